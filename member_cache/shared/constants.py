"""
Constants - Shared constants used across the member cache
"""

# Package metadata
PACKAGE_VERSION = "1.0.0"

# Wire field names
MEMBER_ID_FIELD = "_id"
MEMBER_ID_ALIAS = "identity"
KEY_FIELD_SERVER = "server"
KEY_FIELD_USER = "user"

# Mergeable member fields, in merge order
FIELD_NICKNAME = "nickname"
FIELD_AVATAR = "avatar"
FIELD_ROLES = "roles"

MERGEABLE_FIELDS = (FIELD_NICKNAME, FIELD_AVATAR, FIELD_ROLES)

# Explicit clear instructions issued by the server
CLEAR_NICKNAME = "Nickname"
CLEAR_AVATAR = "Avatar"

CLEARABLE_FIELDS = {
    CLEAR_NICKNAME: FIELD_NICKNAME,
    CLEAR_AVATAR: FIELD_AVATAR,
}

# Client events
EVENT_MEMBER_JOIN = "member/join"
EVENT_MEMBER_UPDATE = "member/update"
EVENT_MEMBER_LEAVE = "member/leave"

# Push event types
PUSH_SERVER_MEMBER_JOIN = "ServerMemberJoin"
PUSH_SERVER_MEMBER_UPDATE = "ServerMemberUpdate"
PUSH_SERVER_MEMBER_LEAVE = "ServerMemberLeave"
PUSH_SERVER_DELETE = "ServerDelete"

# Member routes
MEMBER_ROUTE = "/servers/{server}/members/{user}"

# Transport defaults
DEFAULT_API_URL = "https://api.revolt.chat"
DEFAULT_AUTUMN_URL = "https://autumn.revolt.chat"
DEFAULT_TIMEOUT_SECONDS = 30.0
SESSION_TOKEN_HEADER = "x-session-token"
BOT_TOKEN_HEADER = "x-bot-token"
