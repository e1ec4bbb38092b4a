"""
Configuration module - infrastructure layer
"""

from typing import Any, Optional

from ...domain.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)
from ...shared.constants import (
    DEFAULT_API_URL,
    DEFAULT_AUTUMN_URL,
    DEFAULT_TIMEOUT_SECONDS,
)


class ConfigManager:
    """Configuration manager

    Configuration is grouped into nested sections:
    - api: base_url, token, bot, timeout_seconds
    - files: autumn_url
    - cache: emit_join_events
    """

    def __init__(self, config: Optional[dict] = None):
        self.config = config if config is not None else {}

    def _get_group(self, group: str) -> dict:
        """Get a config section, or an empty dict when it is missing"""
        return self.config.get(group) or {}

    def _ensure_group(self, group: str) -> dict:
        """Make sure a config section exists and return it"""
        if group not in self.config:
            self.config[group] = {}
        return self.config[group]

    def get_api_url(self) -> str:
        """API base URL, without trailing slash"""
        return str(self._get_group("api").get("base_url", DEFAULT_API_URL)).rstrip("/")

    def get_token(self) -> Optional[str]:
        return self._get_group("api").get("token")

    def is_bot(self) -> bool:
        """Whether the token is a bot token"""
        return bool(self._get_group("api").get("bot", False))

    def get_timeout_seconds(self) -> float:
        return self._get_group("api").get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)

    def get_autumn_url(self) -> str:
        """File server base URL, without trailing slash"""
        return str(self._get_group("files").get("autumn_url", DEFAULT_AUTUMN_URL)).rstrip("/")

    def get_emit_join_events(self) -> bool:
        """Whether pushed member joins publish "member/join" """
        return bool(self._get_group("cache").get("emit_join_events", True))

    def set_token(self, token: str, bot: bool = False) -> None:
        api = self._ensure_group("api")
        api["token"] = token
        api["bot"] = bot

    def validate(self) -> None:
        """
        Check required settings

        Raises:
            MissingConfigurationException: api.base_url is empty
            InvalidConfigurationException: timeout is not a positive number
        """
        if not self._get_group("api").get("base_url", DEFAULT_API_URL):
            raise MissingConfigurationException("api.base_url")

        timeout = self.get_timeout_seconds()
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise InvalidConfigurationException(
                "Timeout must be a positive number", "api.timeout_seconds"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "api": {
                "base_url": self.get_api_url(),
                "bot": self.is_bot(),
                "timeout_seconds": self.get_timeout_seconds(),
            },
            "files": {"autumn_url": self.get_autumn_url()},
            "cache": {"emit_join_events": self.get_emit_join_events()},
        }
