import unittest
from unittest.mock import MagicMock

from member_cache.application.client_context import ClientContext
from member_cache.domain.exceptions import InvalidMemberIdException
from member_cache.domain.value_objects.member_key import MemberCompositeKey
from member_cache.shared.constants import EVENT_MEMBER_JOIN


def member_payload(server="S1", user="U1", **fields):
    payload = {"_id": {"server": server, "user": user}}
    payload.update(fields)
    return payload


class TestMemberStore(unittest.TestCase):

    def setUp(self):
        self.context = ClientContext(transport=MagicMock())
        self.store = self.context.members
        self.joined = []
        self.context.events.on(EVENT_MEMBER_JOIN, self.joined.append)

    def test_upsert_returns_same_instance(self):
        first = self.store.upsert(member_payload(nickname="A"))
        second = self.store.upsert(member_payload(nickname="B"))
        self.assertIs(first, second)
        self.assertEqual(first.nickname, "B")
        self.assertEqual(len(self.store), 1)

    def test_upsert_ignores_identity_field_order(self):
        first = self.store.upsert({"_id": {"server": "S1", "user": "U1"}})
        second = self.store.upsert({"_id": {"user": "U1", "server": "S1"}})
        self.assertIs(first, second)

    def test_upsert_preserves_missing_fields(self):
        member = self.store.upsert(member_payload(nickname="A", roles=["r1"]))
        self.store.upsert(member_payload(roles=["r1", "r2"]))
        self.assertEqual(member.nickname, "A")
        self.assertEqual(member.roles, ["r1", "r2"])

    def test_upsert_binds_member_to_context(self):
        member = self.store.upsert(member_payload())
        self.assertIs(member.context, self.context)

    def test_lookup(self):
        self.assertFalse(self.store.has({"server": "S1", "user": "U1"}))
        self.assertIsNone(self.store.get({"server": "S1", "user": "U1"}))

        member = self.store.upsert(member_payload())
        self.assertTrue(self.store.has({"user": "U1", "server": "S1"}))
        self.assertIs(self.store.get(MemberCompositeKey("S1", "U1")), member)
        self.assertIn({"server": "S1", "user": "U1"}, self.store)
        self.assertNotIn("S1", self.store)
        self.assertNotIn({"server": "S1"}, self.store)
        self.assertEqual(self.store.keys(), ['{"server":"S1","user":"U1"}'])
        self.assertEqual(list(self.store), [member])

    def test_emit_on_creation_only(self):
        member = self.store.upsert(member_payload(), emit=True)
        self.assertEqual(self.joined, [member])

        self.store.upsert(member_payload(nickname="A"), emit=True)
        self.store.upsert(member_payload(nickname="B"))
        self.assertEqual(self.joined, [member])

    def test_emit_requires_true(self):
        self.store.upsert(member_payload(user="U1"))
        self.store.upsert(member_payload(user="U2"), emit=1)
        self.store.upsert(member_payload(user="U3"), emit=False)
        self.assertEqual(self.joined, [])
        self.assertEqual(len(self.store), 3)

    def test_delete(self):
        self.store.upsert(member_payload())
        self.assertTrue(self.store.delete({"server": "S1", "user": "U1"}))
        self.assertFalse(self.store.has({"server": "S1", "user": "U1"}))

        self.store.upsert(member_payload(user="U2"))
        self.assertFalse(self.store.delete({"server": "S1", "user": "U1"}))
        self.assertEqual(len(self.store), 1)

    def test_delete_then_upsert_creates_new_instance(self):
        first = self.store.upsert(member_payload(nickname="A"))
        self.store.delete(first.identity)
        second = self.store.upsert(member_payload())
        self.assertIsNot(first, second)
        self.assertIsNone(second.nickname)

    def test_members_of_server(self):
        a = self.store.upsert(member_payload("S1", "U1"))
        b = self.store.upsert(member_payload("S1", "U2"))
        self.store.upsert(member_payload("S2", "U1"))
        self.assertEqual(self.store.members_of("S1"), [a, b])

        self.assertEqual(self.store.delete_members_of("S1"), 2)
        self.assertEqual(self.store.members_of("S1"), [])
        self.assertEqual(len(self.store), 1)
        self.assertEqual(self.store.delete_members_of("S9"), 0)

    def test_apply_update_only_touches_cached_members(self):
        self.assertIsNone(self.store.apply_update({"server": "S1", "user": "U1"}, {"nickname": "A"}))
        self.assertEqual(len(self.store), 0)

        member = self.store.upsert(member_payload(nickname="A"))
        updated = self.store.apply_update({"server": "S1", "user": "U1"}, {"nickname": "B"}, "Nickname")
        self.assertIs(updated, member)
        self.assertIsNone(member.nickname)

    def test_upsert_without_identity_is_rejected(self):
        with self.assertRaises(InvalidMemberIdException):
            self.store.upsert({"nickname": "A"})
        self.assertEqual(len(self.store), 0)


class TestMemberStoreListeners(unittest.TestCase):

    def setUp(self):
        self.store = ClientContext(transport=MagicMock()).members
        self.changes = []
        self.listener = lambda member, name, old, new: self.changes.append((name, old, new))
        self.store.subscribe(self.listener)

    def test_creation_does_not_notify(self):
        self.store.upsert(member_payload(nickname="A"))
        self.assertEqual(self.changes, [])

    def test_each_changed_field_notifies_once(self):
        self.store.upsert(member_payload(nickname="A"))
        self.store.upsert(member_payload(nickname="B", roles=["r1"]))
        self.store.upsert(member_payload(nickname="B", roles=["r1"]))
        self.assertEqual(self.changes, [("nickname", "A", "B"), ("roles", None, ["r1"])])

    def test_caller_mutation_after_upsert_is_not_shared(self):
        roles = ["r1"]
        member = self.store.upsert(member_payload(roles=roles))

        roles.append("r2")
        self.assertEqual(member.roles, ["r1"])

        self.store.upsert(member_payload(roles=roles))
        self.assertEqual(member.roles, ["r1", "r2"])
        self.assertIsNot(member.roles, roles)
        self.assertEqual(self.changes, [("roles", ["r1"], ["r1", "r2"])])

    def test_failing_listener_does_not_abort_merge(self):
        broken = MagicMock(side_effect=RuntimeError("boom"))
        self.store.unsubscribe(self.listener)
        self.store.subscribe(broken)
        self.store.subscribe(self.listener)

        member = self.store.upsert(member_payload(nickname="A"))
        self.store.upsert(member_payload(nickname="B"))

        self.assertEqual(member.nickname, "B")
        broken.assert_called_once()
        self.assertEqual(self.changes, [("nickname", "A", "B")])

    def test_unsubscribe(self):
        self.store.unsubscribe(self.listener)
        self.store.upsert(member_payload(nickname="A"))
        self.store.upsert(member_payload(nickname="B"))
        self.assertEqual(self.changes, [])


if __name__ == "__main__":
    unittest.main()
