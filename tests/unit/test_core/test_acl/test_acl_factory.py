"""Tests for acl factories, entity and transport types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resource_acl.core.acl import (
    AccessControlEntry,
    AccessControlList,
    Ace,
    Acl,
    AclBuilder,
    AclImpl,
    DtoAclFactory,
    EntityAclFactory,
    dto_factory,
    entity_factory,
    factory_of,
)


@pytest.mark.unit
class TestAce:
    """Tests for the Ace entry type."""

    def test_defaults(self) -> None:
        ace = Ace()

        assert ace.guest is False
        assert ace.users == ace.roles == ace.groups == set()
        assert ace.is_empty

    def test_copy_is_independent(self) -> None:
        ace = Ace(users={"bob"})
        clone = ace.copy()

        clone.users.add("carol")

        assert ace.users == {"bob"}
        assert clone == Ace(users={"bob", "carol"})

    def test_guest_is_not_empty(self) -> None:
        assert not Ace(guest=True).is_empty


@pytest.mark.unit
class TestAclImpl:
    """Tests for the in-memory acl entity."""

    def test_satisfies_protocol(self, acl_entity: AclImpl) -> None:
        assert isinstance(acl_entity, Acl)

    def test_copies_mapping(self) -> None:
        entries = {"read": Ace()}
        acl = AclImpl("alice", entries)

        entries["write"] = Ace()

        assert list(acl.entry_map()) == ["read"]

    def test_defaults(self) -> None:
        acl = AclImpl()

        assert acl.owner is None
        assert acl.entry_map() == {}

    def test_equality(self) -> None:
        assert AclImpl("a", {"read": Ace()}) == AclImpl("a", {"read": Ace()})
        assert AclImpl("a") != AclImpl("b")


@pytest.mark.unit
class TestDtoAclFactory:
    """Tests for the transport value factory."""

    def test_none_entries(self) -> None:
        acl = DtoAclFactory().create_access_control_list("alice", None)

        assert acl == AccessControlList(owner="alice")
        assert acl.entries == ()

    def test_sorts_entries_and_principals(self) -> None:
        entries = {
            "write": Ace(users={"zoe", "adam"}),
            "administration": Ace(roles={"R2", "R1"}),
            "read": Ace(guest=True, groups={"g2", "g1"}),
        }

        acl = dto_factory().create_access_control_list("alice", entries)

        assert [entry.permission for entry in acl.entries] == ["administration", "read", "write"]
        assert acl.find_entry("write").users == ("adam", "zoe")
        assert acl.find_entry("administration").roles == ("R1", "R2")
        assert acl.find_entry("read").groups == ("g1", "g2")
        assert acl.find_entry("read").guest is True

    def test_same_input_serializes_identically(self) -> None:
        first = AclBuilder().add_user("b", "write").add_user("a", "read", "write")
        second = AclBuilder().add_user("a", "write", "read").add_user("b", "write")

        assert (
            first.build_access_control_list().model_dump_json()
            == second.build_access_control_list().model_dump_json()
        )

    def test_output_is_frozen(self) -> None:
        acl = dto_factory().create_access_control_list("alice", {"read": Ace(users={"bob"})})

        with pytest.raises(ValidationError):
            acl.owner = "mallory"
        with pytest.raises(AttributeError):
            acl.entries.append(AccessControlEntry(permission="write"))
        with pytest.raises(AttributeError):
            acl.entries[0].users.append("mallory")
        with pytest.raises(AttributeError):
            acl.entries.clear()

        assert acl.find_entry("read").users == ("bob",)


@pytest.mark.unit
class TestEntityFactories:
    """Tests for the entity and callable factories."""

    def test_entity_factory(self) -> None:
        acl = entity_factory().create_access_control_list("alice", {"read": Ace()})

        assert isinstance(acl, AclImpl)
        assert acl == AclImpl("alice", {"read": Ace()})

    def test_singletons(self) -> None:
        assert isinstance(entity_factory(), EntityAclFactory)
        assert entity_factory() is entity_factory()
        assert dto_factory() is dto_factory()

    def test_factory_of(self) -> None:
        calls = []

        def create(owner, entries):
            calls.append((owner, dict(entries)))
            return owner

        factory = factory_of(create)

        assert factory.create_access_control_list("alice", None) == "alice"
        assert calls == [("alice", {})]

    def test_factory_of_with_builder(self) -> None:
        acl = AclBuilder().owner("alice").add_role("R", "read").build(factory_of(AclImpl))

        assert acl == AclImpl("alice", {"read": Ace(roles={"R"})})


@pytest.mark.unit
class TestAccessControlList:
    """Tests for the transport schemas."""

    def test_validates_json(self) -> None:
        acl = AccessControlList.model_validate_json(
            '{"owner": "alice", "entries": [{"permission": "read", "guest": true, "unknown": 1}]}'
        )

        assert acl.owner == "alice"
        assert acl.entries == (AccessControlEntry(permission="read", guest=True),)

    def test_find_entry_is_case_insensitive(self, access_control_list: AccessControlList) -> None:
        assert access_control_list.find_entry("WRITE").users == ("user",)
        assert access_control_list.find_entry("delete") is None

    @pytest.mark.parametrize("permission", [None, "", "  "])
    def test_find_entry_blank_permission(
        self, access_control_list: AccessControlList, permission
    ) -> None:
        assert access_control_list.find_entry(permission) is None

    def test_find_entry_skips_entries_without_permission(self) -> None:
        acl = AccessControlList(
            entries=[AccessControlEntry(), AccessControlEntry(permission="Read", guest=True)]
        )

        assert acl.find_entry("read").guest is True

    def test_json_arrays_become_tuples(self) -> None:
        acl = AccessControlList.model_validate_json(
            '{"entries": [{"permission": "read", "users": ["bob"]}]}'
        )

        assert isinstance(acl.entries, tuple)
        assert acl.entries[0].users == ("bob",)

    def test_from_attributes(self) -> None:
        class Row:
            owner = "alice"
            entries = None

        assert AccessControlList.model_validate(Row()).entries is None
