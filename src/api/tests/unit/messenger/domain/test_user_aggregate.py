"""Unit tests for the User aggregate."""

import pytest

from messenger.domain.aggregates import User
from messenger.domain.value_objects import Address, UserId


class TestUserCreation:
    """Tests for User creation."""

    def test_creates_user_with_address(self, address):
        user_id = UserId.generate()

        user = User(id=user_id, email="alice@test.com", address=address)

        assert user.id == user_id
        assert user.email == "alice@test.com"
        assert user.address == address

    def test_address_is_optional(self):
        user = User(id=UserId.generate(), email="alice@test.com")

        assert user.address is None

    def test_register_generates_id(self, id_generator):
        user = User.register(email="alice@test.com", id_generator=id_generator)

        assert user.id == UserId("01ARZ3NDEKTSV4RRFFQ69G0001")

    def test_register_defaults_to_ulid(self):
        user = User.register(email="alice@test.com")

        assert UserId.from_string(user.id.value) == user.id

    def test_user_is_immutable(self):
        user = User(id=UserId.generate(), email="alice@test.com")

        with pytest.raises(Exception):  # FrozenInstanceError
            user.email = "other@test.com"  # type: ignore[misc]

    def test_str_shows_email(self):
        user = User(id=UserId.generate(), email="alice@test.com")

        assert str(user) == "User(alice@test.com)"


class TestUserEquality:
    """Users compare by id only."""

    def test_same_id_different_fields_are_equal(self, address):
        user_id = UserId.generate()
        first = User(id=user_id, email="alice@test.com", address=address)
        second = User(id=user_id, email="alice.new@test.com", address=None)

        assert first == second

    def test_same_fields_different_id_are_not_equal(self, address):
        first = User(id=UserId.generate(), email="alice@test.com", address=address)
        second = User(id=UserId.generate(), email="alice@test.com", address=address)

        assert first != second

    def test_not_equal_to_other_types(self):
        user = User(id=UserId.generate(), email="alice@test.com")

        assert user != user.id
        assert user != "alice@test.com"

    def test_usable_in_sets_and_dicts(self):
        user_id = UserId.generate()
        first = User(id=user_id, email="alice@test.com")
        second = User(id=user_id, email="alice.new@test.com")

        assert len({first, second}) == 1
        assert {first: "x"}[second] == "x"


class TestAddress:
    """Tests for the Address value object."""

    def test_str_joins_fields(self):
        address = Address(street="1 Main St", city="Springfield", country="US")

        assert str(address) == "1 Main St, Springfield, US"

    def test_equal_by_value(self):
        assert Address("a", "b", "c") == Address("a", "b", "c")
