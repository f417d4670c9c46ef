"""Fixtures shared by Messenger unit tests."""

import pytest

from messenger.domain.aggregates import User
from messenger.domain.value_objects import Address, UserId


class SequentialIdGenerator:
    """Hands out predictable, valid ULID strings: ...0001, ...0002, ..."""

    PREFIX = "01ARZ3NDEKTSV4RRFFQ69G"

    def __init__(self) -> None:
        self._next = 1

    def new_id(self) -> str:
        value = f"{self.PREFIX}{self._next:04d}"
        self._next += 1
        return value


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def address() -> Address:
    return Address(street="123 Street", city="City", country="Country")


@pytest.fixture
def owner(address) -> User:
    return User(id=UserId.generate(), email="owner@test.com", address=address)


@pytest.fixture
def alice(address) -> User:
    return User(id=UserId.generate(), email="alice@test.com", address=address)


@pytest.fixture
def bob(address) -> User:
    return User(id=UserId.generate(), email="bob@test.com", address=address)


@pytest.fixture
def mallory(address) -> User:
    """A user who is never a member of the test conversation."""
    return User(id=UserId.generate(), email="mallory@test.com", address=address)
