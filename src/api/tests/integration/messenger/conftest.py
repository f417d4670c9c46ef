"""Fixtures for Messenger integration tests."""

import pytest_asyncio

from messenger.domain.aggregates import User
from messenger.domain.value_objects import Address, UserId
from messenger.infrastructure.user_repository import UserRepository


@pytest_asyncio.fixture
async def users(session_factory) -> dict[str, User]:
    """Four stored users: owner, alice, bob and mallory."""
    address = Address(street="123 Street", city="City", country="Country")
    created = {
        name: User(id=UserId.generate(), email=f"{name}@test.com", address=address)
        for name in ("owner", "alice", "bob", "mallory")
    }
    async with session_factory() as session:
        async with session.begin():
            repository = UserRepository(session=session)
            for user in created.values():
                await repository.save(user)
    return created
