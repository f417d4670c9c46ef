"""Unit tests for UserRepository with a mocked session."""

from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest

from messenger.domain.aggregates import User
from messenger.domain.value_objects import Address, UserId
from messenger.infrastructure.models import UserModel
from messenger.infrastructure.observability import UserRepositoryProbe
from messenger.infrastructure.user_repository import UserRepository
from messenger.ports.exceptions import DuplicateEmailError
from messenger.ports.repositories import IUserRepository


def scalar_result(value):
    """Build an execute() result whose scalar_one_or_none() returns value."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_probe():
    return create_autospec(UserRepositoryProbe, instance=True)


@pytest.fixture
def repository(mock_session, mock_probe):
    return UserRepository(session=mock_session, probe=mock_probe)


class TestProtocolCompliance:
    """Tests for protocol compliance."""

    def test_implements_protocol(self, repository):
        assert isinstance(repository, IUserRepository)


class TestSave:
    """Tests for save method."""

    @pytest.mark.asyncio
    async def test_adds_new_user_to_session(self, repository, mock_session, address):
        user = User(id=UserId.generate(), email="alice@test.com", address=address)
        mock_session.execute.side_effect = [scalar_result(None), scalar_result(None)]

        await repository.save(user)

        mock_session.add.assert_called_once()
        added = mock_session.add.call_args[0][0]
        assert isinstance(added, UserModel)
        assert added.id == user.id.value
        assert added.email == "alice@test.com"
        assert added.address_street == "123 Street"
        assert added.address_city == "City"
        assert added.address_country == "Country"
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_updates_existing_user(self, repository, mock_session):
        user = User(id=UserId.generate(), email="alice.new@test.com")
        existing = UserModel(
            id=user.id.value,
            email="alice@test.com",
            address_street="1 Old Road",
            address_city="Old Town",
            address_country="Nowhere",
        )
        mock_session.execute.side_effect = [scalar_result(None), scalar_result(existing)]

        await repository.save(user)

        mock_session.add.assert_not_called()
        assert existing.email == "alice.new@test.com"
        assert existing.address_street is None
        assert existing.address_city is None

    @pytest.mark.asyncio
    async def test_rejects_email_taken_by_other_user(
        self, repository, mock_session, mock_probe
    ):
        user = User(id=UserId.generate(), email="alice@test.com")
        other = UserModel(id=UserId.generate().value, email="alice@test.com")
        mock_session.execute.side_effect = [scalar_result(other)]

        with pytest.raises(DuplicateEmailError):
            await repository.save(user)

        mock_session.add.assert_not_called()
        mock_session.flush.assert_not_awaited()
        mock_probe.duplicate_email.assert_called_once_with("alice@test.com")

    @pytest.mark.asyncio
    async def test_resaving_same_user_is_not_a_duplicate(
        self, repository, mock_session, mock_probe
    ):
        user = User(id=UserId.generate(), email="alice@test.com")
        existing = UserModel(id=user.id.value, email="alice@test.com")
        mock_session.execute.side_effect = [
            scalar_result(existing),
            scalar_result(existing),
        ]

        await repository.save(user)

        mock_probe.duplicate_email.assert_not_called()
        mock_probe.user_saved.assert_called_once_with(user.id.value, "alice@test.com")


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_returns_user_with_address(self, repository, mock_session):
        user_id = UserId.generate()
        mock_session.execute.return_value = scalar_result(
            UserModel(
                id=user_id.value,
                email="alice@test.com",
                address_street="1 Main St",
                address_city="Springfield",
                address_country="US",
            )
        )

        user = await repository.get_by_id(user_id)

        assert user is not None
        assert user.id == user_id
        assert user.email == "alice@test.com"
        assert user.address == Address("1 Main St", "Springfield", "US")

    @pytest.mark.asyncio
    async def test_returns_user_without_address(self, repository, mock_session):
        user_id = UserId.generate()
        mock_session.execute.return_value = scalar_result(
            UserModel(id=user_id.value, email="alice@test.com")
        )

        user = await repository.get_by_id(user_id)

        assert user.address is None

    @pytest.mark.asyncio
    async def test_returns_none_when_missing(self, repository, mock_session, mock_probe):
        user_id = UserId.generate()
        mock_session.execute.return_value = scalar_result(None)

        assert await repository.get_by_id(user_id) is None
        mock_probe.user_not_found.assert_called_once_with(user_id.value)


class TestGetByEmail:
    """Tests for get_by_email method."""

    @pytest.mark.asyncio
    async def test_returns_user(self, repository, mock_session, mock_probe):
        user_id = UserId.generate()
        mock_session.execute.return_value = scalar_result(
            UserModel(id=user_id.value, email="alice@test.com")
        )

        user = await repository.get_by_email("alice@test.com")

        assert user.id == user_id
        mock_probe.user_retrieved.assert_called_once_with(user_id.value)

    @pytest.mark.asyncio
    async def test_returns_none_when_missing(self, repository, mock_session, mock_probe):
        mock_session.execute.return_value = scalar_result(None)

        assert await repository.get_by_email("nobody@test.com") is None
        mock_probe.email_not_found.assert_called_once_with("nobody@test.com")
