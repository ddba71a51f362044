"""Tests for UserRepositorySQLAlchemy against in-memory SQLite."""

import pytest

from learnhub_identity.domain.user import EmailAlreadyExistsError, UserId
from learnhub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from tests.shared.fixtures import make_user


@pytest.fixture
def repo(db_session) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(db_session)


class TestUserRepositorySave:
    """Insert and update through save()."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, repo):
        user = make_user()

        await repo.save(user)
        found = await repo.find_by_id(user.id)

        assert found is not None
        assert found == user
        assert found.full_name == "Ann Lee"
        assert found.email.value == "ann@x.com"
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_save_existing_updates_row(self, repo):
        user = make_user()
        await repo.save(user)

        user.update_information("Anna", "Lee", "anna@x.com", 31)
        await repo.save(user)
        found = await repo.find_by_id(user.id)

        assert found.first_name == "Anna"
        assert found.age == 31
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_unique_index_maps_to_domain_conflict(self, repo):
        """Two rows with one email are stopped by the database."""
        await repo.save(make_user(email="ann@x.com"))

        with pytest.raises(EmailAlreadyExistsError):
            await repo.save(make_user(first_name="Other", email="ann@x.com"))


class TestUserRepositoryQueries:
    """Lookups and listing."""

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, repo):
        assert await repo.find_by_id(UserId.generate()) is None

    @pytest.mark.asyncio
    async def test_find_by_email_normalizes(self, repo):
        user = make_user(email="ann@x.com")
        await repo.save(user)

        assert await repo.find_by_email("ANN@X.com") == user
        assert await repo.exists_by_email("ann@x.com") is True
        assert await repo.exists_by_email("bob@x.com") is False

    @pytest.mark.asyncio
    async def test_find_all_active_skips_inactive(self, repo):
        ann = make_user(email="ann@x.com")
        bob = make_user(first_name="Bob", email="bob@x.com", active=False)
        await repo.save(ann)
        await repo.save(bob)

        assert await repo.find_all_active() == [ann]
        assert set(await repo.find_all()) == {ann, bob}

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, repo):
        user = make_user()
        await repo.save(user)

        await repo.delete(user.id)

        assert await repo.find_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, repo):
        await repo.delete(UserId.generate())
