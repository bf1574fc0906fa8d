"""Integration tests for PostgresUserRepository."""

from uuid import uuid4

import pytest

from votp.domain.repository import UserRepository
from votp.domain.value import UserId
from tests.factories import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = make_user(name="Alice")

        await user_repo.save(user)
        found = await user_repo.find_by_id(user.id)

        assert found is not None
        assert found.name == "Alice"
        assert found.email == user.email

    @pytest.mark.asyncio
    async def test_save_updates_existing_user(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user(name="Alice"))

        await user_repo.save(user.model_copy(update={"name": "Alice B."}))

        assert (await user_repo.find_by_id(user.id)).name == "Alice B."

    @pytest.mark.asyncio
    async def test_find_by_id_returns_none_for_unknown_user(self, integration_env):
        user_repo = await integration_env.get(UserRepository)

        assert await user_repo.find_by_id(UserId(uuid4())) is None
