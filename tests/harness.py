"""Container fixtures shared by unit and integration tests.

Settings come from the environment (``tests/conftest.py`` pins
``ENVIRONMENT=test``). Integration tests expect PostgreSQL at
``DATABASE__URL``.
"""

import pytest_asyncio

from tour.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding one request scope of a fresh test container.

    Mock repositories and the recording email client live for the whole
    container, so data saved through one repository is visible to the use
    cases of the same test and to later request scopes. The container
    is closed afterwards, which destroys the rate limiter.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_accept(unit_env):
            use_case = await unit_env.get(AcceptInvitationUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _test_environment
