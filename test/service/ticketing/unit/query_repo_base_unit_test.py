from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import pytest

from src.service.ticketing.driven_adapter.repo.query_repo_base import QueryRepoBase


pytestmark = pytest.mark.unit


class TestQueryRepoBase:
    @pytest.mark.asyncio
    async def test_each_call_opens_its_own_session(self):
        # Given
        opened: list[MagicMock] = []
        closed: list[MagicMock] = []

        @asynccontextmanager
        async def session_factory():
            session = MagicMock(name=f'session-{len(opened)}')
            opened.append(session)
            yield session
            closed.append(session)

        repo = QueryRepoBase(session_factory)

        # When
        async with repo._get_session() as first:
            pass
        async with repo._get_session() as second:
            pass

        # Then
        assert first is not second
        assert opened == [first, second]
        assert closed == [first, second]
