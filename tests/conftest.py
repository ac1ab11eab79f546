from __future__ import annotations

import pytest

from musixmatch_api.client import MusixmatchAPI
from tests.mocks.http_mock import MockSession


@pytest.fixture
def session() -> MockSession:
    return MockSession()


@pytest.fixture
def api(session: MockSession) -> MusixmatchAPI:
    return MusixmatchAPI("test-key", session=session)
