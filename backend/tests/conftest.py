import pytest

from wordsmith.services import get_tool_session


@pytest.fixture(autouse=True)
def fresh_sessions():
    get_tool_session.cache_clear()
    yield
    get_tool_session.cache_clear()
