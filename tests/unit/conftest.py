"""Shared test fixtures."""

import pytest

from chat_sections.session import ChatSession
from tests.unit.fakes import GROUP_CHAT, sent


@pytest.fixture
def group_session() -> ChatSession:
    """A session with the group chat open and items 1..5 in the bottom area."""
    session = ChatSession(chat_id=GROUP_CHAT.id, items=[sent(i) for i in range(1, 6)])
    session.reset_areas()
    return session
