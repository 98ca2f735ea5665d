"""Tests for domain models."""

import pytest

from chat_sections.models.chat import (
    Area,
    ChatDirection,
    ChatInfo,
    ChatItem,
    ChatType,
    LandingSection,
    landing_section_to_area,
)


def test_chat_item_is_frozen() -> None:
    item = ChatItem(id=1, direction=ChatDirection.direct_sent())
    with pytest.raises(AttributeError):
        item.id = 2  # type: ignore[misc]


def test_group_received_direction() -> None:
    assert ChatDirection.group_received("alice").is_group_received
    assert not ChatDirection.direct_received().is_group_received
    assert not ChatDirection.group_sent().is_group_received


def test_chat_info_id_has_type_prefix() -> None:
    assert ChatInfo(chat_type=ChatType.GROUP, api_id=12).id == "#12"
    assert ChatInfo(chat_type=ChatType.DIRECT, api_id=3).id == "@3"


def test_chat_info_from_id() -> None:
    info = ChatInfo.from_id("#12")

    assert info.chat_type is ChatType.GROUP
    assert info.api_id == 12


def test_chat_info_from_id_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="bad chat id"):
        ChatInfo.from_id("12")
    with pytest.raises(ValueError, match="bad chat id"):
        ChatInfo.from_id("#abc")


def test_landing_section_to_area() -> None:
    assert landing_section_to_area(LandingSection.LATEST) is Area.BOTTOM
    assert landing_section_to_area(LandingSection.UNREAD) is Area.CURRENT
