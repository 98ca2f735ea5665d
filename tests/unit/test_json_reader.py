"""Tests for the JSON reader that parses chat API data into domain models."""

import pytest

from chat_sections.core.importer.json_reader import (
    parse_chat_info,
    parse_chat_item,
    parse_chat_items,
    parse_chat_page,
    parse_item_areas,
)
from chat_sections.models.chat import Area, ChatType


def test_parse_chat_item_reads_all_fields() -> None:
    item = parse_chat_item(
        {"id": 5, "sent": False, "memberId": "bob", "mergeCategory": "rcvGroupEvent", "text": "x"}
    )

    assert item.id == 5
    assert item.direction.is_group_received
    assert item.direction.member_id == "bob"
    assert item.merge_category == "rcvGroupEvent"
    assert item.text == "x"


def test_parse_chat_item_defaults_optional_fields() -> None:
    item = parse_chat_item({"id": 1, "sent": True})

    assert item.direction.member_id is None
    assert item.merge_category is None
    assert item.text == ""


def test_parse_chat_item_rejects_bad_id() -> None:
    with pytest.raises(ValueError, match="bad chat item id"):
        parse_chat_item({"id": "1", "sent": True})
    with pytest.raises(ValueError, match="bad chat item id"):
        parse_chat_item({"id": True, "sent": True})


def test_parse_chat_item_requires_sent_flag() -> None:
    with pytest.raises(ValueError, match="bad 'sent'"):
        parse_chat_item({"id": 1})


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("memberId", 3),
        ("mergeCategory", 5),
        ("text", None),
        ("text", ["hi"]),
    ],
)
def test_parse_chat_item_rejects_bad_optional_fields(field: str, value: object) -> None:
    with pytest.raises(ValueError, match=f"bad '{field}' for chat item 1"):
        parse_chat_item({"id": 1, "sent": False, field: value})


def test_parse_chat_item_accepts_null_member_and_category() -> None:
    item = parse_chat_item({"id": 1, "sent": False, "memberId": None, "mergeCategory": None})

    assert item.direction.member_id is None
    assert item.merge_category is None


def test_parse_chat_items_rejects_duplicates() -> None:
    data = [{"id": 1, "sent": True}, {"id": 2, "sent": True}, {"id": 1, "sent": False}]

    with pytest.raises(ValueError, match=r"Duplicate chat item ids: \[1\]"):
        parse_chat_items(data)


def test_parse_chat_items_requires_a_list() -> None:
    with pytest.raises(ValueError, match="must be a list"):
        parse_chat_items({"id": 1, "sent": True})


def test_parse_chat_info_maps_type() -> None:
    info = parse_chat_info({"type": "direct", "id": 3})

    assert info.chat_type is ChatType.DIRECT
    assert info.id == "@3"


def test_parse_chat_info_rejects_unknown_type() -> None:
    with pytest.raises(ValueError, match="unknown chat type"):
        parse_chat_info({"type": "contactRequest", "id": 3})


def test_parse_chat_info_rejects_non_object() -> None:
    with pytest.raises(ValueError, match="bad 'chat': None"):
        parse_chat_info(None)


def test_parse_chat_info_rejects_unhashable_type() -> None:
    with pytest.raises(ValueError, match="unknown chat type"):
        parse_chat_info({"type": ["group"], "id": 3})


def test_parse_chat_info_rejects_bad_id() -> None:
    with pytest.raises(ValueError, match="bad chat id"):
        parse_chat_info({"type": "group", "id": "3"})


def test_parse_chat_page_requires_an_object() -> None:
    with pytest.raises(ValueError, match="chat page must be an object"):
        parse_chat_page([1, 2])


def test_parse_chat_page_rejects_null_chat() -> None:
    with pytest.raises(ValueError, match="bad 'chat'"):
        parse_chat_page({"ok": True, "chat": None})


def test_parse_chat_page_keeps_item_order() -> None:
    page = parse_chat_page(
        {
            "chat": {"type": "local", "id": 1},
            "chatItems": [{"id": 3, "sent": True}, {"id": 4, "sent": True}],
        }
    )

    assert page.chat_info.id == "*1"
    assert [i.id for i in page.chat_items] == [3, 4]


def test_parse_item_areas() -> None:
    assert parse_item_areas({"1": "current", "2": "bottom"}) == {
        1: Area.CURRENT,
        2: Area.BOTTOM,
    }


def test_parse_item_areas_rejects_unknown_area() -> None:
    with pytest.raises(ValueError, match="bad area entry"):
        parse_item_areas({"1": "top"})
