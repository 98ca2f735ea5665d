"""Parse chat API JSON into domain models."""

from typing import Any

from chat_sections.models.chat import Area, ChatDirection, ChatInfo, ChatItem, ChatPage, ChatType

_CHAT_TYPES = {
    "direct": ChatType.DIRECT,
    "group": ChatType.GROUP,
    "local": ChatType.LOCAL,
}


def parse_chat_item(data: dict[str, Any]) -> ChatItem:
    """Parse a single chat item dict.

    Expected keys: ``id`` (int), ``sent`` (bool), and optionally ``memberId``,
    ``mergeCategory`` and ``text``.
    """
    item_id = data.get("id")
    if not isinstance(item_id, int) or isinstance(item_id, bool):
        msg = f"bad chat item id: {item_id!r}"
        raise ValueError(msg)
    sent = data.get("sent")
    if not isinstance(sent, bool):
        msg = f"bad 'sent' for chat item {item_id}: {sent!r}"
        raise ValueError(msg)

    member_id = data.get("memberId")
    if member_id is not None and not isinstance(member_id, str):
        msg = f"bad 'memberId' for chat item {item_id}: {member_id!r}"
        raise ValueError(msg)
    merge_category = data.get("mergeCategory")
    if merge_category is not None and not isinstance(merge_category, str):
        msg = f"bad 'mergeCategory' for chat item {item_id}: {merge_category!r}"
        raise ValueError(msg)
    text = data.get("text", "")
    if not isinstance(text, str):
        msg = f"bad 'text' for chat item {item_id}: {text!r}"
        raise ValueError(msg)

    return ChatItem(
        id=item_id,
        direction=ChatDirection(sent=sent, member_id=member_id),
        merge_category=merge_category,
        text=text,
    )


def parse_chat_items(data: Any) -> list[ChatItem]:
    """Parse a list of chat item dicts, rejecting duplicate ids."""
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        msg = "chat items must be a list of objects"
        raise ValueError(msg)
    items = [parse_chat_item(d) for d in data]
    seen: set[int] = set()
    dupes: set[int] = set()
    for item in items:
        if item.id in seen:
            dupes.add(item.id)
        seen.add(item.id)
    if dupes:
        msg = f"Duplicate chat item ids: {sorted(dupes)!r}"
        raise ValueError(msg)
    return items


def parse_chat_info(data: Any) -> ChatInfo:
    if not isinstance(data, dict):
        msg = f"bad 'chat': {data!r}"
        raise ValueError(msg)
    type_name = data.get("type")
    chat_type = _CHAT_TYPES.get(type_name) if isinstance(type_name, str) else None
    if chat_type is None:
        msg = f"unknown chat type: {type_name!r}"
        raise ValueError(msg)
    api_id = data.get("id")
    if not isinstance(api_id, int) or isinstance(api_id, bool):
        msg = f"bad chat id: {api_id!r}"
        raise ValueError(msg)
    display_name = data.get("displayName", "")
    if not isinstance(display_name, str):
        msg = f"bad 'displayName': {display_name!r}"
        raise ValueError(msg)
    return ChatInfo(chat_type=chat_type, api_id=api_id, display_name=display_name)


def parse_chat_page(data: Any) -> ChatPage:
    """Parse a ``chat/get`` response body (without the ``ok`` flag check)."""
    if not isinstance(data, dict):
        msg = "chat page must be an object"
        raise ValueError(msg)
    return ChatPage(
        chat_info=parse_chat_info(data.get("chat")),
        chat_items=tuple(parse_chat_items(data.get("chatItems", []))),
    )


def parse_item_areas(data: Any) -> dict[int, Area]:
    """Parse an ``{item id: area name}`` mapping, as given to ``--areas``."""
    if not isinstance(data, dict):
        msg = "areas must be an object"
        raise ValueError(msg)
    areas: dict[int, Area] = {}
    for key, value in data.items():
        try:
            areas[int(key)] = Area(value)
        except ValueError:
            msg = f"bad area entry: {key!r}: {value!r}"
            raise ValueError(msg) from None
    return areas
