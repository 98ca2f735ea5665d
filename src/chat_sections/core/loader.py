"""Load the latest page of a chat into the bottom area of a session."""

import asyncio
from collections.abc import Sequence

from loguru import logger

from chat_sections.models.chat import Area, ChatInfo, ChatItem
from chat_sections.protocols import ChatApiProtocol
from chat_sections.session import ChatSession


def merge_bottom_page(session: ChatSession, page: Sequence[ChatItem]) -> list[ChatItem]:
    """Merge a fetched page into the session and tag every page item BOTTOM.

    Each run of new items is inserted right before the next page item the
    session already holds; new items after the last known one are appended.

    Returns:
        The inserted items, in page order.
    """
    # Classify before touching the sequence.
    known = {item.id for item in page if session.area_of(item.id) is not None}
    anchored: dict[int, list[ChatItem]] = {}
    pending: list[ChatItem] = []
    inserted: list[ChatItem] = []
    for item in page:
        if item.id in known:
            if pending:
                anchored[item.id] = pending
                pending = []
        else:
            pending.append(item)
            inserted.append(item)

    updated: list[ChatItem] = []
    for item in session.items:
        updated.extend(anchored.pop(item.id, ()))
        updated.append(item)
    for anchor_id, orphans in anchored.items():
        logger.warning(
            "Item {} has an area but is not in the chat, appending {} items",
            anchor_id,
            len(orphans),
        )
        updated.extend(orphans)
    updated.extend(pending)

    session.replace_all(updated)
    for item in page:
        session.set_area(item.id, Area.BOTTOM)
    return inserted


async def load_bottom_section(
    session: ChatSession,
    api: ChatApiProtocol,
    chat_info: ChatInfo,
    remote_host_id: int | None = None,
) -> list[ChatItem]:
    """Fetch the latest page of ``chat_info`` and merge it into the bottom area.

    Does nothing when the fetch fails, returns no items, or the session has
    switched to another chat while the fetch was in flight.

    Returns:
        The items that were inserted.
    """
    page = await asyncio.to_thread(
        api.get_chat, chat_info.chat_type, chat_info.api_id, remote_host_id=remote_host_id
    )
    if session.chat_id != chat_info.id:
        logger.debug(
            "Chat changed to {} while loading {}, dropping page", session.chat_id, chat_info.id
        )
        return []
    if page is None or not page.chat_items:
        logger.debug("No items to load for {}", chat_info.id)
        return []

    inserted = merge_bottom_page(session, page.chat_items)
    logger.debug(
        "Loaded {} items into {} ({} new)", len(page.chat_items), chat_info.id, len(inserted)
    )
    return inserted
