"""Read-only queries over built sections, plus eviction of temporary sections."""

from collections.abc import Sequence

from loguru import logger

from chat_sections.config import MAX_SECTION_SIZE
from chat_sections.models.chat import Area, ChatItem
from chat_sections.models.section import Section
from chat_sections.session import ChatSession


def chat_item_position(sections: Sequence[Section], item_id: int) -> int | None:
    """Return the row position of an item, or None if no section holds it."""
    for section in sections:
        position = section.item_positions.get(item_id)
        if position is not None:
            return position
    return None


def revealed_item_count(sections: Sequence[Section]) -> int:
    """Count the rows a list view shows: revealed runs per item, collapsed runs once."""
    count = 0
    for section in sections:
        for run in section.items:
            count += len(run.items) if run.revealed else 1
    return count


def find_section(sections: Sequence[Section], area: Area) -> Section | None:
    return next((s for s in sections if s.boundary.area is area), None)


def _is_valid(
    sections: Sequence[Section], section_index: int, run_index: int, item_index: int
) -> bool:
    if not 0 <= section_index < len(sections):
        return False
    runs = sections[section_index].items
    return 0 <= run_index < len(runs) and 0 <= item_index < len(runs[run_index].items)


def previous_shown_item(
    sections: Sequence[Section], section_index: int, run_index: int, item_index: int
) -> ChatItem | None:
    """Like ``Section.previous_shown_item``, continuing into the preceding section."""
    if not _is_valid(sections, section_index, run_index, item_index):
        return None
    item = sections[section_index].previous_shown_item(run_index, item_index)
    if item is None and section_index > 0:
        return sections[section_index - 1].items[-1].items[-1]
    return item


def next_shown_item(
    sections: Sequence[Section], section_index: int, run_index: int, item_index: int
) -> ChatItem | None:
    """Like ``Section.next_shown_item``, continuing into the following section."""
    if not _is_valid(sections, section_index, run_index, item_index):
        return None
    item = sections[section_index].next_shown_item(run_index, item_index)
    if item is None and section_index + 1 < len(sections):
        return sections[section_index + 1].items[0].items[0]
    return item


def drop_temporary_sections(session: ChatSession, sections: Sequence[Section]) -> int:
    """Evict items outside the bottom section once the session exceeds capacity.

    After eviction every remaining item belongs to the bottom area.

    Returns:
        Number of items removed from the head of the sequence.
    """
    bottom = find_section(sections, Area.BOTTOM)
    if bottom is None or len(session) <= MAX_SECTION_SIZE:
        return 0

    items_outside_of_section = len(session) - 1 - bottom.boundary.max_index
    to_remove = items_outside_of_section + bottom.excess_item_count()
    session.remove_range(0, to_remove)
    session.reset_areas(Area.BOTTOM)
    logger.debug("Evicted {} items, {} remain", to_remove, len(session))
    return to_remove
