"""Area resolution: decide which area absorbs which when a load overlaps tagged items."""

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from chat_sections.models.chat import Area, ChatItem
from chat_sections.session import ChatSession


def resolve_area(section_area: Area, recorded: Area | None) -> tuple[Area, Area] | None:
    """Decide which area absorbs the other when an item tagged ``recorded`` is loaded again.

    Returns:
        ``(target, dropped)``, or None when no merge is needed. BOTTOM always
        wins; otherwise the area the item already belongs to wins.
    """
    if recorded is None or recorded is section_area:
        return None
    if recorded is Area.BOTTOM or section_area is Area.BOTTOM:
        dropped = section_area if recorded is Area.BOTTOM else recorded
        return Area.BOTTOM, dropped
    return recorded, section_area


@dataclass(frozen=True)
class ChatSectionLoader:
    """A pending load of items into ``section_area``.

    ``position`` is the list index where the caller inserts the prepared items.
    """

    position: int
    section_area: Area

    def prepare_items(self, session: ChatSession, items: Iterable[ChatItem]) -> list[ChatItem]:
        """Tag incoming items with areas, merging areas they overlap.

        Returns the items that were not known to the session before this call.
        """
        items_to_add: list[ChatItem] = []
        merges: dict[Area, Area] = {}

        for item in items:
            recorded = session.area_of(item.id)
            if recorded is None:
                items_to_add.append(item)
                continue
            resolved = resolve_area(self.section_area, recorded)
            if resolved is None:
                continue
            target, dropped = resolved
            if target is not dropped:
                merges[dropped] = target

        if merges:
            logger.debug(
                "Merging areas {}",
                ", ".join(f"{src.value}->{dst.value}" for src, dst in merges.items()),
            )
            for item in session.items:
                current = session.area_of(item.id)
                if current is not None and current in merges:
                    session.set_area(item.id, merges[current])

        target_area = merges.get(self.section_area, self.section_area)
        for item in items_to_add:
            session.set_area(item.id, target_area)

        return items_to_add
