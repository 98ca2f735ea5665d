"""In-memory state of one open chat: its item sequence and area tags."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from chat_sections.core.sections.builder import put_into_sections
from chat_sections.models.chat import Area, ChatItem
from chat_sections.models.section import Section


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable copy of a session's state, safe to build sections from."""

    items: tuple[ChatItem, ...]
    item_areas: Mapping[int, Area]
    revealed: frozenset[int]


class ChatSession:
    """Owns the canonical item sequence of the open chat and the area of each item.

    All mutation is expected to happen on one event loop.
    """

    def __init__(self, chat_id: str | None = None, items: Iterable[ChatItem] = ()) -> None:
        self.chat_id = chat_id
        self._items: list[ChatItem] = list(items)
        self._item_areas: dict[int, Area] = {}
        self.revealed: set[int] = set()

    @property
    def items(self) -> tuple[ChatItem, ...]:
        return tuple(self._items)

    @property
    def item_areas(self) -> Mapping[int, Area]:
        return MappingProxyType(self._item_areas)

    def __len__(self) -> int:
        return len(self._items)

    def open_chat(self, chat_id: str | None) -> None:
        """Switch to another chat, discarding all state of the previous one."""
        self.chat_id = chat_id
        self._items = []
        self._item_areas.clear()
        self.revealed.clear()

    # --- item sequence ---

    def replace_all(self, items: Iterable[ChatItem]) -> None:
        self._items = list(items)

    def add(self, index: int, item: ChatItem) -> None:
        self._items.insert(index, item)

    def remove_range(self, start: int, stop: int) -> None:
        """Remove items with indices in ``[start, stop)``."""
        del self._items[start:stop]

    # --- area map ---

    def area_of(self, item_id: int) -> Area | None:
        return self._item_areas.get(item_id)

    def set_area(self, item_id: int, area: Area) -> None:
        self._item_areas[item_id] = area

    def clear_areas(self) -> None:
        self._item_areas.clear()

    def reset_areas(self, area: Area = Area.BOTTOM) -> None:
        """Forget all area tags and tag every current item with ``area``."""
        self._item_areas = {item.id: area for item in self._items}

    # --- reveal state ---

    def reveal(self, item_id: int) -> None:
        self.revealed.add(item_id)

    def hide(self, item_id: int) -> None:
        self.revealed.discard(item_id)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            items=tuple(self._items),
            item_areas=MappingProxyType(dict(self._item_areas)),
            revealed=frozenset(self.revealed),
        )

    def build_sections(self) -> list[Section]:
        """Build sections from a snapshot of the current state."""
        snap = self.snapshot()
        return put_into_sections(snap.items, snap.revealed, snap.item_areas)
