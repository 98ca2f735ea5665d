"""Section models produced by the section builder."""

from dataclasses import dataclass, field

from chat_sections.config import MAX_SECTION_SIZE
from chat_sections.models.chat import Area, ChatItem


@dataclass
class SectionBoundary:
    """Index range a section spans in the flat item sequence (inclusive)."""

    min_index: int
    max_index: int
    area: Area


@dataclass
class SectionItems:
    """A run of consecutive items of one section sharing a merge category."""

    merge_category: str | None
    items: list[ChatItem]
    revealed: bool
    show_avatar: set[int] = field(default_factory=set)
    original_range: range = range(0)


@dataclass
class Section:
    """Items of one area, grouped into runs."""

    items: list[SectionItems]
    boundary: SectionBoundary
    item_positions: dict[int, int] = field(default_factory=dict)

    def excess_item_count(self) -> int:
        """Number of items this section holds beyond MAX_SECTION_SIZE."""
        span = self.boundary.max_index - self.boundary.min_index + 1
        return max(span - MAX_SECTION_SIZE, 0)

    def previous_shown_item(self, run_index: int, item_index: int) -> ChatItem | None:
        """Return the visible item before ``items[run_index].items[item_index]``.

        A revealed run is walked item by item; a collapsed run is skipped as a whole.
        Crossing into the preceding run yields its last member.
        """
        if not 0 <= run_index < len(self.items):
            return None
        run = self.items[run_index]
        if not 0 <= item_index < len(run.items):
            return None
        if run.revealed and item_index > 0:
            return run.items[item_index - 1]
        if run_index == 0:
            return None
        return self.items[run_index - 1].items[-1]

    def next_shown_item(self, run_index: int, item_index: int) -> ChatItem | None:
        """Return the visible item after ``items[run_index].items[item_index]``.

        Crossing into the following run yields its first member.
        """
        if not 0 <= run_index < len(self.items):
            return None
        run = self.items[run_index]
        if not 0 <= item_index < len(run.items):
            return None
        if run.revealed and item_index < len(run.items) - 1:
            return run.items[item_index + 1]
        if run_index + 1 >= len(self.items):
            return None
        return self.items[run_index + 1].items[0]
