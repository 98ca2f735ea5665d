"""Section builder: partition a flat item sequence into areas and merge runs."""

from collections.abc import Collection, Mapping, Sequence

from chat_sections.models.chat import Area, ChatItem
from chat_sections.models.section import Section, SectionBoundary, SectionItems


def _shows_avatar(item: ChatItem, prev: ChatItem | None) -> bool:
    """A run or section opened by a group-received item shows an avatar unless
    the same member sent the previous item.
    """
    if not item.direction.is_group_received:
        return False
    if prev is None or not prev.direction.is_group_received:
        return True
    return prev.direction.member_id != item.direction.member_id


def _sender_changed(item: ChatItem, prev: ChatItem) -> bool:
    """Both items are group-received and came from different members."""
    return (
        item.direction.is_group_received
        and prev.direction.is_group_received
        and prev.direction.member_id != item.direction.member_id
    )


def _new_run(
    item: ChatItem, index: int, prev: ChatItem | None, revealed: Collection[int]
) -> SectionItems:
    return SectionItems(
        merge_category=item.merge_category,
        items=[item],
        revealed=item.merge_category is None or item.id in revealed,
        show_avatar={item.id} if _shows_avatar(item, prev) else set(),
        original_range=range(index, index + 1),
    )


def put_into_sections(
    items: Sequence[ChatItem],
    revealed: Collection[int],
    item_areas: Mapping[int, Area],
) -> list[Section]:
    """Split ``items`` into sections by area and into runs by merge category.

    Args:
        items: The flat item sequence, in stored order.
        revealed: Ids of items whose merged run is expanded.
        item_areas: Area of each item; items without an entry belong to BOTTOM.

    Returns:
        Sections in order of first appearance. Each item is given a position
        counting the rows shown before it: a collapsed run occupies one row.
    """
    if not items:
        return []

    first = items[0]
    sections = [
        Section(
            items=[_new_run(first, 0, None, revealed)],
            boundary=SectionBoundary(
                min_index=0, max_index=0, area=item_areas.get(first.id, Area.BOTTOM)
            ),
            item_positions={first.id: 0},
        )
    ]

    prev = first
    position = 0
    for index in range(1, len(items)):
        item = items[index]
        area = item_areas.get(item.id, Area.BOTTOM)
        # At most one section per area, and there are three areas.
        section = next((s for s in sections if s.boundary.area is area), None)

        if section is None:
            position += 1
            sections.append(
                Section(
                    items=[_new_run(item, index, prev, revealed)],
                    boundary=SectionBoundary(min_index=index, max_index=index, area=area),
                    item_positions={item.id: position},
                )
            )
        else:
            recent = section.items[-1]
            category = item.merge_category
            if recent.merge_category == category:
                if category is None or recent.revealed or item.id in revealed:
                    position += 1
                if _sender_changed(item, prev):
                    recent.show_avatar.add(item.id)
                recent.items.append(item)
                recent.original_range = range(recent.original_range.start, index + 1)
            else:
                position += 1
                section.items.append(_new_run(item, index, prev, revealed))
            section.item_positions[item.id] = position
            section.boundary.max_index = index

        prev = item

    return sections
