"""Tests for ChatSession: item sequence and area map of the open chat."""

from chat_sections.models.chat import Area
from chat_sections.session import ChatSession
from tests.unit.fakes import sent


def test_add_and_remove_range(group_session: ChatSession) -> None:
    group_session.add(0, sent(0))
    group_session.remove_range(1, 3)

    assert [i.id for i in group_session.items] == [0, 3, 4, 5]


def test_replace_all_keeps_areas(group_session: ChatSession) -> None:
    group_session.replace_all([sent(9)])

    assert [i.id for i in group_session.items] == [9]
    assert group_session.area_of(1) is Area.BOTTOM


def test_reset_areas_tags_only_current_items(group_session: ChatSession) -> None:
    group_session.set_area(99, Area.CURRENT)

    group_session.reset_areas(Area.DESTINATION)

    assert dict(group_session.item_areas) == {i: Area.DESTINATION for i in range(1, 6)}


def test_clear_areas(group_session: ChatSession) -> None:
    group_session.clear_areas()

    assert group_session.area_of(1) is None


def test_snapshot_is_not_affected_by_later_changes(group_session: ChatSession) -> None:
    group_session.reveal(3)
    snap = group_session.snapshot()

    group_session.add(5, sent(6))
    group_session.set_area(1, Area.CURRENT)
    group_session.hide(3)

    assert len(snap.items) == 5
    assert snap.item_areas[1] is Area.BOTTOM
    assert snap.revealed == frozenset({3})


def test_open_chat_discards_previous_state(group_session: ChatSession) -> None:
    group_session.reveal(2)

    group_session.open_chat("@1")

    assert group_session.chat_id == "@1"
    assert len(group_session) == 0
    assert not group_session.item_areas
    assert not group_session.revealed


def test_build_sections_uses_reveal_state() -> None:
    session = ChatSession(chat_id="#7", items=[sent(1, "ev"), sent(2, "ev")])

    assert session.build_sections()[0].item_positions == {1: 0, 2: 0}
    session.reveal(1)
    assert session.build_sections()[0].item_positions == {1: 0, 2: 1}
