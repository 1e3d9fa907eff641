from __future__ import annotations

import pytest

from wordrush.menus import PauseAction, SelectableList, TitleAction, pause_menu, title_menu


def test_up_wraps_from_first_to_last() -> None:
    menu = SelectableList(["a", "b", "c"])
    menu.select(0)
    menu.up()
    assert menu.selected == 2


def test_down_wraps_from_last_to_first() -> None:
    menu = SelectableList(["a", "b", "c"])
    menu.select(2)
    menu.down()
    assert menu.selected == 0


def test_moves_within_bounds() -> None:
    menu = SelectableList(["a", "b", "c"])
    menu.select(1)
    menu.down()
    assert menu.selected == 2
    menu.up()
    menu.up()
    assert menu.selected == 0


def test_navigation_without_selection_starts_at_first_item() -> None:
    menu = SelectableList(["a", "b", "c"])
    menu.up()
    assert menu.selected == 0
    menu.unselect()
    menu.down()
    assert menu.selected == 0


def test_current_defaults_to_first_item() -> None:
    menu = SelectableList(["a", "b", "c"])
    assert menu.selected is None
    assert menu.current() == "a"
    assert menu.selected == 0


def test_unselect_clears_cursor() -> None:
    menu = SelectableList(["a", "b"])
    menu.select(1)
    menu.unselect()
    assert menu.selected is None


def test_select_out_of_range() -> None:
    menu = SelectableList(["a", "b"])
    with pytest.raises(IndexError):
        menu.select(2)


def test_empty_menu_rejected() -> None:
    with pytest.raises(ValueError):
        SelectableList([])


def test_menu_items_in_display_order() -> None:
    assert title_menu().items == (TitleAction.START, TitleAction.SETTINGS, TitleAction.QUIT)
    assert [a.value for a in pause_menu().items] == ["Resume", "Main Menu", "Restart", "Quit"]
    assert pause_menu().items[-1] is PauseAction.QUIT
