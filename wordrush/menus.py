"""Title and pause menus: closed action sets and a wrap-around cursor."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Optional, Sequence, TypeVar


class TitleAction(Enum):
    START = "Start"
    SETTINGS = "Settings"
    QUIT = "Quit"


class PauseAction(Enum):
    RESUME = "Resume"
    MAIN_MENU = "Main Menu"
    RESTART = "Restart"
    QUIT = "Quit"


T = TypeVar("T")


class SelectableList(Generic[T]):
    def __init__(self, items: Sequence[T]) -> None:
        if not items:
            raise ValueError("a selectable list needs at least one item")
        self.items: tuple[T, ...] = tuple(items)
        self.selected: Optional[int] = None

    def up(self) -> None:
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected - 1) % len(self.items)

    def down(self) -> None:
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + 1) % len(self.items)

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"menu index {index} out of range")
        self.selected = index

    def unselect(self) -> None:
        self.selected = None

    def current(self) -> T:
        """The highlighted item; with nothing highlighted the first item is chosen."""
        if self.selected is None:
            self.selected = 0
        return self.items[self.selected]


def title_menu() -> SelectableList[TitleAction]:
    return SelectableList(list(TitleAction))


def pause_menu() -> SelectableList[PauseAction]:
    return SelectableList(list(PauseAction))
