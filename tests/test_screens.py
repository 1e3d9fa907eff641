from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from wordrush.screens import Screen, ScreenMachine


def test_starts_on_title() -> None:
    assert ScreenMachine().screen is Screen.TITLE


def test_game_round_trip() -> None:
    sm = ScreenMachine()
    sm.start_game()
    assert sm.screen is Screen.GAME
    sm.lose()
    assert sm.screen is Screen.GAME_OVER
    sm.main_menu()
    assert sm.screen is Screen.TITLE


def test_settings_round_trip() -> None:
    sm = ScreenMachine()
    sm.open_settings()
    assert sm.screen is Screen.SETTINGS
    sm.close_settings()
    assert sm.screen is Screen.TITLE


def test_main_menu_from_game() -> None:
    sm = ScreenMachine()
    sm.start_game()
    sm.main_menu()
    assert sm.screen is Screen.TITLE


@pytest.mark.parametrize("event", ["lose", "main_menu", "close_settings"])
def test_illegal_transitions_from_title(event: str) -> None:
    sm = ScreenMachine()
    with pytest.raises(TransitionNotAllowed):
        sm.send(event)
    assert sm.screen is Screen.TITLE


def test_cannot_start_game_from_settings() -> None:
    sm = ScreenMachine()
    sm.open_settings()
    with pytest.raises(TransitionNotAllowed):
        sm.start_game()
