from __future__ import annotations

import logging
from enum import Enum

from statemachine import State, StateMachine

logger = logging.getLogger(__name__)


class Screen(Enum):
    TITLE = "title"
    SETTINGS = "settings"
    GAME = "game"
    GAME_OVER = "game_over"


class ScreenMachine(StateMachine):
    """Guards which screen may follow which.

    Pausing is not a screen: it is a flag on the round while the game screen
    stays active.
    """

    title = State("Title", value=Screen.TITLE.value, initial=True)
    settings = State("Settings", value=Screen.SETTINGS.value)
    game = State("Game", value=Screen.GAME.value)
    game_over = State("Game Over", value=Screen.GAME_OVER.value)

    start_game = title.to(game)
    open_settings = title.to(settings)
    close_settings = settings.to(title)
    main_menu = game.to(title) | game_over.to(title)
    lose = game.to(game_over)

    @property
    def screen(self) -> Screen:
        return Screen(self.current_state.value)

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.debug("screen %s -> %s (%s)", source.id, target.id, event)
