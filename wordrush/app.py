"""
The single application value and the routing of input and ticks.

Which keys mean what depends on the active screen and, in the game, on the
pause flag; everything is dispatched from handle_key.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from wordrush.config import Config
from wordrush.dictionary import Dictionary
from wordrush.events import Key, KeyCode, is_back, is_down, is_select, is_up
from wordrush.menus import PauseAction, TitleAction, pause_menu, title_menu
from wordrush.screens import Screen, ScreenMachine
from wordrush.state import RoundState, TickOutcome

logger = logging.getLogger(__name__)


class App:
    def __init__(
        self, config: Config, dictionary: Dictionary, rng: Optional[random.Random] = None
    ) -> None:
        self.config = config
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.screens = ScreenMachine()
        self.round = RoundState()
        self.title_list = title_menu()
        self.pause_list = pause_menu()
        self.title_list.select(0)
        self.pause_list.select(0)
        self.running = True

    @property
    def screen(self) -> Screen:
        return self.screens.screen

    @property
    def countdown_running(self) -> bool:
        return self.screen is Screen.GAME and not self.round.paused and self.config.has_countdown

    def quit(self) -> None:
        logger.info("quit requested")
        self.running = False

    def start_game(self) -> None:
        self.round.reset_game(self.config)
        self.round.start_round(self.config, self.dictionary, self.rng)
        if self.screen is not Screen.GAME:
            self.screens.start_game()
        logger.info("game started (%s)", self.config.gamemode.label)

    def pause(self) -> None:
        # nothing is highlighted until the player moves; Enter alone resumes
        self.pause_list.unselect()
        self.round.paused = True

    def resume(self) -> None:
        self.round.paused = False

    def submit(self) -> bool:
        return self.round.submit(self.config, self.dictionary, self.rng)

    def tick(self) -> TickOutcome:
        if self.screen is not Screen.GAME:
            return TickOutcome.FROZEN
        outcome = self.round.tick(self.config, self.dictionary, self.rng)
        if outcome is TickOutcome.OUT_OF_LIVES:
            logger.info("game over, score %d", self.round.score)
            self.round.paused = False
            self.screens.lose()
        return outcome

    def handle_key(self, key: Key) -> None:
        screen = self.screen
        if screen is Screen.TITLE:
            self._title_key(key)
        elif screen is Screen.SETTINGS:
            self._settings_key(key)
        elif screen is Screen.GAME:
            if self.round.paused:
                self._pause_key(key)
            else:
                self._game_key(key)
        elif screen is Screen.GAME_OVER:
            self._game_over_key(key)

    def _title_key(self, key: Key) -> None:
        if key.is_char("q"):
            self.quit()
        elif is_up(key):
            self.title_list.up()
        elif is_down(key):
            self.title_list.down()
        elif is_select(key):
            action = self.title_list.current()
            if action is TitleAction.START:
                self.start_game()
            elif action is TitleAction.SETTINGS:
                self.screens.open_settings()
            elif action is TitleAction.QUIT:
                self.quit()

    def _settings_key(self, key: Key) -> None:
        if is_back(key) or key.code is KeyCode.ENTER:
            self.screens.close_settings()

    def _game_key(self, key: Key) -> None:
        if key.code is KeyCode.ENTER:
            self.submit()
        elif key.code is KeyCode.CHAR:
            self.round.type_char(key.char)
        elif key.code is KeyCode.BACKSPACE:
            self.round.backspace()
        elif key.code is KeyCode.ESC:
            self.pause()

    def _pause_key(self, key: Key) -> None:
        if key.code is KeyCode.ESC or key.is_char("q"):
            self.resume()
        elif is_up(key):
            self.pause_list.up()
        elif is_down(key):
            self.pause_list.down()
        elif is_select(key):
            action = self.pause_list.current()
            if action is PauseAction.RESUME:
                self.resume()
            elif action is PauseAction.MAIN_MENU:
                self.round.paused = False
                self.screens.main_menu()
            elif action is PauseAction.RESTART:
                self.start_game()
            elif action is PauseAction.QUIT:
                self.quit()

    def _game_over_key(self, key: Key) -> None:
        if key.is_char("q"):
            self.quit()
        elif key.code in (KeyCode.ENTER, KeyCode.ESC):
            self.screens.main_menu()
