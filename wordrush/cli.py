"""
Fullscreen terminal word game: type a word containing the prompt before time runs out.

Usage: wordrush  (or python -m wordrush)
"""

from __future__ import annotations

import curses
import logging
import os
import sys
from typing import Optional

from wordrush.app import App
from wordrush.clock import GameClock, run_loop
from wordrush.config import Config, default_log_path, default_words_path, load_config
from wordrush.dictionary import Dictionary, load_dictionary
from wordrush.errors import WordrushError
from wordrush.prompts import check_density
from wordrush.ui import init_colors, make_poll, make_render

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    path = default_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=path,
        level=os.environ.get("WORDRUSH_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_app(config: Optional[Config] = None, dictionary: Optional[Dictionary] = None) -> App:
    if config is None:
        config = load_config()
    if dictionary is None:
        dictionary = load_dictionary(default_words_path())
    # fail before the first draw if either prompt length can never be generated
    check_density(dictionary, config.min_words_per_prompt)
    return App(config, dictionary)


def run(stdscr: curses.window, app: App) -> None:
    curses.curs_set(0)
    curses.set_escdelay(25)
    init_colors()
    run_loop(app, make_poll(stdscr), make_render(stdscr), GameClock(app.config.tick_interval))


def main() -> None:
    setup_logging()
    try:
        app = build_app()
        curses.wrapper(run, app)
    except WordrushError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("interrupted")


if __name__ == "__main__":
    main()
