"""
Curses drawing and key translation.

Rendering only reads the App; key codes from curses are turned into Key
values before anything else sees them.
"""

from __future__ import annotations

import curses
from typing import Callable, Optional, Sequence

from wordrush.app import App
from wordrush.config import Config, Gamemode
from wordrush.events import Key, KeyCode
from wordrush.menus import SelectableList
from wordrush.screens import Screen

TITLE_ART = [
    "__      _____  ___ ___  ___ _   _ ___ _  _ ",
    "\\ \\    / / _ \\| _ \\   \\| _ \\ | | / __| || |",
    " \\ \\/\\/ / (_) |   / |) |   / |_| \\__ \\ __ |",
    "  \\_/\\_/ \\___/|_|_\\___/|_|_\\\\___/|___/_||_|",
]

# Eighth-width blocks for a smooth countdown bar.
PARTIAL_BLOCKS = ["", "▏", "▎", "▍", "▌", "▋", "▊", "▉"]
FULL_BLOCK = "█"

ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ESC_KEY = 27
ARROW_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
}


def translate_key(ch: int) -> Optional[Key]:
    if ch in ENTER_KEYS:
        return Key(KeyCode.ENTER)
    if ch in BACKSPACE_KEYS:
        return Key(KeyCode.BACKSPACE)
    if ch == ESC_KEY:
        return Key(KeyCode.ESC)
    if ch in ARROW_KEYS:
        return Key(ARROW_KEYS[ch])
    if 32 <= ch <= 126:
        return Key.of(chr(ch))
    return None


def make_poll(stdscr: curses.window) -> Callable[[Optional[float]], Optional[Key]]:
    def poll(timeout: Optional[float]) -> Optional[Key]:
        stdscr.timeout(-1 if timeout is None else int(timeout * 1000))
        ch = stdscr.getch()
        if ch == -1 or ch == curses.KEY_RESIZE:
            return None
        return translate_key(ch)

    return poll


def countdown_bar(time_left: int, ticks_per_turn: int, width: int) -> str:
    if width <= 0 or ticks_per_turn <= 0:
        return ""
    eighths = width * 8 * time_left // ticks_per_turn
    return FULL_BLOCK * (eighths // 8) + PARTIAL_BLOCKS[eighths % 8]


def lives_label(config: Config, lives: int) -> str:
    if config.gamemode is Gamemode.PRACTICE:
        return "practice"
    if config.gamemode is Gamemode.INFINITE_LIVES:
        return "∞"
    return "♥ " * lives


def safe_addstr(stdscr: curses.window, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


def init_colors() -> None:
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(1, curses.COLOR_WHITE, -1)   # base text
    curses.init_pair(2, curses.COLOR_CYAN, -1)    # highlighted menu item
    curses.init_pair(3, curses.COLOR_WHITE, -1)   # borders
    curses.init_pair(4, curses.COLOR_GREEN, -1)   # accepted word, prompt match
    curses.init_pair(5, curses.COLOR_RED, -1)     # lives, rejected word
    curses.init_pair(6, curses.COLOR_YELLOW, -1)  # countdown bar


def draw_centered(stdscr: curses.window, y: int, text: str, attr: int = 0) -> None:
    _, w = stdscr.getmaxyx()
    safe_addstr(stdscr, y, max(0, (w - len(text)) // 2), text[: max(0, w - 1)], attr)


def draw_box(stdscr: curses.window, y: int, x: int, height: int, width: int, title: str = "") -> None:
    border_attr = curses.color_pair(3) | curses.A_BOLD
    for row in range(y + 1, y + height - 1):
        safe_addstr(stdscr, row, x + 1, " " * (width - 2))
    safe_addstr(stdscr, y, x, "┌" + "─" * (width - 2) + "┐", border_attr)
    for row in range(y + 1, y + height - 1):
        safe_addstr(stdscr, row, x, "│", border_attr)
        safe_addstr(stdscr, row, x + width - 1, "│", border_attr)
    safe_addstr(stdscr, y + height - 1, x, "└" + "─" * (width - 2) + "┘", border_attr)
    if title:
        safe_addstr(stdscr, y, x + (width - len(title) - 2) // 2, f" {title} ", border_attr)


def draw_centered_box(stdscr: curses.window, lines: Sequence[str], title: str = "") -> tuple[int, int]:
    """Draw a box sized to ``lines`` in the middle of the screen; returns its top-left corner."""
    h, w = stdscr.getmaxyx()
    content_width = max([len(title) + 2] + [len(line) for line in lines])
    box_width = min(max(20, content_width + 8), max(10, w - 2))
    box_height = len(lines) + 4
    start_y = max(0, (h - box_height) // 2)
    start_x = max(0, (w - box_width) // 2)
    draw_box(stdscr, start_y, start_x, box_height, box_width, title)
    for i, line in enumerate(lines):
        safe_addstr(stdscr, start_y + 2 + i, start_x + (box_width - len(line)) // 2, line[: box_width - 2])
    return start_y, start_x


def draw_menu(stdscr: curses.window, y: int, menu: SelectableList, symbol: str) -> None:
    for i, item in enumerate(menu.items):
        if i == menu.selected:
            draw_centered(stdscr, y + i, f"{symbol}{item.value}", curses.color_pair(2) | curses.A_BOLD)
        else:
            draw_centered(stdscr, y + i, f"{' ' * len(symbol)}{item.value}", curses.color_pair(1))


def draw_title(stdscr: curses.window, app: App) -> None:
    h, _ = stdscr.getmaxyx()
    top = max(1, h // 2 - len(TITLE_ART) - 3)
    for i, line in enumerate(TITLE_ART):
        draw_centered(stdscr, top + i, line, curses.color_pair(2) | curses.A_BOLD)
    draw_menu(stdscr, top + len(TITLE_ART) + 2, app.title_list, app.config.highlight_symbol)


def draw_settings(stdscr: curses.window, app: App) -> None:
    config = app.config
    lines = [
        f"Gamemode          {config.gamemode.label}",
        f"Words per prompt  {config.min_words_per_prompt}",
        f"Turn length       {config.ticks_per_turn / config.tick_rate:.1f}s",
        f"Starting lives    {config.starting_lives}",
        f"Max lives         {config.max_lives}",
        "",
        "Esc to go back",
    ]
    draw_centered_box(stdscr, lines, "Settings")


def draw_game(stdscr: curses.window, app: App) -> None:
    h, w = stdscr.getmaxyx()
    state = app.round
    draw_centered(stdscr, 2, state.prompt, curses.A_BOLD)
    if app.config.has_countdown:
        bar = countdown_bar(state.time_left, app.config.ticks_per_turn, max(0, w - 4))
        safe_addstr(stdscr, 4, 2, bar, curses.color_pair(6))

    input_y = max(6, h - 8)
    draw_box(stdscr, input_y, 2, 3, max(10, w - 4))
    typed = state.input_buffer
    match_attr = curses.color_pair(4) if state.prompt and state.prompt in typed.upper() else 0
    safe_addstr(stdscr, input_y + 1, 3, typed[: max(0, w - 6)], match_attr)

    if state.last_result is False:
        draw_centered(stdscr, input_y - 1, "not accepted", curses.color_pair(5))
    elif state.last_word and state.score:
        draw_centered(stdscr, input_y - 1, state.last_word, curses.color_pair(4))

    draw_centered(stdscr, input_y + 4, lives_label(app.config, state.lives), curses.color_pair(5) | curses.A_BOLD)
    draw_centered(stdscr, input_y + 5, f"score {state.score}", curses.color_pair(1) | curses.A_DIM)

    if state.paused:
        menu = app.pause_list
        start_y, _ = draw_centered_box(stdscr, [""] * (len(menu.items) + 1), "Paused")
        draw_menu(stdscr, start_y + 2, menu, app.config.highlight_symbol)
    else:
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        try:
            stdscr.move(input_y + 1, min(w - 2, 3 + len(typed)))
        except curses.error:
            pass


def draw_game_over(stdscr: curses.window, app: App) -> None:
    lines = [f"Score: {app.round.score}"]
    if app.round.missed_prompt:
        lines.append(f"Last prompt: {app.round.missed_prompt}")
    lines += ["", "Enter for the title screen, q to quit"]
    draw_centered_box(stdscr, lines, "Game Over")


SCREEN_RENDERERS = {
    Screen.TITLE: draw_title,
    Screen.SETTINGS: draw_settings,
    Screen.GAME: draw_game,
    Screen.GAME_OVER: draw_game_over,
}


def make_render(stdscr: curses.window) -> Callable[[App], None]:
    def render(app: App) -> None:
        stdscr.erase()
        stdscr.bkgd(" ", curses.color_pair(1))
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        h, w = stdscr.getmaxyx()
        footer = "wordrush"
        safe_addstr(stdscr, h - 1, max(0, (w - len(footer)) // 2), footer[: max(0, w - 1)], curses.color_pair(3) | curses.A_DIM)
        SCREEN_RENDERERS[app.screen](stdscr, app)
        stdscr.refresh()

    return render
