"""Command line entry point: option parsing, greeting screen and game loop."""

from __future__ import annotations

import getopt
import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .common import SMALL_TERM_MSG, term_size_ok
from .game import Game
from .gui import (
    BLACK_ON_WHITE,
    GREEN_ON_WHITE,
    RED_ON_WHITE,
    WHITE_ON_BLUE,
    WHITE_ON_GREEN,
    YELLOW_ON_WHITE,
    Renderer,
)
from .keyboard import KEY_RESIZE, KEY_SPACEBAR, QUIT_KEYS, KeyboardHandler, QuitGame

VERSION = "1.4.1"
DEFAULT_PASSES = 3
DEFAULT_PROGRAM_NAME = "ttysolitaire"

_SHORT_OPTIONS = "hvp:"
_LONG_OPTIONS = ["help", "version", "passes=", "four-color-deck", "no-background-color"]

_GREETING = (
    (8, 26, "Welcome to tty-solitaire."),
    (10, 21, "Move with the arrow keys or <hjkl>."),
    (12, 18, "Use the space bar to select and place cards."),
    (14, 13, "After selecting a card you can use <m> to select more"),
    (15, 12, "and <n> to select fewer. Press <Shift+M> to select all."),
    (17, 19, "Press the space bar to play or q to quit."),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Options:
    """Settings chosen on the command line."""

    passes: int = DEFAULT_PASSES
    four_color_deck: bool = False
    no_background_color: bool = False


def _leading_int(text: str) -> int:
    """Read the integer at the start of text, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _program_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else DEFAULT_PROGRAM_NAME


def _usage(program_name: str) -> str:
    return (
        f"usage: {program_name} [OPTIONS]\n"
        "  -v, --version              Show version\n"
        "  -h, --help                 Show this message\n"
        "  -p, --passes               Number of passes through the deck  (default: 3)\n"
        "      --four-color-deck      Draw unique card suit colors       (default: false)\n"
        "      --no-background-color  Don't draw background color        (default: false)\n"
    )


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Parse command line arguments (without the program name).

    Help, version and unknown options print their message and raise
    SystemExit with status 0.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        pairs, _ = getopt.gnu_getopt(args, _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError:
        print(_usage(_program_name()), end="")
        raise SystemExit(0) from None

    options = Options()
    for name, value in pairs:
        if name in ("-v", "--version"):
            print(VERSION)
            raise SystemExit(0)
        if name in ("-h", "--help"):
            print(_usage(_program_name()), end="")
            raise SystemExit(0)
        if name in ("-p", "--passes"):
            options.passes = _leading_int(value)
        elif name == "--four-color-deck":
            options.four_color_deck = True
        elif name == "--no-background-color":
            options.no_background_color = True
    return options


def greeting_lines() -> list[tuple[int, int, str]]:
    """Return the welcome screen as (row, column, text) entries."""
    return list(_GREETING)


def _show_greeting(screen: Any) -> None:
    screen.clear()
    for y, x, text in _GREETING:
        screen.addstr(y, x, text)
    screen.refresh()


def _show_small_terminal(screen: Any) -> None:
    screen.clear()
    screen.addstr(1, 1, SMALL_TERM_MSG)
    screen.refresh()


def run(screen: Any, options: Options) -> bool:
    """Play one game on a curses-like screen.

    Returns True when the game is won and False when the player quits.
    """

    def size_ok() -> bool:
        lines, columns = screen.getmaxyx()
        return term_size_ok(lines, columns)

    while not size_ok():
        _show_small_terminal(screen)
        if screen.getch() in QUIT_KEYS:
            return False

    _show_greeting(screen)

    while True:
        key = screen.getch()
        if key in QUIT_KEYS:
            return False
        if size_ok():
            _show_greeting(screen)
            if key == KEY_SPACEBAR:
                screen.clear()
                screen.refresh()
                break
        elif key == KEY_RESIZE:
            _show_small_terminal(screen)

    game = Game(options.passes, options.four_color_deck)
    renderer = Renderer(game)
    renderer.screen = screen

    def on_resize() -> None:
        screen.clear()
        renderer.cells.clear()
        screen.refresh()
        if size_ok():
            renderer.draw_deck(game.deck)
            renderer.draw_cursor(game.cursor)
        else:
            screen.addstr(1, 1, SMALL_TERM_MSG)
        screen.refresh()

    renderer.draw_cursor(game.cursor)
    renderer.draw_deck(game.deck)
    screen.refresh()

    handler = KeyboardHandler(game, renderer, size_ok, on_resize)
    while True:
        try:
            handler.handle(screen.getch())
        except QuitGame:
            return False
        screen.refresh()
        if game.won():
            return True


def _play(screen: Any, options: Options) -> bool:
    import curses

    curses.raw()
    curses.noecho()
    screen.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    if hasattr(curses, "set_escdelay"):
        curses.set_escdelay(1)
    if options.no_background_color:
        curses.use_default_colors()
    elif hasattr(curses, "assume_default_colors"):
        curses.assume_default_colors(curses.COLOR_WHITE, curses.COLOR_GREEN)
    curses.init_pair(BLACK_ON_WHITE, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(RED_ON_WHITE, curses.COLOR_RED, curses.COLOR_WHITE)
    curses.init_pair(GREEN_ON_WHITE, curses.COLOR_GREEN, curses.COLOR_WHITE)
    curses.init_pair(YELLOW_ON_WHITE, curses.COLOR_YELLOW, curses.COLOR_WHITE)
    curses.init_pair(WHITE_ON_BLUE, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(WHITE_ON_GREEN, curses.COLOR_WHITE, curses.COLOR_GREEN)
    if not options.no_background_color and not hasattr(curses, "assume_default_colors"):
        screen.bkgd(" ", curses.color_pair(WHITE_ON_GREEN))
    return run(screen, options)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in the terminal."""
    import curses

    options = parse_args(argv)
    won = curses.wrapper(_play, options)
    if won:
        print("You won.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())