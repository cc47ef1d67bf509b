"""Terminal size requirements shared by the game screens."""

MIN_TERM_LINES = 28
MIN_TERM_COLS = 57

SMALL_TERM_MSG = (
    "Please increase your terminal size to at least 57x28 or press q to quit."
)


def term_size_ok(lines: int, columns: int) -> bool:
    """Return True when a terminal of this size can hold the whole table."""
    return lines >= MIN_TERM_LINES and columns >= MIN_TERM_COLS