"""Word-wrap formatter for the finished story.

:func:`word_wrap` reflows text so that no line is longer than a given width,
breaking only at whitespace.  It never adds or removes characters: a wrap
point is made by turning the last whitespace character on the line into a
newline.

Unlike :func:`textwrap.fill` the original spacing, blank lines and paragraph
breaks of the story file are kept exactly as written.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def check_width(max_width: int) -> None:
    """Raise ``ValueError`` unless *max_width* is a positive integer."""
    if isinstance(max_width, bool) or not isinstance(max_width, int) or max_width <= 0:
        raise ValueError(f"max_width must be a positive integer, got {max_width!r}")


def word_wrap(text: str, max_width: int) -> str:
    """Wrap *text* to lines of at most *max_width* characters.

    The text is scanned once, left to right.  Column counting restarts after
    every newline, whether it was in the input or inserted by a wrap.  When a
    character would land past *max_width*, the most recent whitespace on the
    current line becomes a newline and counting continues from just after it.

    A word longer than *max_width* cannot be broken at whitespace.  It is left
    intact on a line of its own, and that line overflows until the next
    whitespace character.

    Args:
        text:      Text to wrap.
        max_width: Maximum line length in characters.  Must be positive.

    Returns:
        The wrapped text; same length as *text*.

    Raises:
        ValueError: If *max_width* is not a positive integer.
    """
    check_width(max_width)

    chars = list(text)
    line_start = 0
    last_space: int | None = None
    overflows = 0

    for index, char in enumerate(chars):
        if char == "\n":
            line_start = index + 1
            last_space = None
            continue
        if char.isspace():
            last_space = index
        if index - line_start < max_width:
            continue
        if last_space is None:
            overflows += 1
            continue
        chars[last_space] = "\n"
        line_start = last_space + 1
        last_space = None

    if overflows:
        logger.debug("word_wrap: %d character(s) past width %d", overflows, max_width)
    return "".join(chars)
