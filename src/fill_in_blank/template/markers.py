"""Blank-marker tokenizer, label scanner and substitutor.

A story template is plain text with blanks written as ``{label}``::

    Roses are {color}, {plural noun} are {color}

:func:`tokenize` splits a template into literal :class:`TextRun` pieces and
:class:`Marker` pieces in a single left-to-right pass.  Both public
operations are built on it, so "what counts as a marker" is decided in one
place:

- :func:`scan_labels` returns the label of every marker, in order.  The game
  uses the labels to prompt the player.
- :func:`substitute` rebuilds the template with each marker span (braces
  included) replaced by the next response.

Brace rules
-----------
- ``{`` opens a marker.  A second ``{`` before the closing brace abandons the
  partial marker: the earlier ``{`` and the text after it stay in the output
  as literal text, and the new ``{`` opens the marker.
- ``}`` closes the open marker.  A ``}`` with no open marker raises
  :class:`~fill_in_blank.errors.MalformedTemplateError`.
- A ``{`` that is never closed is kept as literal text and yields no label.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fill_in_blank.errors import MalformedTemplateError, ResponseCountError

logger = logging.getLogger(__name__)

OPEN_BRACE = "{"
CLOSE_BRACE = "}"


@dataclass(frozen=True)
class TextRun:
    """Literal template text between markers.

    Attributes:
        start: Index of the first character of the run.
        end:   Index one past the last character.
        text:  The run itself, ``template[start:end]``.
    """

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class Marker:
    """One blank in a template.

    Attributes:
        start: Index of the opening ``{``.
        end:   Index one past the closing ``}``.
        label: Text strictly between the braces.  May be empty or contain
               whitespace; it is shown to the player unchanged.
    """

    start: int
    end: int
    label: str

    @property
    def span_length(self) -> int:
        """Length of the marker in the template, braces included."""
        return self.end - self.start


Token = TextRun | Marker


def tokenize(template: str) -> list[Token]:
    """Split *template* into text runs and markers, left to right.

    Adjacent literal characters are merged into a single :class:`TextRun`,
    so concatenating ``template[t.start:t.end]`` over all tokens gives back
    the original template.

    Args:
        template: Story template text.

    Returns:
        Tokens in template order.

    Raises:
        MalformedTemplateError: On a ``}`` with no open marker.
    """
    tokens: list[Token] = []
    run_start = 0  # start of the pending literal run
    marker_start: int | None = None

    def flush_run(end: int) -> None:
        if end > run_start:
            tokens.append(TextRun(run_start, end, template[run_start:end]))

    for index, char in enumerate(template):
        if char == OPEN_BRACE:
            # Anything before this brace, including an abandoned partial
            # marker, is literal text.
            marker_start = index
        elif char == CLOSE_BRACE:
            if marker_start is None:
                raise MalformedTemplateError(index)
            flush_run(marker_start)
            tokens.append(Marker(marker_start, index + 1, template[marker_start + 1 : index]))
            run_start = index + 1
            marker_start = None

    flush_run(len(template))
    return tokens


def scan_labels(template: str) -> list[str]:
    """Return the label of every blank in *template*, in order.

    Repeated labels are returned once per occurrence::

        >>> scan_labels("Roses are {color}, {plural noun} are {color}")
        ['color', 'plural noun', 'color']

    Raises:
        MalformedTemplateError: On a ``}`` with no open marker.
    """
    return [token.label for token in tokenize(template) if isinstance(token, Marker)]


def substitute(template: str, responses: Sequence[str]) -> str:
    """Fill every blank in *template* with the matching response.

    The i-th marker span, braces included, is replaced by ``responses[i]``;
    all other text is copied unchanged.  The result is assembled from the
    token list in one pass and joined once.

    Args:
        template:  Story template text.
        responses: One response per blank, in template order.

    Returns:
        The filled story.

    Raises:
        MalformedTemplateError: On a ``}`` with no open marker.
        ResponseCountError: If there are fewer responses than blanks (raised
            at the first blank with no response, before anything is
            returned) or more responses than blanks.
    """
    tokens = tokenize(template)
    expected = sum(1 for token in tokens if isinstance(token, Marker))

    pieces: list[str] = []
    used = 0
    for token in tokens:
        if isinstance(token, TextRun):
            pieces.append(token.text)
            continue
        if used >= len(responses):
            raise ResponseCountError(expected=expected, received=len(responses))
        pieces.append(responses[used])
        used += 1

    if used != len(responses):
        raise ResponseCountError(expected=expected, received=len(responses))

    logger.debug("Filled %d blank(s)", used)
    return "".join(pieces)
