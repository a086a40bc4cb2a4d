"""Typed exceptions for the game.

Every failure that ends a round derives from :class:`FillInBlankError` so the
CLI can report it with a single ``except`` clause.  Template errors also
derive from the matching built-in (``ValueError`` for a malformed template,
``IndexError`` for a response-count mismatch) so callers that only know the
built-in categories still catch them.
"""

from __future__ import annotations


class FillInBlankError(Exception):
    """Base exception for game failures."""


class StorySourceError(FillInBlankError):
    """The story directory, manifest or a story file could not be read."""


class TemplateError(FillInBlankError):
    """Base exception for problems with a story template."""


class MalformedTemplateError(TemplateError, ValueError):
    """A closing brace was found with no opening brace before it.

    Args:
        position: 0-based index of the offending ``}`` in the template.
    """

    def __init__(self, position: int) -> None:
        super().__init__(f"unmatched '}}' at position {position}")
        self.position = position


class ResponseCountError(TemplateError, IndexError):
    """The number of responses does not match the number of blanks.

    Args:
        expected: Number of blanks in the template.
        received: Number of responses supplied.
    """

    def __init__(self, *, expected: int, received: int) -> None:
        super().__init__(f"template needs {expected} responses, got {received}")
        self.expected = expected
        self.received = received
