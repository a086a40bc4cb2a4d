"""Game controller: one round of Fill In The Blank.

A round runs in four steps::

    labels    = scan_labels(template)          # what to ask for
    responses = [prompt(...) for each label]   # ask the player
    filled    = substitute(template, responses)
    output(word_wrap(filled, line_width))

Console I/O is injected (``prompt`` defaults to :func:`input`, ``output`` to
:func:`print`) so rounds can be driven by tests or another front end.  The
template engine itself never performs I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from fill_in_blank.stories import Story, StoryLibrary
from fill_in_blank.template import check_width, scan_labels, substitute, word_wrap

logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH = 70
DEFAULT_PROMPT_FORMAT = "Enter a {label}: "


class GameRound:
    """One round of the game, built around a single template.

    Attributes:
        template:      Story template text.
        labels:        Blank labels in template order.
        _prompt:       Callable that shows a prompt and returns one line;
                       :func:`input` when ``None``.
        _output:       Callable that prints one block of text; :func:`print`
                       when ``None``.
        _prompt_format: Format string with a ``{label}`` field.
    """

    def __init__(
        self,
        template: str,
        *,
        prompt: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
        prompt_format: str = DEFAULT_PROMPT_FORMAT,
    ) -> None:
        self.template = template
        self.labels = scan_labels(template)
        self._prompt = prompt
        self._output = output
        self._prompt_format = prompt_format
        logger.debug("Round has %d blank(s)", len(self.labels))

    def prompt_text(self, label: str) -> str:
        """Return the prompt shown for *label*."""
        return self._prompt_format.replace("{label}", label)

    def collect_responses(self) -> list[str]:
        """Ask the player for one word or phrase per blank, in order."""
        prompt = self._prompt or input
        return [prompt(self.prompt_text(label)) for label in self.labels]

    def fill(self, responses: Sequence[str]) -> str:
        """Return the story with *responses* written into the blanks."""
        return substitute(self.template, responses)

    def render(self, responses: Sequence[str], line_width: int = DEFAULT_LINE_WIDTH) -> str:
        """Return the filled story, word-wrapped to *line_width*."""
        return word_wrap(self.fill(responses), line_width)

    def play(self, line_width: int = DEFAULT_LINE_WIDTH) -> str:
        """Run the whole round and print the finished story.

        The width is checked before the player is prompted.

        Returns:
            The wrapped story that was printed.
        """
        check_width(line_width)
        responses = self.collect_responses()
        story = self.render(responses, line_width)
        output = self._output or print
        output("")
        output(story)
        return story


def play_round(
    story: Story,
    *,
    line_width: int = DEFAULT_LINE_WIDTH,
    prompt: Callable[[str], str] | None = None,
    output: Callable[[str], None] | None = None,
    prompt_format: str = DEFAULT_PROMPT_FORMAT,
) -> str:
    """Play one round with *story* and return the printed text."""
    logger.info("Playing %r (%s)", story.title, story.path.name)
    game_round = GameRound(
        story.template, prompt=prompt, output=output, prompt_format=prompt_format
    )
    return game_round.play(line_width)


def play_random_round(
    library: StoryLibrary,
    *,
    line_width: int = DEFAULT_LINE_WIDTH,
    prompt: Callable[[str], str] | None = None,
    output: Callable[[str], None] | None = None,
    prompt_format: str = DEFAULT_PROMPT_FORMAT,
) -> str:
    """Pick a random story from *library* and play one round with it."""
    return play_round(
        library.load_random(),
        line_width=line_width,
        prompt=prompt,
        output=output,
        prompt_format=prompt_format,
    )
