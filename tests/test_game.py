"""
Unit tests for the game controller (fill_in_blank/game.py).

Tests cover:
- Prompt text and order
- Filling and wrapping a round
- Failure paths: bad width, player quitting, malformed template
- Random rounds drawn from a story library
"""

import random

import pytest

from fill_in_blank.errors import MalformedTemplateError, ResponseCountError
from fill_in_blank.game import GameRound, play_random_round, play_round
from fill_in_blank.stories import StoryLibrary
from tests.constants import ROSES_FILLED, ROSES_LABELS, ROSES_RESPONSES, ROSES_TEMPLATE

# ============================================================================
# PROMPTING
# ============================================================================


@pytest.mark.unit
def test_round_exposes_labels():
    assert GameRound(ROSES_TEMPLATE).labels == ROSES_LABELS


@pytest.mark.unit
def test_prompts_once_per_label_in_order(scripted_console):
    console = scripted_console(ROSES_RESPONSES)
    game_round = GameRound(ROSES_TEMPLATE, prompt=console.prompt, output=console.output)

    responses = game_round.collect_responses()

    assert responses == ROSES_RESPONSES
    assert console.prompts == [
        "Enter a color: ",
        "Enter a plural noun: ",
        "Enter a color: ",
    ]


@pytest.mark.unit
def test_custom_prompt_format(scripted_console):
    console = scripted_console(["x"])
    game_round = GameRound("{noun}", prompt=console.prompt, prompt_format="{label}? ")
    game_round.collect_responses()
    assert console.prompts == ["noun? "]


@pytest.mark.unit
def test_no_blanks_means_no_prompts(scripted_console):
    console = scripted_console([])
    game_round = GameRound("Nothing to fill.", prompt=console.prompt, output=console.output)
    assert game_round.play() == "Nothing to fill."
    assert console.prompts == []


# ============================================================================
# FILLING AND RENDERING
# ============================================================================


@pytest.mark.unit
def test_fill_and_render():
    game_round = GameRound(ROSES_TEMPLATE)
    assert game_round.fill(ROSES_RESPONSES) == ROSES_FILLED
    assert game_round.render(ROSES_RESPONSES, 15) == "Roses are red,\ndogs are blue"


@pytest.mark.unit
def test_play_prints_blank_line_then_story(scripted_console):
    console = scripted_console(ROSES_RESPONSES)
    game_round = GameRound(ROSES_TEMPLATE, prompt=console.prompt, output=console.output)

    story = game_round.play(line_width=70)

    assert story == ROSES_FILLED
    assert console.printed == ["", ROSES_FILLED]


# ============================================================================
# FAILURE PATHS
# ============================================================================


@pytest.mark.unit
def test_bad_width_fails_before_prompting(scripted_console):
    console = scripted_console(ROSES_RESPONSES)
    game_round = GameRound(ROSES_TEMPLATE, prompt=console.prompt, output=console.output)

    with pytest.raises(ValueError):
        game_round.play(line_width=0)

    assert console.prompts == []
    assert console.printed == []


@pytest.mark.unit
def test_player_quitting_prints_nothing(scripted_console):
    console = scripted_console(["red"])
    game_round = GameRound(ROSES_TEMPLATE, prompt=console.prompt, output=console.output)

    with pytest.raises(EOFError):
        game_round.play()

    assert console.printed == []


@pytest.mark.unit
def test_malformed_template_fails_at_construction():
    with pytest.raises(MalformedTemplateError):
        GameRound("Roses are {color}}")


@pytest.mark.unit
def test_fill_with_too_few_responses_fails():
    with pytest.raises(ResponseCountError):
        GameRound(ROSES_TEMPLATE).fill(["red"])


# ============================================================================
# ROUNDS FROM A LIBRARY
# ============================================================================


@pytest.mark.unit
def test_play_round_with_story(story_dir, scripted_console):
    story = StoryLibrary(story_dir).load("roses.txt")
    console = scripted_console(ROSES_RESPONSES)

    result = play_round(story, prompt=console.prompt, output=console.output)

    assert result == ROSES_FILLED


@pytest.mark.unit
def test_play_random_round_is_repeatable_with_seed(story_dir, scripted_console):
    answers = ["word"] * 10
    first = scripted_console(answers)
    second = scripted_console(answers)

    play_random_round(
        StoryLibrary(story_dir, random.Random(3)), prompt=first.prompt, output=first.output
    )
    play_random_round(
        StoryLibrary(story_dir, random.Random(3)), prompt=second.prompt, output=second.output
    )

    assert first.prompts == second.prompts
    assert first.printed == second.printed
