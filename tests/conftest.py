"""
Shared pytest fixtures for the Fill In The Blank test suite.

This module provides fixtures that are automatically available to all test files:
- Temporary story directories, with and without a manifest
- Seeded random sources for repeatable story selection
- Scripted prompt/output callables standing in for the console
"""

import logging
import random
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from fill_in_blank.config import use_story_directory
from tests.constants import PICNIC_TEMPLATE, ROSES_TEMPLATE

# ============================================================================
# STORY DIRECTORY FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def story_dir(tmp_path: Path) -> Path:
    """
    Create a story directory holding two stories and no manifest.

    Returns:
        Path to the story directory
    """
    directory = tmp_path / "stories"
    directory.mkdir()
    (directory / "roses.txt").write_text(ROSES_TEMPLATE, encoding="utf-8")
    (directory / "the_picnic.txt").write_text(PICNIC_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture(scope="function")
def story_dir_with_manifest(story_dir: Path) -> Path:
    """
    Add a library.yaml manifest that lists only roses.txt, with a title.

    Returns:
        Path to the story directory
    """
    (story_dir / "library.yaml").write_text(
        'version: "1"\nstories:\n  - file: roses.txt\n    title: Roses Are Red\n',
        encoding="utf-8",
    )
    return story_dir


@pytest.fixture(scope="function")
def configured_story_dir(story_dir: Path) -> Generator[Path, None, None]:
    """
    Point the global config at the temporary story directory.

    Yields:
        Path to the story directory

    Cleanup:
        Restores the configured story directory
    """
    with use_story_directory(story_dir):
        yield story_dir


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by CLI tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


# ============================================================================
# RANDOMNESS AND CONSOLE FIXTURES
# ============================================================================


@pytest.fixture
def seeded_rng() -> random.Random:
    """A random source with a fixed seed."""
    return random.Random(1234)


class ScriptedConsole:
    """Stand-in for input()/print() that replays answers and records output."""

    def __init__(self, answers: list[str]):
        self._answers = list(answers)
        self.prompts: list[str] = []
        self.printed: list[str] = []

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def output(self, text: str) -> None:
        self.printed.append(text)


@pytest.fixture
def scripted_console() -> Callable[[list[str]], ScriptedConsole]:
    """Factory fixture: ``scripted_console(["red", "dogs"])``."""
    return ScriptedConsole
