"""
Command-line interface for Fill In The Blank.

Provides CLI commands:
- play: Play one round with a random (or chosen) story
- list: List the stories in rotation with their blank counts
- check: Scan every story and report malformed templates
- config: Print the active configuration

Usage:
    fill-in-blank
    fill-in-blank play [--stories DIR] [--story FILE] [--width N] [--seed N]
    fill-in-blank list [--stories DIR]
    fill-in-blank check [--stories DIR]

Environment Variables:
    FIB_STORY_DIR: Story directory (default: data/stories)
    FIB_LINE_WIDTH: Output line width (default: 70)
    FIB_LOG_LEVEL: Log level (default: WARNING)
"""

import argparse
import logging
import random
import sys

from fill_in_blank.errors import FillInBlankError

logger = logging.getLogger(__name__)


def _build_library(args: argparse.Namespace):
    """Create a StoryLibrary from CLI arguments and config."""
    from fill_in_blank.config import config
    from fill_in_blank.stories import StoryLibrary

    directory = getattr(args, "stories", None) or config.stories.absolute_directory
    seed = getattr(args, "seed", None)
    rng = random.Random(seed) if seed is not None else None
    return StoryLibrary(directory, rng, manifest_name=config.stories.manifest)


def cmd_play(args: argparse.Namespace) -> int:
    """
    Play one round.

    The story comes from --story if given, otherwise a random story from the
    story directory. Any failure ends the round before the story is printed.

    Returns:
        0 on success, 1 on error or if the player quits mid-round
    """
    from fill_in_blank.config import config
    from fill_in_blank.game import play_round

    line_width = getattr(args, "width", None)
    if line_width is None:
        line_width = config.display.line_width

    try:
        library = _build_library(args)
        story_file = getattr(args, "story", None)
        story = library.load(story_file) if story_file else library.load_random()
        play_round(
            story,
            line_width=line_width,
            prompt_format=config.display.prompt_format,
        )
        return 0
    except (KeyboardInterrupt, EOFError):
        print("\nRound abandoned.", file=sys.stderr)
        return 1
    except (FillInBlankError, ValueError) as e:
        logger.error("Round failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_list(args: argparse.Namespace) -> int:
    """
    List every story in rotation with its title and number of blanks.

    Returns:
        0 on success, 1 if the story source cannot be read
    """
    from fill_in_blank.template import scan_labels

    try:
        stories = _build_library(args).load_all()
    except FillInBlankError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for story in stories:
        try:
            blanks = str(len(scan_labels(story.template)))
        except FillInBlankError:
            blanks = "malformed"
        print(f"{story.path.name:<30} {story.title:<30} {blanks:>9}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """
    Scan every story and report templates that cannot be played.

    Returns:
        0 if every story is well formed, 1 otherwise
    """
    from fill_in_blank.template import scan_labels

    try:
        stories = _build_library(args).load_all()
    except FillInBlankError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    failures = 0
    for story in stories:
        try:
            labels = scan_labels(story.template)
        except FillInBlankError as e:
            failures += 1
            print(f"FAIL  {story.path.name}: {e}")
            continue
        if not labels:
            print(f"WARN  {story.path.name}: no blanks")
        else:
            print(f"OK    {story.path.name}: {len(labels)} blanks")

    print(f"\n{len(stories)} stories checked, {failures} malformed.")
    return 1 if failures else 0


def cmd_config(args: argparse.Namespace) -> int:
    """Print the active configuration."""
    from fill_in_blank.config import print_config_summary

    print_config_summary()
    return 0


def _add_story_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--stories",
        "-s",
        type=str,
        help="Story directory (default: data/stories, or FIB_STORY_DIR env var)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    from fill_in_blank import __version__
    from fill_in_blank.config import config
    from fill_in_blank.logging_config import configure_logging

    parser = argparse.ArgumentParser(
        prog="fill-in-blank",
        description="Fill In The Blank - a word game of random stories",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level (default: WARNING, or FIB_LOG_LEVEL env var)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # play command
    play_parser = subparsers.add_parser(
        "play",
        help="Play one round (default)",
        description="Pick a story, ask for a word for every blank, and print the result.",
    )
    _add_story_options(play_parser)
    play_parser.add_argument(
        "--story",
        type=str,
        help="Play this story file (name inside the story directory) instead of a random one",
    )
    play_parser.add_argument(
        "--width",
        "-w",
        type=int,
        help="Maximum output line width (default: 70, or FIB_LINE_WIDTH env var)",
    )
    play_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for story selection, for a repeatable pick",
    )
    play_parser.set_defaults(func=cmd_play)

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List the stories in rotation",
        description="List every story with its title and number of blanks.",
    )
    _add_story_options(list_parser)
    list_parser.set_defaults(func=cmd_list)

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check every story for malformed blanks",
        description="Scan every story and exit with status 1 if any is malformed.",
    )
    _add_story_options(check_parser)
    check_parser.set_defaults(func=cmd_check)

    # config command
    config_parser = subparsers.add_parser("config", help="Show the active configuration")
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args(argv)
    configure_logging(config.logging, level=args.log_level)

    if args.command is None:
        return cmd_play(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
