"""
Game configuration management.

This module handles loading and accessing game configuration from multiple sources
with a clear priority order:

    1. Environment variables (highest priority) - for one-off overrides
    2. Config file (config/game.ini) - for a local installation
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The GameConfig
dataclass provides typed access to all settings.

Usage:
    from fill_in_blank.config import config

    # Access settings
    print(config.stories.absolute_directory)
    print(config.display.line_width)

Environment Variable Mapping:
    FIB_STORY_DIR        -> stories.directory
    FIB_STORY_MANIFEST   -> stories.manifest
    FIB_LINE_WIDTH       -> display.line_width
    FIB_LOG_LEVEL        -> logging.level
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/, data/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "game.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "game.example.ini"


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class StorySettings:
    """Story source configuration."""

    directory: str = "data/stories"
    manifest: str = "library.yaml"

    @property
    def absolute_directory(self) -> Path:
        """Get absolute path to the story directory."""
        p = Path(self.directory)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class DisplaySettings:
    """Console output configuration."""

    line_width: int = 70
    prompt_format: str = "Enter a {label}: "


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "WARNING"
    format: Literal["simple", "detailed"] = "simple"


@dataclass
class GameConfig:
    """
    Complete game configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    stories: StorySettings = field(default_factory=StorySettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _load_from_ini(parser: configparser.ConfigParser, cfg: GameConfig) -> None:
    """Load configuration from parsed INI file into GameConfig."""
    # Stories section
    if parser.has_section("stories"):
        if parser.has_option("stories", "directory"):
            cfg.stories.directory = parser.get("stories", "directory")
        if parser.has_option("stories", "manifest"):
            cfg.stories.manifest = parser.get("stories", "manifest")

    # Display section
    if parser.has_section("display"):
        if parser.has_option("display", "line_width"):
            cfg.display.line_width = parser.getint("display", "line_width")
        if parser.has_option("display", "prompt_format"):
            # raw=True keeps "{label}" away from configparser interpolation
            cfg.display.prompt_format = parser.get("display", "prompt_format", raw=True)

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: GameConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_dir := os.getenv("FIB_STORY_DIR"):
        cfg.stories.directory = env_dir
    if env_manifest := os.getenv("FIB_STORY_MANIFEST"):
        cfg.stories.manifest = env_manifest

    if env_width := os.getenv("FIB_LINE_WIDTH"):
        cfg.display.line_width = int(env_width)

    if env_log := os.getenv("FIB_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_config() -> GameConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/game.ini
        3. config/game.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        GameConfig: Fully populated configuration object.
    """
    cfg = GameConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "GameConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton.

    Returns:
        GameConfig: The newly loaded configuration.
    """
    global config
    config = load_config()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "story_directory": str(config.stories.absolute_directory),
        "line_width": config.display.line_width,
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("GAME CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {status['config_file_path']}")
    print(f"File exists: {status['config_file_exists']}")
    if status["using_example"]:
        print("NOTE: Using example config (copy to game.ini to customise)")
    print("-" * 60)
    print(f"Stories:     {status['story_directory']}")
    print(f"Manifest:    {config.stories.manifest}")
    print(f"Line width:  {status['line_width']}")
    print(f"Log level:   {config.logging.level}")
    print("=" * 60 + "\n")


# =============================================================================
# TEST HELPERS
# =============================================================================


class use_story_directory:
    """
    Context manager for pointing the game at a temporary story directory.

    Usage:
        from fill_in_blank.config import use_story_directory

        def test_something(tmp_path):
            (tmp_path / "roses.txt").write_text("Roses are {color}")
            with use_story_directory(tmp_path):
                ...

    Args:
        directory: Path to the story directory
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)
        self.original_directory: str | None = None

    def __enter__(self) -> Path:
        """Point the config at the temporary directory."""
        self.original_directory = config.stories.directory
        config.stories.directory = str(self.directory)
        return self.directory

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Restore the original story directory."""
        if self.original_directory is not None:
            config.stories.directory = self.original_directory
        return None
