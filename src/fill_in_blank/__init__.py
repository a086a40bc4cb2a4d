"""Fill In The Blank: a single-player word game.

A story template is picked from a directory of text files.  Blank words in
the template are written inside curly braces::

    Roses are {color}, {plural noun} are {color}

The player is asked for a word for each blank, the answers are written into
the story, and the result is printed word-wrapped for the sake of humor.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# If the package is imported without being installed we fall back to the
# version below so the game can still start.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("fill-in-the-blank")
except PackageNotFoundError:
    __version__ = "0.1.0"
