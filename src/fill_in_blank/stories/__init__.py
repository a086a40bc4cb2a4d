"""Story source package.

Exports the public API used by the game controller and the CLI::

    from fill_in_blank.stories import Story, StoryLibrary
"""

from fill_in_blank.stories.library import Story, StoryLibrary
from fill_in_blank.stories.manifest import StoryManifest, load_manifest

__all__ = ["Story", "StoryLibrary", "StoryManifest", "load_manifest"]
