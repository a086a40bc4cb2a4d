"""Story library: the directory of story templates.

``StoryLibrary`` is the only place in the game that touches the filesystem.
It lists the story files in a directory, reads one verbatim, and picks one at
random.

Randomness is injected: the library draws from the ``random.Random``
instance it was built with, so a seeded generator (``--seed`` on the command
line, or a fixed seed in tests) always picks the same story.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from fill_in_blank.errors import StorySourceError
from fill_in_blank.stories.manifest import MANIFEST_NAME, StoryManifest, load_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Story:
    """One story template read from disk.

    Attributes:
        path:     File the story was read from.
        title:    Display title.
        template: File contents, verbatim.
    """

    path: Path
    title: str
    template: str


def title_from_path(path: Path) -> str:
    """Derive a display title from a file name (``the_picnic.txt`` -> ``The Picnic``)."""
    return path.stem.replace("_", " ").replace("-", " ").strip().title() or path.name


class StoryLibrary:
    """A directory of story templates.

    Attributes:
        _directory:     Story directory.
        _rng:           Random source used by :meth:`load_random`.
        _manifest_name: File name of the optional manifest.
    """

    def __init__(
        self,
        directory: Path | str,
        rng: random.Random | None = None,
        *,
        manifest_name: str = MANIFEST_NAME,
    ) -> None:
        self._directory = Path(directory)
        self._rng = rng if rng is not None else random.Random()
        self._manifest_name = manifest_name

    @property
    def directory(self) -> Path:
        return self._directory

    def manifest(self) -> StoryManifest | None:
        """Return the parsed manifest, or ``None`` if the directory has none."""
        self._require_directory()
        return load_manifest(self._directory, self._manifest_name)

    def story_paths(self) -> list[Path]:
        """List the story files in rotation.

        With a manifest, exactly the files it names, in manifest order.
        Otherwise every regular, non-hidden file except the manifest,
        sorted by name.

        Raises:
            StorySourceError: If the directory is missing or unreadable, the
                manifest is invalid, or there are no stories.
        """
        manifest = self.manifest()
        if manifest is not None:
            paths = [self._directory / entry.file for entry in manifest.entries]
        else:
            try:
                paths = sorted(
                    p
                    for p in self._directory.iterdir()
                    if p.is_file() and not p.name.startswith(".") and p.name != self._manifest_name
                )
            except OSError as exc:
                raise StorySourceError(
                    f"Cannot list story directory {self._directory}: {exc}"
                ) from exc

        if not paths:
            raise StorySourceError(f"No stories found in {self._directory}")
        return paths

    def load(self, path: Path | str, manifest: StoryManifest | None = None) -> Story:
        """Read one story file.

        A relative *path* is resolved against the story directory.

        Raises:
            StorySourceError: If the file cannot be read.
        """
        path = Path(path)
        if not path.is_absolute():
            path = self._directory / path
        try:
            template = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorySourceError(f"Cannot read story {path}: {exc}") from exc

        title = manifest.title_for(path.name) if manifest is not None else None
        return Story(path=path, title=title or title_from_path(path), template=template)

    def load_all(self) -> list[Story]:
        """Read every story in rotation."""
        manifest = self.manifest()
        return [self.load(path, manifest) for path in self.story_paths()]

    def load_random(self) -> Story:
        """Read a story chosen uniformly at random."""
        path = self._rng.choice(self.story_paths())
        logger.debug("Selected story %s", path)
        return self.load(path, self.manifest())

    def load_random_template(self) -> str:
        """Return the text of a random story, verbatim."""
        return self.load_random().template

    def _require_directory(self) -> None:
        if not self._directory.is_dir():
            raise StorySourceError(f"Story directory not found: {self._directory}")
