"""Story manifest: optional YAML index of a story directory.

A story directory may contain a ``library.yaml`` file naming the stories that
are in rotation and giving each a display title::

    version: "1"
    stories:
      - file: roses.txt
        title: Roses Are Red
      - file: the_picnic.txt

Without a manifest every regular, non-hidden file in the directory is a
story (see :class:`~fill_in_blank.stories.library.StoryLibrary`).

Design notes:
- All dataclasses are frozen (immutable after load).
- :func:`load_manifest` returns ``None`` if the manifest file is absent and
  raises :exc:`~fill_in_blank.errors.StorySourceError` on any schema
  problem.  The library lets that error propagate; a broken manifest ends
  the round rather than silently falling back to the whole directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from fill_in_blank.errors import StorySourceError

logger = logging.getLogger(__name__)

#: Default manifest file name inside a story directory.
MANIFEST_NAME = "library.yaml"


@dataclass(frozen=True)
class ManifestEntry:
    """One story listed in the manifest.

    Attributes:
        file:  File name relative to the story directory.
        title: Display title, or ``None`` to derive one from the file name.
    """

    file: str
    title: str | None = None


@dataclass(frozen=True)
class StoryManifest:
    """Parsed ``library.yaml``.

    Attributes:
        version: Schema version string read from the file.
        entries: Stories in the order the manifest lists them.
    """

    version: str
    entries: tuple[ManifestEntry, ...]

    def title_for(self, file_name: str) -> str | None:
        """Return the manifest title for *file_name*, if one is set."""
        for entry in self.entries:
            if entry.file == file_name:
                return entry.title
        return None


def load_manifest(directory: Path, name: str = MANIFEST_NAME) -> StoryManifest | None:
    """Load and validate the manifest in *directory*.

    Args:
        directory: Story directory.
        name:      Manifest file name inside *directory*.

    Returns:
        The parsed manifest, or ``None`` if there is no manifest file.

    Raises:
        StorySourceError: If the file cannot be read or parsed, is missing
            required fields, or names a story file that does not exist.
    """
    manifest_path = directory / name
    if not manifest_path.is_file():
        return None

    try:
        with manifest_path.open(encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise StorySourceError(f"Cannot read story manifest {manifest_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise StorySourceError(f"{name} must be a YAML mapping at the top level.")

    version = raw.get("version")
    if not version:
        raise StorySourceError(f"{name}: missing required field 'version'.")

    stories_raw = raw.get("stories")
    if not isinstance(stories_raw, list):
        raise StorySourceError(f"{name}: 'stories' must be a list.")

    entries = tuple(
        _parse_entry(directory, name, index, item) for index, item in enumerate(stories_raw)
    )
    logger.debug("Loaded manifest %s with %d stories", manifest_path, len(entries))
    return StoryManifest(version=str(version), entries=entries)


def _parse_entry(directory: Path, name: str, index: int, raw: object) -> ManifestEntry:
    """Parse one item of the ``stories`` list.

    A bare string is accepted as shorthand for ``{"file": <string>}``.
    """
    if isinstance(raw, str):
        raw = {"file": raw}
    if not isinstance(raw, dict):
        raise StorySourceError(f"{name}: stories[{index}] must be a mapping or a file name.")

    file_name = raw.get("file")
    if not isinstance(file_name, str) or not file_name.strip():
        raise StorySourceError(f"{name}: stories[{index}] is missing 'file'.")
    if not (directory / file_name).is_file():
        raise StorySourceError(f"{name}: stories[{index}] names missing file {file_name!r}.")

    title = raw.get("title")
    return ManifestEntry(file=file_name, title=str(title) if title is not None else None)
