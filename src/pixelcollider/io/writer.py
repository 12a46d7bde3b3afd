"""Collider writer for saving generated shapes as JSON.

This module provides the ColliderWriter class and the naming convention
for collider files written next to their source images.
"""

import json
from pathlib import Path
from typing import Any

from pixelcollider import __version__
from pixelcollider.domain import ColliderSpec, collider_from_dict
from pixelcollider.exceptions import ColliderFormatError, ColliderSaveError

COLLIDER_SUFFIX = ".collider.json"


class ColliderWriter:
    """Writes collider specifications to JSON files.

    Example:
        writer = ColliderWriter(ColliderWriter.get_collider_path(Path("hero.png")))
        writer.save(result.collider, metadata={"source": "hero.png"})
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination JSON file
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        return self._output_path

    @staticmethod
    def get_collider_path(image_path: Path) -> Path:
        """Default output path: ``hero.png`` becomes ``hero.collider.json``."""
        return image_path.with_name(image_path.stem + COLLIDER_SUFFIX)

    @staticmethod
    def to_document(spec: ColliderSpec, metadata: dict[str, Any] | None = None) -> dict[str, Any]:
        """Build the JSON document for a collider."""
        return {
            "generator": f"pixelcollider {__version__}",
            "collider": spec.to_dict(),
            "metadata": metadata or {},
        }

    def save(self, spec: ColliderSpec, metadata: dict[str, Any] | None = None) -> Path:
        """Write the collider document.

        Raises:
            ColliderSaveError: If the file cannot be written
        """
        document = self.to_document(spec, metadata)
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise ColliderSaveError(str(self._output_path), str(e)) from e
        return self._output_path


def load_collider(path: Path) -> ColliderSpec:
    """Read a collider written by ColliderWriter.

    Raises:
        FileNotFoundError: If the file does not exist
        ColliderFormatError: If the file cannot be read or is not a
            collider document
    """
    if not path.exists():
        raise FileNotFoundError(f"Collider file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ColliderFormatError(f"{path} could not be read: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ColliderFormatError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(document, dict) or "collider" not in document:
        raise ColliderFormatError(f"{path} has no 'collider' entry")
    return collider_from_dict(document["collider"])
