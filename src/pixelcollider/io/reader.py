"""Sprite reader for loading images with Pillow.

This module provides the SpriteReader class for opening sprite images and
exposing them to the pipeline.
"""

from pathlib import Path
from types import TracebackType

from PIL import Image

from pixelcollider.domain import SpriteRegion
from pixelcollider.exceptions import SpriteLoadError


class SpriteReader:
    """Loads sprite images.

    Example:
        with SpriteReader(Path("hero.png")) as reader:
            buffer = sampler.sample(reader.image, reader.full_region)
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the sprite reader.

        Args:
            image_path: Path to the image file
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Open and decode the image file.

        Raises:
            FileNotFoundError: If the image file does not exist
            SpriteLoadError: If the file is not a readable image
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        try:
            image = Image.open(self._image_path)
            image.load()
        except OSError as e:
            raise SpriteLoadError(str(self._image_path), str(e)) from e

        self._image = image

    @property
    def image(self) -> Image.Image:
        """The loaded image.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        """Image width and height in pixels."""
        return self.image.size

    @property
    def mode(self) -> str:
        """Pillow mode of the loaded image (e.g. 'RGBA', 'P')."""
        return self.image.mode

    @property
    def full_region(self) -> SpriteRegion:
        """Region covering the whole image."""
        return SpriteRegion.full(*self.size)

    def close(self) -> None:
        """Release the image."""
        if self._image is not None:
            self._image.close()
            self._image = None

    def __enter__(self) -> "SpriteReader":
        self.load()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
