"""Alpha sampling from Pillow images.

This module reads the alpha values of a sprite region into a PixelBuffer.
Images that do not expose an alpha band directly (palette, RGB, grayscale,
16-bit modes) are converted into a temporary RGBA copy which is closed on
every exit path.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import numpy as np
from PIL import Image

from pixelcollider.domain import PixelBuffer, SpriteRegion
from pixelcollider.utils import PipelineLogger

READABLE_MODES = frozenset({"RGBA", "LA"})


def is_directly_readable(image: Image.Image) -> bool:
    """Whether the image's alpha band can be read without conversion."""
    return image.mode in READABLE_MODES


@contextmanager
def readable_copy(image: Image.Image) -> Iterator[Image.Image]:
    """Yield an image whose alpha band can be read.

    Directly readable images are yielded as-is and left open. Anything else
    is converted to a temporary RGBA copy that is closed when the block
    exits, whether it returns normally or raises.
    """
    if is_directly_readable(image):
        yield image
        return

    temporary = image.convert("RGBA")
    try:
        yield temporary
    finally:
        temporary.close()


def region_box(region: SpriteRegion, texture_height: int) -> tuple[int, int, int, int]:
    """Convert a y-up region into a Pillow (left, upper, right, lower) box."""
    upper = texture_height - (region.y + region.height)
    return (region.x, upper, region.x + region.width, upper + region.height)


class PixelSampler:
    """Reads sprite regions into pixel buffers.

    Example:
        sampler = PixelSampler()
        buffer = sampler.sample(image, SpriteRegion(0, 0, 16, 16))
        if buffer is None:
            ...  # nothing readable, use the fallback box
    """

    def __init__(self, logger: PipelineLogger | None = None) -> None:
        self._logger = logger if logger is not None else PipelineLogger()

    def sample(
        self,
        image: Image.Image,
        region: SpriteRegion | None = None,
        name: str = "sprite",
    ) -> PixelBuffer | None:
        """Read the alpha values of a region.

        Args:
            image: Source image in any Pillow mode
            region: Sprite rectangle in y-up texture pixels (None = whole image)
            name: Sprite name used in log events

        Returns:
            PixelBuffer with row 0 at the bottom of the region, or None if
            the pixels could not be read
        """
        try:
            with readable_copy(image) as readable:
                texture_width, texture_height = readable.size
                if region is None:
                    region = SpriteRegion.full(texture_width, texture_height)

                if (
                    region.x + region.width > texture_width
                    or region.y + region.height > texture_height
                ):
                    self._logger.log_sampling_failed(
                        name,
                        f"region {region.to_tuple()} exceeds texture "
                        f"{texture_width}x{texture_height}",
                    )
                    return None

                box = region_box(region, texture_height)
                band = readable.getchannel("A").crop(box)
                try:
                    top_down = np.asarray(band, dtype=np.uint8)
                finally:
                    band.close()
        except (OSError, ValueError) as e:
            self._logger.log_sampling_failed(name, str(e))
            return None

        bottom_up = np.ascontiguousarray(top_down[::-1])
        return PixelBuffer(
            width=region.width,
            height=region.height,
            alpha=bottom_up.reshape(-1),
            origin=(region.x, region.y),
        )


def sample_alpha(
    image: Image.Image, region: SpriteRegion | None = None
) -> PixelBuffer | None:
    """Read a region's alpha values with a default sampler."""
    return PixelSampler().sample(image, region)
