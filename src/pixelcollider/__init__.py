"""PixelCollider - Build physics collision shapes from pixel-art sprites.

PixelCollider reads the alpha channel of a sprite, thresholds it into an
occupancy grid, traces the silhouette and simplifies it into a polygon (or a
closed edge loop) expressed in sprite-local units. When no usable outline can
be extracted, a box covering the whole sprite is produced instead.

Example:
    $ pixelcollider generate hero.png --ppu 16

This will create hero.collider.json next to the image.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
