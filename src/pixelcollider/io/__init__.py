"""Sprite and collider I/O layer for pixelcollider.

This module handles reading sprite images using Pillow and writing the
generated colliders as JSON. It keeps Pillow file handling and JSON
layout out of the pipeline stages.

Key responsibilities:
- Load PNG (or any Pillow-readable) sprite images
- Write collider documents with the ``.collider.json`` naming convention
- Read collider documents back into domain models

Key classes:
- SpriteReader: Load sprite images
- ColliderWriter: Save generated colliders
"""

from pixelcollider.io.reader import SpriteReader
from pixelcollider.io.writer import ColliderWriter, load_collider

__all__ = [
    "ColliderWriter",
    "SpriteReader",
    "load_collider",
]
