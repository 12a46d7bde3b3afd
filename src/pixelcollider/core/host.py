"""Attachment of collider shapes to host objects.

The pipeline does not own scene objects. Whatever holds the bodies (a game
engine binding, an editor, a test) implements ColliderHost; the pipeline
only ever removes a host's shapes and then attaches one new shape.
"""

from collections.abc import Hashable
from typing import Protocol, runtime_checkable

from pixelcollider.domain import ColliderSpec


@runtime_checkable
class ColliderHost(Protocol):
    """Something that can hold collision shapes for host objects."""

    def remove_colliders(self, host_id: Hashable) -> None:
        """Remove every shape attached to ``host_id``."""
        ...

    def attach_collider(self, host_id: Hashable, spec: ColliderSpec) -> None:
        """Attach ``spec`` to ``host_id``."""
        ...


class InMemoryColliderHost:
    """ColliderHost keeping shapes in a dictionary.

    Example:
        host = InMemoryColliderHost()
        generate_collider(image, region, geometry, host, "hero")
        host.colliders("hero")
    """

    def __init__(self) -> None:
        self._shapes: dict[Hashable, list[ColliderSpec]] = {}

    def remove_colliders(self, host_id: Hashable) -> None:
        self._shapes.pop(host_id, None)

    def attach_collider(self, host_id: Hashable, spec: ColliderSpec) -> None:
        self._shapes.setdefault(host_id, []).append(spec)

    def colliders(self, host_id: Hashable) -> list[ColliderSpec]:
        """Shapes currently attached to ``host_id``."""
        return list(self._shapes.get(host_id, []))

    def __contains__(self, host_id: object) -> bool:
        return host_id in self._shapes
