"""Exception hierarchy for PixelCollider."""


class PixelColliderError(Exception):
    """Base exception for all PixelCollider errors."""

    pass


class SpriteError(PixelColliderError):
    """Errors related to sprite loading or sampling."""

    pass


class SpriteLoadError(SpriteError):
    """Error loading a sprite image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load sprite '{path}': {reason}")


class InvalidRegionError(SpriteError):
    """Sprite region is empty or malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid sprite region: {reason}")


class InvalidGeometryError(SpriteError):
    """Pivot or pixel density values are unusable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid sprite geometry: {reason}")


class ColliderError(PixelColliderError):
    """Errors related to collider output."""

    pass


class ColliderFormatError(ColliderError):
    """Serialized collider data could not be interpreted."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid collider data: {details}")


class ColliderSaveError(ColliderError):
    """Error saving a collider file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save collider '{path}': {reason}")
