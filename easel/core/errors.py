class EaselError(Exception):
    """Base class for recoverable drawing surface errors."""


class DecodeError(EaselError):
    """Raised when image bytes cannot be decoded into a raster."""


class InvalidDimensions(EaselError, ValueError):
    """Raised when a surface is asked to take a non-positive size."""

    def __init__(self, width, height):
        super().__init__(f"Invalid surface dimensions: {width}x{height}")
        self.width = width
        self.height = height
