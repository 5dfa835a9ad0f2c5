"""Exceptions raised by the carving routines."""


class CarvingError(ValueError):
    """Base class for seam carving failures."""


class DegenerateGridError(CarvingError):
    """Raised when an operation needs a grid with no zero dimension."""


class SeamMismatchError(CarvingError):
    """Raised when a seam's length does not match the current grid."""


class InvalidSeamError(CarvingError):
    """Raised when a seam has out-of-range or disconnected indices."""


class TooManySeamsError(CarvingError):
    """Raised when a carve asks for more seams than the grid dimension holds."""
