"""Cell resolution exceptions."""

from typing import Optional


class CellResolutionError(Exception):
    """Base cell resolution error."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class InvalidCoordinateError(CellResolutionError, ValueError):
    """Raised when a latitude/longitude is outside the valid WGS84 range."""
    pass


class IndexingFailure(CellResolutionError):
    """Raised when the H3 indexing primitive rejects well-formed input."""
    pass


class InvalidViewportBoundsError(CellResolutionError, ValueError):
    """Raised for inverted, antimeridian-spanning or non-finite viewports."""
    pass


class CacheMisconfigurationError(CellResolutionError, ValueError):
    """Raised when a cell cache is constructed with a non-positive capacity."""
    pass
