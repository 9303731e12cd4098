"""Custom exception hierarchy for the Tango puzzle engine."""


class TangoError(Exception):
    """Base exception for puzzle failures."""


class OutOfRangeError(TangoError):
    """Raised when a coordinate falls outside the grid."""


class InvalidSymbolError(TangoError):
    """Raised when a cell is set to something other than X or Y."""


class NotAdjacentError(TangoError):
    """Raised when a constraint joins cells that are not orthogonal neighbours."""


class InvalidGridShapeError(TangoError):
    """Raised when a puzzle is built from a grid of the wrong dimensions."""


class ValidationError(TangoError):
    """Raised when a generated puzzle fails its integrity checks."""


class GenerationError(TangoError):
    """Raised when the generator cannot produce a puzzle."""
