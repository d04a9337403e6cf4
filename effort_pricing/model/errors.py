"""Error kinds raised by the estimation core."""


class EstimationError(Exception):
    """Base class for estimation core errors."""


class InvalidInputError(EstimationError, ValueError):
    """Historical observation sequences are missing."""


class LengthMismatchError(EstimationError, ValueError):
    """Planned and actual sequences have different lengths."""
