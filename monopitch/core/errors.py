"""Exceptions raised by the pitch detection pipeline."""


class PitchDetectionError(Exception):
    """Base class for pitch detection failures."""


class EmptyChunkError(PitchDetectionError):
    """Raised when a zero-length chunk is handed to the estimator."""

    def __init__(self, message: str = "Cannot estimate frequency of an empty chunk"):
        super().__init__(message)


class InsufficientPeaksError(PitchDetectionError):
    """Raised when a chunk's energy curve has too few local maxima.

    Typical causes are silence, a DC offset, or a tone below the lowest
    detectable frequency.
    """

    def __init__(self, peak_count: int, required: int = 3):
        self.peak_count = peak_count
        self.required = required
        super().__init__(
            f"Found {peak_count} autocorrelation peak(s), need at least {required}"
        )


class InvalidConfigurationError(PitchDetectionError, ValueError):
    """Raised for configuration values that cannot produce an analysis."""
