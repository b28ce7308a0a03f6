"""Analysis configuration."""

import math
from dataclasses import dataclass, replace

from .constants import (
    DEFAULT_SR,
    DEFAULT_MIN_DETECTABLE_FREQ,
    DEFAULT_FUDGE_FACTOR,
    DEFAULT_NOTE_EPSILON,
)
from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for chunked pitch analysis.

    Attributes:
        sample_rate: Sample rate of the analysed audio in Hz (default: 44100)
        min_detectable_freq: Lowest frequency a chunk must hold enough
            periods of, in Hz (default: 40.0)
        fudge_factor: Number of periods of ``min_detectable_freq`` that must
            fit in one chunk (default: 10)
        note_epsilon: Absolute tolerance in Hz for note matching (default: 1.0)
    """

    sample_rate: int = DEFAULT_SR
    min_detectable_freq: float = DEFAULT_MIN_DETECTABLE_FREQ
    fudge_factor: int = DEFAULT_FUDGE_FACTOR
    note_epsilon: float = DEFAULT_NOTE_EPSILON

    @property
    def chunk_size(self) -> int:
        """Samples per analysis chunk: ceil(fudge_factor * sr / min_freq)."""
        if self.min_detectable_freq <= 0:
            raise InvalidConfigurationError(
                f"min_detectable_freq must be positive, got {self.min_detectable_freq}"
            )
        return math.ceil(self.fudge_factor * self.sample_rate / self.min_detectable_freq)

    def validate(self) -> "AnalysisConfig":
        """Check every field and return self.

        Raises:
            InvalidConfigurationError: If any value cannot yield a chunk
        """
        if self.sample_rate <= 0:
            raise InvalidConfigurationError(
                f"sample_rate must be positive, got {self.sample_rate}"
            )
        if self.min_detectable_freq <= 0:
            raise InvalidConfigurationError(
                f"min_detectable_freq must be positive, got {self.min_detectable_freq}"
            )
        if self.fudge_factor <= 0:
            raise InvalidConfigurationError(
                f"fudge_factor must be positive, got {self.fudge_factor}"
            )
        if self.note_epsilon <= 0:
            raise InvalidConfigurationError(
                f"note_epsilon must be positive, got {self.note_epsilon}"
            )
        # Under one sample per chunk: the minimum frequency is out of reach
        if self.fudge_factor * self.sample_rate / self.min_detectable_freq < 1:
            raise InvalidConfigurationError(
                f"min_detectable_freq {self.min_detectable_freq} Hz is too high for "
                f"sample_rate {self.sample_rate} Hz and fudge_factor {self.fudge_factor}"
            )
        return self

    def with_sample_rate(self, sample_rate: int) -> "AnalysisConfig":
        """Copy of this config for audio at a different sample rate."""
        return replace(self, sample_rate=sample_rate)
