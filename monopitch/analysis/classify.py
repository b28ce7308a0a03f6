"""Frequency to pitch class matching against a reference table."""

import math
from bisect import bisect_left
from typing import Optional

from ..core import (
    PitchClass,
    NoteReference,
    NoteTable,
    DEFAULT_NOTE_TABLE,
    DEFAULT_NOTE_EPSILON,
    InvalidConfigurationError,
)


class NoteClassifier:
    """Matches frequencies to the first reference within a fixed tolerance.

    With a flat tolerance of 1 Hz, references below about 130 Hz are less
    than 2 Hz apart and a frequency can fall within range of two of them.
    The lower one wins.
    """

    def __init__(
        self,
        table: NoteTable = DEFAULT_NOTE_TABLE,
        epsilon: float = DEFAULT_NOTE_EPSILON,
    ):
        """
        Initialize NoteClassifier.

        Args:
            table: Reference frequencies
            epsilon: Absolute tolerance in Hz (strict: |f - ref| < epsilon)
        """
        if epsilon <= 0:
            raise InvalidConfigurationError(f"epsilon must be positive, got {epsilon}")
        self.table = table
        self.epsilon = epsilon

    def match(self, frequency: float) -> Optional[NoteReference]:
        """
        Find the lowest reference within tolerance of a frequency.

        Args:
            frequency: Frequency in Hz

        Returns:
            Matching NoteReference, or None
        """
        if not math.isfinite(frequency) or frequency <= 0:
            return None

        refs = self.table.frequencies
        # One step back covers rounding in frequency - epsilon
        index = max(bisect_left(refs, frequency - self.epsilon) - 1, 0)
        while index < len(refs) and refs[index] <= frequency + self.epsilon:
            if abs(frequency - refs[index]) < self.epsilon:
                return self.table[index]
            index += 1
        return None

    def classify(self, frequency: float) -> PitchClass:
        """Pitch class of the matching reference, or PitchClass.UNKNOWN."""
        ref = self.match(frequency)
        return ref.pitch_class if ref is not None else PitchClass.UNKNOWN


def classify_note(
    frequency_hz: float,
    table: NoteTable = DEFAULT_NOTE_TABLE,
    epsilon: float = DEFAULT_NOTE_EPSILON,
) -> PitchClass:
    """Classify a frequency as one of the 12 pitch classes, or Unknown."""
    return NoteClassifier(table, epsilon).classify(frequency_hz)
