"""Base classes for pitch tracking."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from ..core import PitchClass, NoteReference
from ..input import SampleBuffer


@dataclass
class ChunkResult:
    """Pitch estimate for one analysis chunk."""

    index: int  # Chunk number, from 0
    start: int  # First sample of the chunk
    sample_rate: int
    frequency: Optional[float] = None  # Hz, None if no estimate
    note: PitchClass = PitchClass.UNKNOWN
    reference: Optional[NoteReference] = None
    error: Optional[str] = None

    @property
    def time(self) -> float:
        """Chunk start in seconds."""
        return self.start / self.sample_rate

    @property
    def has_estimate(self) -> bool:
        return self.frequency is not None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "index": self.index,
            "time": self.time,
            "frequency": self.frequency,
            "note": self.note.value,
            "name": self.reference.name if self.reference else None,
            "error": self.error,
        }


class Transcriber(ABC):
    """Abstract base class for pitch tracking over a sample buffer."""

    @abstractmethod
    def track(self, buffer: SampleBuffer) -> List[ChunkResult]:
        """
        Estimate pitch for every chunk of a buffer.

        Args:
            buffer: Mono 16-bit samples

        Returns:
            One result per chunk, in chunk order
        """
        pass
