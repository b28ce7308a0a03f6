"""Pitch classes and the reference note table."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from .constants import (
    PITCH_NAMES,
    A4_FREQ,
    A4_MIDI,
    TABLE_MIN_OCTAVE,
    TABLE_MAX_OCTAVE,
    STANDARD_FREQUENCIES,
)


class PitchClass(Enum):
    """The twelve equal-tempered pitch classes, plus Unknown."""

    C = "C"
    C_SHARP = "C#"
    D = "D"
    D_SHARP = "D#"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G = "G"
    G_SHARP = "G#"
    A = "A"
    A_SHARP = "A#"
    B = "B"
    UNKNOWN = "Unknown"

    @classmethod
    def from_index(cls, index: int) -> "PitchClass":
        """Pitch class for 0-11, where 0=C."""
        return cls(PITCH_NAMES[index % 12])

    @property
    def index(self) -> int:
        """Position in the octave (0-11), or -1 for Unknown."""
        if self is PitchClass.UNKNOWN:
            return -1
        return PITCH_NAMES.index(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NoteReference:
    """A reference frequency and the pitch it names."""

    frequency: float  # Hz
    pitch_class: PitchClass
    octave: int

    @property
    def midi(self) -> int:
        """MIDI note number (C4 = 60)."""
        return 12 * (self.octave + 1) + self.pitch_class.index

    @property
    def name(self) -> str:
        """Note name with octave (e.g., 'A4', 'C#3')."""
        return f"{self.pitch_class.value}{self.octave}"

    @staticmethod
    def midi_to_freq(midi: int, a4: float = A4_FREQ) -> float:
        """Convert MIDI pitch to equal-tempered frequency (Hz)."""
        return a4 * (2 ** ((midi - A4_MIDI) / 12.0))


class NoteTable:
    """Immutable table of reference frequencies, sorted ascending.

    Entries are kept as a tuple so one instance can be shared freely,
    including across threads.
    """

    __slots__ = ("_entries", "_frequencies")

    def __init__(self, entries: Iterable[NoteReference]):
        ordered = tuple(sorted(entries, key=lambda ref: ref.frequency))
        if not ordered:
            raise ValueError("A note table needs at least one entry")
        if any(ref.pitch_class is PitchClass.UNKNOWN for ref in ordered):
            raise ValueError("Unknown is not a valid reference pitch class")
        object.__setattr__(self, "_entries", ordered)
        object.__setattr__(self, "_frequencies", tuple(ref.frequency for ref in ordered))

    def __setattr__(self, name, value):
        raise AttributeError("NoteTable is immutable")

    @classmethod
    def equal_tempered(
        cls,
        min_octave: int = TABLE_MIN_OCTAVE,
        max_octave: int = TABLE_MAX_OCTAVE,
        a4: float = A4_FREQ,
        decimals: int = 2,
    ) -> "NoteTable":
        """
        Build a 12-tone table from the equal-tempered formula, C of
        ``min_octave`` to B of ``max_octave``. Used for other tunings; a few
        rounded values differ from ``standard()`` by 0.01 Hz.

        Args:
            min_octave: First octave (0 starts at C0 = 16.35 Hz)
            max_octave: Last octave, inclusive
            a4: Tuning reference for A4 in Hz
            decimals: Rounding applied to each frequency

        Returns:
            NoteTable with 12 entries per octave
        """
        entries = []
        for octave in range(min_octave, max_octave + 1):
            for index in range(12):
                midi = 12 * (octave + 1) + index
                freq = round(NoteReference.midi_to_freq(midi, a4), decimals)
                entries.append(NoteReference(freq, PitchClass.from_index(index), octave))
        return cls(entries)

    @classmethod
    def standard(cls) -> "NoteTable":
        """The standard 12-tone reference table, C0 (16.35 Hz) to B8 (7902.13 Hz)."""
        return cls(
            NoteReference(freq, PitchClass.from_index(index), octave)
            for octave, row in enumerate(STANDARD_FREQUENCIES, start=TABLE_MIN_OCTAVE)
            for index, freq in enumerate(row)
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, PitchClass]]) -> "NoteTable":
        """Build a table from (frequency, pitch class) pairs.

        Octaves are not known for arbitrary pairs, so each entry is numbered
        by how many times its pitch class has already appeared.
        """
        seen = {}
        entries = []
        for freq, pitch_class in sorted(pairs, key=lambda pair: pair[0]):
            octave = seen.get(pitch_class, 0)
            seen[pitch_class] = octave + 1
            entries.append(NoteReference(float(freq), pitch_class, octave))
        return cls(entries)

    @property
    def entries(self) -> Tuple[NoteReference, ...]:
        return self._entries

    @property
    def frequencies(self) -> Tuple[float, ...]:
        return self._frequencies

    def octave(self, octave: int) -> List[NoteReference]:
        """All references in one octave."""
        return [ref for ref in self._entries if ref.octave == octave]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NoteReference]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> NoteReference:
        return self._entries[index]

    def __repr__(self) -> str:
        return (
            f"NoteTable({len(self)} notes, "
            f"{self._entries[0].name}..{self._entries[-1].name})"
        )


DEFAULT_NOTE_TABLE = NoteTable.standard()
