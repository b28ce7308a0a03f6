"""Core types, configuration and errors for monopitch."""

from .note import PitchClass, NoteReference, NoteTable, DEFAULT_NOTE_TABLE
from .config import AnalysisConfig
from .errors import (
    PitchDetectionError,
    EmptyChunkError,
    InsufficientPeaksError,
    InvalidConfigurationError,
)
from .constants import (
    PITCH_NAMES,
    DEFAULT_SR,
    DEFAULT_MIN_DETECTABLE_FREQ,
    DEFAULT_FUDGE_FACTOR,
    DEFAULT_NOTE_EPSILON,
)

__all__ = [
    "PitchClass",
    "NoteReference",
    "NoteTable",
    "DEFAULT_NOTE_TABLE",
    "AnalysisConfig",
    "PitchDetectionError",
    "EmptyChunkError",
    "InsufficientPeaksError",
    "InvalidConfigurationError",
    "PITCH_NAMES",
    "DEFAULT_SR",
    "DEFAULT_MIN_DETECTABLE_FREQ",
    "DEFAULT_FUDGE_FACTOR",
    "DEFAULT_NOTE_EPSILON",
]
