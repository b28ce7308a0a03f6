"""monopitch - Monophonic pitch detection with autocorrelation.

Architecture Layers:
    1. core/          - Pitch classes, note table, configuration, errors
    2. input/         - Audio loading into 16-bit sample buffers
    3. analysis/      - Chunking, autocorrelation estimation, note matching
    4. transcription/ - Per-chunk pitch tracking over a whole buffer
    5. output/        - Test tones and WAV export
"""

__version__ = "0.1.0"

# Core types
from .core import (
    PitchClass,
    NoteReference,
    NoteTable,
    DEFAULT_NOTE_TABLE,
    AnalysisConfig,
    PitchDetectionError,
    EmptyChunkError,
    InsufficientPeaksError,
    InvalidConfigurationError,
)

# Input layer
from .input import AudioLoader, SampleBuffer

# Analysis layer
from .analysis import (
    segment,
    ChunkSequence,
    AutocorrelationEstimator,
    estimate_frequency,
    NoteClassifier,
    classify_note,
)

# Transcription layer
from .transcription import ChunkedPitchTracker, ChunkResult

__all__ = [
    # Core
    "PitchClass",
    "NoteReference",
    "NoteTable",
    "DEFAULT_NOTE_TABLE",
    "AnalysisConfig",
    "PitchDetectionError",
    "EmptyChunkError",
    "InsufficientPeaksError",
    "InvalidConfigurationError",
    # Input
    "AudioLoader",
    "SampleBuffer",
    # Analysis
    "segment",
    "ChunkSequence",
    "AutocorrelationEstimator",
    "estimate_frequency",
    "NoteClassifier",
    "classify_note",
    # Transcription
    "ChunkedPitchTracker",
    "ChunkResult",
]
