"""Analysis layer - Chunking, pitch estimation and note matching.

This layer turns raw 16-bit samples into pitch estimates:
- Fixed-size chunking of sample buffers
- Autocorrelation frequency estimation per chunk
- Matching frequencies against a reference note table
"""

from .segment import segment, ChunkSequence
from .autocorrelation import AutocorrelationEstimator, estimate_frequency
from .classify import NoteClassifier, classify_note

__all__ = [
    "segment",
    "ChunkSequence",
    "AutocorrelationEstimator",
    "estimate_frequency",
    "NoteClassifier",
    "classify_note",
]
