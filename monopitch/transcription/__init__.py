"""Transcription layer - Per-chunk pitch tracking.

This layer drives the analysis layer over a whole sample buffer:
- Fixed-size chunking
- One frequency estimate and note per chunk
- Failed chunks reported without stopping the run
"""

from .base import Transcriber, ChunkResult
from .chunked import ChunkedPitchTracker

__all__ = [
    "Transcriber",
    "ChunkResult",
    "ChunkedPitchTracker",
]
