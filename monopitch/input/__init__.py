"""Input layer - Audio loading into sample buffers."""

from .loader import AudioLoader, SampleBuffer

__all__ = [
    "AudioLoader",
    "SampleBuffer",
]
