"""Output layer - Test tones and WAV export."""

from .tone import (
    DEMO_FREQUENCIES,
    generate_tone,
    generate_stepped_sweep,
    write_wav,
)

__all__ = [
    "DEMO_FREQUENCIES",
    "generate_tone",
    "generate_stepped_sweep",
    "write_wav",
]
