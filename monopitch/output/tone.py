"""Test tone generation and 16-bit WAV writing."""

from pathlib import Path
from typing import Sequence

import numpy as np
import librosa
import soundfile as sf

from ..core import DEFAULT_SR

INT16_MAX = np.iinfo(np.int16).max

# Stepped sweep used by the demo tone: C3..D4, then D7..G#8
DEMO_FREQUENCIES = (
    130.81, 138.59, 146.83, 155.56, 164.81, 174.61, 185.00, 196.00, 207.65,
    220.00, 233.08, 246.94, 261.63, 277.18, 293.66, 2349.32, 2489.02, 2637.02,
    2793.83, 2959.96, 3135.96, 3322.44, 3520.00, 3729.31, 3951.07, 4186.01,
    4434.92, 4698.63, 4978.03, 5274.04, 5587.65, 5919.91, 6271.93, 6644.88,
)


def _to_int16(audio: np.ndarray, amplitude: float) -> np.ndarray:
    # Truncation toward zero, as a plain int cast does
    return (audio * amplitude * INT16_MAX).astype(np.int16)


def generate_tone(
    frequency: float,
    duration: float,
    sample_rate: int = DEFAULT_SR,
    amplitude: float = 1.0,
) -> np.ndarray:
    """Generate a 16-bit sine tone starting at phase 0."""
    n_samples = int(round(duration * sample_rate))
    tone = librosa.tone(frequency, sr=sample_rate, length=n_samples)
    return _to_int16(tone, amplitude)


def generate_stepped_sweep(
    frequencies: Sequence[float] = DEMO_FREQUENCIES,
    duration: float = 20.0,
    sample_rate: int = DEFAULT_SR,
    amplitude: float = 1.0,
) -> np.ndarray:
    """
    Generate a sine that steps through frequencies in equal-length segments.

    Sample ``i`` uses ``frequencies[len(frequencies) * i // n_samples]`` and
    time ``i / sample_rate`` measured from the start of the whole sweep, so
    each step picks up the phase the global clock gives it.

    Args:
        frequencies: Frequencies to step through, in Hz
        duration: Total duration in seconds
        sample_rate: Sample rate in Hz
        amplitude: Peak amplitude as a fraction of full scale

    Returns:
        int16 sample array
    """
    if not frequencies:
        raise ValueError("At least one frequency is required")

    n_samples = int(round(duration * sample_rate))
    index = np.arange(n_samples)
    steps = (len(frequencies) * index) // max(n_samples, 1)
    freqs = np.asarray(frequencies, dtype=np.float64)[steps]
    t = index / sample_rate
    return _to_int16(np.sin(2 * np.pi * freqs * t), amplitude)


def write_wav(path: str, samples: np.ndarray, sample_rate: int = DEFAULT_SR) -> Path:
    """
    Write mono 16-bit PCM WAV.

    Args:
        path: Output file path
        samples: int16 samples
        sample_rate: Sample rate in Hz

    Returns:
        Path of the written file
    """
    path = Path(path)

    # Ensure output directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    sf.write(str(path), np.asarray(samples, dtype=np.int16), sample_rate, subtype="PCM_16")
    return path
