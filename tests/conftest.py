"""Shared fixtures for monopitch tests."""

import numpy as np
import pytest


def sine(freq: float, n_samples: int, sr: int, amplitude: float = 1.0) -> np.ndarray:
    """Full-scale 16-bit sine starting at phase 0."""
    t = np.arange(n_samples) / sr
    return (np.sin(2 * np.pi * freq * t) * amplitude * 32767).astype(np.int16)


@pytest.fixture
def make_sine():
    return sine
