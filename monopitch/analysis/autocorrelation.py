"""Time-domain autocorrelation pitch estimation.

The energy curve of a periodic chunk rises and falls once per period. Every
point where it turns from rising to falling is taken as a peak, and the
spacing between peaks gives the period.
"""

import logging
from typing import Sequence, Union

import numpy as np
from scipy.signal import fftconvolve

from ..core import (
    EmptyChunkError,
    InsufficientPeaksError,
    InvalidConfigurationError,
    DEFAULT_SR,
)
from ..core.constants import MIN_PEAKS

logger = logging.getLogger(__name__)

METHODS = ("direct", "fft")


class AutocorrelationEstimator:
    """Estimates the fundamental frequency of a single-pitch chunk."""

    def __init__(self, sample_rate: int = DEFAULT_SR, method: str = "direct"):
        """
        Initialize AutocorrelationEstimator.

        Args:
            sample_rate: Sample rate of the chunks in Hz
            method: Energy curve computation, 'direct' (exact O(n^2)) or
                'fft' (same curve via FFT convolution)
        """
        if sample_rate <= 0:
            raise InvalidConfigurationError(f"sample_rate must be positive, got {sample_rate}")
        if method not in METHODS:
            raise InvalidConfigurationError(
                f"Unknown method '{method}'. Supported: {', '.join(METHODS)}"
            )
        self.sample_rate = sample_rate
        self.method = method

    def estimate(self, chunk: Union[np.ndarray, Sequence[int]]) -> float:
        """
        Estimate the fundamental frequency of one chunk.

        Args:
            chunk: 16-bit samples

        Returns:
            Frequency in Hz

        Raises:
            EmptyChunkError: If the chunk has no samples
            InsufficientPeaksError: If fewer than 3 peaks are found
        """
        energies = self.energy_curve(chunk)
        peaks = self.find_peaks(energies)
        period = self.average_period(peaks)
        freq = self.sample_rate / period

        logger.debug(
            "%d peaks, period %.3f samples, %.2f Hz", len(peaks), period, freq
        )
        return freq

    def energy_curve(self, chunk: Union[np.ndarray, Sequence[int]]) -> np.ndarray:
        """
        Un-normalized autocorrelation for lags 1..n-1.

        Element ``i - 1`` is ``sum(x[k] * x[k + i])`` over the overlapping
        samples, accumulated in int64.

        Returns:
            int64 array of length n - 1
        """
        samples = np.asarray(chunk, dtype=np.int64)
        if samples.size == 0:
            raise EmptyChunkError()

        n = samples.size
        if self.method == "fft":
            # Correlation as convolution with the reversed signal. Rounding
            # restores the exact integer sums; float64 error stays far below
            # 0.5 for 16-bit input at these chunk sizes.
            full = fftconvolve(samples.astype(np.float64), samples[::-1].astype(np.float64))
            full = np.rint(full).astype(np.int64)
        else:
            full = np.correlate(samples, samples, mode="full")

        # full[n - 1] is lag 0
        return full[n:]

    @staticmethod
    def find_peaks(energies: np.ndarray) -> np.ndarray:
        """
        Lags at which the energy curve turns from increasing to decreasing.

        The walk starts with a previous energy of 0 and "not increasing", so
        a positive energy at lag 1 counts as a rise. A peak at lag ``i - 1``
        is recorded when the energy rose into lag ``i - 1`` and is strictly
        lower at lag ``i``. Equal neighbours end a rise without a peak.

        Args:
            energies: Energy for lags 1..n-1 (see energy_curve)

        Returns:
            int64 array of peak lags, ascending
        """
        curve = np.concatenate(([0], np.asarray(energies, dtype=np.int64)))
        if curve.size < 3:
            return np.empty(0, dtype=np.int64)

        rising = curve[1:-1] > curve[:-2]
        falling = curve[2:] < curve[1:-1]
        return np.flatnonzero(rising & falling).astype(np.int64) + 1

    @staticmethod
    def average_period(peaks: np.ndarray) -> float:
        """
        Mean distance between consecutive peaks, first distance dropped.

        The first distance often spans a partial period at the chunk edge.

        Raises:
            InsufficientPeaksError: If fewer than 3 peaks are given
        """
        peaks = np.asarray(peaks)
        if peaks.size < MIN_PEAKS:
            raise InsufficientPeaksError(int(peaks.size), MIN_PEAKS)

        distances = np.diff(peaks)[1:]
        return float(distances.mean())


def estimate_frequency(
    chunk: Union[np.ndarray, Sequence[int]],
    sample_rate: int = DEFAULT_SR,
    method: str = "direct",
) -> float:
    """Estimate the fundamental frequency (Hz) of one chunk.

    See AutocorrelationEstimator.estimate.
    """
    return AutocorrelationEstimator(sample_rate, method=method).estimate(chunk)
