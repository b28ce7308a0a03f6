"""Chunk-by-chunk pitch tracking with autocorrelation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List

import numpy as np

from .base import Transcriber, ChunkResult
from ..analysis import AutocorrelationEstimator, NoteClassifier, segment
from ..analysis.autocorrelation import METHODS
from ..core import (
    AnalysisConfig,
    NoteTable,
    DEFAULT_NOTE_TABLE,
    PitchDetectionError,
    InvalidConfigurationError,
)
from ..input import SampleBuffer

logger = logging.getLogger(__name__)


class ChunkedPitchTracker(Transcriber):
    """Estimates one frequency and note per fixed-size chunk."""

    def __init__(
        self,
        config: AnalysisConfig = AnalysisConfig(),
        note_table: NoteTable = DEFAULT_NOTE_TABLE,
        method: str = "direct",
        workers: int = 1,
    ):
        """
        Initialize ChunkedPitchTracker.

        Args:
            config: Sample rate, chunking and note tolerance settings
            note_table: Reference frequencies for note matching
            method: Energy curve method passed to AutocorrelationEstimator
            workers: Threads used to analyse chunks (1 = sequential)
        """
        if method not in METHODS:
            raise InvalidConfigurationError(
                f"Unknown method '{method}'. Supported: {', '.join(METHODS)}"
            )
        self.config = config.validate()
        self.method = method
        self.workers = max(1, int(workers))
        self.classifier = NoteClassifier(note_table, config.note_epsilon)

    def track(self, buffer: SampleBuffer) -> List[ChunkResult]:
        """Estimate every chunk; results come back in chunk order."""
        if self.workers == 1:
            return list(self.iter_track(buffer))

        config = self._config_for(buffer)
        estimator = AutocorrelationEstimator(config.sample_rate, method=self.method)
        chunks = segment(buffer.samples, config.chunk_size)

        # map() yields in submission order regardless of completion order
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(
                pool.map(
                    lambda args: self._analyze(estimator, *args),
                    zip(range(len(chunks)), chunks.offsets(), chunks),
                )
            )

    def iter_track(self, buffer: SampleBuffer) -> Iterator[ChunkResult]:
        """Estimate chunks one at a time, in order."""
        config = self._config_for(buffer)
        estimator = AutocorrelationEstimator(config.sample_rate, method=self.method)
        chunks = segment(buffer.samples, config.chunk_size)

        for index, (start, chunk) in enumerate(zip(chunks.offsets(), chunks)):
            yield self._analyze(estimator, index, start, chunk)

    def _config_for(self, buffer: SampleBuffer) -> AnalysisConfig:
        """Config matching the buffer's own sample rate."""
        config = self.config
        if buffer.sample_rate != config.sample_rate:
            logger.warning(
                "Buffer sample rate %d Hz differs from configured %d Hz; "
                "analysing at %d Hz",
                buffer.sample_rate,
                config.sample_rate,
                buffer.sample_rate,
            )
            config = config.with_sample_rate(buffer.sample_rate).validate()

        chunks = len(buffer) // config.chunk_size
        logger.debug(
            "%d samples -> %d chunks of %d (%d dropped)",
            len(buffer),
            chunks,
            config.chunk_size,
            len(buffer) - chunks * config.chunk_size,
        )
        return config

    def _analyze(
        self,
        estimator: AutocorrelationEstimator,
        index: int,
        start: int,
        chunk: np.ndarray,
    ) -> ChunkResult:
        result = ChunkResult(index=index, start=start, sample_rate=estimator.sample_rate)
        try:
            freq = estimator.estimate(chunk)
        except PitchDetectionError as e:
            logger.debug("Chunk %d: no estimate (%s)", index, e)
            result.error = str(e)
            return result

        result.frequency = freq
        result.reference = self.classifier.match(freq)
        if result.reference is not None:
            result.note = result.reference.pitch_class
        logger.debug("Chunk %d: %.2f Hz, %s", index, freq, result.note)
        return result
