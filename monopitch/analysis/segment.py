"""Fixed-size, non-overlapping chunking of sample buffers."""

from typing import Iterator, List, Sequence, Union

import numpy as np

from ..core import InvalidConfigurationError


class ChunkSequence:
    """Lazy, restartable view of a buffer as equal-length chunks.

    Chunks are numpy views into the original buffer; no samples are copied.
    Any trailing samples that do not fill a whole chunk are left out.
    """

    def __init__(self, samples: np.ndarray, chunk_size: int):
        self.samples = samples
        self.chunk_size = chunk_size

    def __len__(self) -> int:
        return len(self.samples) // self.chunk_size

    def __getitem__(self, index: int) -> np.ndarray:
        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"Chunk index {index} out of range for {count} chunks")
        start = index * self.chunk_size
        return self.samples[start:start + self.chunk_size]

    def __iter__(self) -> Iterator[np.ndarray]:
        for index in range(len(self)):
            yield self[index]

    def offsets(self) -> List[int]:
        """Start sample of each chunk."""
        return [i * self.chunk_size for i in range(len(self))]

    @property
    def dropped(self) -> int:
        """Number of trailing samples that are not analysed."""
        return len(self.samples) % self.chunk_size


def segment(buffer: Union[np.ndarray, Sequence[int]], chunk_size: int) -> ChunkSequence:
    """
    Split a sample buffer into fixed-size, non-overlapping chunks.

    Args:
        buffer: Ordered 16-bit samples
        chunk_size: Samples per chunk

    Returns:
        ChunkSequence of ``len(buffer) // chunk_size`` chunks, in order

    Raises:
        InvalidConfigurationError: If chunk_size is not positive
    """
    if chunk_size <= 0:
        raise InvalidConfigurationError(f"chunk_size must be positive, got {chunk_size}")

    samples = np.asarray(buffer)
    if samples.ndim != 1:
        raise ValueError(f"Expected a 1-D sample buffer, got shape {samples.shape}")

    return ChunkSequence(samples, int(chunk_size))
