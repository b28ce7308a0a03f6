"""Audio loading into 16-bit mono sample buffers."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import librosa
import soundfile as sf

logger = logging.getLogger(__name__)

INT16_MAX = np.iinfo(np.int16).max


@dataclass
class SampleBuffer:
    """Mono 16-bit samples and the rate they were recorded at."""

    samples: np.ndarray  # int16
    sample_rate: int  # Hz

    def __post_init__(self):
        self.samples = np.asarray(self.samples, dtype=np.int16)
        if self.samples.ndim != 1:
            raise ValueError(f"Expected mono samples, got shape {self.samples.shape}")

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return len(self.samples) / self.sample_rate

    @classmethod
    def from_float(cls, audio: np.ndarray, sample_rate: int) -> "SampleBuffer":
        """Scale float audio in [-1, 1] to int16, clipping out-of-range values."""
        scaled = np.clip(np.asarray(audio, dtype=np.float64), -1.0, 1.0) * INT16_MAX
        return cls(scaled.astype(np.int16), sample_rate)


class AudioLoader:
    """Loads audio files as 16-bit mono sample buffers."""

    SUPPORTED_FORMATS = {".wav", ".flac", ".ogg", ".mp3", ".m4a"}

    def __init__(self, target_sr: Optional[int] = None):
        """
        Initialize AudioLoader.

        Args:
            target_sr: Resample to this rate. None keeps the file's own rate.
        """
        self.target_sr = target_sr

    def load(self, path: str) -> SampleBuffer:
        """
        Load an audio file.

        16-bit mono PCM at the wanted rate is read sample-exact. Anything
        else is decoded, mixed to mono and resampled by librosa, then scaled
        to int16.

        Args:
            path: Path to audio file

        Returns:
            SampleBuffer

        Raises:
            ValueError: If file format not supported
            FileNotFoundError: If file doesn't exist
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {self.SUPPORTED_FORMATS}"
            )

        if self._is_native_pcm16(path):
            samples, sr = sf.read(str(path), dtype="int16")
            logger.debug("Read %d PCM_16 samples at %d Hz from %s", len(samples), sr, path)
            return SampleBuffer(samples, sr)

        audio, sr = librosa.load(str(path), sr=self.target_sr, mono=True)
        logger.debug("Decoded %s with librosa at %d Hz", path, sr)
        return SampleBuffer.from_float(audio, sr)

    def _is_native_pcm16(self, path: Path) -> bool:
        """True when the file can be read without conversion."""
        try:
            info = sf.info(str(path))
        except RuntimeError:
            return False
        if info.channels != 1 or info.subtype != "PCM_16":
            return False
        return self.target_sr is None or info.samplerate == self.target_sr
