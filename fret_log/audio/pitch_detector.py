"""FFT-based pitch detection over a completed recording."""

from __future__ import annotations
from typing import ClassVar, List, Optional, Tuple

import numpy as np

from ..core.interfaces import IPitchDetector
from ..logger import get_logger
from ..note_types import PitchEstimate

logger = get_logger(__name__)


class FFTPlan:
    """Radix-2 real FFT setup for a fixed window size.

    Holds the Hamming taper for the size. Building a plan for a size that
    is not a power of two raises ValueError.
    """

    def __init__(self, size: int):
        if size < 2 or size & (size - 1):
            raise ValueError(f"FFT size must be a power of two, got {size}")
        self.size = size
        # Periodic Hamming window
        n = np.arange(size)
        self.taper = 0.54 - 0.46 * np.cos(2.0 * np.pi * n / size)

    def magnitudes(self, window: np.ndarray) -> np.ndarray:
        """Magnitude spectrum of the tapered window, first size/2 bins."""
        spectrum = np.fft.rfft(window * self.taper, n=self.size)
        return np.abs(spectrum[: self.size // 2])


class FFTPitchDetector(IPitchDetector):
    """Slides an FFT window across the samples and picks the peak bin.

    Pitch resolution is one bin (sample_rate / window_size, about 10.8 Hz at
    44.1kHz with 4096 samples); there is no interpolation between bins.
    """

    DEFAULT_WINDOW_SIZE: ClassVar[int] = 4096
    MIN_FREQUENCY: ClassVar[float] = 80.0  # Hz - low E on guitar is ~82 Hz
    MAX_FREQUENCY: ClassVar[float] = 1200.0  # Hz

    def __init__(
        self,
        window_size: int = DEFAULT_WINDOW_SIZE,
        hop_size: Optional[int] = None,
        min_frequency: float = MIN_FREQUENCY,
        max_frequency: float = MAX_FREQUENCY,
    ) -> None:
        """
        Args:
            window_size: Samples per analysis window (power of two)
            hop_size: Stride between windows, defaults to half the window (50% overlap)
            min_frequency: Lowest accepted peak frequency in Hz
            max_frequency: Highest accepted peak frequency in Hz
        """
        self._window_size = window_size
        self._hop_size = hop_size or max(window_size // 2, 1)
        self._min_frequency = min_frequency
        self._max_frequency = max_frequency

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def hop_size(self) -> int:
        return self._hop_size

    def window_count(self, total_samples: int) -> int:
        """Number of analysis windows for a recording of the given length."""
        if total_samples < self._window_size:
            return 0
        return (total_samples - self._window_size) // self._hop_size

    def estimate_window(
        self, window: np.ndarray, sample_rate: float, plan: FFTPlan
    ) -> Optional[Tuple[float, float]]:
        """Estimate the dominant frequency of one window.

        Returns:
            (frequency, confidence), or None when the window is empty or the
            peak falls outside the accepted range
        """
        if len(window) == 0:
            return None

        magnitudes = plan.magnitudes(window)
        peak_index = int(np.argmax(magnitudes))
        peak = float(magnitudes[peak_index])
        mean = float(np.mean(magnitudes))

        frequency = peak_index * sample_rate / plan.size
        if not self._min_frequency <= frequency <= self._max_frequency:
            return None

        confidence = min(peak / (mean * 10), 1.0) if mean > 0 else 0.0
        return frequency, confidence

    def detect(self, samples: np.ndarray, sample_rate: int) -> List[PitchEstimate]:
        """Estimate pitch for every full window of the recording.

        Args:
            samples: Mono samples
            sample_rate: Sample rate in Hz

        Returns:
            Estimates in time order; windows with no usable peak are omitted
        """
        total = len(samples)
        if total == 0 or sample_rate <= 0:
            logger.warning("No samples to analyze")
            return []

        try:
            plan = FFTPlan(self._window_size)
        except ValueError as e:
            logger.error(f"❌ Cannot set up FFT: {e}")
            return []

        samples = np.asarray(samples, dtype=np.float64)
        estimates: List[PitchEstimate] = []
        window_count = self.window_count(total)

        for i in range(window_count):
            start = i * self._hop_size
            end = start + self._window_size
            if end > total:
                continue

            result = self.estimate_window(samples[start:end], sample_rate, plan)
            if result is None:
                continue

            frequency, confidence = result
            timestamp = start / sample_rate
            logger.debug(
                f"Window {i} @ {timestamp:.3f}s: {frequency:.1f}Hz "
                f"(confidence {confidence:.2f})"
            )
            estimates.append(PitchEstimate(frequency, confidence, timestamp))

        logger.info(
            f"✓ Pitch estimates: {len(estimates)} from {window_count} windows"
        )
        return estimates
