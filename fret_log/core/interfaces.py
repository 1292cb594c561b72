"""Defines the core interfaces for the Fret Log pipeline."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Tuple

import numpy as np

from ..note_types import PitchEstimate


class ISampleExtractor(ABC):
    """Interface for turning an encoded recording into mono samples."""

    @abstractmethod
    def extract(self, audio_data: bytes) -> Tuple[np.ndarray, int]:
        """Decode audio bytes into (mono float samples, sample rate)."""
        pass


class IPitchDetector(ABC):
    """Interface for windowed pitch estimation."""

    @abstractmethod
    def detect(self, samples: np.ndarray, sample_rate: int) -> List[PitchEstimate]:
        """Return one estimate per accepted analysis window, in time order."""
        pass
