"""Audio decoding, pitch detection and reference tone synthesis."""

from .pitch_detector import FFTPitchDetector, FFTPlan
from .sample_extractor import SoundFileSampleExtractor, extract_samples
from .tone_generator import render_note, render_scale, render_tone, write_wav

__all__ = [
    "FFTPitchDetector",
    "FFTPlan",
    "SoundFileSampleExtractor",
    "extract_samples",
    "render_note",
    "render_scale",
    "render_tone",
    "write_wav",
]
