"""Core components for the Fret Log application."""

# Import interfaces for easier access
from .config import ConfigManager, ValidationConfig
from .errors import (
    AudioProcessingFailed,
    InvalidAudioFormat,
    NoAudioData,
    ValidationError,
)
from .interfaces import IPitchDetector, ISampleExtractor

__all__ = [
    "ConfigManager",
    "ValidationConfig",
    "ValidationError",
    "AudioProcessingFailed",
    "InvalidAudioFormat",
    "NoAudioData",
    "IPitchDetector",
    "ISampleExtractor",
]
