"""Fret Log - checks recorded scale practice against the expected notes."""

from .core.config import ValidationConfig
from .core.errors import (
    AudioProcessingFailed,
    InvalidAudioFormat,
    NoAudioData,
    ValidationError,
)
from .note_types import DetectedNote, ScaleDefinition, ScaleValidationResult
from .services.scale_validator import ScaleValidator, validate
from .services.validation_service import ScaleValidationService

__version__ = "0.1.0"

__all__ = [
    "AudioProcessingFailed",
    "DetectedNote",
    "InvalidAudioFormat",
    "NoAudioData",
    "ScaleDefinition",
    "ScaleValidationResult",
    "ScaleValidationService",
    "ScaleValidator",
    "ValidationConfig",
    "ValidationError",
    "validate",
]
