"""Validation services built on the detection pipeline."""

from .feedback import generate_feedback, is_passing
from .scale_validator import ScaleValidator, validate
from .validation_service import ScaleValidationService

__all__ = [
    "ScaleValidator",
    "ScaleValidationService",
    "generate_feedback",
    "is_passing",
    "validate",
]
