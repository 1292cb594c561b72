"""Scale validation pipeline: decode, detect, segment, match, report."""

from typing import List, Optional, Sequence, Union

from ..audio.pitch_detector import FFTPitchDetector
from ..audio.sample_extractor import SoundFileSampleExtractor
from ..core.config import ValidationConfig
from ..core.interfaces import IPitchDetector, ISampleExtractor
from ..detection.note_segmenter import NoteSegmenter
from ..logger import get_logger
from ..note_matcher import NoteMatcher
from ..note_types import DetectedNote, PitchEstimate, ScaleDefinition, ScaleValidationResult
from ..note_utils import frequency_to_note
from .feedback import generate_feedback, is_passing

logger = get_logger(__name__)

ExpectedScale = Union[ScaleDefinition, Sequence[str]]


class ScaleValidator:
    """Checks a recorded take against an expected sequence of notes."""

    def __init__(
        self,
        config: Optional[ValidationConfig] = None,
        sample_extractor: Optional[ISampleExtractor] = None,
        pitch_detector: Optional[IPitchDetector] = None,
    ) -> None:
        """
        Args:
            config: Validation thresholds, defaults to ValidationConfig()
            sample_extractor: Decoder for the recording, defaults to soundfile
            pitch_detector: Windowed pitch estimator, defaults to the FFT detector
        """
        self.config = config or ValidationConfig()
        self._sample_extractor = sample_extractor or SoundFileSampleExtractor()
        self._pitch_detector = pitch_detector or FFTPitchDetector()
        self._segmenter = NoteSegmenter(self.config.minimum_note_duration)

    def validate(
        self, audio_data: bytes, expected_scale: ExpectedScale
    ) -> ScaleValidationResult:
        """Run the full pipeline on one recording.

        Args:
            audio_data: Encoded audio bytes from the recorder
            expected_scale: A ScaleDefinition or a sequence of note names

        Returns:
            The validation result

        Raises:
            AudioProcessingFailed: If the recording cannot be decoded
        """
        expected = _expected_notes(expected_scale)
        logger.info(f"🎵 Starting scale validation: {', '.join(expected)}")

        samples, sample_rate = self._sample_extractor.extract(audio_data)

        estimates = self._pitch_detector.detect(samples, sample_rate)
        detected = self.name_estimates(estimates)
        logger.info(f"✓ Detected {len(detected)} notes")

        cleaned = self._segmenter.segment(detected)
        return self.score(cleaned, expected)

    def name_estimates(self, estimates: Sequence[PitchEstimate]) -> List[DetectedNote]:
        """Drop low-confidence estimates and name the rest."""
        threshold = self.config.confidence_threshold
        return [
            DetectedNote(
                note_name=frequency_to_note(estimate.frequency),
                frequency=estimate.frequency,
                timestamp=estimate.timestamp,
                confidence=estimate.confidence,
            )
            for estimate in estimates
            if estimate.confidence >= threshold
        ]

    def score(
        self, detected: Sequence[DetectedNote], expected: Sequence[str]
    ) -> ScaleValidationResult:
        """Match cleaned notes against the expectation and build the result."""
        matched = NoteMatcher.match_sequence(detected, expected)
        accuracy = sum(matched) / len(expected) if expected else 0.0
        passing = self.config.passing_accuracy

        return ScaleValidationResult(
            is_valid=is_passing(accuracy, passing),
            detected_notes=detected,
            expected_notes=expected,
            matched_notes=matched,
            accuracy=accuracy,
            feedback=generate_feedback(detected, expected, matched, accuracy, passing),
        )


def _expected_notes(expected_scale: ExpectedScale) -> List[str]:
    if isinstance(expected_scale, ScaleDefinition):
        return list(expected_scale.notes)
    if isinstance(expected_scale, str):
        # A bare string would otherwise be split into characters
        return [expected_scale]
    return list(expected_scale)


def validate(
    audio_data: bytes,
    expected_scale: ExpectedScale,
    config: Optional[ValidationConfig] = None,
) -> ScaleValidationResult:
    """Validate a recording with the default decoder and detector."""
    return ScaleValidator(config).validate(audio_data, expected_scale)
