"""Type definitions for the Fret Log project."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class PitchEstimate:
    """A raw pitch estimate for a single analysis window."""

    frequency: float  # Frequency of the peak bin in Hz
    confidence: float  # Peakiness score (0-1)
    timestamp: float  # Window start, seconds from recording start


@dataclass(frozen=True)
class DetectedNote:
    """Represents a detected musical note with its properties."""

    note_name: str  # Note name (e.g., 'A4', 'C#3')
    frequency: float  # Frequency in Hz
    timestamp: float  # Seconds from the start of the recording
    confidence: float  # Detection confidence (0-1)

    def __str__(self):
        return f"{self.note_name}@{self.timestamp:.2f}s"


@dataclass(frozen=True)
class ScaleDefinition:
    """A named, ordered sequence of notes to validate a take against."""

    name: str
    notes: Tuple[str, ...]

    def __post_init__(self):
        # Accept any sequence but store an immutable copy
        object.__setattr__(self, "notes", tuple(self.notes))

    def __len__(self):
        return len(self.notes)


@dataclass(frozen=True)
class ScaleValidationResult:
    """Outcome of validating one recording against an expected scale.

    ``matched_notes`` is parallel to ``expected_notes``; ``accuracy`` is the
    fraction of expected notes that were matched.
    """

    is_valid: bool
    detected_notes: Tuple[DetectedNote, ...]
    expected_notes: Tuple[str, ...]
    matched_notes: Tuple[bool, ...]
    accuracy: float
    feedback: str = field(default="")

    def __post_init__(self):
        object.__setattr__(self, "detected_notes", tuple(self.detected_notes))
        object.__setattr__(self, "expected_notes", tuple(self.expected_notes))
        object.__setattr__(self, "matched_notes", tuple(self.matched_notes))
        if len(self.matched_notes) != len(self.expected_notes):
            raise ValueError(
                f"matched_notes has {len(self.matched_notes)} entries, "
                f"expected {len(self.expected_notes)}"
            )

    @property
    def matched_count(self) -> int:
        return sum(1 for matched in self.matched_notes if matched)

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for storage or JSON output."""
        return {
            "is_valid": self.is_valid,
            "accuracy": self.accuracy,
            "expected_notes": list(self.expected_notes),
            "matched_notes": list(self.matched_notes),
            "detected_notes": [
                {
                    "note_name": note.note_name,
                    "frequency": note.frequency,
                    "timestamp": note.timestamp,
                    "confidence": note.confidence,
                }
                for note in self.detected_notes
            ],
            "feedback": self.feedback,
        }
