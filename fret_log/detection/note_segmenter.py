from typing import List, Sequence

from ..logger import get_logger
from ..note_types import DetectedNote

logger = get_logger(__name__)


class NoteSegmenter:
    """
    Collapses a stream of per-window detections into sustained notes.
    """

    def __init__(self, minimum_note_duration: float):
        self._minimum_note_duration = minimum_note_duration

    def segment(self, notes: Sequence[DetectedNote]) -> List[DetectedNote]:
        """
        Merge consecutive detections with the same name and drop short notes.

        Each kept note is represented by its first detection. A note's duration
        runs from its first detection to the first detection of the next name.
        The last note has nothing to bound it and is always kept.

        Returns:
            The cleaned notes, still in time order.
        """
        if not notes:
            return []

        cleaned: List[DetectedNote] = []
        current = notes[0]

        for note in notes[1:]:
            if note.note_name == current.note_name:
                continue

            duration = note.timestamp - current.timestamp
            if duration >= self._minimum_note_duration:
                cleaned.append(current)
            else:
                logger.debug(
                    f"Dropping short note {current.note_name} "
                    f"({duration:.3f}s < {self._minimum_note_duration}s)"
                )
            current = note

        cleaned.append(current)

        logger.info(f"✓ Cleaned to {len(cleaned)} distinct notes")
        return cleaned
