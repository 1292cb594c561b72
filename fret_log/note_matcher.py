from typing import List, Sequence

from .logger import get_logger
from .note_types import DetectedNote
from .note_utils import pitch_class

# Get logger for this module
logger = get_logger(__name__)


class NoteMatcher:
    """
    Encapsulates logic for comparing detected notes to expected notes,
    including octave-insensitive comparison and enharmonic equivalence.
    """

    @staticmethod
    def match(target: str, played: str) -> bool:
        """
        Check if the played note matches the target note, ignoring octave.

        Args:
            target: The expected note (e.g., 'C#4', 'Db')
            played: The detected note (e.g., 'Db4', 'C#3')
        Returns:
            bool: True if both spell the same pitch class, False otherwise
        """
        target_class = pitch_class(target)
        played_class = pitch_class(played)

        if target_class is None or played_class is None:
            logger.warning(
                f"⚠️  INVALID NOTE FORMAT - Target: '{target}', Played: '{played}'"
            )
            return False

        matched = target_class == played_class
        logger.debug(
            f"{'✅' if matched else '❌'} '{played}' vs '{target}' "
            f"({played_class} / {target_class})"
        )
        return matched

    @classmethod
    def match_sequence(
        cls, detected: Sequence[DetectedNote], expected: Sequence[str]
    ) -> List[bool]:
        """
        Align detected notes against the expected sequence in one forward pass.

        A cursor walks the detected notes. When the note under the cursor does
        not match, the next one is tried, so a single spurious detection before
        an expected note is skipped. There is no backtracking: a missed note is
        only recovered if the very next detection matches.

        Returns:
            One flag per expected note, True where it was matched.
        """
        matched = [False] * len(expected)
        cursor = 0

        for index, expected_note in enumerate(expected):
            if cursor >= len(detected):
                break

            if cls.match(expected_note, detected[cursor].note_name):
                matched[index] = True
                cursor += 1
            elif cursor + 1 < len(detected) and cls.match(
                expected_note, detected[cursor + 1].note_name
            ):
                logger.debug(
                    f"Skipping extra detection {detected[cursor].note_name} "
                    f"before {expected_note}"
                )
                matched[index] = True
                cursor += 2
            else:
                cursor += 1

        logger.info(f"✓ Matched notes: {sum(matched)}/{len(expected)}")
        return matched
