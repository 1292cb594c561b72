"""Human-readable feedback for a validated take."""

from typing import Sequence

from ..note_types import DetectedNote


def is_passing(accuracy: float, passing_accuracy: float) -> bool:
    """A take passes when its accuracy reaches the threshold (inclusive)."""
    return accuracy >= passing_accuracy


def generate_feedback(
    detected: Sequence[DetectedNote],
    expected: Sequence[str],
    matched: Sequence[bool],
    accuracy: float,
    passing_accuracy: float,
) -> str:
    """Build the summary shown to the player.

    The text has a verdict line, the detected and expected note lists, then
    one line per expected note marked ✓ or ✗.
    """
    if is_passing(accuracy, passing_accuracy):
        lines = ["✅ Great job! You played the scale correctly."]
    else:
        lines = [
            f"❌ Keep practicing. You got {int(accuracy * 100)}% of the notes correct."
        ]

    lines.append("")
    lines.append(f"Detected notes: {', '.join(n.note_name for n in detected)}")
    lines.append(f"Expected notes: {', '.join(expected)}")
    lines.append("")

    for expected_note, is_matched in zip(expected, matched):
        lines.append(f"{'✓' if is_matched else '✗'} {expected_note}")

    return "\n".join(lines) + "\n"
