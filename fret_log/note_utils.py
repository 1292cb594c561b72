"""Utility functions for working with musical notes and frequencies.

Everything here is stateless and shared by pitch detection, segmentation,
matching and reference-tone generation.
"""

import re
from typing import Dict, List, Optional, Tuple

import numpy as np

from .logger import get_logger

# Get logger for this module
logger = get_logger(__name__)

# Standard reference: A4 = 440Hz, MIDI note 69
A4_FREQUENCY = 440.0
A4_MIDI = 69

SHARP_NOTES: List[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]

# Mapping between sharp and flat note names
SHARP_TO_FLAT: Dict[str, str] = {
    "C#": "Db",
    "D#": "Eb",
    "F#": "Gb",
    "G#": "Ab",
    "A#": "Bb",
}

FLAT_TO_SHARP: Dict[str, str] = {v: k for k, v in SHARP_TO_FLAT.items()}

# Letter, optional accidental, octave (may be negative, e.g. 'C-1')
NOTE_PATTERN = re.compile(r"^([A-G])([#b]?)(-?\d+)$")


def parse_note(note_name: str) -> Tuple[str, int]:
    """Split a note name into its sharp-spelled pitch class and octave.

    Args:
        note_name: Note in Scientific Pitch Notation (e.g. 'F#3', 'Db4')

    Returns:
        Tuple of (pitch class using sharps, octave)

    Raises:
        ValueError: If the name is not a valid note
    """
    match = NOTE_PATTERN.match(str(note_name).strip())
    if not match:
        raise ValueError(f"Invalid note name: {note_name!r}")

    letter, accidental, octave = match.groups()
    pitch = letter + accidental
    pitch = FLAT_TO_SHARP.get(pitch, pitch)
    if pitch not in SHARP_NOTES:
        # 'Cb', 'Fb' and friends are outside the twelve spellings we support
        raise ValueError(f"Unsupported note spelling: {note_name!r}")
    return pitch, int(octave)


def pitch_class(note_name: str) -> Optional[str]:
    """Return the octave-less, sharp-spelled pitch class, or None if invalid."""
    try:
        return parse_note(note_name)[0]
    except ValueError:
        return None


def note_to_midi(note_name: str) -> int:
    """Convert a note name to its MIDI number (C-1 = 0, A4 = 69)."""
    pitch, octave = parse_note(note_name)
    return (octave + 1) * 12 + SHARP_NOTES.index(pitch)


def note_to_frequency(note_name: str) -> float:
    """Convert a note name to its equal-tempered frequency in Hz.

    Examples:
        >>> note_to_frequency('A4')
        440.0
        >>> round(note_to_frequency('C4'), 2)
        261.63
    """
    semitones_from_a4 = note_to_midi(note_name) - A4_MIDI
    return A4_FREQUENCY * 2.0 ** (semitones_from_a4 / 12.0)


def frequency_to_note(freq: float) -> str:
    """Convert frequency to note name using Scientific Pitch Notation (SPN).

    Args:
        freq: Frequency in Hz

    Returns:
        Note name with octave (e.g., 'A4', 'C#4'), or an empty string if the
        frequency is not a positive finite number

    Note:
        - Middle C is C4 (261.63 Hz)
        - Octave numbers change between B and C (e.g., B3 -> C4)
    """
    if not isinstance(freq, (int, float, np.number)) or not np.isfinite(freq):
        logger.warning(f"Invalid frequency value: {freq}")
        return ""

    if freq <= 0:
        logger.debug(f"Non-positive frequency: {freq}")
        return ""

    # Calculate half steps from A4
    half_steps = int(round(12 * np.log2(freq / A4_FREQUENCY)))
    midi_number = A4_MIDI + half_steps

    # SPN octave calculation (C4 is middle C)
    octave = (midi_number // 12) - 1
    note_name = SHARP_NOTES[midi_number % 12]

    return f"{note_name}{octave}"

