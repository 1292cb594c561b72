"""Built-in practice scales."""

from typing import List, Tuple

from .note_types import ScaleDefinition

SCALES: Tuple[ScaleDefinition, ...] = (
    ScaleDefinition("C Major", ("C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5")),
    ScaleDefinition("G Major", ("G3", "A3", "B3", "C4", "D4", "E4", "F#4", "G4")),
    ScaleDefinition("A Minor", ("A3", "B3", "C4", "D4", "E4", "F4", "G4", "A4")),
    ScaleDefinition("E Major Pentatonic", ("E3", "F#3", "G#3", "B3", "C#4", "E4")),
    ScaleDefinition("A Minor Pentatonic", ("A3", "C4", "D4", "E4", "G4", "A4")),
)


def scale_names() -> List[str]:
    return [scale.name for scale in SCALES]


def get_scale(name: str) -> ScaleDefinition:
    """Look up a built-in scale by name, ignoring case.

    Raises:
        KeyError: If no scale has that name
    """
    wanted = name.strip().lower()
    for scale in SCALES:
        if scale.name.lower() == wanted:
            return scale
    raise KeyError(f"Unknown scale '{name}'. Available: {', '.join(scale_names())}")
