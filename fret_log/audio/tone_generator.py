"""Reference tone synthesis for notes and scales."""

from typing import BinaryIO, Sequence, Union

import numpy as np
import soundfile as sf

from ..logger import get_logger
from ..note_utils import note_to_frequency

logger = get_logger(__name__)

DEFAULT_SAMPLE_RATE = 44100
AMPLITUDE = 0.25
FADE_TIME = 0.05  # seconds of linear fade in and out


def render_tone(
    frequency: float,
    duration: float,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    amplitude: float = AMPLITUDE,
) -> np.ndarray:
    """Render a sine tone with a short fade in/out envelope.

    Args:
        frequency: Tone frequency in Hz
        duration: Length in seconds
        sample_rate: Output sample rate in Hz
        amplitude: Peak amplitude (0-1)

    Returns:
        1D float32 array
    """
    frame_count = int(sample_rate * duration)
    t = np.arange(frame_count) / sample_rate

    envelope = np.ones(frame_count)
    fade_time = min(FADE_TIME, duration / 2)
    if fade_time > 0:
        envelope = np.minimum(envelope, t / fade_time)
        envelope = np.minimum(envelope, (duration - t) / fade_time)
        envelope = np.clip(envelope, 0.0, 1.0)

    tone = amplitude * envelope * np.sin(2.0 * np.pi * frequency * t)
    return tone.astype(np.float32)


def render_note(
    note_name: str, duration: float = 0.8, sample_rate: int = DEFAULT_SAMPLE_RATE
) -> np.ndarray:
    """Render a single reference note.

    Raises:
        ValueError: If the note name is invalid
    """
    frequency = note_to_frequency(note_name)
    logger.debug(f"Rendering {note_name} at {frequency:.2f} Hz for {duration}s")
    return render_tone(frequency, duration, sample_rate)


def render_scale(
    notes: Sequence[str],
    note_duration: float = 0.6,
    gap: float = 0.1,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
) -> np.ndarray:
    """Render notes one after another with a short pause between them.

    Raises:
        ValueError: If any note name is invalid
    """
    silence = np.zeros(int(sample_rate * gap), dtype=np.float32)
    parts = []
    for index, note_name in enumerate(notes):
        if index > 0 and len(silence):
            parts.append(silence)
        parts.append(render_note(note_name, note_duration, sample_rate))

    if not parts:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(parts)


def write_wav(
    destination: Union[str, BinaryIO],
    samples: np.ndarray,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
) -> None:
    """Write samples as a 16-bit mono WAV file (path or binary file object)."""
    sf.write(destination, samples, sample_rate, format="WAV", subtype="PCM_16")
    logger.info(f"Wrote {len(samples)} samples at {sample_rate} Hz")
