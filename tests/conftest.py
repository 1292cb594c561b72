import io

import numpy as np
import pytest

from fret_log.audio.tone_generator import render_scale, render_tone, write_wav


def _encode_wav(samples: np.ndarray, sample_rate: int = 44100) -> bytes:
    buffer = io.BytesIO()
    write_wav(buffer, samples, sample_rate)
    return buffer.getvalue()


@pytest.fixture
def encode_wav():
    return _encode_wav


@pytest.fixture
def c_major_notes():
    return ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5"]


@pytest.fixture
def c_major_wav(c_major_notes):
    return _encode_wav(render_scale(c_major_notes))


@pytest.fixture
def a4_samples():
    return render_tone(440.0, 1.0)
