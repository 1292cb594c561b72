import threading

import pytest

from fret_log.core.config import ValidationConfig
from fret_log.core.errors import AudioProcessingFailed, NoAudioData
from fret_log.services.validation_service import ScaleValidationService


def test_future_resolves_to_result(c_major_wav, c_major_notes):
    with ScaleValidationService() as service:
        result = service.submit(c_major_wav, c_major_notes).result(timeout=30)

    assert result.is_valid
    assert result.accuracy == 1.0


def test_future_raises_validation_error(c_major_notes):
    with ScaleValidationService() as service:
        future = service.submit(b"", c_major_notes)
        with pytest.raises(NoAudioData):
            future.result(timeout=30)


def test_callback_receives_result(c_major_wav, c_major_notes):
    done = threading.Event()
    received = {}

    def on_done(result, error):
        received["result"] = result
        received["error"] = error
        done.set()

    with ScaleValidationService() as service:
        service.submit(c_major_wav, c_major_notes, callback=on_done)
        assert done.wait(timeout=30)

    assert received["error"] is None
    assert received["result"].matched_count == len(c_major_notes)


def test_callback_receives_error(c_major_notes):
    done = threading.Event()
    received = {}

    def on_done(result, error):
        received["result"] = result
        received["error"] = error
        done.set()

    with ScaleValidationService() as service:
        service.submit(b"not audio", c_major_notes, callback=on_done)
        assert done.wait(timeout=30)

    assert received["result"] is None
    assert isinstance(received["error"], AudioProcessingFailed)


def test_per_call_config_override(c_major_wav):
    # The first four notes match and the rest do not: 50%
    strict = ValidationConfig(passing_accuracy=0.75)
    lenient = ValidationConfig(passing_accuracy=0.5)
    expected = ["C4", "D4", "E4", "F4", "C#4", "C#4", "C#4", "C#4"]

    with ScaleValidationService(config=strict) as service:
        strict_result = service.submit(c_major_wav, expected).result(timeout=30)
        lenient_result = service.submit(c_major_wav, expected, config=lenient).result(timeout=30)

    assert strict_result.accuracy == lenient_result.accuracy == 0.5
    assert not strict_result.is_valid
    assert lenient_result.is_valid


def test_shutdown_rejects_new_work(c_major_notes):
    service = ScaleValidationService()
    service.shutdown()
    with pytest.raises(RuntimeError):
        service.submit(b"", c_major_notes)
