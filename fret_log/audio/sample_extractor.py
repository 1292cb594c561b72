"""Decoding of recorded audio buffers into mono samples."""

import os
import tempfile
import warnings
from typing import Optional, Tuple

import numpy as np
import soundfile as sf

from ..core.errors import AudioProcessingFailed, InvalidAudioFormat, NoAudioData
from ..core.interfaces import ISampleExtractor
from ..logger import get_logger

logger = get_logger(__name__)


class SoundFileSampleExtractor(ISampleExtractor):
    """Decodes an encoded recording via a staging file.

    The bytes are written to a temporary file and read as float32 with
    ``soundfile``. Containers libsndfile rejects, such as the recorder's m4a
    takes, are decoded with ``librosa`` instead. The staging file is removed
    whether decoding succeeds or not.
    """

    def __init__(self, suffix: str = ".wav", staging_dir: Optional[str] = None):
        """
        Args:
            suffix: Extension given to the staging file (hint for the decoder)
            staging_dir: Directory for the staging file, or None for the system default
        """
        self._suffix = suffix
        self._staging_dir = staging_dir

    def extract(self, audio_data: bytes) -> Tuple[np.ndarray, int]:
        """Decode audio bytes into mono samples.

        Args:
            audio_data: Encoded audio as produced by the recorder

        Returns:
            Tuple of (1D float32 samples, sample rate in Hz)

        Raises:
            NoAudioData: If the buffer is empty or decodes to zero frames
            InvalidAudioFormat: If the decoder cannot read the container
            AudioProcessingFailed: If the staging file cannot be written or read
        """
        if not audio_data:
            logger.error("❌ No audio data to extract")
            raise NoAudioData("Audio buffer is empty")

        staging_path = None
        try:
            try:
                with tempfile.NamedTemporaryFile(
                    delete=False, suffix=self._suffix, dir=self._staging_dir
                ) as tmp:
                    staging_path = tmp.name
                    tmp.write(audio_data)
            except OSError as e:
                logger.error(f"❌ Failed to stage audio data: {e}")
                raise AudioProcessingFailed(f"Could not stage audio data: {e}") from e

            logger.debug(f"Wrote {len(audio_data)} bytes to {staging_path}")

            if not os.path.exists(staging_path):
                logger.error(f"❌ Staging file missing after write: {staging_path}")
                raise AudioProcessingFailed("Staging file disappeared before decoding")

            try:
                data, sample_rate = _read_with_soundfile(staging_path)
            except RuntimeError as e:
                # soundfile's LibsndfileError is a RuntimeError. libsndfile has
                # no MP4/AAC support, so hand the file to librosa's decoders.
                logger.info(f"libsndfile could not open the recording ({e}), trying librosa")
                data, sample_rate = _read_with_librosa(staging_path)
            except OSError as e:
                logger.error(f"❌ Failed to read audio file: {e}")
                raise AudioProcessingFailed(f"Could not read audio: {e}") from e
        finally:
            if staging_path is not None:
                _remove_staging_file(staging_path)

        if data.shape[0] == 0:
            logger.error("❌ Audio decoded to zero frames")
            raise NoAudioData("Audio contains no frames")

        # Downmix to mono
        if data.shape[1] > 1:
            samples = data.mean(axis=1)
        else:
            samples = data[:, 0]

        samples = np.ascontiguousarray(samples, dtype=np.float32)
        logger.info(f"✓ Extracted {len(samples)} samples at {sample_rate} Hz")
        return samples, int(sample_rate)


def _read_with_soundfile(path: str) -> Tuple[np.ndarray, int]:
    with sf.SoundFile(path) as f:
        logger.debug(
            f"Opened audio: {f.format}/{f.subtype}, {f.channels} ch, "
            f"{f.samplerate} Hz, {f.frames} frames"
        )
        return f.read(dtype="float32", always_2d=True), f.samplerate


def _read_with_librosa(path: str) -> Tuple[np.ndarray, int]:
    """Decode containers libsndfile can't open (m4a/AAC) through librosa.

    Raises:
        InvalidAudioFormat: If no librosa backend can decode the file
    """
    import librosa  # deferred, pulls in numba and the audioread backends

    try:
        with warnings.catch_warnings():
            # librosa warns whenever it falls back from soundfile to audioread
            warnings.simplefilter("ignore")
            samples, sample_rate = librosa.load(path, sr=None, mono=True)
    except Exception as e:
        logger.error(f"❌ Failed to decode audio: {e}")
        raise InvalidAudioFormat(f"Could not decode audio: {e}") from e

    if samples.size == 0:
        logger.error("❌ librosa decoded the recording to zero frames")
        raise InvalidAudioFormat("Could not decode audio: no frames in container")

    logger.debug(f"Decoded with librosa: {sample_rate} Hz, {samples.size} frames")
    return samples.reshape(-1, 1).astype(np.float32, copy=False), int(sample_rate)


def _remove_staging_file(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove staging file {path}: {e}")


def extract_samples(audio_data: bytes, suffix: str = ".wav") -> Tuple[np.ndarray, int]:
    """Decode audio bytes with the default extractor."""
    return SoundFileSampleExtractor(suffix=suffix).extract(audio_data)
