from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from ..core.config import ValidationConfig
from ..core.errors import ValidationError
from ..logger import get_logger
from ..note_types import ScaleValidationResult
from .scale_validator import ExpectedScale, ScaleValidator

logger = get_logger(__name__)

ResultCallback = Callable[[Optional[ScaleValidationResult], Optional[BaseException]], None]


class ScaleValidationService:
    """Runs scale validations on worker threads.

    Each submission gets its own ScaleValidator, so nothing is shared
    between runs. Results and errors come back through the returned Future
    and, if given, a callback invoked on the worker thread.
    """

    def __init__(
        self,
        config: Optional[ValidationConfig] = None,
        max_workers: int = 1,
        validator_factory: Optional[Callable[[ValidationConfig], ScaleValidator]] = None,
    ) -> None:
        self._config = config or ValidationConfig()
        self._validator_factory = validator_factory or ScaleValidator
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="fret-log-validate"
        )

    def submit(
        self,
        audio_data: bytes,
        expected_scale: ExpectedScale,
        config: Optional[ValidationConfig] = None,
        callback: Optional[ResultCallback] = None,
    ) -> "Future[ScaleValidationResult]":
        """Queue a validation.

        Args:
            audio_data: Encoded audio bytes
            expected_scale: A ScaleDefinition or a sequence of note names
            config: Overrides the service config for this run
            callback: Called with (result, None) or (None, error) when done

        Returns:
            Future resolving to the ScaleValidationResult
        """
        validator = self._validator_factory(config or self._config)
        future = self._executor.submit(validator.validate, audio_data, expected_scale)

        if callback is not None:
            future.add_done_callback(lambda done: self._deliver(done, callback))
        return future

    @staticmethod
    def _deliver(future: Future, callback: ResultCallback) -> None:
        if future.cancelled():
            return

        error = future.exception()
        if error is not None:
            if isinstance(error, ValidationError):
                logger.warning(f"Validation could not run: {error}")
            else:
                logger.error(f"Unexpected validation failure: {error!r}")
            callback(None, error)
        else:
            callback(future.result(), None)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; by default wait for queued validations."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "ScaleValidationService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
