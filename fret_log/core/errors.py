"""Error types raised when a recording cannot be validated."""


class ValidationError(Exception):
    """Base class for failures that stop a validation from running at all.

    A raised ValidationError means "could not analyze", which callers should
    keep distinct from a result that ran and scored low.
    """


class AudioProcessingFailed(ValidationError):
    """Staging, decoding or reading the recorded audio failed."""


class InvalidAudioFormat(AudioProcessingFailed):
    """The decoder rejected the audio container or codec."""


class NoAudioData(AudioProcessingFailed):
    """The buffer was empty or decoded to zero frames."""
