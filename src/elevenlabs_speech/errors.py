"""
Exceptions raised by the speech client.

    TtsError
    +-- TtsValidationError        raised before any network call
    |   +-- MissingApiKeyError
    |   +-- MissingInputError
    |   +-- InputTooLongError
    |   +-- InvalidVoiceSettingError
    |   +-- InvalidSeedError
    +-- SerializationError
    +-- ApiError                  non-2xx response from the provider

Transport failures are httpx's own exceptions (httpx.RequestError and
subclasses) and are not wrapped.
"""

from __future__ import annotations


class TtsError(Exception):
    """Base for every error raised by this package."""


class TtsValidationError(TtsError):
    pass


class MissingApiKeyError(TtsValidationError):
    def __init__(self) -> None:
        super().__init__("missing API key")


class MissingInputError(TtsValidationError):
    def __init__(self) -> None:
        super().__init__("missing input text")


class InputTooLongError(TtsValidationError):
    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__("input text too long: %d characters (max: %d)" % (length, max_length))


class InvalidVoiceSettingError(TtsValidationError):
    def __init__(self, field: str, value: float, minimum: float = 0.0, maximum: float = 1.0) -> None:
        self.field = field
        self.value = value
        super().__init__(
            "invalid voice setting %s: %r (must be between %.1f and %.1f)" % (field, value, minimum, maximum)
        )


class InvalidSeedError(TtsValidationError):
    def __init__(self, seed: object, maximum: int) -> None:
        self.seed = seed
        super().__init__("invalid seed value: %r (must be an integer between 0 and %d)" % (seed, maximum))


class SerializationError(TtsError):
    pass


class ApiError(TtsError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__("API error (status %d): %s" % (status, message))
