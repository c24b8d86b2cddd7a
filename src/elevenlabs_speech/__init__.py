from elevenlabs_speech.client import MAX_INPUT_LENGTH, SpeechClient, SpeechRequestBuilder
from elevenlabs_speech.config import SpeechSettings
from elevenlabs_speech.errors import (
    ApiError,
    InputTooLongError,
    InvalidSeedError,
    InvalidVoiceSettingError,
    MissingApiKeyError,
    MissingInputError,
    SerializationError,
    TtsError,
    TtsValidationError,
)
from elevenlabs_speech.types import (
    AudioFormat,
    SpeechRequest,
    SpeechResponse,
    TextNormalization,
    TtsModel,
    Voice,
    VoiceSettings,
)

__all__ = [
    "MAX_INPUT_LENGTH",
    "ApiError",
    "AudioFormat",
    "InputTooLongError",
    "InvalidSeedError",
    "InvalidVoiceSettingError",
    "MissingApiKeyError",
    "MissingInputError",
    "SerializationError",
    "SpeechClient",
    "SpeechRequest",
    "SpeechRequestBuilder",
    "SpeechResponse",
    "SpeechSettings",
    "TextNormalization",
    "TtsError",
    "TtsModel",
    "TtsValidationError",
    "Voice",
    "VoiceSettings",
]
