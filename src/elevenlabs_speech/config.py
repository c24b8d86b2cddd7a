from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from elevenlabs_speech.types import AudioFormat, TtsModel, Voice

DEFAULT_BASE_URL = "https://api.elevenlabs.io/v1"
DEFAULT_TIMEOUT_SECONDS = 60.0


def _strip_quotes(s: str) -> str:
    s = (s or "").strip()
    if len(s) >= 2 and ((s[0] == s[-1]) and s[0] in ("'", '"')):
        s = s[1:-1].strip()
    return s


class SpeechSettings(BaseSettings):
    """
    In-memory client settings, read from the environment (or a local .env).
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[str] = Field(default=None, alias="ELEVENLABS_API_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="ELEVENLABS_BASE_URL")
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, alias="ELEVENLABS_TIMEOUT_SECONDS")
    model: TtsModel = Field(default=TtsModel.ELEVEN_MULTILINGUAL_V2, alias="ELEVENLABS_MODEL_ID")
    voice: Voice = Field(default=Voice.RACHEL, alias="ELEVENLABS_VOICE")
    output_format: AudioFormat = Field(default=AudioFormat.MP3_44100_128, alias="ELEVENLABS_OUTPUT_FORMAT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("api_key", mode="before")
    @classmethod
    def _normalize_api_key(cls, v: object) -> Optional[str]:
        if v is None:
            return None
        s = _strip_quotes(str(v))
        return s or None

    @field_validator("base_url", mode="before")
    @classmethod
    def _normalize_base_url(cls, v: object) -> str:
        return _strip_quotes(str(v)).rstrip("/")

    @field_validator("model", "output_format", mode="before")
    @classmethod
    def _normalize_enum(cls, v: object) -> object:
        if isinstance(v, str):
            return _strip_quotes(v).lower()
        return v

    @field_validator("voice", mode="before")
    @classmethod
    def _normalize_voice(cls, v: object) -> Voice:
        # Voice names ("rachel") and raw ids are both accepted.
        if isinstance(v, Voice):
            return v
        return Voice.parse(_strip_quotes(str(v)))

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        return _strip_quotes(str(v)).upper() or "INFO"
