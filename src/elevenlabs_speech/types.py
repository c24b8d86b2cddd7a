from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class TtsModel(str, Enum):
    ELEVEN_V3 = "eleven_v3"
    ELEVEN_MULTILINGUAL_V2 = "eleven_multilingual_v2"
    ELEVEN_FLASH_V2_5 = "eleven_flash_v2_5"
    ELEVEN_TURBO_V2_5 = "eleven_turbo_v2_5"

    @classmethod
    def default(cls) -> "TtsModel":
        return cls.ELEVEN_MULTILINGUAL_V2


class Voice(str, Enum):
    """
    Preset voices. The value is the provider's voice id (current as of 2025-09).
    """

    RACHEL = "21m00Tcm4TlvDq8ikWAM"
    DREW = "29vD33N1CtxCmqQRPOHJ"
    CLYDE = "2EiwWnXFnvU5JabPnv8n"
    PAUL = "5Q0t7uMcjvnagumLfvZi"
    ARIA = "9BWtsMINqrJLrRacOk9x"
    DOMI = "AZnzlk1XvdvUeBnXmlld"
    DAVE = "CYw3kZ02Hs0563khs1Fj"
    ROGER = "CwhRBWXzGAHq8TQ4Fs17"
    FIN = "D38z5RcWu1voky8WS1ja"
    SARAH = "EXAVITQu4vr4xnSDxMaL"

    @classmethod
    def default(cls) -> "Voice":
        return cls.RACHEL

    @classmethod
    def parse(cls, value: Union["Voice", str]) -> "Voice":
        """
        Accepts a member, a voice id, or a voice name ("rachel", "Rachel").
        """
        if isinstance(value, cls):
            return value
        s = str(value).strip()
        try:
            return cls(s)
        except ValueError:
            pass
        try:
            return cls[s.upper()]
        except KeyError:
            raise ValueError("unknown voice: %r" % (value,)) from None

    @property
    def voice_id(self) -> str:
        return self.value


class AudioFormat(str, Enum):
    MP3_22050_32 = "mp3_22050_32"
    MP3_44100_32 = "mp3_44100_32"
    MP3_44100_64 = "mp3_44100_64"
    MP3_44100_96 = "mp3_44100_96"
    MP3_44100_128 = "mp3_44100_128"
    MP3_44100_192 = "mp3_44100_192"
    PCM_16000 = "pcm_16000"
    PCM_22050 = "pcm_22050"
    PCM_24000 = "pcm_24000"
    PCM_44100 = "pcm_44100"
    ULAW_8000 = "ulaw_8000"

    @classmethod
    def default(cls) -> "AudioFormat":
        return cls.MP3_44100_128

    @property
    def codec(self) -> str:
        return self.value.split("_", 1)[0]

    @property
    def mime_type(self) -> str:
        if self.codec == "mp3":
            return "audio/mpeg"
        if self.codec == "ulaw":
            return "audio/basic"
        # Raw little-endian 16-bit PCM, no container.
        return "audio/pcm"

    @property
    def suggested_ext(self) -> str:
        return {"mp3": "mp3", "pcm": "pcm", "ulaw": "ulaw"}[self.codec]


class TextNormalization(str, Enum):
    AUTO = "auto"
    ON = "on"
    OFF = "off"


@dataclass
class VoiceSettings:
    stability: Optional[float] = None
    similarity_boost: Optional[float] = None
    style: Optional[float] = None
    use_speaker_boost: Optional[bool] = None


@dataclass
class SpeechRequest:
    text: str = ""
    model: TtsModel = field(default_factory=TtsModel.default)
    voice: Voice = field(default_factory=Voice.default)
    voice_settings: Optional[VoiceSettings] = None
    output_format: Optional[AudioFormat] = None
    language_code: Optional[str] = None
    seed: Optional[int] = None
    previous_text: Optional[str] = None
    next_text: Optional[str] = None
    previous_request_ids: Optional[List[str]] = None
    next_request_ids: Optional[List[str]] = None
    apply_text_normalization: Optional[TextNormalization] = None
    apply_language_text_normalization: Optional[bool] = None

    @property
    def resolved_format(self) -> AudioFormat:
        return self.output_format or AudioFormat.default()


@dataclass(frozen=True)
class SpeechResponse:
    audio_data: bytes
    format: AudioFormat
    content_type: str = ""

    @property
    def suggested_ext(self) -> str:
        return self.format.suggested_ext

    def __len__(self) -> int:
        return len(self.audio_data)


# --- wire models ---


class VoiceSettingsBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    stability: Optional[float] = None
    similarity_boost: Optional[float] = None
    style: Optional[float] = None
    use_speaker_boost: Optional[bool] = None


class SpeechRequestBody(BaseModel):
    """
    JSON body for POST /text-to-speech/{voice_id}.
    Voice and output format travel in the URL, not here.
    """

    model_config = ConfigDict(extra="forbid")

    text: str
    model_id: str
    language_code: Optional[str] = None
    voice_settings: Optional[VoiceSettingsBody] = None
    seed: Optional[int] = None
    previous_text: Optional[str] = None
    next_text: Optional[str] = None
    previous_request_ids: Optional[List[str]] = None
    next_request_ids: Optional[List[str]] = None
    apply_text_normalization: Optional[TextNormalization] = None
    apply_language_text_normalization: Optional[bool] = None

    @classmethod
    def from_request(cls, req: SpeechRequest) -> "SpeechRequestBody":
        vs = req.voice_settings
        return cls(
            text=req.text,
            model_id=req.model.value,
            language_code=req.language_code,
            voice_settings=(
                VoiceSettingsBody(
                    stability=vs.stability,
                    similarity_boost=vs.similarity_boost,
                    style=vs.style,
                    use_speaker_boost=vs.use_speaker_boost,
                )
                if vs is not None
                else None
            ),
            seed=req.seed,
            previous_text=req.previous_text,
            next_text=req.next_text,
            previous_request_ids=req.previous_request_ids,
            next_request_ids=req.next_request_ids,
            apply_text_normalization=req.apply_text_normalization,
            apply_language_text_normalization=req.apply_language_text_normalization,
        )

    def to_json(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class ApiErrorDetail(BaseModel):
    message: str
    type: Optional[str] = None
    code: Optional[str] = None


class ApiErrorResponse(BaseModel):
    """
    Structured error body. Accepts {"error": {...}} as well as the
    provider's {"detail": {...}} / {"detail": "..."} shapes.
    """

    error: Optional[ApiErrorDetail] = None
    detail: Optional[Union[ApiErrorDetail, str]] = None

    @property
    def message(self) -> Optional[str]:
        if self.error is not None:
            return self.error.message
        if isinstance(self.detail, ApiErrorDetail):
            return self.detail.message
        if isinstance(self.detail, str):
            return self.detail
        return None


def parse_api_error(body: bytes) -> Optional[str]:
    """Returns the structured error message, or None if the body isn't one."""
    try:
        parsed = ApiErrorResponse.model_validate_json(body)
    except ValueError:
        return None
    return parsed.message


def coerce_enum(enum_cls: Any, value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError("invalid %s: %r" % (enum_cls.__name__, value)) from None
