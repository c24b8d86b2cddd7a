from __future__ import annotations

import math
from typing import Dict, List, Optional, Union

import httpx

from elevenlabs_speech.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, SpeechSettings
from elevenlabs_speech.core.logging import get_logger
from elevenlabs_speech.errors import (
    ApiError,
    InputTooLongError,
    InvalidSeedError,
    InvalidVoiceSettingError,
    MissingApiKeyError,
    MissingInputError,
    SerializationError,
)
from elevenlabs_speech.types import (
    AudioFormat,
    SpeechRequest,
    SpeechRequestBody,
    SpeechResponse,
    TextNormalization,
    TtsModel,
    Voice,
    VoiceSettings,
    coerce_enum,
    parse_api_error,
)

MAX_INPUT_LENGTH = 5000
MIN_VOICE_SETTING = 0.0
MAX_VOICE_SETTING = 1.0
MAX_SEED = 4294967295

_BOUNDED_VOICE_SETTINGS = ("stability", "similarity_boost", "style")


class SpeechClient:
    """
    ElevenLabs text-to-speech client.

    One POST per call, no retries. Timeouts and network errors come from the
    httpx transport and are raised as-is.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        defaults: Optional[SpeechRequest] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout_seconds)
        self._transport = transport
        self._defaults = defaults
        self._log = get_logger(component="speech_client")

    @classmethod
    def from_settings(
        cls,
        settings: SpeechSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SpeechClient":
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            transport=transport,
            defaults=SpeechRequest(
                model=settings.model,
                voice=settings.voice,
                output_format=settings.output_format,
            ),
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def with_base_url(self, base_url: str) -> "SpeechClient":
        return SpeechClient(
            self._api_key,
            base_url=base_url,
            timeout_seconds=self._timeout,
            transport=self._transport,
            defaults=self._defaults,
        )

    def with_timeout(self, timeout_seconds: float) -> "SpeechClient":
        return SpeechClient(
            self._api_key,
            base_url=self._base_url,
            timeout_seconds=timeout_seconds,
            transport=self._transport,
            defaults=self._defaults,
        )

    def synthesize(self) -> "SpeechRequestBuilder":
        request = SpeechRequest()
        if self._defaults is not None:
            request.model = self._defaults.model
            request.voice = self._defaults.voice
            request.output_format = self._defaults.output_format
        return SpeechRequestBuilder(self, request)

    def validate(self, request: SpeechRequest) -> None:
        """
        Pre-flight checks; raises a TtsValidationError subclass. Never touches the network.
        """
        if not self._api_key:
            raise MissingApiKeyError()

        if not request.text:
            raise MissingInputError()
        if len(request.text) > MAX_INPUT_LENGTH:
            raise InputTooLongError(len(request.text), MAX_INPUT_LENGTH)

        settings = request.voice_settings
        if settings is not None:
            for name in _BOUNDED_VOICE_SETTINGS:
                value = getattr(settings, name)
                if value is None:
                    continue
                if not _in_range(value, MIN_VOICE_SETTING, MAX_VOICE_SETTING):
                    raise InvalidVoiceSettingError(name, value, MIN_VOICE_SETTING, MAX_VOICE_SETTING)

        seed = request.seed
        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= MAX_SEED:
                raise InvalidSeedError(seed, MAX_SEED)

    def serialize(self, request: SpeechRequest) -> bytes:
        try:
            return SpeechRequestBody.from_request(request).to_json()
        except ValueError as e:
            raise SerializationError("could not encode speech request: %s" % (e,)) from e

    def _headers(self, fmt: AudioFormat) -> Dict[str, str]:
        return {
            "xi-api-key": self._api_key or "",
            "content-type": "application/json",
            "accept": fmt.mime_type,
        }

    async def send(self, request: SpeechRequest) -> SpeechResponse:
        self.validate(request)
        body = self.serialize(request)

        fmt = request.resolved_format
        url = "%s/text-to-speech/%s" % (self._base_url, request.voice.voice_id)
        params = {"output_format": fmt.value}

        self._log.debug(
            "speech_request",
            voice=request.voice.name.lower(),
            model=request.model.value,
            format=fmt.value,
            characters=len(request.text),
        )

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.post(url, content=body, headers=self._headers(fmt), params=params)

        if resp.is_success:
            self._log.debug("speech_response", status=resp.status_code, bytes=len(resp.content))
            return SpeechResponse(
                audio_data=resp.content,
                format=fmt,
                content_type=resp.headers.get("content-type", fmt.mime_type),
            )

        message = parse_api_error(resp.content)
        if message is None:
            message = resp.content.decode("utf-8", errors="replace")
        self._log.warning("speech_api_error", status=resp.status_code, message=message[:300])
        raise ApiError(resp.status_code, message)


class SpeechRequestBuilder:
    """
    Fluent request accumulation. Setters only coerce types; range checks
    happen in SpeechClient.validate() when the request is executed.
    """

    def __init__(self, client: SpeechClient, request: Optional[SpeechRequest] = None) -> None:
        self._client = client
        self._request = request if request is not None else SpeechRequest()

    def text(self, text: str) -> "SpeechRequestBuilder":
        self._request.text = str(text)
        return self

    def input(self, text: str) -> "SpeechRequestBuilder":
        return self.text(text)

    def model(self, model: Union[TtsModel, str]) -> "SpeechRequestBuilder":
        self._request.model = coerce_enum(TtsModel, model)
        return self

    def voice(self, voice: Union[Voice, str]) -> "SpeechRequestBuilder":
        self._request.voice = Voice.parse(voice)
        return self

    def voice_settings(self, settings: VoiceSettings) -> "SpeechRequestBuilder":
        if not isinstance(settings, VoiceSettings):
            raise TypeError("voice_settings expects VoiceSettings, got %s" % (type(settings).__name__,))
        self._request.voice_settings = settings
        return self

    def _settings(self) -> VoiceSettings:
        if self._request.voice_settings is None:
            self._request.voice_settings = VoiceSettings()
        return self._request.voice_settings

    def stability(self, stability: float) -> "SpeechRequestBuilder":
        self._settings().stability = stability
        return self

    def similarity_boost(self, similarity_boost: float) -> "SpeechRequestBuilder":
        self._settings().similarity_boost = similarity_boost
        return self

    def style(self, style: float) -> "SpeechRequestBuilder":
        self._settings().style = style
        return self

    def use_speaker_boost(self, use_speaker_boost: bool) -> "SpeechRequestBuilder":
        self._settings().use_speaker_boost = bool(use_speaker_boost)
        return self

    def output_format(self, fmt: Union[AudioFormat, str]) -> "SpeechRequestBuilder":
        self._request.output_format = coerce_enum(AudioFormat, fmt)
        return self

    def response_format(self, fmt: Union[AudioFormat, str]) -> "SpeechRequestBuilder":
        return self.output_format(fmt)

    def language_code(self, code: str) -> "SpeechRequestBuilder":
        self._request.language_code = str(code)
        return self

    def seed(self, seed: int) -> "SpeechRequestBuilder":
        self._request.seed = seed
        return self

    def previous_text(self, text: str) -> "SpeechRequestBuilder":
        self._request.previous_text = str(text)
        return self

    def next_text(self, text: str) -> "SpeechRequestBuilder":
        self._request.next_text = str(text)
        return self

    def previous_request_ids(self, ids: List[str]) -> "SpeechRequestBuilder":
        self._request.previous_request_ids = [str(i) for i in ids]
        return self

    def next_request_ids(self, ids: List[str]) -> "SpeechRequestBuilder":
        self._request.next_request_ids = [str(i) for i in ids]
        return self

    def apply_text_normalization(self, mode: Union[TextNormalization, str]) -> "SpeechRequestBuilder":
        self._request.apply_text_normalization = coerce_enum(TextNormalization, mode)
        return self

    def apply_language_text_normalization(self, enabled: bool) -> "SpeechRequestBuilder":
        self._request.apply_language_text_normalization = bool(enabled)
        return self

    def build(self) -> SpeechRequest:
        return self._request

    async def execute(self) -> SpeechResponse:
        return await self._client.send(self._request)


def _in_range(value: object, lo: float, hi: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if math.isnan(value):
        return False
    return lo <= value <= hi
