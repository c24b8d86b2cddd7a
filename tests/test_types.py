import json

import pytest

from elevenlabs_speech.types import (
    AudioFormat,
    SpeechRequest,
    SpeechRequestBody,
    SpeechResponse,
    TextNormalization,
    VoiceSettings,
    parse_api_error,
)


def test_body_omits_unset_fields() -> None:
    body = json.loads(SpeechRequestBody.from_request(SpeechRequest(text="hi")).to_json())
    assert body == {"text": "hi", "model_id": "eleven_multilingual_v2"}


def test_body_carries_every_optional_field() -> None:
    req = SpeechRequest(
        text="hi",
        voice_settings=VoiceSettings(similarity_boost=0.75, use_speaker_boost=False),
        output_format=AudioFormat.PCM_44100,
        language_code="de",
        seed=9,
        previous_text="a",
        next_text="b",
        previous_request_ids=["p"],
        next_request_ids=["n"],
        apply_text_normalization=TextNormalization.ON,
        apply_language_text_normalization=False,
    )

    body = json.loads(SpeechRequestBody.from_request(req).to_json())

    assert body == {
        "text": "hi",
        "model_id": "eleven_multilingual_v2",
        "language_code": "de",
        "voice_settings": {"similarity_boost": 0.75, "use_speaker_boost": False},
        "seed": 9,
        "previous_text": "a",
        "next_text": "b",
        "previous_request_ids": ["p"],
        "next_request_ids": ["n"],
        "apply_text_normalization": "on",
        "apply_language_text_normalization": False,
    }
    # Voice and format are URL concerns.
    assert "voice" not in body and "output_format" not in body


@pytest.mark.parametrize(
    "fmt,mime,ext",
    [
        (AudioFormat.MP3_22050_32, "audio/mpeg", "mp3"),
        (AudioFormat.PCM_16000, "audio/pcm", "pcm"),
        (AudioFormat.ULAW_8000, "audio/basic", "ulaw"),
    ],
)
def test_format_metadata(fmt: AudioFormat, mime: str, ext: str) -> None:
    assert fmt.mime_type == mime
    assert SpeechResponse(audio_data=b"", format=fmt).suggested_ext == ext


@pytest.mark.parametrize(
    "raw,expected",
    [
        (b'{"error": {"message": "nope"}}', "nope"),
        (b'{"detail": {"status": "x", "message": "bad voice"}}', "bad voice"),
        (b'{"detail": "Not Found"}', "Not Found"),
        (b"{}", None),
        (b"<html>502</html>", None),
        (b"", None),
    ],
)
def test_parse_api_error(raw: bytes, expected) -> None:
    assert parse_api_error(raw) == expected


def test_serialize_wraps_encoding_failures() -> None:
    from elevenlabs_speech.client import SpeechClient
    from elevenlabs_speech.errors import SerializationError

    client = SpeechClient("k")
    assert json.loads(client.serialize(SpeechRequest(text="hi")))["text"] == "hi"
    with pytest.raises(SerializationError):
        client.serialize(SpeechRequest(text="hi", language_code=5))  # type: ignore[arg-type]
