import pytest

from elevenlabs_speech.client import SpeechClient
from elevenlabs_speech.types import AudioFormat, SpeechRequest, TextNormalization, TtsModel, Voice, VoiceSettings


def _builder():
    return SpeechClient("k").synthesize()


def test_defaults() -> None:
    req = _builder().build()
    assert req == SpeechRequest()
    assert req.model == TtsModel.ELEVEN_MULTILINGUAL_V2
    assert req.voice == Voice.RACHEL
    assert req.output_format is None
    assert req.resolved_format == AudioFormat.MP3_44100_128


def test_chaining_accumulates_every_field() -> None:
    req = (
        _builder()
        .input("Once upon a time")
        .model("eleven_v3")
        .voice("aria")
        .response_format("pcm_16000")
        .language_code("en")
        .seed(1234)
        .previous_text("Before.")
        .next_text("After.")
        .previous_request_ids(["r1", "r2"])
        .next_request_ids(["r3"])
        .apply_text_normalization("off")
        .apply_language_text_normalization(True)
        .build()
    )

    assert req.text == "Once upon a time"
    assert req.model == TtsModel.ELEVEN_V3
    assert req.voice == Voice.ARIA
    assert req.output_format == AudioFormat.PCM_16000
    assert req.language_code == "en"
    assert req.seed == 1234
    assert req.previous_text == "Before."
    assert req.next_text == "After."
    assert req.previous_request_ids == ["r1", "r2"]
    assert req.next_request_ids == ["r3"]
    assert req.apply_text_normalization == TextNormalization.OFF
    assert req.apply_language_text_normalization is True


def test_voice_setting_setters_merge() -> None:
    req = _builder().stability(0.3).similarity_boost(0.8).style(0.1).use_speaker_boost(True).build()
    assert req.voice_settings == VoiceSettings(stability=0.3, similarity_boost=0.8, style=0.1, use_speaker_boost=True)


def test_individual_setter_keeps_existing_settings() -> None:
    req = _builder().voice_settings(VoiceSettings(stability=0.2)).style(0.9).build()
    assert req.voice_settings == VoiceSettings(stability=0.2, style=0.9)


def test_voice_accepts_member_id_and_name() -> None:
    assert _builder().voice(Voice.DREW).build().voice == Voice.DREW
    assert _builder().voice("29vD33N1CtxCmqQRPOHJ").build().voice == Voice.DREW
    assert _builder().voice("Drew").build().voice == Voice.DREW


@pytest.mark.parametrize(
    "setter,value",
    [
        ("model", "gpt-4o"),
        ("voice", "nobody"),
        ("output_format", "flac"),
        ("apply_text_normalization", "sometimes"),
    ],
)
def test_closed_enumerations_reject_unknown_values(setter: str, value: str) -> None:
    with pytest.raises(ValueError):
        getattr(_builder(), setter)(value)


def test_voice_settings_type_is_enforced() -> None:
    with pytest.raises(TypeError):
        _builder().voice_settings({"stability": 0.5})  # type: ignore[arg-type]


def test_setters_do_not_range_check() -> None:
    req = _builder().stability(7.0).seed(-3).build()
    assert req.voice_settings.stability == 7.0
    assert req.seed == -3
