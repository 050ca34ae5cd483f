"""Testes de RequestOptions: defaults, persistencia, path e query."""

from __future__ import annotations

import pytest

from voz._types import AudioFormat, TextType, VoiceId
from voz.exceptions import OptionsDecodeError, PathEncodingError
from voz.options import PERSISTED_KEYS, RequestOptions


class TestCreate:
    def test_defaults(self) -> None:
        options = RequestOptions.create("hello")
        assert options.text == "hello"
        assert options.text_type is TextType.TEXT
        assert options.voice_id is VoiceId.JOANNA
        assert options.output_format is AudioFormat.MP3

    def test_empty_text_is_accepted(self) -> None:
        assert RequestOptions.create("").text == ""

    def test_fields_are_mutable(self) -> None:
        options = RequestOptions.create("hello")
        options.voice_id = VoiceId.HANS
        options.output_format = AudioFormat.PCM
        assert options.query_parameters[1] == ("voiceId", "hans")
        assert options.query_parameters[2] == ("outputFormat", "pcm")


class TestEncode:
    def test_encode_uses_canonical_tokens(self, ssml_options: RequestOptions) -> None:
        assert ssml_options.encode() == {
            "text": "<speak>Vire a direita</speak>",
            "textType": "ssml",
            "voiceId": "vitoria",
            "outputFormat": "ogg_vorbis",
        }

    def test_encode_has_exactly_persisted_keys(self) -> None:
        assert set(RequestOptions.create("x").encode()) == set(PERSISTED_KEYS)

    def test_text_is_not_escaped(self) -> None:
        assert RequestOptions.create("a b/c?").encode()["text"] == "a b/c?"


class TestDecode:
    def test_decode_valid(self, persisted_options: dict[str, object]) -> None:
        options = RequestOptions.decode(persisted_options)
        assert options == RequestOptions(
            text="Turn left",
            text_type=TextType.TEXT,
            voice_id=VoiceId.BRIAN,
            output_format=AudioFormat.PCM,
        )

    @pytest.mark.parametrize(
        "options",
        [
            RequestOptions.create("hello"),
            RequestOptions("<speak>oi</speak>", TextType.SSML, VoiceId.INES, AudioFormat.PCM),
            RequestOptions("", TextType.TEXT, VoiceId.MIZUKI, AudioFormat.OGG_VORBIS),
            RequestOptions("ação & \"aspas\"", TextType.TEXT, VoiceId.FILIZ, AudioFormat.MP3),
        ],
    )
    def test_encode_decode_round_trip(self, options: RequestOptions) -> None:
        assert RequestOptions.decode(options.encode()) == options

    @pytest.mark.parametrize(
        ("key", "token"),
        [
            ("textType", "SSML"),
            ("textType", "markup"),
            ("voiceId", "Joanna"),
            ("voiceId", "alloy"),
            ("outputFormat", "wav"),
            ("outputFormat", "oggVorbis"),
        ],
    )
    def test_unknown_token_fails(
        self, persisted_options: dict[str, object], key: str, token: str
    ) -> None:
        persisted_options[key] = token
        with pytest.raises(OptionsDecodeError) as exc_info:
            RequestOptions.decode(persisted_options)
        assert exc_info.value.fields == (key,)

    def test_missing_enum_key_fails(self, persisted_options: dict[str, object]) -> None:
        del persisted_options["voiceId"]
        with pytest.raises(OptionsDecodeError) as exc_info:
            RequestOptions.decode(persisted_options)
        assert exc_info.value.fields == ("voiceId",)

    def test_non_string_enum_value_fails(self, persisted_options: dict[str, object]) -> None:
        persisted_options["outputFormat"] = 0
        with pytest.raises(OptionsDecodeError):
            RequestOptions.decode(persisted_options)

    def test_all_failed_fields_are_reported(self) -> None:
        with pytest.raises(OptionsDecodeError) as exc_info:
            RequestOptions.decode({"text": "hi"})
        assert exc_info.value.fields == ("textType", "outputFormat", "voiceId")
        assert "voiceId" in str(exc_info.value)

    def test_missing_text_defaults_to_empty(self, persisted_options: dict[str, object]) -> None:
        del persisted_options["text"]
        assert RequestOptions.decode(persisted_options).text == ""

    @pytest.mark.parametrize("value", [42, None, ["a", "b"], {"t": 1}])
    def test_wrong_type_text_defaults_to_empty(
        self, persisted_options: dict[str, object], value: object
    ) -> None:
        persisted_options["text"] = value
        assert RequestOptions.decode(persisted_options).text == ""

    def test_empty_text_with_bad_token_still_fails(self) -> None:
        with pytest.raises(OptionsDecodeError):
            RequestOptions.decode(
                {"text": "", "textType": "text", "voiceId": "joanna", "outputFormat": "flac"}
            )

    def test_extra_keys_are_ignored(self, persisted_options: dict[str, object]) -> None:
        persisted_options["speed"] = "1.5"
        assert RequestOptions.decode(persisted_options).voice_id is VoiceId.BRIAN


class TestJson:
    def test_json_round_trip(self, ssml_options: RequestOptions) -> None:
        assert RequestOptions.from_json(ssml_options.to_json()) == ssml_options

    def test_from_json_bytes(self) -> None:
        raw = b'{"text": "x", "textType": "text", "voiceId": "amy", "outputFormat": "mp3"}'
        assert RequestOptions.from_json(raw).voice_id is VoiceId.AMY

    def test_invalid_json(self) -> None:
        with pytest.raises(OptionsDecodeError) as exc_info:
            RequestOptions.from_json("{not json")
        assert exc_info.value.fields == ()
        assert "JSON invalido" in str(exc_info.value)

    def test_non_object_json(self) -> None:
        with pytest.raises(OptionsDecodeError, match="objeto"):
            RequestOptions.from_json('["text"]')

    def test_lone_surrogate_survives_json(self) -> None:
        options = RequestOptions.create("a\ud800b")
        assert RequestOptions.from_json(options.to_json()) == options


class TestPath:
    def test_reserved_characters_are_escaped(self) -> None:
        assert RequestOptions.create("a b/c?d").path == "voice/v1/speak/a%20b%2Fc%3Fd"

    def test_plain_text(self) -> None:
        assert RequestOptions.create("Hello123").path == "voice/v1/speak/Hello123"

    def test_empty_text(self) -> None:
        assert RequestOptions.create("").path == "voice/v1/speak/"

    def test_ssml_markup_is_escaped(self) -> None:
        path = RequestOptions("<speak>Oi!</speak>", TextType.SSML).path
        assert path == "voice/v1/speak/%3Cspeak%3EOi%21%3C%2Fspeak%3E"

    def test_non_ascii_passes_through(self) -> None:
        assert RequestOptions.create("São Paulo").path == "voice/v1/speak/São%20Paulo"

    def test_path_follows_mutation(self) -> None:
        options = RequestOptions.create("a")
        options.text = "b c"
        assert options.path == "voice/v1/speak/b%20c"

    def test_lone_surrogate_raises(self) -> None:
        with pytest.raises(PathEncodingError) as exc_info:
            _ = RequestOptions.create("ab\udc00").path
        assert exc_info.value.position == 2


class TestQueryParameters:
    def test_defaults_in_fixed_order(self) -> None:
        assert RequestOptions.create("x").query_parameters == [
            ("textType", "text"),
            ("voiceId", "joanna"),
            ("outputFormat", "mp3"),
        ]

    def test_non_default_values(self, ssml_options: RequestOptions) -> None:
        assert ssml_options.query_parameters == [
            ("textType", "ssml"),
            ("voiceId", "vitoria"),
            ("outputFormat", "ogg_vorbis"),
        ]

    def test_query_does_not_depend_on_text(self) -> None:
        a = RequestOptions.create("one")
        b = RequestOptions.create("two / three")
        assert a.query_parameters == b.query_parameters
