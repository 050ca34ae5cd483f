"""Tipos fundamentais do Voz.

Enums de opcoes de sintese. O valor de cada membro e o token canonico,
usado tanto na forma persistida quanto nos query parameters da request.
A conversao token -> membro e exata (case-sensitive); token desconhecido
retorna None, cabendo ao chamador tratar como falha de validacao.
"""

from __future__ import annotations

from enum import Enum


class TextType(Enum):
    """Modo de entrada do texto a sintetizar."""

    TEXT = "text"
    SSML = "ssml"

    @classmethod
    def from_description(cls, description: str) -> TextType | None:
        return _TEXT_TYPES.get(description)

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class AudioFormat(Enum):
    """Codificacao do audio de saida.

    O token de OGG_VORBIS e "ogg_vorbis" (difere do nome do membro).
    """

    MP3 = "mp3"
    OGG_VORBIS = "ogg_vorbis"
    PCM = "pcm"

    @classmethod
    def from_description(cls, description: str) -> AudioFormat | None:
        return _AUDIO_FORMATS.get(description)

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class VoiceId(Enum):
    """Vozes sinteticas suportadas pelo endpoint de fala.

    Cada voz e especifica de um locale (ver `locale`).
    """

    NICOLE = "nicole"
    RUSSELL = "russell"
    AMY = "amy"
    BRIAN = "brian"
    EMMA = "emma"
    RAVEENA = "raveena"
    IVY = "ivy"
    JOANNA = "joanna"
    JOEY = "joey"
    JUSTIN = "justin"
    KENDRA = "kendra"
    KIMBERLY = "kimberly"
    SALLI = "salli"
    GERAINT = "geraint"
    GWYNETH = "gwyneth"
    MADS = "mads"
    NAJA = "naja"
    HANS = "hans"
    MARLENE = "marlene"
    VICKI = "vicki"
    CONCHITA = "conchita"
    ENRIQUE = "enrique"
    MIGUEL = "miguel"
    PENELOPE = "penelope"
    CHANTAL = "chantal"
    CELINE = "celine"
    MATHIEU = "mathieu"
    DORA = "dora"
    KARL = "karl"
    CARLA = "carla"
    GIORGIO = "giorgio"
    MIZUKI = "mizuki"
    LIV = "liv"
    LOTTE = "lotte"
    RUBEN = "ruben"
    EWA = "ewa"
    JACEK = "jacek"
    JAN = "jan"
    MAJA = "maja"
    RICARDO = "ricardo"
    VITORIA = "vitoria"
    CRISTIANO = "cristiano"
    INES = "ines"
    CARMEN = "carmen"
    MAXIM = "maxim"
    TATYANA = "tatyana"
    ASTRID = "astrid"
    FILIZ = "filiz"

    @classmethod
    def from_description(cls, description: str) -> VoiceId | None:
        return _VOICE_IDS.get(description)

    @classmethod
    def for_locale(cls, locale: str) -> list[VoiceId]:
        """Vozes de um locale.

        Aceita tag completa ("en-US") ou apenas o idioma ("en").
        Comparacao case-insensitive.
        """
        wanted = locale.strip().lower()
        if "-" in wanted:
            return [v for v in cls if v.locale.lower() == wanted]
        return [v for v in cls if v.locale.lower().split("-", 1)[0] == wanted]

    @property
    def description(self) -> str:
        return self.value

    @property
    def locale(self) -> str:
        return _VOICE_LOCALES[self]

    def __str__(self) -> str:
        return self.value


DEFAULT_TEXT_TYPE = TextType.TEXT
DEFAULT_VOICE_ID = VoiceId.JOANNA
DEFAULT_AUDIO_FORMAT = AudioFormat.MP3

_TEXT_TYPES: dict[str, TextType] = {t.value: t for t in TextType}
_AUDIO_FORMATS: dict[str, AudioFormat] = {f.value: f for f in AudioFormat}
_VOICE_IDS: dict[str, VoiceId] = {v.value: v for v in VoiceId}

_VOICE_LOCALES: dict[VoiceId, str] = {
    VoiceId.NICOLE: "en-AU",
    VoiceId.RUSSELL: "en-AU",
    VoiceId.AMY: "en-GB",
    VoiceId.BRIAN: "en-GB",
    VoiceId.EMMA: "en-GB",
    VoiceId.RAVEENA: "en-IN",
    VoiceId.IVY: "en-US",
    VoiceId.JOANNA: "en-US",
    VoiceId.JOEY: "en-US",
    VoiceId.JUSTIN: "en-US",
    VoiceId.KENDRA: "en-US",
    VoiceId.KIMBERLY: "en-US",
    VoiceId.SALLI: "en-US",
    VoiceId.GERAINT: "en-GB-WLS",
    VoiceId.GWYNETH: "cy-GB",
    VoiceId.MADS: "da-DK",
    VoiceId.NAJA: "da-DK",
    VoiceId.HANS: "de-DE",
    VoiceId.MARLENE: "de-DE",
    VoiceId.VICKI: "de-DE",
    VoiceId.CONCHITA: "es-ES",
    VoiceId.ENRIQUE: "es-ES",
    VoiceId.MIGUEL: "es-US",
    VoiceId.PENELOPE: "es-US",
    VoiceId.CHANTAL: "fr-CA",
    VoiceId.CELINE: "fr-FR",
    VoiceId.MATHIEU: "fr-FR",
    VoiceId.DORA: "is-IS",
    VoiceId.KARL: "is-IS",
    VoiceId.CARLA: "it-IT",
    VoiceId.GIORGIO: "it-IT",
    VoiceId.MIZUKI: "ja-JP",
    VoiceId.LIV: "nb-NO",
    VoiceId.LOTTE: "nl-NL",
    VoiceId.RUBEN: "nl-NL",
    VoiceId.EWA: "pl-PL",
    VoiceId.JACEK: "pl-PL",
    VoiceId.JAN: "pl-PL",
    VoiceId.MAJA: "pl-PL",
    VoiceId.RICARDO: "pt-BR",
    VoiceId.VITORIA: "pt-BR",
    VoiceId.CRISTIANO: "pt-PT",
    VoiceId.INES: "pt-PT",
    VoiceId.CARMEN: "ro-RO",
    VoiceId.MAXIM: "ru-RU",
    VoiceId.TATYANA: "ru-RU",
    VoiceId.ASTRID: "sv-SE",
    VoiceId.FILIZ: "tr-TR",
}
