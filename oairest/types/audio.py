from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from ..core.errors import InvalidArgumentError
from ..core.models import BaseModel, FileUpload, Request, check_range, enum_value, form_field, require


class SttResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


JSON_FORMATS = (SttResponseFormat.JSON, SttResponseFormat.VERBOSE_JSON)


class TtsResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"


class Voice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SttModel(str, Enum):
    WHISPER_1 = "whisper-1"


class TtsModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"


class TimestampGranularity(str, Enum):
    SEGMENT = "segment"
    WORD = "word"


class Language(str, Enum):
    """ISO-639-1 codes of the languages speech-to-text accepts."""

    ENGLISH = "en"
    CHINESE = "zh"
    GERMAN = "de"
    SPANISH = "es"
    RUSSIAN = "ru"
    KOREAN = "ko"
    FRENCH = "fr"
    JAPANESE = "ja"
    PORTUGUESE = "pt"
    TURKISH = "tr"
    POLISH = "pl"
    CATALAN = "ca"
    DUTCH = "nl"
    ARABIC = "ar"
    SWEDISH = "sv"
    ITALIAN = "it"
    INDONESIAN = "id"
    HINDI = "hi"
    FINNISH = "fi"
    VIETNAMESE = "vi"
    HEBREW = "he"
    UKRAINIAN = "uk"
    GREEK = "el"
    MALAY = "ms"
    CZECH = "cs"
    ROMANIAN = "ro"
    DANISH = "da"
    HUNGARIAN = "hu"
    TAMIL = "ta"
    NORWEGIAN = "no"
    THAI = "th"
    URDU = "ur"
    CROATIAN = "hr"
    BULGARIAN = "bg"
    LITHUANIAN = "lt"
    LATIN = "la"
    MAORI = "mi"
    MALAYALAM = "ml"
    WELSH = "cy"
    SLOVAK = "sk"
    TELUGU = "te"
    PERSIAN = "fa"
    LATVIAN = "lv"
    BENGALI = "bn"
    SERBIAN = "sr"
    AZERBAIJANI = "az"
    SLOVENIAN = "sl"
    KANNADA = "kn"
    ESTONIAN = "et"
    MACEDONIAN = "mk"
    BRETON = "br"
    BASQUE = "eu"
    ICELANDIC = "is"
    ARMENIAN = "hy"
    NEPALI = "ne"
    MONGOLIAN = "mn"
    BOSNIAN = "bs"
    KAZAKH = "kk"
    ALBANIAN = "sq"
    SWAHILI = "sw"
    GALICIAN = "gl"
    MARATHI = "mr"
    PUNJABI = "pa"
    SINHALA = "si"
    KHMER = "km"
    SHONA = "sn"
    YORUBA = "yo"
    SOMALI = "so"
    AFRIKAANS = "af"
    OCCITAN = "oc"
    GEORGIAN = "ka"
    BELARUSIAN = "be"
    TAJIK = "tg"
    SINDHI = "sd"
    GUJARATI = "gu"
    AMHARIC = "am"
    YIDDISH = "yi"
    LAO = "lo"
    UZBEK = "uz"
    FAROESE = "fo"
    HAITIAN_CREOLE = "ht"
    PASHTO = "ps"
    TURKMEN = "tk"
    NYNORSK = "nn"
    MALTESE = "mt"
    SANSKRIT = "sa"
    LUXEMBOURGISH = "lb"
    MYANMAR = "my"
    TIBETAN = "bo"
    TAGALOG = "tl"
    MALAGASY = "mg"
    ASSAMESE = "as"
    TATAR = "tt"
    HAWAIIAN = "haw"
    LINGALA = "ln"
    HAUSA = "ha"
    BASHKIR = "ba"
    JAVANESE = "jw"
    SUNDANESE = "su"


@dataclass(frozen=True)
class CreateSpeechRequest(Request):
    input: str  # max 4096 characters
    voice: Union[Voice, str]
    model: Union[TtsModel, str] = TtsModel.TTS_1
    response_format: Optional[Union[TtsResponseFormat, str]] = None  # default: mp3
    speed: Optional[float] = None  # min: 0.25, max: 4.0, default: 1.0

    def validate(self) -> None:
        require(self.input, "input")
        if len(self.input) > 4096:
            raise InvalidArgumentError("`input` must be at most 4096 characters")
        enum_value(Voice, self.voice, "voice")
        require(self.model, "model")
        if self.response_format is not None:
            enum_value(TtsResponseFormat, self.response_format, "response_format")
        check_range(self.speed, "speed", 0.25, 4.0)


def _check_stt(req) -> None:
    require(req.file, "file")
    require(req.model, "model")
    if req.response_format is not None:
        enum_value(SttResponseFormat, req.response_format, "response_format")
    check_range(req.temperature, "temperature", 0, 1)


@dataclass(frozen=True)
class CreateTranscriptionRequest(Request):
    file: FileUpload
    model: Union[SttModel, str] = SttModel.WHISPER_1
    language: Optional[Union[Language, str]] = None
    prompt: Optional[str] = None
    response_format: Optional[Union[SttResponseFormat, str]] = None  # default: json
    temperature: Optional[float] = None  # min: 0, max: 1, default: 0
    timestamp_granularities: Optional[List[Union[TimestampGranularity, str]]] = form_field(
        "timestamp_granularities[]"
    )

    def validate(self) -> None:
        _check_stt(self)
        if self.language is not None:
            enum_value(Language, self.language, "language")
        if self.timestamp_granularities:
            for granularity in self.timestamp_granularities:
                enum_value(TimestampGranularity, granularity, "timestamp_granularities")
            if self.response_format is None or SttResponseFormat(self.response_format) is not SttResponseFormat.VERBOSE_JSON:
                raise InvalidArgumentError(
                    "`timestamp_granularities` requires `response_format` verbose_json"
                )


@dataclass(frozen=True)
class CreateTranslationRequest(Request):
    file: FileUpload
    model: Union[SttModel, str] = SttModel.WHISPER_1
    prompt: Optional[str] = None
    response_format: Optional[Union[SttResponseFormat, str]] = None  # default: json
    temperature: Optional[float] = None

    def validate(self) -> None:
        _check_stt(self)


def is_json_format(response_format: Optional[Union[SttResponseFormat, str]]) -> bool:
    """True when the server will answer with JSON (unset defaults to json)."""
    if response_format is None:
        return True
    return SttResponseFormat(response_format) in JSON_FORMATS


@dataclass(frozen=True)
class Segment(BaseModel):
    id: int
    seek: int
    start: float
    end: float
    text: str
    tokens: List[int]
    temperature: float
    avg_logprob: float
    compression_ratio: float
    no_speech_prob: float


@dataclass(frozen=True)
class Word(BaseModel):
    word: str
    start: float
    end: float


@dataclass(frozen=True)
class SttResponse(BaseModel):
    """Transcription/translation result; the verbose fields are only set for verbose_json."""
    text: str
    task: Optional[str] = None
    language: Optional[str] = None
    duration: Optional[float] = None
    segments: Optional[List[Segment]] = None
    words: Optional[List[Word]] = None
