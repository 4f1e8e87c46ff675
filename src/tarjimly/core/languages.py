# src/tarjimly/core/languages.py
"""
Language vocabulary.

A Vocabulary maps short codes ("en", "gd") to display names
("English", "Scots Gaelic") and keeps a case-folded lookup set of
every code and every name. Segmentation only needs membership;
resolution maps a designator back to its code.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


logger = logging.getLogger(__name__)


LANGUAGE_NAMES: dict[str, str] = {
    "af": "Afrikaans",
    "sq": "Albanian",
    "am": "Amharic",
    "ar": "Arabic",
    "hy": "Armenian",
    "az": "Azerbaijani",
    "eu": "Basque",
    "be": "Belarusian",
    "bn": "Bengali",
    "bs": "Bosnian",
    "bg": "Bulgarian",
    "ca": "Catalan",
    "ceb": "Cebuano",
    "ny": "Chichewa",
    "zh-cn": "Chinese (Simplified)",
    "zh-tw": "Chinese (Traditional)",
    "co": "Corsican",
    "hr": "Croatian",
    "cs": "Czech",
    "da": "Danish",
    "nl": "Dutch",
    "en": "English",
    "eo": "Esperanto",
    "et": "Estonian",
    "tl": "Filipino",
    "fi": "Finnish",
    "fr": "French",
    "fy": "Frisian",
    "gl": "Galician",
    "ka": "Georgian",
    "de": "German",
    "el": "Greek",
    "gu": "Gujarati",
    "ht": "Haitian Creole",
    "ha": "Hausa",
    "haw": "Hawaiian",
    "he": "Hebrew",
    "hi": "Hindi",
    "hmn": "Hmong",
    "hu": "Hungarian",
    "is": "Icelandic",
    "ig": "Igbo",
    "id": "Indonesian",
    "ga": "Irish",
    "it": "Italian",
    "ja": "Japanese",
    "jw": "Javanese",
    "kn": "Kannada",
    "kk": "Kazakh",
    "km": "Khmer",
    "ko": "Korean",
    "ku": "Kurdish (Kurmanji)",
    "ky": "Kyrgyz",
    "lo": "Lao",
    "la": "Latin",
    "lv": "Latvian",
    "lt": "Lithuanian",
    "lb": "Luxembourgish",
    "mk": "Macedonian",
    "mg": "Malagasy",
    "ms": "Malay",
    "ml": "Malayalam",
    "mt": "Maltese",
    "mi": "Maori",
    "mr": "Marathi",
    "mn": "Mongolian",
    "my": "Myanmar (Burmese)",
    "ne": "Nepali",
    "no": "Norwegian",
    "or": "Odia",
    "ps": "Pashto",
    "fa": "Persian",
    "pl": "Polish",
    "pt": "Portuguese",
    "pa": "Punjabi",
    "ro": "Romanian",
    "ru": "Russian",
    "sm": "Samoan",
    "gd": "Scots Gaelic",
    "sr": "Serbian",
    "st": "Sesotho",
    "sn": "Shona",
    "sd": "Sindhi",
    "si": "Sinhala",
    "sk": "Slovak",
    "sl": "Slovenian",
    "so": "Somali",
    "es": "Spanish",
    "su": "Sundanese",
    "sw": "Swahili",
    "sv": "Swedish",
    "tg": "Tajik",
    "ta": "Tamil",
    "te": "Telugu",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "ur": "Urdu",
    "ug": "Uyghur",
    "uz": "Uzbek",
    "vi": "Vietnamese",
    "cy": "Welsh",
    "xh": "Xhosa",
    "yi": "Yiddish",
    "yo": "Yoruba",
    "zu": "Zulu",
}


class VocabularyError(ValueError):
    """Raised when a vocabulary file cannot be loaded."""


@dataclass(frozen=True)
class Vocabulary:
    names: Mapping[str, str] = field(hash=False)  # code -> display name
    designators: frozenset[str] = field(init=False, repr=False, compare=False, hash=True)

    def __post_init__(self):
        # Codes are stored case-folded so "EN" in a file still resolves to "en"
        names = {code.lower(): name for code, name in self.names.items()}
        object.__setattr__(self, "names", MappingProxyType(names))
        object.__setattr__(
            self,
            "designators",
            frozenset(names) | frozenset(n.lower() for n in names.values()),
        )

    def __contains__(self, designator: object) -> bool:
        if not isinstance(designator, str):
            return False
        return designator.lower() in self.designators

    def __len__(self) -> int:
        return len(self.names)

    def code_for(self, designator: str | None) -> str | None:
        """
        Map a code or display name (any case) back to its code.

        Codes win over names; among names the first entry in table
        order wins if two codes share a display name.
        """
        if not designator:
            return None
        lower = designator.lower()
        if lower in self.names:
            return lower
        for code, name in self.names.items():
            if name.lower() == lower:
                return code
        return None

    def name_for(self, code: str) -> str | None:
        return self.names.get(code.lower())

    def search(self, term: str) -> list[tuple[str, str]]:
        """Entries whose code or name contains term (case-insensitive)."""
        term = term.lower()
        return [
            (code, name)
            for code, name in self.names.items()
            if term in code or term in name.lower()
        ]

    @classmethod
    def from_json(cls, path: str | Path) -> "Vocabulary":
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise VocabularyError(f"Cannot read vocabulary file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise VocabularyError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(raw, dict):
            raise VocabularyError(f"{path}: expected an object of code -> name")

        for code, name in raw.items():
            if not isinstance(name, str) or not code or not name:
                raise VocabularyError(f"{path}: bad entry {code!r}: {name!r}")

        folded = {}
        for code in raw:
            other = folded.setdefault(code.lower(), code)
            if other != code:
                raise VocabularyError(f"{path}: codes {other!r} and {code!r} differ only in case")

        logger.debug("Loaded %d languages from %s", len(raw), path)
        return cls(raw)


@lru_cache(maxsize=1)
def default_vocabulary() -> Vocabulary:
    return Vocabulary(LANGUAGE_NAMES)
