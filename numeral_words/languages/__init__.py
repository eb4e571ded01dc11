"""Built-in language profiles, keyed by canonical locale code."""

from __future__ import annotations

from collections.abc import Callable

from ..profile import LanguageProfile
from .chinese import build_simplified_chinese, build_traditional_chinese
from .english import build_american_english, build_english
from .french import build_belgian_french, build_french
from .german import build_german
from .hebrew import build_hebrew
from .italian import build_italian
from .korean import build_korean
from .slavic import build_polish, build_russian
from .south_asian import build_hindi
from .turkish import build_turkish
from .vietnamese import build_vietnamese

BUILDERS: dict[str, Callable[[], LanguageProfile]] = {
    "en": build_english,
    "en-US": build_american_english,
    "fr": build_french,
    "fr-BE": build_belgian_french,
    "de": build_german,
    "it": build_italian,
    "tr": build_turkish,
    "ru": build_russian,
    "pl": build_polish,
    "vi": build_vietnamese,
    "he": build_hebrew,
    "hi": build_hindi,
    "ko": build_korean,
    "zh-Hans": build_simplified_chinese,
    "zh-Hant": build_traditional_chinese,
}

ALIASES: dict[str, str] = {
    "en-GB": "en",
    "zh": "zh-Hans",
    "zh-CN": "zh-Hans",
    "zh-SG": "zh-Hans",
    "zh-TW": "zh-Hant",
    "zh-HK": "zh-Hant",
    "zh-MO": "zh-Hant",
    "iw": "he",
}
