"""
Supported locales and their Transifex names.

SUPPORTED_LOCALES is the static table of every locale pulled from Transifex,
keyed by the code used in downstream repositories. LOCALE_MAP lists only the
locales whose Transifex code differs from that key.
"""

from __future__ import annotations

from typing import Final, TypedDict


class LocaleInfo(TypedDict):
    """Display information for a supported locale."""

    name: str


SOURCE_LOCALE: Final[str] = "en"

SUPPORTED_LOCALES: Final[dict[str, LocaleInfo]] = {
    "ab": {"name": "Аҧсшәа"},
    "af": {"name": "Afrikaans"},
    "ar": {"name": "العربية"},
    "am": {"name": "አማርኛ"},
    "an": {"name": "Aragonés"},
    "ast": {"name": "Asturianu"},
    "az": {"name": "Azeri"},
    "id": {"name": "Bahasa Indonesia"},
    "bn": {"name": "বাংলা"},
    "be": {"name": "Беларуская"},
    "bg": {"name": "Български"},
    "ca": {"name": "Català"},
    "cs": {"name": "Česky"},
    "cy": {"name": "Cymraeg"},
    "da": {"name": "Dansk"},
    "de": {"name": "Deutsch"},
    "et": {"name": "Eesti"},
    "el": {"name": "Ελληνικά"},
    "en": {"name": "English"},
    "es": {"name": "Español (España)"},
    "es-419": {"name": "Español Latinoamericano"},
    "eo": {"name": "Esperanto"},
    "eu": {"name": "Euskara"},
    "fa": {"name": "فارسی"},
    "fil": {"name": "Filipino"},
    "fr": {"name": "Français"},
    "fy": {"name": "Frysk"},
    "ga": {"name": "Gaeilge"},
    "gd": {"name": "Gàidhlig"},
    "gl": {"name": "Galego"},
    "ko": {"name": "한국어"},
    "hy": {"name": "Հայերեն"},
    "he": {"name": "עִבְרִית"},
    "hi": {"name": "हिन्दी"},
    "hr": {"name": "Hrvatski"},
    "xh": {"name": "isiXhosa"},
    "zu": {"name": "isiZulu"},
    "is": {"name": "Íslenska"},
    "it": {"name": "Italiano"},
    "ka": {"name": "ქართული ენა"},
    "kk": {"name": "қазақша"},
    "qu": {"name": "Kichwa"},
    "sw": {"name": "Kiswahili"},
    "ht": {"name": "Kreyòl ayisyen"},
    "ku": {"name": "Kurdî"},
    "ckb": {"name": "کوردیی ناوەندی"},
    "lv": {"name": "Latviešu"},
    "lt": {"name": "Lietuvių"},
    "hu": {"name": "Magyar"},
    "mi": {"name": "Māori"},
    "mn": {"name": "Монгол хэл"},
    "nl": {"name": "Nederlands"},
    "ja": {"name": "日本語"},
    "ja-Hira": {"name": "にほんご"},
    "nb": {"name": "Norsk Bokmål"},
    "nn": {"name": "Norsk Nynorsk"},
    "oc": {"name": "Occitan"},
    "uz": {"name": "Oʻzbekcha"},
    "th": {"name": "ไทย"},
    "km": {"name": "ភាសាខ្មែរ"},
    "pl": {"name": "Polski"},
    "pt": {"name": "Português"},
    "pt-br": {"name": "Português Brasileiro"},
    "ro": {"name": "Română"},
    "ru": {"name": "Русский"},
    "sk": {"name": "Slovenčina"},
    "sl": {"name": "Slovenščina"},
    "sr": {"name": "Српски"},
    "fi": {"name": "Suomi"},
    "sv": {"name": "Svenska"},
    "vi": {"name": "Tiếng Việt"},
    "tr": {"name": "Türkçe"},
    "uk": {"name": "Українська"},
    "zh-cn": {"name": "简体中文"},
    "zh-tw": {"name": "繁體中文"},
}

# Transifex uses underscores and upper-case regions.
LOCALE_MAP: Final[dict[str, str]] = {
    "es-419": "es_419",
    "ja-Hira": "ja_HIRA",
    "pt-br": "pt_BR",
    "zh-cn": "zh_CN",
    "zh-tw": "zh_TW",
}


def transifex_locale(locale: str) -> str:
    """Return the Transifex language code for a supported locale."""
    return LOCALE_MAP.get(locale, locale)


def locale_names() -> dict[str, str]:
    """Map every supported locale to its display name."""
    return {locale: info["name"] for locale, info in SUPPORTED_LOCALES.items()}
