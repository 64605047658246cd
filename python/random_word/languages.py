"""Language catalogue and the Lang enumeration.

CATALOGUE lists every language the project knows how to ship. Lang only has
members for languages whose corpus blob was built into the package. The set
is fixed when the package is built and does not read config.json. Code
referring to a language left out of the build fails where it is written
(Lang.JA -> AttributeError) instead of at lookup time.
"""

from dataclasses import dataclass
from enum import Enum

from .corpus import available_codes


@dataclass(frozen=True)
class LanguageInfo:
    """One catalogue entry."""

    code: str       # ISO 639-1, also the blob name
    member: str     # Lang member name
    name: str       # English display name


CATALOGUE: tuple[LanguageInfo, ...] = (
    LanguageInfo("de", "DE", "German"),
    LanguageInfo("en", "EN", "English"),
    LanguageInfo("es", "ES", "Spanish"),
    LanguageInfo("fr", "FR", "French"),
    LanguageInfo("ja", "JA", "Japanese"),
    LanguageInfo("ru", "RU", "Russian"),
    LanguageInfo("zh", "ZH", "Chinese"),
)

_BY_CODE: dict[str, LanguageInfo] = {info.code: info for info in CATALOGUE}


def enabled_codes() -> list[str]:
    """Catalogue codes with a shipped corpus blob, in catalogue order."""
    shipped = set(available_codes())
    return [info.code for info in CATALOGUE if info.code in shipped]


Lang = Enum(
    "Lang",
    [(_BY_CODE[code].member, code) for code in enabled_codes()],
    module=__name__,
)
Lang.__doc__ = "ISO 639-1 language codes of the corpora built into this install."


def display_name(lang: Lang) -> str:
    """English name of a language, e.g. Lang.DE -> "German"."""
    return _BY_CODE[lang.value].name


def from_code(code: str) -> Lang:
    """Look up a Lang member by its ISO 639-1 code.

    Raises:
        ValueError: If the code is unknown or its corpus is not built in.
    """
    if code not in _BY_CODE:
        raise ValueError(
            f"Unknown language: {code}. Available: {[lang.value for lang in Lang]}"
        )
    try:
        return Lang(code)
    except ValueError:
        raise ValueError(
            f"Language not built into this install: {code}. "
            f"Available: {[lang.value for lang in Lang]}"
        ) from None
