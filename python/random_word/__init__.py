"""random_word - Random words from compressed multi-language dictionaries.

Each language's word list ships gzip-compressed inside the package. It is
decompressed on first use, split into a word table, and indexed by length
and by first character, each step exactly once per process even when many
threads ask at the same time.

Supported languages (when built in):
    German, English, Spanish, French, Japanese, Russian, Chinese

Usage:
    import random_word
    from random_word import Lang

    random_word.random_word(Lang.EN)              # "anchor"
    random_word.all_words(Lang.EN)                # ("able", "about", ...)
    random_word.random_of_length(5, Lang.EN)      # "apple"
    random_word.all_of_length(1000, Lang.EN)      # None
    random_word.random_starting_with("c", Lang.EN)

Only languages whose corpus was built (see random_word.builder) and that are
enabled in config.json have a Lang member.
"""

import random
from typing import Optional

from . import database
from .corpus import CorpusIntegrityError
from .languages import Lang, display_name, from_code

__version__ = "0.5.2"

# OS entropy; never seeded with a fixed value
_rng = random.SystemRandom()


def all_words(lang: Lang) -> tuple[str, ...]:
    """Return all words for a language."""
    return database.words(lang)


def random_word(lang: Lang) -> str:
    """Return one uniformly chosen word for a language.

    Raises:
        CorpusIntegrityError: If the language has no words.
    """
    words = database.words(lang)
    if not words:
        raise CorpusIntegrityError(f"[{lang.value}] word table is empty")
    return _rng.choice(words)


def all_of_length(length: int, lang: Lang) -> Optional[tuple[str, ...]]:
    """Return all words with exactly `length` characters, or None."""
    return database.words_by_length(length, lang)


def random_of_length(length: int, lang: Lang) -> Optional[str]:
    """Return a random word with exactly `length` characters, or None."""
    words = database.words_by_length(length, lang)
    if not words:
        return None
    return _rng.choice(words)


def all_starting_with(char: str, lang: Lang) -> Optional[tuple[str, ...]]:
    """Return all words whose first character is `char`, or None."""
    return database.words_by_start(char, lang)


def random_starting_with(char: str, lang: Lang) -> Optional[str]:
    """Return a random word whose first character is `char`, or None."""
    words = database.words_by_start(char, lang)
    if not words:
        return None
    return _rng.choice(words)


__all__ = [
    "Lang",
    "CorpusIntegrityError",
    "all_words",
    "random_word",
    "all_of_length",
    "random_of_length",
    "all_starting_with",
    "random_starting_with",
    "display_name",
    "from_code",
]
