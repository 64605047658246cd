"""Per-language word databases.

One WordDatabase per built language holds four lazy cells:

    text       decompressed corpus          (corpus blob -> str)
    words      word table                   (text -> tuple of words)
    by_length  length index                 (words -> {len: bucket})
    by_start   first-character index        (words -> {char: bucket})

Each cell pulls the one below it on first use, so asking for an index
decompresses and splits the corpus only if nothing has done so yet. Buckets
keep word table order. Everything handed out is an immutable tuple.

Usage:
    from random_word.database import words, words_by_length
    from random_word import Lang

    table = words(Lang.EN)
    fives = words_by_length(5, Lang.EN)
"""

import logging
from typing import Callable, Optional

from . import config as cfg
from .corpus import CorpusIntegrityError, compressed_bytes, decompress
from .languages import Lang
from .lazy import Lazy

logger = logging.getLogger(__name__)

Words = tuple[str, ...]


def split_lines(text: str) -> Words:
    """Split corpus text into words, one per line.

    A trailing "\\r" is dropped from each line and the empty segment after
    the final newline is discarded.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


def index_by_length(words: Words) -> dict[int, Words]:
    """Group words by character count (code points, not bytes)."""
    buckets: dict[int, list[str]] = {}
    for word in words:
        buckets.setdefault(len(word), []).append(word)
    return {length: tuple(bucket) for length, bucket in buckets.items()}


def index_by_start(words: Words) -> dict[str, Words]:
    """Group words by their first character.

    Raises:
        CorpusIntegrityError: If a word is empty.
    """
    buckets: dict[str, list[str]] = {}
    for position, word in enumerate(words):
        if not word:
            raise CorpusIntegrityError(f"Empty word at line {position + 1}")
        buckets.setdefault(word[0], []).append(word)
    return {first: tuple(bucket) for first, bucket in buckets.items()}


class WordDatabase:
    """Lazily built word table and indexes for one language."""

    def __init__(
        self,
        code: str,
        loader: Callable[[], bytes],
        buffer_size: Optional[int] = None,
    ):
        """Initialize database.

        Args:
            code: Language code, used in log records and errors.
            loader: Returns the compressed corpus blob.
            buffer_size: Decompression read size (default from config).
        """
        self.code = code
        self.buffer_size = buffer_size or cfg.default_buffer_size()
        self._loader = loader
        self._text: Lazy[str] = Lazy(self._init_text)
        self._words: Lazy[Words] = Lazy(self._init_words)
        self._by_length: Lazy[dict[int, Words]] = Lazy(self._init_by_length)
        self._by_start: Lazy[dict[str, Words]] = Lazy(self._init_by_start)

    def _init_text(self) -> str:
        blob = self._loader()
        try:
            text = decompress(blob, self.buffer_size)
        except CorpusIntegrityError as e:
            raise CorpusIntegrityError(f"[{self.code}] {e}") from e
        logger.debug(
            "[%s] decompressed corpus: %d -> %d bytes",
            self.code, len(blob), len(text.encode("utf-8")),
        )
        return text

    def _init_words(self) -> Words:
        words = split_lines(self._text.get())
        logger.debug("[%s] word table: %d words", self.code, len(words))
        return words

    def _init_by_length(self) -> dict[int, Words]:
        index = index_by_length(self._words.get())
        logger.debug("[%s] length index: %d buckets", self.code, len(index))
        return index

    def _init_by_start(self) -> dict[str, Words]:
        try:
            index = index_by_start(self._words.get())
        except CorpusIntegrityError as e:
            raise CorpusIntegrityError(f"[{self.code}] {e}") from e
        logger.debug("[%s] start index: %d buckets", self.code, len(index))
        return index

    def text(self) -> str:
        """Decompressed corpus text."""
        return self._text.get()

    def words(self) -> Words:
        """All words, in corpus order."""
        return self._words.get()

    def with_length(self, length: int) -> Optional[Words]:
        """Words of exactly `length` characters, or None if there are none."""
        return self._by_length.get().get(length)

    def starting_with(self, char: str) -> Optional[Words]:
        """Words whose first character is `char`, or None if there are none.

        Matching is exact: no case folding or accent stripping.

        Raises:
            ValueError: If `char` is not a single character.
        """
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        return self._by_start.get().get(char)

    def lengths(self) -> list[int]:
        """Word lengths present in the corpus, ascending."""
        return sorted(self._by_length.get())

    def first_chars(self) -> list[str]:
        """First characters present in the corpus, sorted."""
        return sorted(self._by_start.get())

    def __repr__(self) -> str:
        return (
            f"WordDatabase({self.code}: text={self._text!r}, "
            f"words={self._words!r})"
        )


def _shipped_loader(code: str) -> Callable[[], bytes]:
    return lambda: compressed_bytes(code)


_DATABASES: dict[Lang, WordDatabase] = {
    lang: WordDatabase(lang.value, _shipped_loader(lang.value)) for lang in Lang
}


def database(lang: Lang) -> WordDatabase:
    """The database for a built language."""
    return _DATABASES[lang]


def decompressed_text(lang: Lang) -> str:
    """Decompressed corpus text for a language."""
    return _DATABASES[lang].text()


def words(lang: Lang) -> Words:
    """All words for a language."""
    return _DATABASES[lang].words()


def words_by_length(length: int, lang: Lang) -> Optional[Words]:
    """Words of a given character length, or None."""
    return _DATABASES[lang].with_length(length)


def words_by_start(char: str, lang: Lang) -> Optional[Words]:
    """Words starting with a given character, or None."""
    return _DATABASES[lang].starting_with(char)
