"""Corpus builder: plain-text word lists -> compressed package data.

Input: one UTF-8 word list per language, one word per line, no blank lines.
A leading byte order mark is ignored.

Output structure:
    python/random_word/data/
    ├── de.gz
    ├── en.gz
    └── ...

Only the selected languages are written; with --prune, blobs of every other
language are removed, so they are left out of the installed package and out
of Lang.

Usage:
    random-word-build --languages de,en,es --prune
    python -m random_word.builder --wordlist-dir wordlists --output-dir out
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from . import config as cfg
from .corpus import BLOB_SUFFIX, blob_name, compress
from .languages import CATALOGUE

logger = logging.getLogger(__name__)

WORDLIST_SUFFIX = ".txt"


@dataclass
class IngestResult:
    """Result of reading one word list."""

    words: list[str]
    source_path: str
    language: str
    total_raw: int = 0          # Total lines in source
    total_duplicates: int = 0   # Repeated words dropped

    @property
    def total_valid(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.language}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes)"
        )


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_words: int = 0
    by_language: dict[str, int] = field(default_factory=dict)
    raw_bytes: dict[str, int] = field(default_factory=dict)
    compressed_bytes: dict[str, int] = field(default_factory=dict)
    files_written: list[str] = field(default_factory=list)
    files_removed: list[str] = field(default_factory=list)


def parse_wordlist(filepath: Path) -> Iterator[tuple[str, int]]:
    """Parse a word list and yield (word, line_number) tuples.

    Only line terminators are stripped; words are otherwise opaque.

    Raises:
        ValueError: On a blank line.
    """
    with open(filepath, "r", encoding="utf-8-sig", newline="") as f:
        for line_num, line in enumerate(f, start=1):
            word = line.rstrip("\r\n")
            if not word:
                raise ValueError(f"{filepath}:{line_num}: blank line")
            yield word, line_num


def read_wordlist(filepath: Path | str, language: Optional[str] = None) -> IngestResult:
    """Read a word list, dropping repeated words.

    Args:
        filepath: Path to the .txt word list.
        language: Language code (default: file stem).

    Returns:
        IngestResult with words in first-seen order.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Word list not found: {filepath}")

    seen: set[str] = set()
    words: list[str] = []
    total_raw = 0
    duplicates = 0

    for word, _ in parse_wordlist(filepath):
        total_raw += 1
        if word in seen:
            duplicates += 1
            continue
        seen.add(word)
        words.append(word)

    return IngestResult(
        words=words,
        source_path=str(filepath.resolve()),
        language=language or filepath.stem,
        total_raw=total_raw,
        total_duplicates=duplicates,
    )


class CorpusBuilder:
    """Writes compressed corpus blobs from ingested word lists."""

    def __init__(self, output_dir: Path | str):
        """Initialize builder.

        Args:
            output_dir: Directory receiving <code>.gz blobs.
        """
        self.output_dir = Path(output_dir)
        self._words: dict[str, list[str]] = {}

    def add(self, result: IngestResult) -> None:
        """Add an ingested word list."""
        if not result.words:
            raise ValueError(f"[{result.language}] word list is empty")
        self._words[result.language] = list(result.words)

    def get_languages(self) -> list[str]:
        """Languages added so far."""
        return sorted(self._words)

    def build(self) -> BuildStats:
        """Compress every added language into the output directory."""
        stats = BuildStats()
        self.output_dir.mkdir(parents=True, exist_ok=True)

        for language in self.get_languages():
            words = self._words[language]
            text = "\n".join(words) + "\n"
            blob = compress(text)

            filepath = self.output_dir / blob_name(language)
            filepath.write_bytes(blob)

            stats.total_words += len(words)
            stats.by_language[language] = len(words)
            stats.raw_bytes[language] = len(text.encode("utf-8"))
            stats.compressed_bytes[language] = len(blob)
            stats.files_written.append(str(filepath))
            logger.info("[%s] wrote %s (%d words)", language, filepath, len(words))

        return stats

    def prune(self, keep: set[str], stats: Optional[BuildStats] = None) -> list[str]:
        """Remove blobs of languages not in `keep`.

        Returns:
            Paths of removed files.
        """
        removed: list[str] = []
        if not self.output_dir.exists():
            return removed
        for filepath in sorted(self.output_dir.glob(f"*{BLOB_SUFFIX}")):
            code = filepath.name[: -len(BLOB_SUFFIX)]
            if code not in keep:
                filepath.unlink()
                removed.append(str(filepath))
                logger.info("[%s] removed %s", code, filepath)
        if stats is not None:
            stats.files_removed.extend(removed)
        return removed


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    project_root = Path(__file__).parent.parent.parent
    known = [info.code for info in CATALOGUE]

    parser = argparse.ArgumentParser(
        description="Build compressed word corpora for random_word"
    )
    parser.add_argument(
        "--languages",
        "-l",
        type=str,
        default=",".join(cfg.default_languages()),
        help=f"Comma-separated language codes (known: {','.join(known)})",
    )
    parser.add_argument(
        "--wordlist-dir",
        "-w",
        type=Path,
        default=project_root / cfg.default_wordlist_dir(),
        help="Directory holding <code>.txt word lists",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=project_root / cfg.default_output_dir(),
        help="Directory receiving <code>.gz corpora",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="Remove corpora of languages not selected",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each file written",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    languages = cfg.parse_languages(args.languages)
    unknown = [code for code in languages if code not in known]
    if unknown:
        print(f"Unknown language(s): {', '.join(unknown)}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("random_word - corpus builder")
    print("=" * 60)
    print(f"Languages: {', '.join(languages)}")
    print(f"Word lists: {args.wordlist_dir}")
    print(f"Output: {args.output_dir}")
    print()

    builder = CorpusBuilder(args.output_dir)

    print("[1/2] Reading word lists...")
    for code in languages:
        print(f"  [{code}] ", end="")
        try:
            result = read_wordlist(args.wordlist_dir / f"{code}{WORDLIST_SUFFIX}", code)
            builder.add(result)
        except (FileNotFoundError, ValueError) as e:
            print(f"ERROR - {e}")
            return 1
        print(f"OK - {result.total_valid:,} words ({result.total_duplicates} dupes)")

    print("\n[2/2] Compressing...")
    stats = builder.build()
    if args.prune:
        builder.prune(set(languages), stats)

    for code in sorted(stats.by_language):
        print(
            f"    {code}: {stats.by_language[code]:,} words, "
            f"{stats.raw_bytes[code]:,} -> {stats.compressed_bytes[code]:,} bytes"
        )
    print(f"  Total words: {stats.total_words:,}")
    print(f"  Files written: {len(stats.files_written)}")
    if stats.files_removed:
        print(f"  Files removed: {len(stats.files_removed)}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
