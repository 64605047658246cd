"""random-word CLI - Memorable passwords from random words.

Usage:
    random-word                 # 4 English words joined with "-"
    random-word 5 _             # 5 words joined with "_"
    random-word -s 6            # 6 words plus strength statistics
    random-word -l de 4 .       # German words
"""

import argparse
import logging
import math
import sys
from typing import Optional

from . import all_words, random_word
from . import config as cfg
from .languages import Lang, display_name, from_code

# ANSI color codes
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
GREEN = "\x1b[32m"
CYAN = "\x1b[36m"
MAGENTA = "\x1b[35m"

# (upper bound in bits, rating, color), ascending
STRENGTH_RATINGS = [
    (28.0, "Very Weak", RED),
    (36.0, "Weak", YELLOW),
    (60.0, "Reasonable", BLUE),
    (80.0, "Strong", GREEN),
    (128.0, "Very Strong", CYAN),
]
STRONGEST = ("Extremely Strong", MAGENTA)

RULE = "━" * 47

# Below this a corpus is a sample list, not a full dictionary
PRODUCTION_MIN_WORDS = 100_000


def calculate_entropy(num_words: int, dictionary_size: int) -> float:
    """Bits of entropy of num_words independent uniform picks."""
    return num_words * math.log2(dictionary_size)


def format_combinations(entropy: float) -> str:
    """Format 2 ** entropy in scientific notation, e.g. "~1.05e+12".

    Works from the exponent so that very long passwords do not overflow a
    float.
    """
    exponent10 = entropy * math.log10(2)
    exponent = math.floor(exponent10)
    mantissa = 10 ** (exponent10 - exponent)
    if round(mantissa, 2) >= 10:
        mantissa /= 10
        exponent += 1
    return f"~{mantissa:.2f}e{exponent:+03d}"


def strength_rating(entropy: float) -> tuple[str, str]:
    """Return (rating, color) for an entropy in bits."""
    for bound, rating, color in STRENGTH_RATINGS:
        if entropy < bound:
            return rating, color
    return STRONGEST


def generate_password(num_words: int, separator: str, lang: Lang) -> str:
    """Join num_words random words with separator."""
    return separator.join(random_word(lang) for _ in range(num_words))


def print_stats(
    num_words: int,
    dictionary_size: int,
    entropy: float,
    password_len: int,
    lang: Lang,
) -> None:
    """Print the strength analysis to stderr."""
    combinations = format_combinations(entropy)
    strength, color = strength_rating(entropy)

    def out(line: str = "") -> None:
        print(line, file=sys.stderr)

    out(f"\n{BOLD}{RULE}{RESET}")
    out(f"{BOLD}Password Strength Analysis{RESET}")
    out(f"{BOLD}{RULE}{RESET}")
    out(f"Language:            {BOLD}{display_name(lang)}{RESET}")
    out(f"Words used:          {BOLD}{num_words}{RESET}")
    out(f"Dictionary size:     {BOLD}{dictionary_size:,}{RESET} words")
    out(f"Password length:     {BOLD}{password_len}{RESET} characters")
    out(f"Possible combos:     {BOLD}{combinations}{RESET}")
    out(f"Entropy:             {BOLD}{color}{entropy:.2f} bits{RESET}")
    out(f"Strength rating:     {BOLD}{color}{strength}{RESET}")
    if dictionary_size < PRODUCTION_MIN_WORDS:
        out(
            f"{YELLOW}Note: {display_name(lang)} ships a sample dictionary of "
            f"{dictionary_size:,} words; use more words or build a full word list.{RESET}"
        )
    out(f"{BOLD}{RULE}{RESET}")
    out(f"\n{DIM}For reference:")
    out(f"  • <28 bits:    {RED}Very Weak{DIM} (crackable instantly)")
    out(f"  • 28-36 bits:  {YELLOW}Weak{DIM} (crackable in hours/days)")
    out(f"  • 36-60 bits:  {BLUE}Reasonable{DIM} (crackable in months/years)")
    out(f"  • 60-80 bits:  {GREEN}Strong{DIM} (secure for most purposes)")
    out(f"  • 80-128 bits: {CYAN}Very Strong{DIM} (military grade)")
    out(f"  • >128 bits:   {MAGENTA}Extremely Strong{DIM} (overkill){RESET}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="random-word - Generate a password from random words"
    )
    parser.add_argument(
        "num_words",
        nargs="?",
        default=str(cfg.default_num_words()),
        help=f"Number of words to generate (default: {cfg.default_num_words()})",
    )
    parser.add_argument(
        "separator",
        nargs="?",
        default=cfg.default_separator(),
        help=f"String placed between words (default: {cfg.default_separator()})",
    )
    parser.add_argument(
        "--stats",
        "-s",
        action="store_true",
        help="Show password strength statistics",
    )
    parser.add_argument(
        "--language",
        "-l",
        type=str,
        default=cfg.default_language(),
        help=f"Language code (available: {','.join(lang.value for lang in Lang)})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log corpus loading",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        num_words = int(args.num_words)
    except ValueError:
        print(f"Error: num_words must be an integer, got {args.num_words!r}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if num_words < 1:
        print("Error: num_words must be at least 1", file=sys.stderr)
        return 1

    try:
        lang = from_code(args.language)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    dictionary_size = len(all_words(lang))
    password = generate_password(num_words, args.separator, lang)

    print(password)

    if args.stats:
        entropy = calculate_entropy(num_words, dictionary_size)
        print_stats(num_words, dictionary_size, entropy, len(password), lang)

    return 0


if __name__ == "__main__":
    sys.exit(main())
