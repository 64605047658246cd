"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from random_word.corpus import compress
from random_word.database import WordDatabase


def pytest_addoption(parser):
    parser.addoption(
        "--production-corpus",
        action="store_true",
        default=False,
        help="Require production-size corpora (>= 100,000 words per language)",
    )


@pytest.fixture
def production_corpus(request):
    """Whether production-size corpora are expected."""
    return request.config.getoption("--production-corpus")


@pytest.fixture
def sample_wordlist_content():
    """Sample mixed-script word list."""
    return "apple\nant\nbanana\nbee\nÄpfel\nзвезда\nねこ\n猫\n"


@pytest.fixture
def make_database():
    """Build a WordDatabase over in-memory text.

    The returned database exposes `load_count`, the number of times its
    compressed blob was loaded.
    """

    def factory(text: str, code: str = "xx", buffer_size: int = 16) -> WordDatabase:
        blob = compress(text)
        calls = {"count": 0}

        def loader() -> bytes:
            calls["count"] += 1
            return blob

        db = WordDatabase(code, loader, buffer_size=buffer_size)
        db.load_count = lambda: calls["count"]
        return db

    return factory
