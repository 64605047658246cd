"""Tests for the public query functions."""

import threading
from collections import Counter

import pytest

import random_word
from random_word import Lang, CorpusIntegrityError

LANGS = list(Lang)
ITERATIONS = 1000


def lang_ids(lang):
    return lang.value


def hamming_distance(a: str, b: str) -> int:
    """Character mismatches plus the length difference."""
    diff = sum(1 for c1, c2 in zip(a, b) if c1 != c2)
    return diff + abs(len(a) - len(b))


def most_common_length(lang):
    return Counter(len(w) for w in random_word.all_words(lang)).most_common(1)[0][0]


class TestEnglishScenario:
    """Known English entries."""

    def test_apple_by_start(self):
        """Test "apple" is among words starting with "a"."""
        assert "apple" in random_word.all_starting_with("a", Lang.EN)

    def test_apple_by_length(self):
        """Test "apple" is among 5-character words."""
        assert "apple" in random_word.all_of_length(5, Lang.EN)

    def test_case_sensitive_start(self):
        """Test English corpus has no capitalized first letters."""
        assert random_word.all_starting_with("A", Lang.EN) is None


@pytest.mark.parametrize("lang", LANGS, ids=lang_ids)
class TestQueries:
    """Query behavior for every built language."""

    def test_all_words_stable(self, lang):
        """Test repeated calls return the same table."""
        first = random_word.all_words(lang)
        assert first
        assert random_word.all_words(lang) == first
        assert len(random_word.all_words(lang)) == len(first)

    def test_random_word_in_table(self, lang):
        """Test random words come from the table."""
        table = set(random_word.all_words(lang))
        for _ in range(50):
            word = random_word.random_word(lang)
            assert word
            assert word in table

    def test_length_absent(self, lang):
        """Test an absurd length has no words."""
        assert random_word.all_of_length(1000, lang) is None
        assert random_word.random_of_length(1000, lang) is None

    def test_length_present(self, lang):
        """Test the most common length has words."""
        length = most_common_length(lang)
        bucket = random_word.all_of_length(length, lang)
        assert bucket
        word = random_word.random_of_length(length, lang)
        assert word in bucket
        assert len(word) == length

    def test_start_absent(self, lang):
        """Test a character never used first has no words."""
        assert random_word.all_starting_with("\x00", lang) is None
        assert random_word.random_starting_with("\x00", lang) is None

    def test_start_present(self, lang):
        """Test the first character of the first word has words."""
        first = random_word.all_words(lang)[0][0]
        bucket = random_word.all_starting_with(first, lang)
        assert bucket
        word = random_word.random_starting_with(first, lang)
        assert word in bucket
        assert word[0] == first


@pytest.mark.parametrize("lang", LANGS, ids=lang_ids)
class TestRandomness:
    """Statistical checks on random_word()."""

    def test_no_pathological_repetition(self, lang):
        """Test variety and no long runs of the same word."""
        table = random_word.all_words(lang)
        draws = ITERATIONS // 3
        seen = set()
        consecutive = 0
        max_consecutive = 0
        last = ""

        for _ in range(draws):
            word = random_word.random_word(lang)
            seen.add(word)
            if word == last:
                consecutive += 1
                max_consecutive = max(max_consecutive, consecutive)
            else:
                consecutive = 0
            last = word

        assert len(seen) > min(draws, len(table)) // 2
        assert max_consecutive < 3

    def test_chi_squared_uniformity(self, lang):
        """Test draw frequencies fit a uniform distribution."""
        table = random_word.all_words(lang)
        sample_size = max(5000, 5 * len(table))
        counts = Counter(random_word.random_word(lang) for _ in range(sample_size))

        expected = sample_size / len(table)
        chi_squared = sum(
            (counts.get(word, 0) - expected) ** 2 / expected for word in table
        )
        chi_squared_per_word = chi_squared / len(table)

        # Mean 1, standard deviation sqrt(2 / n) for uniform draws
        assert chi_squared_per_word < 2.0

    def test_coverage(self, lang):
        """Test sampling reaches nearly every word."""
        table = random_word.all_words(lang)
        sample_size = max(5000, 5 * len(table))
        seen = {random_word.random_word(lang) for _ in range(sample_size)}

        # Expected coverage is 1 - e^-5 (about 99.3%) or better
        assert len(seen) / len(set(table)) > 0.9

    def test_hamming_distance_distribution(self, lang):
        """Test consecutive words differ meaningfully."""
        last = random_word.random_word(lang)
        distances = []

        for _ in range(ITERATIONS):
            current = random_word.random_word(lang)
            if current != last:
                distances.append(hamming_distance(last, current))
            last = current

        assert distances
        assert min(distances) > 0
        average = sum(distances) / len(distances)
        if average > 2.0:
            assert max(distances) >= 3


class TestFacadeEdgeCases:
    """Facade behavior on unusual databases."""

    def test_empty_table_is_fatal(self, monkeypatch):
        """Test random_word() refuses an empty table."""
        monkeypatch.setattr(random_word.database, "words", lambda lang: ())
        with pytest.raises(CorpusIntegrityError):
            random_word.random_word(Lang.EN)

    def test_empty_bucket_is_absent(self, monkeypatch):
        """Test an empty bucket is treated like a missing one."""
        monkeypatch.setattr(random_word.database, "words_by_length", lambda n, lang: ())
        monkeypatch.setattr(random_word.database, "words_by_start", lambda c, lang: ())
        assert random_word.random_of_length(5, Lang.EN) is None
        assert random_word.random_starting_with("a", Lang.EN) is None

    def test_single_character_argument(self):
        """Test multi-character starts are rejected."""
        with pytest.raises(ValueError):
            random_word.all_starting_with("ap", Lang.EN)

    def test_concurrent_random(self):
        """Test random draws from many threads all come from the table."""
        table = set(random_word.all_words(Lang.EN))
        results = []
        lock = threading.Lock()

        def worker():
            picked = [random_word.random_word(Lang.EN) for _ in range(100)]
            with lock:
                results.extend(picked)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 800
        assert set(results) <= table
