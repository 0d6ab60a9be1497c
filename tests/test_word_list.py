"""Tests for loading candidate root words."""

import pytest

from wordscramble.errors import WordListMissing
from wordscramble.word_list import WordListProvider, clear_cache, default_words_file


class TestWordListProvider:
    """Test cases for WordListProvider."""

    def setup_method(self):
        """Setup for each test."""
        clear_cache()

    def test_bundled_list(self):
        """Test that the bundled start.txt loads."""
        words = WordListProvider().load()
        assert len(words) > 100
        assert all(words)
        assert all(w == w.strip().lower() for w in words)

    def test_default_path(self):
        assert WordListProvider().path == default_words_file()
        assert default_words_file().name == "start.txt"

    def test_custom_file(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("Silkworm\n  treasure \n\nmountain\n", encoding="utf-8")

        words = WordListProvider(path).load()
        assert words == ["silkworm", "treasure", "mountain"]

    def test_trailing_newline_has_no_empty_word(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("storrer\n", encoding="utf-8")
        assert WordListProvider(path).load() == ["storrer"]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.txt"
        with pytest.raises(WordListMissing) as exc_info:
            WordListProvider(path).load()
        assert exc_info.value.path == path

    def test_invalid_utf8(self, tmp_path):
        """Test that undecodable bytes raise WordListMissing."""
        path = tmp_path / "start.txt"
        path.write_bytes(b"storrer\n\xff\xfe\n")
        with pytest.raises(WordListMissing) as exc_info:
            WordListProvider(path).load()
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_directory_path(self, tmp_path):
        with pytest.raises(WordListMissing) as exc_info:
            WordListProvider(tmp_path).load()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("\n\n   \n", encoding="utf-8")
        with pytest.raises(WordListMissing):
            WordListProvider(path).load()

    def test_cached_per_path(self, tmp_path):
        """Test that a file is read once and then served from cache."""
        path = tmp_path / "start.txt"
        path.write_text("silkworm\n", encoding="utf-8")
        first = WordListProvider(path).load()

        path.write_text("treasure\n", encoding="utf-8")
        assert WordListProvider(path).load() == first

        clear_cache()
        assert WordListProvider(path).load() == ["treasure"]
