"""Tests for the dictionary oracles."""

from unittest.mock import patch

import pytest

from wordscramble.config import GameConfig
from wordscramble.dictionary import (
    WordfreqDictionary,
    WordListDictionary,
    build_dictionary,
)
from wordscramble.errors import ConfigError
from wordscramble.game_engine import GameEngine, Session


class TestWordListDictionary:
    """Test cases for the word list dictionary."""

    def setup_method(self):
        """Setup for each test."""
        self.dictionary = WordListDictionary(["Rots", " rose ", "", "store"])

    def test_known_words(self):
        assert self.dictionary.is_valid("rots")
        assert self.dictionary.is_valid("ROSE", "en")

    def test_unknown_word(self):
        assert not self.dictionary.is_valid("xyz")

    def test_other_language(self):
        """Test that words are only valid for the dictionary's language."""
        assert not self.dictionary.is_valid("rots", "fr")

    def test_blank_lines_skipped(self):
        assert len(self.dictionary) == 3
        assert not self.dictionary.is_valid("")

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("rots\nrose\n\nstore\n", encoding="utf-8")

        dictionary = WordListDictionary.from_file(path)
        assert len(dictionary) == 3
        assert dictionary.is_valid("store")

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            WordListDictionary.from_file(tmp_path / "missing.txt")

    def test_decomposed_file_matches_composed_word(self, tmp_path):
        """Test that a dictionary saved in NFD still accepts accented words."""
        path = tmp_path / "words.txt"
        path.write_bytes(b"me\xcc\x80re\n")

        dictionary = WordListDictionary.from_file(path, language="fr")
        assert dictionary.is_valid("m\u00e8re", "fr")
        assert dictionary.is_valid("Me\u0300re", "fr")

    def test_decomposed_file_in_game(self, tmp_path):
        """Test that an accented word from an NFD dictionary is accepted."""
        path = tmp_path / "words.txt"
        path.write_bytes(b"me\xcc\x80re\n")
        dictionary = WordListDictionary.from_file(path, language="fr")

        result = GameEngine.submit_word("m\u00e8re", Session(root_word="cr\u00e8me"), dictionary, "fr")
        assert result.accepted
        assert result.points == 8

    def test_invalid_utf8_file(self, tmp_path):
        """Test that undecodable bytes are reported instead of dropped."""
        path = tmp_path / "words.txt"
        path.write_bytes(b"rots\n\xff\xfe\n")
        with pytest.raises(ConfigError):
            WordListDictionary.from_file(path)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ConfigError):
            WordListDictionary.from_file(tmp_path)


class TestWordfreqDictionary:
    """Test cases for the wordfreq dictionary."""

    def setup_method(self):
        """Setup for each test."""
        self.dictionary = WordfreqDictionary(min_zipf=1.5)

    def test_frequent_word_is_valid(self):
        with patch("wordscramble.dictionary.zipf_frequency", return_value=3.2) as mock_zipf:
            assert self.dictionary.is_valid("rots", "en")
        mock_zipf.assert_called_once_with("rots", "en")

    def test_rare_word_is_invalid(self):
        with patch("wordscramble.dictionary.zipf_frequency", return_value=0.0):
            assert not self.dictionary.is_valid("xyzzyq", "en")

    def test_threshold_is_inclusive(self):
        with patch("wordscramble.dictionary.zipf_frequency", return_value=1.5):
            assert self.dictionary.is_valid("rose", "en")

    def test_unsupported_language(self):
        with patch("wordscramble.dictionary.zipf_frequency") as mock_zipf:
            assert not self.dictionary.is_valid("rots", "not-a-language")
        mock_zipf.assert_not_called()

    def test_real_data(self):
        """Test against wordfreq's bundled English data."""
        assert self.dictionary.is_valid("house", "en")
        assert not self.dictionary.is_valid("qzxvbnmw", "en")


class TestBuildDictionary:
    """Test cases for picking a dictionary backend."""

    def test_wordfreq_backend(self):
        dictionary = build_dictionary(GameConfig(dictionary="wordfreq", min_zipf=2.5))
        assert isinstance(dictionary, WordfreqDictionary)
        assert dictionary.min_zipf == 2.5

    def test_wordlist_backend(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("rots\n", encoding="utf-8")

        dictionary = build_dictionary(
            GameConfig(dictionary="wordlist", dictionary_file=str(path), language="en")
        )
        assert isinstance(dictionary, WordListDictionary)
        assert dictionary.is_valid("rots", "en")

    def test_wordlist_backend_needs_file(self):
        with pytest.raises(ConfigError):
            build_dictionary(GameConfig(dictionary="wordlist"))

    def test_unknown_backend(self):
        with pytest.raises(ConfigError):
            build_dictionary(GameConfig(dictionary="spellcheck"))
