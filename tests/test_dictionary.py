import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

from wordchain.core.exceptions import DictionaryLoadError
from wordchain.data.dictionary import DictionaryConfig, DictionaryIndex
from wordchain.data.normalization import clean_word, is_letter


class NormalizationTests(unittest.TestCase):
    def test_clean_word_strips_and_lowercases(self) -> None:
        self.assertEqual(clean_word("  Cat\r\n"), "cat")
        self.assertEqual(clean_word(""), "")

    def test_is_letter_accepts_single_letters_only(self) -> None:
        self.assertTrue(is_letter("a"))
        self.assertTrue(is_letter("Q"))
        self.assertFalse(is_letter("ab"))
        self.assertFalse(is_letter("1"))
        self.assertFalse(is_letter("-"))
        self.assertFalse(is_letter(""))


class DictionaryIndexTests(unittest.TestCase):
    def test_words_and_prefixes_are_indexed(self) -> None:
        index = DictionaryIndex.from_words(["cat", "cats", "act"])
        self.assertTrue(index.contains("cat"))
        self.assertTrue(index.contains("cats"))
        self.assertFalse(index.contains("ca"))
        for prefix in ("c", "ca", "cat", "cats", "a", "ac", "act"):
            self.assertTrue(index.is_viable_prefix(prefix), prefix)
        self.assertFalse(index.is_viable_prefix("catz"))
        self.assertFalse(index.is_viable_prefix("t"))
        self.assertEqual(len(index), 3)
        self.assertIn("act", index)

    def test_build_from_file_folds_case_and_skips_blanks(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words.txt"
            sample.write_text("Cat\n\n  DOG  \r\nsun\n", encoding="utf-8")

            index = DictionaryIndex.build(sample)
            self.assertEqual(len(index), 3)
            self.assertTrue(index.contains("cat"))
            self.assertTrue(index.contains("dog"))
            self.assertFalse(index.contains("Cat"))
            self.assertEqual(index.max_length, 3)

    def test_build_from_string_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words.txt"
            sample.write_text("alpha\n", encoding="utf-8")
            index = DictionaryIndex.build(str(sample))
            self.assertTrue(index.contains("alpha"))

    def test_build_from_stream(self) -> None:
        index = DictionaryIndex.build(io.StringIO("ab\ncd\n"))
        self.assertTrue(index.contains("ab"))
        self.assertTrue(index.is_viable_prefix("c"))

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.build(Path(tmpdir) / "absent.txt")

    def test_directory_source_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.build(tmpdir)

    def test_undecodable_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "broken.txt"
            sample.write_bytes(b"\xff\xfe\xfa\n")
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.from_config(DictionaryConfig(source=sample, encoding="utf-8"))

    def test_has_length(self) -> None:
        index = DictionaryIndex.from_words(["ab", "abcd"])
        self.assertTrue(index.has_length(2))
        self.assertTrue(index.has_length(4))
        self.assertFalse(index.has_length(3))
        self.assertFalse(index.has_length(9))

    def test_empty_index(self) -> None:
        index = DictionaryIndex.from_words([])
        self.assertEqual(len(index), 0)
        self.assertEqual(index.max_length, 0)
        self.assertFalse(index.is_viable_prefix("a"))


class RemoteDictionaryTests(unittest.TestCase):
    def test_url_source_is_downloaded(self) -> None:
        response = MagicMock()
        response.text = "Cat\ndog\n"
        with patch("wordchain.io.remote.requests.get", return_value=response) as fake_get:
            index = DictionaryIndex.build("https://example.com/words.txt", timeout_seconds=5.0)
        fake_get.assert_called_once_with("https://example.com/words.txt", timeout=5.0)
        response.raise_for_status.assert_called_once_with()
        self.assertTrue(index.contains("cat"))
        self.assertTrue(index.contains("dog"))

    def test_download_failure_raises_load_error(self) -> None:
        with patch(
            "wordchain.io.remote.requests.get",
            side_effect=requests.ConnectionError("offline"),
        ):
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.build("http://example.com/words.txt")

    def test_http_error_status_raises_load_error(self) -> None:
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        with patch("wordchain.io.remote.requests.get", return_value=response):
            with self.assertRaises(DictionaryLoadError):
                DictionaryIndex.build("http://example.com/missing.txt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
