import unittest

from wordchain.data.dictionary import DictionaryIndex
from wordchain.engine.grid import LetterGrid
from wordchain.engine.search import PathSearch, find_words


def _assert_valid_path(test: unittest.TestCase, grid: LetterGrid, path) -> None:
    test.assertEqual(len(set(path.cells)), len(path.cells), "cell repeated")
    test.assertEqual("".join(grid.letter(cell) for cell in path.cells), path.word)
    for (r1, c1), (r2, c2) in zip(path.cells, path.cells[1:]):
        test.assertEqual(max(abs(r1 - r2), abs(c1 - c2)), 1, "cells not adjacent")


class PathSearchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid.from_rows(["ca", "ts"])
        self.dictionary = DictionaryIndex.from_words(["cat", "cats", "act"])

    def test_finds_words_of_requested_length(self) -> None:
        paths = find_words(self.dictionary, self.grid, 3)
        self.assertEqual({p.word for p in paths}, {"cat", "act"})
        for path in paths:
            _assert_valid_path(self, self.grid, path)

    def test_longer_word_uses_whole_board(self) -> None:
        paths = find_words(self.dictionary, self.grid, 4)
        self.assertEqual([p.word for p in paths], ["cats"])
        self.assertEqual(paths[0].cells, ((0, 0), (0, 1), (1, 0), (1, 1)))

    def test_starts_restrict_first_cell(self) -> None:
        paths = find_words(self.dictionary, self.grid, 3, starts=[1])
        self.assertEqual({p.word for p in paths}, {"act"})
        self.assertTrue(all(p.cells[0] == (0, 1) for p in paths))

    def test_empty_start_range_finds_nothing(self) -> None:
        self.assertEqual(find_words(self.dictionary, self.grid, 3, starts=range(0)), [])

    def test_no_viable_prefix_finds_nothing(self) -> None:
        dictionary = DictionaryIndex.from_words(["zzz"])
        self.assertEqual(find_words(dictionary, self.grid, 3), [])

    def test_does_not_extend_past_target_length(self) -> None:
        dictionary = DictionaryIndex.from_words(["ca", "cat"])
        paths = find_words(dictionary, self.grid, 2)
        self.assertEqual([p.word for p in paths], ["ca"])

    def test_no_cell_reuse(self) -> None:
        grid = LetterGrid.from_rows(["ab", "cd"])
        dictionary = DictionaryIndex.from_words(["aba", "ab"])
        self.assertEqual(find_words(dictionary, grid, 3), [])

    def test_empty_cells_are_never_traced(self) -> None:
        grid = LetterGrid.from_rows(["ab", "cd"]).apply_word([(1, 0)])
        # Column 0 settles to ["-", "a"].
        self.assertEqual(grid.rows(), ["-b", "ad"])
        dictionary = DictionaryIndex.from_words(["abd", "bad", "cab"])
        self.assertEqual({p.word for p in find_words(dictionary, grid, 3)}, {"abd", "bad"})

    def test_duplicate_words_from_distinct_paths(self) -> None:
        grid = LetterGrid.from_rows(["aa", "aa"])
        dictionary = DictionaryIndex.from_words(["aa"])
        paths = find_words(dictionary, grid, 2)
        self.assertEqual(len(paths), 12)
        self.assertEqual({p.word for p in paths}, {"aa"})

    def test_run_is_lazy_and_can_be_abandoned(self) -> None:
        search = PathSearch(self.dictionary, self.grid, 3)
        iterator = iter(search)
        first = next(iterator)
        self.assertIn(first.word, {"cat", "act"})
        iterator.close()
        self.assertEqual(len(list(search.run())), 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
