"""
Tests for crossword placement.

Covers:
- Crossing on shared letters
- Fallback parking for words with no shared letter
- Normalization to a 0-based origin
- Conflict-free output for a range of word lists
"""

import pytest

from wordlink.grid import PlacedWord, build_grid, place_words, render_grid, visualize


WORD_LISTS = [
    ["cat"],
    ["cat", "map"],
    ["cat", "dog"],
    ["cat", "cat"],
    ["pug", "sock", "llama", "pencil", "giraffe"],
    ["zoo", "wow", "eek", "gym", "hop", "pizza", "drum"],
    ["abc", "xyz", "qqq", "jjj", "kkk"],
    ["sloth", "otter", "tortoise", "rooster", "oops", "spin", "stop"],
]


class TestCrossing:
    """Words sharing a letter are crossed perpendicular to each other."""

    def test_cat_map(self):
        """MAP crosses CAT vertically on the shared A."""
        placed = place_words(["cat", "map"])

        assert [pw.word for pw in placed] == ["cat", "map"]
        cat, map_ = placed
        assert cat.direction == 'H'
        assert map_.direction == 'V'
        assert cat.origin == (0, 1)
        assert map_.origin == (1, 0)

    def test_cat_map_render(self):
        placed = place_words(["cat", "map"])
        assert visualize(placed) == ".M.\nCAT\n.P."

    def test_duplicate_word_crosses_itself(self):
        """A repeated word crosses its twin on the first letter."""
        placed = place_words(["cat", "cat"])

        assert placed[1].direction == 'V'
        assert placed[1].origin == (0, 0)
        _, conflicts = build_grid(placed)
        assert conflicts == []

    def test_shared_cell_holds_same_letter(self):
        placed = place_words(["cat", "map"])
        grid, _ = build_grid(placed)
        assert grid[(1, 1)] == 'a'


class TestFallback:
    """Words with no shared letter are parked beside the last word."""

    def test_no_shared_letter(self):
        placed = place_words(["cat", "dog"])

        dog = placed[1]
        assert dog.direction == 'V'
        assert dog.origin == (6, 0)

    def test_fallback_alternates_direction(self):
        """A parked word is perpendicular to the word it is parked beside."""
        placed = place_words(["abc", "xyz", "qqq"])

        assert [pw.direction for pw in placed] == ['H', 'V', 'H']


class TestPlacement:
    """Placement-wide guarantees."""

    def test_single_word(self):
        placed = place_words(["hello"])

        assert len(placed) == 1
        assert placed[0].origin == (0, 0)
        assert placed[0].direction == 'H'

    @pytest.mark.parametrize("words", WORD_LISTS)
    def test_no_conflicts(self, words):
        """Every cell holds a single letter."""
        _, conflicts = build_grid(place_words(words))
        assert conflicts == []

    @pytest.mark.parametrize("words", WORD_LISTS)
    def test_normalized(self, words):
        """Smallest x and y across all letters are 0."""
        placed = place_words(words)

        assert min(x for pw in placed for x, _ in pw.cells()) == 0
        assert min(y for pw in placed for _, y in pw.cells()) == 0

    @pytest.mark.parametrize("words", WORD_LISTS)
    def test_one_entry_per_word_in_order(self, words):
        placed = place_words(words)
        assert [pw.word for pw in placed] == words

    def test_deterministic(self):
        words = ["sloth", "otter", "tortoise", "rooster"]
        assert place_words(words) == place_words(words)

    def test_empty_list_raises(self):
        with pytest.raises(ValueError):
            place_words([])

    def test_empty_word_raises(self):
        with pytest.raises(ValueError):
            place_words(["cat", ""])


class TestPlacedWord:
    """PlacedWord keeps its letters consistent with its origin and direction."""

    def test_build_vertical(self):
        pw = PlacedWord.build("dog", 2, 1, 'V')
        assert pw.cells() == [(2, 1), (2, 2), (2, 3)]

    def test_shifted(self):
        pw = PlacedWord.build("dog", 2, 1, 'H').shifted(-2, -1)
        assert pw.origin == (0, 0)
        assert pw.cells() == [(0, 0), (1, 0), (2, 0)]

    def test_rejects_misaligned_letters(self):
        pw = PlacedWord.build("dog", 0, 0, 'H')
        with pytest.raises(ValueError):
            PlacedWord(word="dog", x=0, y=0, direction='V', letters=pw.letters)

    def test_visualize_rejects_conflicts(self):
        placed = [PlacedWord.build("cat", 0, 0, 'H'), PlacedWord.build("dog", 0, 0, 'V')]
        with pytest.raises(ValueError):
            visualize(placed)


class TestRenderGrid:
    """Text rendering of a cell map."""

    def test_empty(self):
        assert render_grid({}) == ""

    def test_hides_cells_outside_revealed(self):
        grid, _ = build_grid(place_words(["cat", "map"]))
        cat_cells = {(0, 1), (1, 1), (2, 1)}

        assert render_grid(grid, revealed=cat_cells) == ".#.\nCAT\n.#."

    def test_custom_hidden_marker(self):
        grid, _ = build_grid(place_words(["cat"]))
        assert render_grid(grid, revealed=set(), hidden='?') == "???"
