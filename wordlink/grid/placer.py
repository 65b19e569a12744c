"""
Crossword-style placement of a word list on an integer grid.

Placement is greedy first-fit:
1. The first word goes horizontally at (0, 0)
2. Each later word tries to cross an already placed word on a shared letter,
   scanning placed words in order, then letters left to right
3. Words that cannot cross anything are parked beside the last placed word
4. The result is translated so the smallest x and y are 0
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .models import Direction, PlacedWord


# Gap between a parked word and the word it was parked beside
FALLBACK_SPACING = 3


def _perpendicular(direction: Direction) -> Direction:
    return 'V' if direction == 'H' else 'H'


def _fits(candidate: PlacedWord, cells: Dict[Tuple[int, int], str]) -> bool:
    """Letters may share a cell only when the characters match."""
    for letter in candidate.letters:
        existing = cells.get((letter.x, letter.y))
        if existing is not None and existing != letter.char:
            return False
    return True


def _crossing(
    existing: PlacedWord,
    existing_idx: int,
    word: str,
    word_idx: int
) -> PlacedWord:
    """Build `word` perpendicular to `existing` so word[word_idx] lands on existing[existing_idx]."""
    direction = _perpendicular(existing.direction)
    shared = existing.letters[existing_idx]

    start_x = shared.x - (word_idx if direction == 'H' else 0)
    start_y = shared.y - (word_idx if direction == 'V' else 0)

    return PlacedWord.build(word, start_x, start_y, direction)


def _try_cross(
    word: str,
    placed: List[PlacedWord],
    cells: Dict[Tuple[int, int], str]
) -> Optional[PlacedWord]:
    for existing in placed:
        for i, existing_letter in enumerate(existing.word):
            for j, letter in enumerate(word):
                if letter != existing_letter:
                    continue

                candidate = _crossing(existing, i, word, j)
                if _fits(candidate, cells):
                    return candidate
    return None


def _fallback(
    word: str,
    last: PlacedWord,
    cells: Dict[Tuple[int, int], str]
) -> PlacedWord:
    """Park `word` beside `last`, alternating direction, sliding further out until it fits."""
    direction = _perpendicular(last.direction)
    offset = len(last.word) + FALLBACK_SPACING

    while True:
        start_x = last.x + (offset if direction == 'V' else 0)
        start_y = last.y + (offset if direction == 'H' else 0)
        candidate = PlacedWord.build(word, start_x, start_y, direction)
        if _fits(candidate, cells):
            return candidate
        offset += 1


def normalize(placed: List[PlacedWord]) -> List[PlacedWord]:
    """Translate every word so the minimum x and y across all letters are 0."""
    min_x = min(letter.x for pw in placed for letter in pw.letters)
    min_y = min(letter.y for pw in placed for letter in pw.letters)

    if min_x == 0 and min_y == 0:
        return list(placed)
    return [pw.shifted(-min_x, -min_y) for pw in placed]


def place_words(words: Sequence[str]) -> List[PlacedWord]:
    """
    Lay out `words` crossword-style.

    Deterministic for a given input order. Raises ValueError on an empty list
    or an empty word.
    """
    if not words:
        raise ValueError("Cannot place an empty word list")
    if any(not word for word in words):
        raise ValueError("Cannot place an empty word")

    placed: List[PlacedWord] = [PlacedWord.build(words[0], 0, 0, 'H')]
    cells: Dict[Tuple[int, int], str] = {cell: c for cell, c in zip(placed[0].cells(), words[0])}

    for word in words[1:]:
        new_word = _try_cross(word, placed, cells)
        if new_word is None:
            new_word = _fallback(word, placed[-1], cells)

        placed.append(new_word)
        for letter in new_word.letters:
            cells[(letter.x, letter.y)] = letter.char

    return normalize(placed)
