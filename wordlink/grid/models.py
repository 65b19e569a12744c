"""Data models for word placement."""

from typing import List, Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


Direction = Literal['H', 'V']


class Letter(BaseModel):
    """One letter positioned on the grid."""
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    char: str = Field(..., min_length=1, max_length=1)


class PlacedWord(BaseModel):
    """A word placed on the grid with the coordinates of every letter."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1)
    x: int
    y: int
    direction: Direction
    letters: List[Letter]

    @model_validator(mode='after')
    def _check_letters(self) -> "PlacedWord":
        if len(self.letters) != len(self.word):
            raise ValueError(f"'{self.word}' has {len(self.letters)} letters placed")

        dx, dy = (1, 0) if self.direction == 'H' else (0, 1)
        for i, letter in enumerate(self.letters):
            if letter.char != self.word[i]:
                raise ValueError(f"Letter {i} of '{self.word}' is '{letter.char}'")
            if (letter.x, letter.y) != (self.x + dx * i, self.y + dy * i):
                raise ValueError(f"Letter {i} of '{self.word}' is out of line")
        return self

    @classmethod
    def build(cls, word: str, x: int, y: int, direction: Direction) -> "PlacedWord":
        """Lay `word` out from (x, y) along `direction`."""
        dx, dy = (1, 0) if direction == 'H' else (0, 1)
        letters = [Letter(x=x + dx * i, y=y + dy * i, char=c) for i, c in enumerate(word)]
        return cls(word=word, x=x, y=y, direction=direction, letters=letters)

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def cells(self) -> List[Tuple[int, int]]:
        return [(letter.x, letter.y) for letter in self.letters]

    def shifted(self, dx: int, dy: int) -> "PlacedWord":
        """Return a copy translated by (dx, dy)."""
        return PlacedWord.build(self.word, self.x + dx, self.y + dy, self.direction)
