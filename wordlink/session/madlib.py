"""
Mad Libs session: the phase that follows Word Link.

The words collected in Word Link are placed into a story's `[type]` blanks.
Putting a word of the wrong type in a blank, or running out of time on a
blank, costs a heart.
"""

import random
from typing import ClassVar, Dict, List, Optional, Sequence
from pydantic import BaseModel, Field

from ..data import StoryWord, blank_types, fill_story
from .base import HeartSession
from .models import GameConfig, Phase


# Wrong-type choices offered next to the correct word
DISTRACTORS: List[StoryWord] = [
    StoryWord(word=w, type=t) for w, t in [
        ("jump", "verb"), ("beautifully", "adverb"), ("cat", "noun"),
        ("run", "verb"), ("blue", "adjective"), ("quickly", "adverb"),
        ("happy", "adjective"), ("swim", "verb"), ("tree", "noun"),
        ("softly", "adverb"), ("angry", "adjective"), ("climb", "verb"),
        ("rabbit", "noun"), ("fast", "adjective"), ("sing", "verb"),
    ]
]


class Blank(BaseModel):
    """One `[type]` blank in the story."""
    type: str
    word: Optional[str] = None

    @property
    def filled(self) -> bool:
        return self.word is not None


class MadLibSession(HeartSession):
    """
    Manages the Mad Libs phase.

    Attributes:
        story: Story text with `[type]` blanks
        word_set: Words collected in Word Link, tagged with their type
        blanks: One entry per blank, in reading order
    """

    phase: ClassVar[Phase] = "madlib"

    story: str
    word_set: List[StoryWord] = Field(default_factory=list)
    blanks: List[Blank] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        story: str,
        word_set: Sequence[StoryWord],
        config: Optional[GameConfig] = None,
        hearts: Optional[int] = None,
        score: int = 0,
    ) -> "MadLibSession":
        """Factory method to start the phase on a story and its collected words."""
        config = config or GameConfig()
        session = cls(
            story=story,
            word_set=list(word_set),
            blanks=[Blank(type=t) for t in blank_types(story)],
            hearts=config.starting_hearts if hearts is None else hearts,
            score=score,
        )
        if session.hearts == 0:
            session.status = "exhausted"
        return session

    @property
    def all_blanks_filled(self) -> bool:
        return all(b.filled for b in self.blanks)

    def open_blanks(self) -> List[int]:
        return [i for i, b in enumerate(self.blanks) if not b.filled]

    def fill_next_blank(self, word: str, word_type: str) -> bool:
        """
        Fill the first open blank that expects `word_type`.

        Returns:
            True if a blank was filled; False (and a heart lost) if none matches
        """
        if not self.is_active:
            return False

        for blank in self.blanks:
            if not blank.filled and blank.type == word_type:
                blank.word = word
                self._after_fill()
                return True

        self._lose_heart()
        return False

    def choose_word(self, index: int, word: str, word_type: str) -> bool:
        """
        Fill blank `index` with the player's choice.

        A wrong-type choice still fills the blank but costs a heart.

        Returns:
            True if the choice matched the blank's type

        Raises:
            IndexError: If `index` is not a blank
        """
        blank = self.blanks[index]
        if not self.is_active or blank.filled:
            return False

        correct = blank.type == word_type
        blank.word = word

        if self.all_blanks_filled:
            # Finishing the story ends the phase even on a wrong last choice
            if not correct:
                self.hearts = max(0, self.hearts - 1)
            self._after_fill()
        elif not correct:
            self._lose_heart()
        else:
            self._emit("state_changed")
        return correct

    def time_expired(self, index: int) -> None:
        """The choice timer for blank `index` ran out."""
        if not self.is_active or self.blanks[index].filled:
            return
        self._lose_heart()

    def choices_for(self, index: int, rng: Optional[random.Random] = None, distractors: int = 2) -> List[StoryWord]:
        """Choices for blank `index`: an unused collected word of its type plus wrong-type distractors."""
        rng = rng or random.Random()
        blank = self.blanks[index]

        used = [b.word for b in self.blanks if b.filled]
        correct = [w for w in self.word_set if w.type == blank.type and w.word not in used]
        wrong = [w for w in DISTRACTORS if w.type != blank.type]

        choices = correct[:1] + rng.sample(wrong, min(distractors, len(wrong)))
        rng.shuffle(choices)
        return choices

    def _after_fill(self) -> None:
        if self.all_blanks_filled:
            self.status = "solved"
            self._emit("phase_complete")
        else:
            self._emit("state_changed")

    def render(self) -> str:
        """The story with filled words in place."""
        return fill_story(self.story, [b.word for b in self.blanks])

    def get_state(self) -> Dict:
        return {
            "blanks": [b.model_dump() for b in self.blanks],
            "score": self.score,
            "hearts": self.hearts,
            "status": self.status,
        }
