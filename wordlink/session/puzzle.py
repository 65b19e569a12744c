"""
Word Link puzzle session.

The player rebuilds each target word from shuffled letter tiles. The first
letter of every word is shown; hints reveal more. Guesses are scored:

- exact target word: +100 and move to the next word
- any other valid English word: +10, tiles reshuffled
- anything else: lose a heart
"""

import random
from typing import ClassVar, Dict, List, Optional, Sequence, Set
from pydantic import Field

from ..grid import PlacedWord, place_words
from ..validation import WordValidator
from .base import HeartSession
from .models import GameConfig, GuessOutcome, GuessResult, HintResult, Phase


class PuzzleSession(HeartSession):
    """
    Manages the Word Link phase for one set of words.

    Attributes:
        words: Words to solve, shortest first
        layout: Crossword placement of `words`
        current_index: Index of the word being guessed
        current_guess: Letters the player has drawn into open slots
        used_hints: Hints used on the current word
        hinted_positions: Positions revealed by hints on the current word
        tile_pool: Letters still available to draw
        submitting: True while a guess is being validated
        seed: Optional random seed for reproducible shuffles and hints
    """

    phase: ClassVar[Phase] = "wordlink"

    words: List[str]
    layout: List[PlacedWord] = Field(default_factory=list)
    word_validator: WordValidator = Field(exclude=True)
    config: GameConfig = Field(default_factory=GameConfig)
    current_index: int = 0
    current_guess: List[str] = Field(default_factory=list)
    used_hints: int = 0
    hinted_positions: Set[int] = Field(default_factory=set)
    tile_pool: List[str] = Field(default_factory=list)
    submitting: bool = False
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(
        cls,
        words: Sequence[str],
        validator: WordValidator,
        config: Optional[GameConfig] = None,
        hearts: Optional[int] = None,
        score: int = 0,
        seed: Optional[int] = None,
    ) -> "PuzzleSession":
        """
        Factory method to start a session on a finalized word set.

        Args:
            words: Words to solve (any order; sorted by length here)
            validator: Validator consulted for non-target guesses
            config: Game configuration (defaults used if omitted)
            hearts: Starting hearts (defaults to config.starting_hearts)
            score: Starting score, e.g. when resuming
            seed: Random seed (defaults to config.seed)

        Raises:
            ValueError: If `words` is empty
        """
        if not words:
            raise ValueError("A Word Link session needs at least one word")

        config = config or GameConfig()
        ordered = sorted((w.lower() for w in words), key=len)

        session = cls(
            words=ordered,
            layout=place_words(ordered),
            word_validator=validator,
            config=config,
            hearts=config.starting_hearts if hearts is None else hearts,
            score=score,
            seed=config.seed if seed is None else seed,
        )
        if session.hearts == 0:
            session.status = "exhausted"
        session.start_word()
        return session

    @property
    def target_word(self) -> Optional[str]:
        """The word being guessed, or None once every word is solved."""
        if self.current_index < len(self.words):
            return self.words[self.current_index]
        return None

    @property
    def hints_remaining(self) -> int:
        return max(0, self.config.max_hints_per_word - self.used_hints)

    @property
    def open_slots(self) -> List[int]:
        """Positions the player fills from the tile pool."""
        if self.target_word is None:
            return []
        return [p for p in range(1, len(self.target_word)) if p not in self.hinted_positions]

    @property
    def visible_guess(self) -> str:
        """The guess as shown: first letter, hinted letters and drawn tiles."""
        word = self.target_word
        if word is None:
            return ""

        slots = [""] * len(word)
        slots[0] = word[0]
        for p in self.hinted_positions:
            slots[p] = word[p]

        drawn = iter(self.current_guess)
        for p in self.open_slots:
            slots[p] = next(drawn, "")

        return "".join(slots)

    def start_word(self) -> None:
        """Set up the current word: clear the guess and hints, shuffle its tiles."""
        self.current_guess = []
        self.used_hints = 0
        self.hinted_positions = set()

        word = self.target_word
        self.tile_pool = list(word[1:]) if word else []
        self._rng.shuffle(self.tile_pool)

    def draw_tile(self, letter: str) -> bool:
        """
        Move one `letter` tile from the pool into the next open slot.

        Returns:
            True if the tile was drawn, False if unavailable or slots are full
        """
        if not self.is_active:
            return False

        letter = letter.lower()
        if letter not in self.tile_pool or len(self.current_guess) >= len(self.open_slots):
            return False

        self.tile_pool.remove(letter)
        self.current_guess.append(letter)
        self._emit("state_changed")
        return True

    def refresh(self) -> None:
        """Return drawn tiles to the pool and reshuffle. Hinted letters stay."""
        if not self.is_active:
            return

        self.tile_pool.extend(self.current_guess)
        self.current_guess = []
        self._rng.shuffle(self.tile_pool)
        self._emit("state_changed")

    def request_hint(self) -> HintResult:
        """
        Reveal one random unrevealed letter of the current word.

        Returns a HintResult with a `reason` instead of revealing when the
        session is inactive, hints are used up, or every letter is shown.
        """
        if not self.is_active:
            return HintResult(reason="inactive")

        if self.hints_remaining <= 0:
            return HintResult(hints_remaining=0, reason="no_hints_left")

        word = self.target_word
        candidates = [p for p in range(1, len(word)) if p not in self.hinted_positions]
        if not candidates:
            return HintResult(hints_remaining=self.hints_remaining, reason="all_revealed")

        position = self._rng.choice(candidates)
        letter = word[position]

        self.hinted_positions.add(position)
        self.used_hints += 1

        # The revealed letter is either still in the pool or already drawn
        if letter in self.tile_pool:
            self.tile_pool.remove(letter)
        elif letter in self.current_guess:
            self.current_guess.remove(letter)

        self._emit("state_changed")
        return HintResult(position=position, letter=letter, hints_remaining=self.hints_remaining)

    def submit_guess(self, guess: Optional[str] = None) -> GuessResult:
        """
        Score a guess against the current word.

        Args:
            guess: Word to submit (defaults to the visible guess)

        Returns:
            GuessResult; outcome `busy` if a validation is already in flight,
            `ignored` if the session is not accepting guesses
        """
        if self.submitting:
            return self._result("busy", guess or "")

        if not self.is_active:
            return self._result("ignored", guess or "")

        guess = (self.visible_guess if guess is None else guess).strip().lower()

        self.submitting = True
        try:
            if guess == self.target_word:
                outcome: GuessOutcome = "correct"
            elif self.word_validator.is_valid(guess):
                outcome = "valid_word"
            else:
                outcome = "wrong"
        finally:
            self.submitting = False

        return self._apply(outcome, guess)

    def _apply(self, outcome: GuessOutcome, guess: str) -> GuessResult:
        points = 0

        if outcome == "correct":
            points = self.config.exact_match_points
            self.score += points
            self._advance()
        elif outcome == "valid_word":
            points = self.config.valid_word_points
            self.score += points
            self.refresh()
        else:
            self.tile_pool.extend(self.current_guess)
            self.current_guess = []
            self._rng.shuffle(self.tile_pool)
            self._lose_heart()

        return self._result(outcome, guess, points)

    def _advance(self) -> None:
        self.current_index += 1

        if self.current_index >= len(self.words):
            self.status = "solved"
            self.start_word()
            self._emit("word_solved")
            self._emit("phase_complete")
            return

        self.start_word()
        self._emit("word_solved")

    def _result(self, outcome: GuessOutcome, guess: str, points: int = 0) -> GuessResult:
        return GuessResult(
            outcome=outcome,
            guess=guess,
            points=points,
            score=self.score,
            hearts=self.hearts,
            word_index=self.current_index,
            status=self.status,
        )

    def reset(self) -> None:
        """Start the phase over from the first word with full hearts."""
        self.current_index = 0
        self.score = 0
        self.hearts = self.config.starting_hearts
        self.status = "guessing"
        self.start_word()
        self._emit("state_changed")

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for rendering and logging.
        """
        return {
            "words": list(self.words),
            "current_index": self.current_index,
            "target_length": len(self.target_word) if self.target_word else 0,
            "visible_guess": self.visible_guess,
            "tile_pool": list(self.tile_pool),
            "score": self.score,
            "hearts": self.hearts,
            "hints_remaining": self.hints_remaining,
            "hinted_positions": sorted(self.hinted_positions),
            "status": self.status,
        }
