"""
Pydantic models for the session layer.

This module contains the configuration, per-action results, and the hand-off
snapshot used throughout the session layer. The main logic classes
(PuzzleSession, MadLibSession, ResumptionGateway, GameFlow) live in their
respective files.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field

from ..validation import DICTIONARY_API_URL


# Type aliases
Phase = Literal["wordlink", "madlib"]
SessionStatus = Literal["guessing", "exhausted", "solved"]
GuessOutcome = Literal["correct", "valid_word", "wrong", "busy", "ignored"]
SessionEvent = Literal["state_changed", "word_solved", "phase_complete", "out_of_hearts"]


class GameConfig(BaseModel):
    """Configuration for a game."""
    starting_hearts: int = Field(default=3, ge=1)
    max_hints_per_word: int = Field(default=3, ge=0)
    exact_match_points: int = Field(default=100, ge=0)
    valid_word_points: int = Field(default=10, ge=0)
    seed: Optional[int] = None
    dictionary_url: str = DICTIONARY_API_URL
    lookup_timeout: Optional[float] = Field(default=None, gt=0)
    base_url: str = "/index.html"
    state_file: str = ".wordlink_session.json"


class GuessResult(BaseModel):
    """Result of a single guess submission."""
    outcome: GuessOutcome
    guess: str = ""
    points: int = 0
    score: int = 0
    hearts: int = 0
    word_index: int = 0
    status: SessionStatus = "guessing"


class HintResult(BaseModel):
    """Result of a hint request. `position` is None when nothing was revealed."""
    position: Optional[int] = None
    letter: Optional[str] = None
    hints_remaining: int = 0
    reason: Optional[Literal["no_hints_left", "all_revealed", "inactive"]] = None

    @property
    def revealed(self) -> bool:
        return self.position is not None


class ResumptionSnapshot(BaseModel):
    """Gameplay state carried across a navigation to a mini-game and back."""
    hearts: int = Field(default=0, ge=0)
    score: int = Field(default=0, ge=0)
    resume_target: Phase
    bonus_hearts_pending: int = Field(default=0, ge=0)

    def restored_hearts(self, default: int) -> int:
        """Hearts to resume with: the saved count plus bonus, or `default` when that is 0."""
        total = self.hearts + self.bonus_hearts_pending
        return total if total > 0 else default
