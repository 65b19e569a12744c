"""Persisted game progress, loaded from and saved to session storage explicitly."""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..data import StoryWord
from .storage import KeyValueStorage


logger = logging.getLogger(__name__)

STATE_KEY = "spellventure_state"


class GameProgress(BaseModel):
    """
    What a page needs to rebuild the current story after a navigation.

    Attributes:
        story: Story template with `[type]` blanks
        word_set: Words chosen for the story
        words_collected: Words solved so far in Word Link
    """
    story: str = ""
    word_set: List[StoryWord] = Field(default_factory=list)
    words_collected: int = Field(default=0, ge=0)

    @classmethod
    def load(cls, storage: KeyValueStorage) -> Optional["GameProgress"]:
        """Load saved progress; None if nothing usable is stored."""
        try:
            raw = storage.get(STATE_KEY)
        except Exception as e:
            logger.warning("Could not read game progress: %s", e)
            return None

        if not raw:
            return None

        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable game progress: %s", e)
            return None

    def save(self, storage: KeyValueStorage) -> bool:
        """Save progress. Returns False (after logging) if storage refused it."""
        try:
            storage.set(STATE_KEY, self.model_dump_json())
        except Exception as e:
            logger.warning("Could not save game progress: %s", e)
            return False
        return True
