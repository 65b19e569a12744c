"""
Game flow for one story: Word Link, then Mad Libs.

A phase that runs out of hearts is suspended and the player is sent to a
mini-game; the return URL brings them back to the same phase.
"""

import logging
import random
from functools import partial
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field

from ..data import STORY_TEMPLATE, WORD_BANKS, choose_word_set
from ..validation import WordValidator, dictionary_api_lookup
from .madlib import MadLibSession
from .models import GameConfig, Phase, SessionEvent
from .puzzle import PuzzleSession
from .resumption import ResumptionGateway
from .state import GameProgress
from .storage import MemoryStorage, PrintNavigator


logger = logging.getLogger(__name__)

Session = Union[PuzzleSession, MadLibSession]


class GameFlow(BaseModel):
    """
    Top-level orchestrator for one story.

    Runs Word Link, then Mad Libs, and hands off to a mini-game whenever a
    phase runs out of hearts. A page that is reloaded after the mini-game
    calls `bootstrap(url)` to land back in the right phase.

    Attributes:
        config: Game configuration
        word_validator: Validator shared by every Word Link session
        gateway: Serializes hand-offs into storage and URLs
        navigator: Performs the navigation to the mini-game
        storage: Session-scoped storage, also used for GameProgress
        progress: Story and word set being played
        puzzle: Active Word Link session, if any
        madlib: Active Mad Libs session, if any
        phase: Phase currently being played
        is_complete: Whether the story is finished
        handoff_count: Number of hand-offs performed
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    word_validator: WordValidator
    gateway: ResumptionGateway
    navigator: Any
    storage: Any
    banks: Dict[str, List[str]] = Field(default_factory=lambda: dict(WORD_BANKS))
    progress: GameProgress = Field(default_factory=GameProgress)
    puzzle: Optional[PuzzleSession] = None
    madlib: Optional[MadLibSession] = None
    phase: Optional[Phase] = None
    is_complete: bool = False
    handoff_count: int = 0
    last_handoff_url: Optional[str] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        storage: Any = None,
        navigator: Any = None,
        validator: Optional[WordValidator] = None,
        banks: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> "GameFlow":
        """
        Factory method wiring the collaborators together.

        Args:
            config: Game configuration (defaults used if omitted)
            storage: Key-value storage (in-memory if omitted)
            navigator: Navigator (prints URLs if omitted)
            validator: Word validator (corpus from `banks`, remote dictionary lookup)
            banks: Word banks (defaults to the built-in ones)
        """
        config = config or GameConfig()
        storage = storage if storage is not None else MemoryStorage()
        banks = {k: list(v) for k, v in (banks or WORD_BANKS).items()}

        if validator is None:
            lookup = partial(
                dictionary_api_lookup,
                url_template=config.dictionary_url,
                timeout=config.lookup_timeout,
            )
            validator = WordValidator(banks, lookup=lookup)

        return cls(
            config=config,
            word_validator=validator,
            gateway=ResumptionGateway(storage, config.base_url),
            navigator=navigator if navigator is not None else PrintNavigator(),
            storage=storage,
            banks=banks,
        )

    @property
    def session(self) -> Optional[Session]:
        """The session of the phase being played."""
        if self.phase == "wordlink":
            return self.puzzle
        if self.phase == "madlib":
            return self.madlib
        return None

    def start(self, story: str = STORY_TEMPLATE) -> PuzzleSession:
        """Pick words for `story` and start Word Link."""
        word_set = choose_word_set(story, self.banks, self._rng)
        self.progress = GameProgress(story=story, word_set=word_set)
        self.progress.save(self.storage)
        self.is_complete = False
        return self.start_word_link()

    def start_word_link(self, hearts: Optional[int] = None, score: int = 0) -> PuzzleSession:
        words = [w.word for w in self.progress.word_set]
        self.puzzle = PuzzleSession.create(
            words,
            self.word_validator,
            config=self.config,
            hearts=hearts,
            score=score,
        )
        self.puzzle.subscribe(self._on_event)
        self.madlib = None
        self.phase = "wordlink"
        logger.info("Word Link started with %d words", len(words))
        return self.puzzle

    def start_mad_lib(self, hearts: Optional[int] = None, score: int = 0) -> MadLibSession:
        self.madlib = MadLibSession.create(
            self.progress.story,
            self.progress.word_set,
            config=self.config,
            hearts=hearts,
            score=score,
        )
        self.madlib.subscribe(self._on_event)
        self.phase = "madlib"
        logger.info("Mad Libs started with %d blanks", len(self.madlib.blanks))
        return self.madlib

    def _on_event(self, event: SessionEvent, session: Session) -> None:
        if event == "word_solved" and session is self.puzzle:
            self.progress.words_collected += 1
            self.progress.save(self.storage)
        elif event == "phase_complete":
            if session is self.puzzle:
                self.start_mad_lib(score=session.score)
            else:
                self.is_complete = True
                logger.info("Story complete with score %d", session.score)
        elif event == "out_of_hearts":
            self.hand_off(session)

    def hand_off(self, session: Session) -> Optional[str]:
        """
        Suspend `session` and navigate to the mini-game selection.

        If navigation fails the phase keeps going with one heart.

        Returns:
            The navigation URL, or None if navigation failed
        """
        self.progress.save(self.storage)
        url = self.gateway.suspend(session.snapshot())
        self.handoff_count += 1

        try:
            self.navigator.redirect(url)
        except Exception as e:
            logger.error("Navigation to mini-game failed, resuming locally: %s", e)
            session.set_hearts(1)
            return None

        self.last_handoff_url = url
        return url

    def bootstrap(self, url: Optional[str] = None) -> Session:
        """
        Entry point for a page load.

        Resumes the tagged phase when `url` is a return from a mini-game and
        the story survived in storage; otherwise starts a new story.
        """
        snapshot = self.gateway.resume(url) if url else None
        if snapshot is None:
            return self.start()

        progress = GameProgress.load(self.storage)
        if progress is None or not progress.word_set:
            logger.warning("Nothing saved to resume %s from; starting a new story", snapshot.resume_target)
            return self.start()

        self.progress = progress
        self.is_complete = False
        hearts = snapshot.restored_hearts(self.config.starting_hearts)

        if snapshot.resume_target == "wordlink":
            # Word Link restarts from its first word
            self.progress.words_collected = 0
            self.progress.save(self.storage)
            return self.start_word_link(hearts=hearts, score=snapshot.score)
        return self.start_mad_lib(hearts=hearts, score=snapshot.score)

    def get_state(self) -> Dict:
        session = self.session
        return {
            "phase": self.phase,
            "is_complete": self.is_complete,
            "handoff_count": self.handoff_count,
            "words_collected": self.progress.words_collected,
            "session": session.get_state() if session else None,
        }
