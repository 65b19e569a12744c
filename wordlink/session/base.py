"""Heart, event and snapshot handling shared by the gameplay phases."""

import logging
from typing import Any, Callable, ClassVar, List
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .models import Phase, ResumptionSnapshot, SessionEvent, SessionStatus


logger = logging.getLogger(__name__)

Listener = Callable[[SessionEvent, Any], None]


class HeartSession(BaseModel):
    """
    Base for a gameplay phase that spends hearts.

    Losing the last heart moves the session to `exhausted` and emits a single
    `out_of_hearts` event; listeners receive `(event, session)`.

    Attributes:
        hearts: Hearts remaining, never negative
        score: Points earned so far
        status: guessing, exhausted, or solved
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    phase: ClassVar[Phase]

    hearts: int = Field(default=3, ge=0)
    score: int = Field(default=0, ge=0)
    status: SessionStatus = "guessing"
    _listeners: List[Listener] = PrivateAttr(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.status == "guessing"

    def subscribe(self, listener: Listener) -> None:
        """Register a callback for state-change notifications."""
        self._listeners.append(listener)

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)

    def _lose_heart(self) -> bool:
        """Spend one heart. Returns True if that was the last one."""
        self.hearts = max(0, self.hearts - 1)

        if self.hearts == 0:
            self._exhaust()
            return True

        self._emit("state_changed")
        return False

    def _exhaust(self) -> None:
        self.status = "exhausted"
        logger.info("%s session out of hearts (score %d)", self.phase, self.score)
        self._emit("out_of_hearts")

    def add_hearts(self, amount: int = 1) -> None:
        """Add hearts (negative amounts subtract, clamped at 0). No upper bound."""
        self._apply_hearts(self.hearts + amount)

    def set_hearts(self, hearts: int) -> None:
        """Set hearts to an exact value, clamped at 0."""
        self._apply_hearts(hearts)

    def _apply_hearts(self, hearts: int) -> None:
        self.hearts = max(0, hearts)

        if self.status == "guessing" and self.hearts == 0:
            self._exhaust()
            return

        if self.status == "exhausted" and self.hearts > 0:
            self.status = "guessing"
        self._emit("state_changed")

    def snapshot(self, bonus_hearts: int = 0) -> ResumptionSnapshot:
        """Capture what a hand-off needs to resume this phase."""
        return ResumptionSnapshot(
            hearts=self.hearts,
            score=self.score,
            resume_target=self.phase,
            bonus_hearts_pending=bonus_hearts,
        )
