"""Gameplay sessions and the mini-game hand-off."""

from .models import (
    GameConfig,
    GuessOutcome,
    GuessResult,
    HintResult,
    Phase,
    ResumptionSnapshot,
    SessionEvent,
    SessionStatus,
)
from .puzzle import PuzzleSession
from .madlib import MadLibSession, Blank
from .resumption import ResumptionGateway
from .state import GameProgress
from .storage import JsonFileStorage, KeyValueStorage, MemoryStorage, Navigator, PrintNavigator
from .flow import GameFlow

__all__ = [
    "GameConfig",
    "GuessOutcome",
    "GuessResult",
    "HintResult",
    "Phase",
    "ResumptionSnapshot",
    "SessionEvent",
    "SessionStatus",
    "PuzzleSession",
    "MadLibSession",
    "Blank",
    "ResumptionGateway",
    "GameProgress",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "Navigator",
    "PrintNavigator",
    "GameFlow",
]
