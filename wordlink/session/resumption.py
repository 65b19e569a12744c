"""
Hand-off of gameplay state across a full navigation to a mini-game and back.

Outbound, `suspend` saves the heart count under a phase-specific storage key
and returns the mini-game URL, tagged with the phase to come back to:

    /index.html?screen=miniGameSelect&returnTo=game_openWordLink&hearts=0&score=120

When the mini-game finishes, `complete_interlude` builds the return URL:

    /index.html?screen=game&bonusHearts=2&openWordLink=true&hearts=0&score=120

On the returning page, `resume` reads the URL first and falls back to storage
for the heart count. The URL parameter names are part of the contract with
the mini-games and must not change.
"""

import logging
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .models import Phase, ResumptionSnapshot
from .storage import KeyValueStorage


logger = logging.getLogger(__name__)

SCREEN_PARAM = "screen"
BONUS_HEARTS_PARAM = "bonusHearts"
HEARTS_PARAM = "hearts"
SCORE_PARAM = "score"
RETURN_TO_PARAM = "returnTo"

GAME_SCREEN = "game"
MINI_GAME_SCREEN = "miniGameSelect"

RESUME_FLAGS: Dict[Phase, str] = {
    "wordlink": "openWordLink",
    "madlib": "openMadLib",
}
RETURN_TAGS: Dict[Phase, str] = {
    "wordlink": "game_openWordLink",
    "madlib": "game_openMadLib",
}

# Older mini-game links carry no phase tag; they came from Mad Libs
DEFAULT_RESUME_TARGET: Phase = "madlib"


def hearts_key(phase: Phase) -> str:
    """Storage key for the hearts a phase had when it was suspended."""
    return f"{phase}_prev_hearts"


def parse_count(value: Optional[str]) -> Optional[int]:
    """Parse a non-negative integer parameter; None if absent or malformed."""
    if value is None:
        return None
    try:
        count = int(value.strip())
    except ValueError:
        return None
    return count if count >= 0 else None


def parse_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in ("true", "1", "yes")


def encode_url(base_url: str, params: Dict[str, str]) -> str:
    """Add `params` to the query string of `base_url`."""
    parts = urlsplit(base_url)
    query = dict(parse_qsl(parts.query))
    query.update(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


def decode_params(url: str) -> Dict[str, str]:
    """Query parameters of `url` (first value wins)."""
    params: Dict[str, str] = {}
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


class ResumptionGateway:
    """
    Serializes and restores ResumptionSnapshots across navigation.

    Args:
        storage: Session-scoped key-value storage
        base_url: Entry page of the game
    """

    def __init__(self, storage: KeyValueStorage, base_url: str = "/index.html"):
        self.storage = storage
        self.base_url = base_url

    def _store(self, key: str, value: str) -> None:
        try:
            self.storage.set(key, value)
        except Exception as e:
            logger.warning("Could not persist '%s', continuing without it: %s", key, e)

    def _consume(self, key: str) -> Optional[int]:
        """Read a stored count once; the key is blanked after reading."""
        try:
            value = self.storage.get(key)
        except Exception as e:
            logger.warning("Could not read '%s' from storage: %s", key, e)
            return None

        if not value:
            return None

        self._store(key, "")
        return parse_count(value)

    def suspend(self, snapshot: ResumptionSnapshot) -> str:
        """
        Persist `snapshot` and return the URL of the mini-game selection.

        The returned URL is the opaque token for the round trip.
        """
        target = snapshot.resume_target
        self._store(hearts_key(target), str(snapshot.hearts))

        params = {
            SCREEN_PARAM: MINI_GAME_SCREEN,
            RETURN_TO_PARAM: RETURN_TAGS[target],
            HEARTS_PARAM: str(snapshot.hearts),
            SCORE_PARAM: str(snapshot.score),
        }
        if snapshot.bonus_hearts_pending:
            params[BONUS_HEARTS_PARAM] = str(snapshot.bonus_hearts_pending)

        logger.info("Suspending %s with %d hearts, score %d", target, snapshot.hearts, snapshot.score)
        return encode_url(self.base_url, params)

    def complete_interlude(self, token: str, bonus_hearts: int = 0) -> str:
        """
        Build the URL a mini-game sends the player back to.

        Args:
            token: URL returned by `suspend`
            bonus_hearts: Hearts earned in the mini-game
        """
        params = decode_params(token)
        target = self._target_from_tag(params.get(RETURN_TO_PARAM))

        out = {
            SCREEN_PARAM: GAME_SCREEN,
            BONUS_HEARTS_PARAM: str(max(0, bonus_hearts)),
            RESUME_FLAGS[target]: "true",
        }
        for key in (HEARTS_PARAM, SCORE_PARAM):
            if key in params:
                out[key] = params[key]

        return encode_url(self.base_url, out)

    def resolve_target(self, params: Dict[str, str]) -> Phase:
        """Which phase a return URL asks for: explicit flag, then `returnTo` tag, then the default."""
        for phase, flag in RESUME_FLAGS.items():
            if parse_flag(params.get(flag)):
                return phase
        return self._target_from_tag(params.get(RETURN_TO_PARAM))

    def _target_from_tag(self, tag: Optional[str]) -> Phase:
        for phase, known in RETURN_TAGS.items():
            if tag == known:
                return phase

        logger.info("No resume target in return path (tag=%r); defaulting to %s", tag, DEFAULT_RESUME_TARGET)
        return DEFAULT_RESUME_TARGET

    def is_return(self, params: Dict[str, str]) -> bool:
        """True if the parameters describe a return from a mini-game."""
        if params.get(SCREEN_PARAM) != GAME_SCREEN:
            return False
        keys = (BONUS_HEARTS_PARAM, RETURN_TO_PARAM, *RESUME_FLAGS.values())
        return any(key in params for key in keys)

    def resume(self, url: str) -> Optional[ResumptionSnapshot]:
        """
        Decode a return URL into a snapshot.

        Returns:
            The snapshot to resume from, or None if `url` is not a return from
            a mini-game
        """
        params = decode_params(url)
        if not self.is_return(params):
            return None

        target = self.resolve_target(params)
        stored_hearts = self._consume(hearts_key(target))

        hearts = parse_count(params.get(HEARTS_PARAM))
        if hearts is None:
            hearts = stored_hearts if stored_hearts is not None else 0

        snapshot = ResumptionSnapshot(
            hearts=hearts,
            score=parse_count(params.get(SCORE_PARAM)) or 0,
            resume_target=target,
            bonus_hearts_pending=parse_count(params.get(BONUS_HEARTS_PARAM)) or 0,
        )
        logger.info("Resuming %s: %s", target, snapshot.model_dump())
        return snapshot
