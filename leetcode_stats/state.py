"""View state for the stats widget and the classifier that produces it.

Exactly one of ``Idle``, ``Loading``, ``Error`` or ``Data`` describes what the
widget shows at any time.
"""
import logging
from dataclasses import dataclass
from typing import Any

from .api import api_user_stats

NOT_FOUND = "not_found"
FETCH_FAILED = "fetch_failed"

NOT_FOUND_MESSAGE = "⚠️ User not found"
FETCH_FAILED_MESSAGE = "❌ Failed to fetch data"
LOADING_TEXT = "Fetching data..."

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsResult:
    total_solved: Any
    ranking: Any
    easy_solved: Any
    total_easy: Any
    medium_solved: Any
    total_medium: Any
    hard_solved: Any
    total_hard: Any

    @classmethod
    def from_json(cls, j):
        return cls(
            total_solved=j["totalSolved"],
            ranking=j["ranking"],
            easy_solved=j["easySolved"],
            total_easy=j["totalEasy"],
            medium_solved=j["mediumSolved"],
            total_medium=j["totalMedium"],
            hard_solved=j["hardSolved"],
            total_hard=j["totalHard"],
        )


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    username: str = ""


@dataclass(frozen=True)
class Error:
    kind: str
    message: str


@dataclass(frozen=True)
class Data:
    stats: StatsResult


def classify(payload):
    if payload.get("status") == "error":
        return Error(NOT_FOUND, NOT_FOUND_MESSAGE)
    return Data(StatsResult.from_json(payload))


def load_stats(username, fetch=api_user_stats):
    """Fetch and classify one username; never raises."""
    try:
        state = classify(fetch(username))
    except Exception:
        logger.exception("Failed to fetch stats for %r", username)
        return Error(FETCH_FAILED, FETCH_FAILED_MESSAGE)
    if isinstance(state, Error):
        logger.warning("User %r not found", username)
    return state


def summary(stats):
    return (f"Total Problems Solved: {stats.total_solved}", f"Ranking: #{stats.ranking}")


def panels(state):
    """Return ``(loading_text, error_text, show_results)`` for ``state``."""
    return (
        LOADING_TEXT if isinstance(state, Loading) else "",
        state.message if isinstance(state, Error) else "",
        isinstance(state, Data),
    )
