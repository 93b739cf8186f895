"""Models package for the Golf wager engine."""

from .course import Course, Tee
from .match import Match, MatchFormat, MatchOptions, MatchStatus
from .profile import HandicapHistoryEntry, HandicapSource, Profile
from .results import (
    HandicapCalculation,
    HoleOutcome,
    HoleResult,
    MatchOutcome,
    MatchPlayResult,
    MatchReport,
    NassauResult,
    NassauSegment,
    NetStrokeResult,
    OutcomeResult,
    PlayerResult,
    Settlement,
    SkinsHole,
    SkinsResult,
    StrokeAllocation,
)
from .scorecard import Scorecard, ScorecardEntry

__all__ = [
    "Course",
    "Tee",
    "Match",
    "MatchFormat",
    "MatchOptions",
    "MatchStatus",
    "HandicapHistoryEntry",
    "HandicapSource",
    "Profile",
    "HandicapCalculation",
    "HoleOutcome",
    "HoleResult",
    "MatchOutcome",
    "MatchPlayResult",
    "MatchReport",
    "NassauResult",
    "NassauSegment",
    "NetStrokeResult",
    "OutcomeResult",
    "PlayerResult",
    "Settlement",
    "SkinsHole",
    "SkinsResult",
    "StrokeAllocation",
    "Scorecard",
    "ScorecardEntry",
]
