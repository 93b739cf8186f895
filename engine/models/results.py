"""
Result records produced by the scoring engine.

Every "no winner" is None, never a placeholder id, so a tie can't be
mistaken for a real player.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# user_id -> strokes received per hole (index = hole - 1)
StrokeAllocation = dict[str, list[int]]


class HoleOutcome(str, Enum):
    """Match play hole result from player one's perspective."""
    WIN = "W"
    LOSS = "L"
    PUSH = "P"


class OutcomeResult(str, Enum):
    """A single user's verdict for a match."""
    WON = "won"
    LOST = "lost"
    TIED = "tied"


@dataclass
class HandicapCalculation:
    """Handicap figures for one player on one tee."""
    handicap_index: float
    course_handicap: int
    playing_handicap: int

    def to_dict(self) -> dict:
        return {
            "handicap_index": self.handicap_index,
            "course_handicap": self.course_handicap,
            "playing_handicap": self.playing_handicap,
        }


@dataclass
class HoleResult:
    """One processed match play hole."""
    hole: int
    result: HoleOutcome
    net_score: int

    def to_dict(self) -> dict:
        return {"hole": self.hole, "result": self.result.value, "net_score": self.net_score}


@dataclass
class MatchPlayResult:
    """
    Singles match play result.

    Attributes:
        holes: Holes both players completed, in order.
        up_down_history: Running holes-up count for player one after each hole.
        winner: Player ahead after the last processed hole, or None if all square.
    """
    holes: list[HoleResult] = field(default_factory=list)
    up_down_history: list[int] = field(default_factory=list)
    winner: Optional[str] = None

    @property
    def status(self) -> int:
        """Final holes-up count for player one (0 when nothing was played)."""
        return self.up_down_history[-1] if self.up_down_history else 0

    def to_dict(self) -> dict:
        return {
            "holes": [h.to_dict() for h in self.holes],
            "up_down_history": list(self.up_down_history),
            "winner": self.winner,
        }


@dataclass
class NetStrokeResult:
    """Net stroke play totals and the sole low total, if any."""
    net_totals: dict[str, int] = field(default_factory=dict)
    winner: Optional[str] = None

    def to_dict(self) -> dict:
        return {"net_totals": dict(self.net_totals), "winner": self.winner}


@dataclass
class SkinsHole:
    """A hole in the skins game; carryover is the skins at stake on it."""
    hole: int
    carryover: int
    winner: Optional[str] = None

    def to_dict(self) -> dict:
        return {"hole": self.hole, "winner": self.winner, "carryover": self.carryover}


@dataclass
class SkinsResult:
    """Per-hole skins and the skin count won by each player."""
    holes: list[SkinsHole] = field(default_factory=list)
    winners: dict[str, int] = field(default_factory=dict)

    @property
    def total_skins(self) -> int:
        return sum(self.winners.values())

    def to_dict(self) -> dict:
        return {
            "holes": [h.to_dict() for h in self.holes],
            "winners": dict(self.winners),
        }


@dataclass
class NassauSegment:
    """One leg of a Nassau; amount is reported even when the leg is halved."""
    amount: int
    winner: Optional[str] = None

    def to_dict(self) -> dict:
        return {"winner": self.winner, "amount": self.amount}


@dataclass
class NassauResult:
    """Front nine, back nine and overall legs."""
    front: NassauSegment
    back: NassauSegment
    overall: NassauSegment

    def segments(self) -> list[tuple[str, NassauSegment]]:
        return [("front", self.front), ("back", self.back), ("overall", self.overall)]

    def to_dict(self) -> dict:
        return {name: seg.to_dict() for name, seg in self.segments()}


@dataclass
class MatchOutcome:
    """A user's verdict and net cash delta for a match, in cents."""
    result: OutcomeResult
    winnings: int = 0

    def to_dict(self) -> dict:
        return {"result": self.result.value, "winnings": self.winnings}


@dataclass(frozen=True)
class Settlement:
    """A transfer of `amount_cents` from one player to another."""
    from_user: str
    to_user: str
    amount_cents: int

    def to_dict(self) -> dict:
        return {"from": self.from_user, "to": self.to_user, "amount_cents": self.amount_cents}


@dataclass
class PlayerResult:
    """A player's line on the results board."""
    user_id: str
    gross_total: int
    net_total: int
    holes_completed: int
    winnings: int = 0

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "gross_total": self.gross_total,
            "net_total": self.net_total,
            "holes_completed": self.holes_completed,
            "winnings": self.winnings,
        }


@dataclass
class MatchReport:
    """Everything the results page needs for one match."""
    match_id: str
    stroke_allocation: StrokeAllocation
    winnings: dict[str, int]
    player_results: list[PlayerResult]
    settlements: list[Settlement]
    net_adjustments: dict[str, dict[str, int]] = field(default_factory=dict)
    match_play: Optional[MatchPlayResult] = None
    net_stroke: Optional[NetStrokeResult] = None
    skins: Optional[SkinsResult] = None
    nassau: Optional[NassauResult] = None

    @property
    def total_pot(self) -> int:
        return sum(self.winnings.values())

    def to_dict(self) -> dict:
        return {
            "match_id": self.match_id,
            "stroke_allocation": {k: list(v) for k, v in self.stroke_allocation.items()},
            "winnings": dict(self.winnings),
            "total_pot": self.total_pot,
            "player_results": [r.to_dict() for r in self.player_results],
            "settlements": [s.to_dict() for s in self.settlements],
            "net_adjustments": {k: dict(v) for k, v in self.net_adjustments.items()},
            "match_play": self.match_play.to_dict() if self.match_play else None,
            "net_stroke": self.net_stroke.to_dict() if self.net_stroke else None,
            "skins": self.skins.to_dict() if self.skins else None,
            "nassau": self.nassau.to_dict() if self.nassau else None,
        }
