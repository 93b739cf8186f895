"""
Match models.

The engine only ever reads a snapshot of a match; lifecycle transitions
(open -> in_progress -> completed -> settled) belong to the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class MatchFormat(str, Enum):
    """Main wager format of a match."""
    MATCH_PLAY_NET = "match_play_net"
    NET_STROKE = "net_stroke"


class MatchStatus(str, Enum):
    """Lifecycle state of a match."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SETTLED = "settled"
    CANCELED = "canceled"


@dataclass(frozen=True)
class MatchOptions:
    """Side games played alongside the main format."""

    skins: bool = False
    """Pay the sole low net score on each hole, ties carry over."""

    nassau: bool = False
    """Front nine, back nine and overall bets (two-player match play only)."""

    def to_dict(self) -> dict:
        return {"skins": self.skins, "nassau": self.nassau}


@dataclass(frozen=True)
class Match:
    """
    A money match snapshot.

    Attributes:
        id: Match identifier.
        format: Main wager format.
        stakes_cents: Ante each player puts in, in cents.
        player_ids: Roster in join order.
        options: Side games.
        max_players: Roster capacity (2-4).
        status: Lifecycle state at snapshot time.
        course_id: Course played.
        tee_id: Tee played.
        creator_id: User who created the match.
        tee_time: Scheduled tee time.
    """
    id: str
    format: MatchFormat
    stakes_cents: int
    player_ids: tuple[str, ...] = field(default_factory=tuple)
    options: MatchOptions = field(default_factory=MatchOptions)
    max_players: int = 2
    status: MatchStatus = MatchStatus.OPEN
    course_id: str = ""
    tee_id: str = ""
    creator_id: Optional[str] = None
    tee_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not isinstance(self.format, MatchFormat):
            object.__setattr__(self, "format", MatchFormat(self.format))
        if not isinstance(self.player_ids, tuple):
            object.__setattr__(self, "player_ids", tuple(self.player_ids))

    @property
    def total_pot(self) -> int:
        """Sum of all antes for a full roster."""
        return self.stakes_cents * len(self.player_ids)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "format": self.format.value,
            "options": self.options.to_dict(),
            "stakes_cents": self.stakes_cents,
            "player_ids": list(self.player_ids),
            "max_players": self.max_players,
            "status": self.status.value,
            "course_id": self.course_id,
            "tee_id": self.tee_id,
            "creator_id": self.creator_id,
            "tee_time": self.tee_time.isoformat() if self.tee_time else None,
        }
