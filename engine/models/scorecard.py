"""
Scorecard models.

A scorecard holds one player's gross strokes for one match, at most one
entry per hole. Rounds in progress simply have fewer entries.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional


@dataclass(frozen=True)
class ScorecardEntry:
    """Gross strokes recorded on a single hole."""
    hole: int
    strokes: int

    def to_dict(self) -> dict:
        return {"hole": self.hole, "strokes": self.strokes}


@dataclass(frozen=True)
class Scorecard:
    """
    A player's card for a match.

    Attributes:
        user_id: Player the card belongs to.
        entries: Recorded holes, in entry order.
        match_id: Match the card was kept for.
        id: Scorecard identifier.
        attested_by: User who attested the card, if any.
        submitted_at: When the card was submitted, if it has been.
    """
    user_id: str
    entries: tuple[ScorecardEntry, ...] = field(default_factory=tuple)
    match_id: str = ""
    id: str = ""
    attested_by: Optional[str] = None
    submitted_at: Optional[datetime] = None
    _by_hole: dict = field(init=False, repr=False, compare=False, default_factory=dict)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        by_hole: dict[int, ScorecardEntry] = {}
        for entry in entries:
            # First entry for a hole wins
            by_hole.setdefault(entry.hole, entry)
        object.__setattr__(self, "_by_hole", by_hole)

    @classmethod
    def from_strokes(cls, user_id: str, strokes: Iterable[int], start_hole: int = 1, **kwargs) -> "Scorecard":
        """Build a card from consecutive gross scores starting at `start_hole`."""
        entries = tuple(
            ScorecardEntry(hole=start_hole + i, strokes=s)
            for i, s in enumerate(strokes)
        )
        return cls(user_id=user_id, entries=entries, **kwargs)

    def entry_for(self, hole: int) -> Optional[ScorecardEntry]:
        """Get the entry recorded for a hole, or None if it hasn't been played."""
        return self._by_hole.get(hole)

    @property
    def holes_completed(self) -> int:
        return len(self._by_hole)

    def gross_total(self) -> int:
        """Sum of gross strokes over recorded holes."""
        return sum(e.strokes for e in self._by_hole.values())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "match_id": self.match_id,
            "user_id": self.user_id,
            "entries": [e.to_dict() for e in self.entries],
            "attested_by": self.attested_by,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
        }
