"""
Player profile models.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class HandicapSource(str, Enum):
    """Where a handicap index value came from."""
    SELF = "self"
    CALCULATED = "calculated"
    MANUAL = "manual"
    GHIN = "ghin"
    OTHER = "other"


@dataclass(frozen=True)
class HandicapHistoryEntry:
    """A dated handicap index revision."""
    date: datetime
    handicap_index: float
    source: HandicapSource = HandicapSource.MANUAL

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "handicap_index": self.handicap_index,
            "source": self.source.value,
        }


@dataclass(frozen=True)
class Profile:
    """
    A golfer's profile as far as the engine is concerned.

    Attributes:
        id: User identifier.
        handicap_index: Current handicap index (negative for plus handicaps).
        display_name: Name shown to other players.
        verified: Whether the index was verified by a handicap network.
        handicap_history: Past index revisions, any order.
    """
    id: str
    handicap_index: float
    display_name: str = ""
    verified: bool = False
    handicap_history: tuple[HandicapHistoryEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "handicap_index": self.handicap_index,
            "verified": self.verified,
            "handicap_history": [h.to_dict() for h in self.handicap_history],
        }
