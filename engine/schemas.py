"""
Input schemas for data handed to the engine.

The engine trusts what it's given. These pydantic models are where
collaborator payloads (stored tees, submitted scorecards, match setup) get
checked before being converted into engine models.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from constants import HOLES_PER_ROUND
from models.course import Tee
from models.match import Match, MatchFormat, MatchOptions, MatchStatus
from models.profile import HandicapHistoryEntry, HandicapSource, Profile
from models.scorecard import Scorecard, ScorecardEntry


class TeeIn(BaseModel):
    """Tee payload."""
    id: str = ""
    course_id: str = ""
    name: str = ""
    color: str = ""
    slope: int = Field(ge=55, le=155)
    rating: float = Field(ge=60, le=85)
    par: int = Field(ge=60, le=80)
    stroke_index: list[int]
    yardage: int = 0

    @field_validator("stroke_index")
    @classmethod
    def check_stroke_index(cls, value: list[int]) -> list[int]:
        if len(value) != HOLES_PER_ROUND:
            raise ValueError("Stroke index must have exactly 18 values")
        if sorted(value) != list(range(1, HOLES_PER_ROUND + 1)):
            raise ValueError("Stroke index must contain unique values from 1 to 18")
        return value

    def to_model(self) -> Tee:
        return Tee(
            slope=self.slope,
            rating=self.rating,
            par=self.par,
            stroke_index=tuple(self.stroke_index),
            id=self.id,
            course_id=self.course_id,
            name=self.name,
            color=self.color,
            yardage=self.yardage,
        )


class ScorecardEntryIn(BaseModel):
    """Strokes for one hole."""
    hole: int = Field(ge=1, le=HOLES_PER_ROUND)
    strokes: int = Field(ge=1)


class ScorecardIn(BaseModel):
    """Scorecard payload."""
    user_id: str
    match_id: str = ""
    id: str = ""
    entries: list[ScorecardEntryIn] = Field(default_factory=list)
    attested_by: Optional[str] = None
    submitted_at: Optional[datetime] = None

    @field_validator("entries")
    @classmethod
    def check_unique_holes(cls, value: list[ScorecardEntryIn]) -> list[ScorecardEntryIn]:
        holes = [e.hole for e in value]
        if len(holes) != len(set(holes)):
            raise ValueError("Scorecard has more than one entry for a hole")
        return value

    def to_model(self) -> Scorecard:
        return Scorecard(
            user_id=self.user_id,
            entries=tuple(ScorecardEntry(hole=e.hole, strokes=e.strokes) for e in self.entries),
            match_id=self.match_id,
            id=self.id,
            attested_by=self.attested_by,
            submitted_at=self.submitted_at,
        )


class MatchOptionsIn(BaseModel):
    skins: bool = False
    nassau: bool = False


class MatchIn(BaseModel):
    """Match payload."""
    id: str
    format: MatchFormat
    stakes_cents: int = Field(ge=0)
    player_ids: list[str] = Field(default_factory=list)
    options: MatchOptionsIn = Field(default_factory=MatchOptionsIn)
    max_players: int = Field(default=2, ge=2, le=4)
    status: MatchStatus = MatchStatus.OPEN
    course_id: str = ""
    tee_id: str = ""
    creator_id: Optional[str] = None
    tee_time: Optional[datetime] = None

    @field_validator("player_ids")
    @classmethod
    def check_unique_players(cls, value: list[str]) -> list[str]:
        if len(value) != len(set(value)):
            raise ValueError("A player can only join a match once")
        return value

    def to_model(self) -> Match:
        return Match(
            id=self.id,
            format=self.format,
            stakes_cents=self.stakes_cents,
            player_ids=tuple(self.player_ids),
            options=MatchOptions(skins=self.options.skins, nassau=self.options.nassau),
            max_players=self.max_players,
            status=self.status,
            course_id=self.course_id,
            tee_id=self.tee_id,
            creator_id=self.creator_id,
            tee_time=self.tee_time,
        )


class HandicapHistoryEntryIn(BaseModel):
    date: datetime
    handicap_index: float
    source: HandicapSource = HandicapSource.MANUAL


class ProfileIn(BaseModel):
    """Profile payload."""
    id: str
    handicap_index: float = Field(ge=-10, le=54)
    display_name: str = ""
    verified: bool = False
    handicap_history: list[HandicapHistoryEntryIn] = Field(default_factory=list)

    def to_model(self) -> Profile:
        return Profile(
            id=self.id,
            handicap_index=self.handicap_index,
            display_name=self.display_name,
            verified=self.verified,
            handicap_history=tuple(
                HandicapHistoryEntry(date=h.date, handicap_index=h.handicap_index, source=h.source)
                for h in self.handicap_history
            ),
        )
