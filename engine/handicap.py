"""
Handicap calculation for net golf formats.

This module turns a player's handicap index into the strokes they receive
on each hole of a given tee. All calculations are deterministic.

Formulas (World Handicap System):
    - Course Handicap  = round(Index x Slope / 113 + (Rating - Par))
    - Playing Handicap = round(Course Handicap x allowance)

Stroke Allocation:
    Only the difference to the lowest Playing Handicap in the match is
    given. Strokes go out one at a time in stroke index order: the first
    to the hole ranked 1, the second to the hole ranked 2, and so on. The
    19th stroke goes back to the hole ranked 1 for a second stroke.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Sequence, Union

from constants import HOLES_PER_ROUND, STANDARD_SLOPE, get_allowance
from errors import InvalidStrokeIndex
from models.course import Tee
from models.match import MatchFormat
from models.profile import Profile
from models.results import HandicapCalculation, StrokeAllocation

logger = logging.getLogger(__name__)


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding (round(16.5) == 16), which
    isn't how handicaps are rounded.
    """
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def course_handicap(handicap_index: float, slope: int, rating: float, par: int) -> int:
    """
    Calculate a Course Handicap.

    No clamping is applied; plus handicaps produce negative results.

    Args:
        handicap_index: Player's handicap index.
        slope: Tee slope rating.
        rating: Tee course rating.
        par: Tee par.

    Returns:
        Course Handicap in whole strokes.
    """
    return round_half_away(handicap_index * (slope / STANDARD_SLOPE) + (rating - par))


def playing_handicap(course_hcp: int, match_format: Union[MatchFormat, str]) -> int:
    """
    Scale a Course Handicap by the format's allowance.

    Singles match play plays off 100%, net stroke play off 95%.

    Args:
        course_hcp: Course Handicap.
        match_format: Format of the match.

    Returns:
        Playing Handicap in whole strokes.
    """
    allowance = get_allowance(MatchFormat(match_format).value)
    return round_half_away(course_hcp * allowance)


def calculate_player_handicap(
    handicap_index: float,
    tee: Tee,
    match_format: Union[MatchFormat, str],
) -> HandicapCalculation:
    """Full handicap calculation for a player on a tee."""
    course_hcp = course_handicap(handicap_index, tee.slope, tee.rating, tee.par)
    return HandicapCalculation(
        handicap_index=handicap_index,
        course_handicap=course_hcp,
        playing_handicap=playing_handicap(course_hcp, match_format),
    )


def playing_handicaps(
    profiles: Iterable[Profile],
    tee: Tee,
    match_format: Union[MatchFormat, str],
) -> dict[str, int]:
    """Playing Handicap for every profile, keyed by user id in roster order."""
    return {
        p.id: calculate_player_handicap(p.handicap_index, tee, match_format).playing_handicap
        for p in profiles
    }


def allocate_strokes(
    player_handicaps: Mapping[str, int],
    stroke_index: Sequence[int],
) -> StrokeAllocation:
    """
    Distribute handicap strokes across the 18 holes.

    Each player receives the difference between their Playing Handicap and
    the lowest one in the match; the lowest player receives nothing.

    Only the length of the stroke index is checked. Duplicate or
    out-of-range ranks must be rejected before calling (see schemas.TeeIn).

    Args:
        player_handicaps: Playing Handicap keyed by user id.
        stroke_index: Difficulty rank per hole position (1 = hardest).

    Returns:
        18-length list of strokes received per hole, keyed by user id in
        the same order as `player_handicaps`.

    Raises:
        InvalidStrokeIndex: If the stroke index doesn't have 18 values.
    """
    if len(stroke_index) != HOLES_PER_ROUND:
        logger.warning(f"Rejected stroke index with {len(stroke_index)} values")
        raise InvalidStrokeIndex(len(stroke_index))

    if not player_handicaps:
        return {}

    # rank -> hole position; first occurrence wins for malformed input
    position_for_rank: dict[int, int] = {}
    for position, rank in enumerate(stroke_index):
        position_for_rank.setdefault(rank, position)

    lowest = min(player_handicaps.values())
    allocation: StrokeAllocation = {}

    for user_id, hcp in player_handicaps.items():
        strokes = [0] * HOLES_PER_ROUND
        for k in range(hcp - lowest):
            position = position_for_rank.get(k % HOLES_PER_ROUND + 1)
            if position is not None:
                strokes[position] += 1
        allocation[user_id] = strokes

    logger.debug(
        f"Allocated strokes: lowest={lowest}, "
        f"received={ {uid: sum(s) for uid, s in allocation.items()} }"
    )
    return allocation


def strokes_on_hole(allocation: StrokeAllocation, user_id: str, hole: int) -> int:
    """Strokes a user receives on a hole; users missing from the allocation get none."""
    strokes = allocation.get(user_id)
    if not strokes:
        return 0
    return strokes[hole - 1]


def net_score(gross: int, allocation: StrokeAllocation, user_id: str, hole: int) -> int:
    """Gross strokes on a hole minus the handicap strokes received there."""
    return gross - strokes_on_hole(allocation, user_id, hole)
