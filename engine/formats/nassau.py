"""
Nassau side bet for two-player net match play.

Three separate bets on net totals: front nine, back nine and the full
round. Each leg is staked at a third of the total stake, rounded down.
"""

import logging
from typing import Optional, Sequence

from constants import BACK_NINE, FRONT_NINE, FULL_ROUND, NASSAU_SEGMENTS
from errors import WrongPlayerCount
from handicap import net_score
from models.results import NassauResult, NassauSegment, StrokeAllocation
from models.scorecard import Scorecard

logger = logging.getLogger(__name__)


def compute_nassau(
    scorecards: Sequence[Scorecard],
    allocation: StrokeAllocation,
    total_stake: int,
) -> NassauResult:
    """
    Settle the three Nassau legs.

    Only holes both players have recorded count towards a leg. A halved
    leg still reports its amount; deciding what happens to it is up to the
    payout step.

    Raises:
        WrongPlayerCount: If there aren't exactly two scorecards.
    """
    if len(scorecards) != 2:
        logger.warning(f"Nassau called with {len(scorecards)} scorecards")
        raise WrongPlayerCount("Nassau", len(scorecards))

    player1, player2 = scorecards
    leg_stake = total_stake // NASSAU_SEGMENTS

    result = NassauResult(
        front=_segment(player1, player2, allocation, FRONT_NINE, leg_stake),
        back=_segment(player1, player2, allocation, BACK_NINE, leg_stake),
        overall=_segment(player1, player2, allocation, FULL_ROUND, leg_stake),
    )
    logger.debug(f"Nassau legs={result.to_dict()}")
    return result


def _segment(
    player1: Scorecard,
    player2: Scorecard,
    allocation: StrokeAllocation,
    holes: tuple[int, int],
    amount: int,
) -> NassauSegment:
    start, end = holes
    p1_total = 0
    p2_total = 0

    for hole in range(start, end + 1):
        p1_entry = player1.entry_for(hole)
        p2_entry = player2.entry_for(hole)
        if p1_entry is None or p2_entry is None:
            continue
        p1_total += net_score(p1_entry.strokes, allocation, player1.user_id, hole)
        p2_total += net_score(p2_entry.strokes, allocation, player2.user_id, hole)

    winner: Optional[str] = None
    if p1_total < p2_total:
        winner = player1.user_id
    elif p2_total < p1_total:
        winner = player2.user_id

    return NassauSegment(amount=amount, winner=winner)
