"""
Singles match play (net).

Each hole is won by the lower net score, or halved. The match is decided
by holes won, not total strokes. Holes where either player has no entry
yet are skipped so an in-progress match can be shown.
"""

import logging
from typing import Sequence

from constants import HOLES_PER_ROUND
from errors import WrongPlayerCount
from handicap import net_score
from models.results import HoleOutcome, HoleResult, MatchPlayResult, StrokeAllocation
from models.scorecard import Scorecard

logger = logging.getLogger(__name__)


def compute_match_play(
    scorecards: Sequence[Scorecard],
    allocation: StrokeAllocation,
) -> MatchPlayResult:
    """
    Score a two-player net match.

    Args:
        scorecards: Exactly two cards; the first is "player one" for W/L.
        allocation: Strokes received per hole.

    Returns:
        MatchPlayResult with per-hole results and the running up/down count.

    Raises:
        WrongPlayerCount: If there aren't exactly two scorecards.
    """
    if len(scorecards) != 2:
        logger.warning(f"Match play called with {len(scorecards)} scorecards")
        raise WrongPlayerCount("Match play", len(scorecards))

    player1, player2 = scorecards
    result = MatchPlayResult()
    running = 0

    for hole in range(1, HOLES_PER_ROUND + 1):
        p1_entry = player1.entry_for(hole)
        p2_entry = player2.entry_for(hole)
        if p1_entry is None or p2_entry is None:
            continue

        p1_net = net_score(p1_entry.strokes, allocation, player1.user_id, hole)
        p2_net = net_score(p2_entry.strokes, allocation, player2.user_id, hole)

        if p1_net < p2_net:
            outcome = HoleOutcome.WIN
            running += 1
        elif p1_net > p2_net:
            outcome = HoleOutcome.LOSS
            running -= 1
        else:
            outcome = HoleOutcome.PUSH

        result.holes.append(HoleResult(hole=hole, result=outcome, net_score=p1_net))
        result.up_down_history.append(running)

    if result.status > 0:
        result.winner = player1.user_id
    elif result.status < 0:
        result.winner = player2.user_id

    logger.debug(
        f"Match play: {len(result.holes)} holes, status={result.status}, winner={result.winner}"
    )
    return result
