"""
Net stroke play.

Lowest total net score wins. Totals only cover the holes each player has
recorded, so callers should only settle completed rounds.
"""

import logging
from typing import Optional, Sequence

from handicap import net_score
from models.results import NetStrokeResult, StrokeAllocation
from models.scorecard import Scorecard

logger = logging.getLogger(__name__)


def compute_net_stroke(
    scorecards: Sequence[Scorecard],
    allocation: StrokeAllocation,
) -> NetStrokeResult:
    """
    Total each player's net score and find the sole low total.

    A tie for the low total leaves the winner as None.
    """
    net_totals: dict[str, int] = {}
    for card in scorecards:
        net_totals[card.user_id] = sum(
            net_score(entry.strokes, allocation, card.user_id, entry.hole)
            for entry in _unique_entries(card)
        )

    winner: Optional[str] = None
    if net_totals:
        lowest = min(net_totals.values())
        leaders = [uid for uid, total in net_totals.items() if total == lowest]
        if len(leaders) == 1:
            winner = leaders[0]

    logger.debug(f"Net stroke totals={net_totals}, winner={winner}")
    return NetStrokeResult(net_totals=net_totals, winner=winner)


def _unique_entries(card: Scorecard):
    for hole in sorted({e.hole for e in card.entries}):
        yield card.entry_for(hole)
