"""
Skins side game.

Every hole is worth a skin. The sole low net score on a hole takes the
skins riding on it; if the low score is tied nobody wins and the skin
carries over to the next hole played.
"""

import logging
from typing import Sequence

from constants import HOLES_PER_ROUND
from handicap import net_score
from models.results import SkinsHole, SkinsResult, StrokeAllocation
from models.scorecard import Scorecard

logger = logging.getLogger(__name__)


def compute_skins(
    scorecards: Sequence[Scorecard],
    allocation: StrokeAllocation,
) -> SkinsResult:
    """
    Play out the skins game hole by hole.

    Holes nobody has recorded are skipped and don't affect the carryover.
    Any number of players may take part.
    """
    result = SkinsResult(winners={card.user_id: 0 for card in scorecards})
    carryover = 1

    for hole in range(1, HOLES_PER_ROUND + 1):
        nets: list[tuple[str, int]] = []
        for card in scorecards:
            entry = card.entry_for(hole)
            if entry is not None:
                nets.append((card.user_id, net_score(entry.strokes, allocation, card.user_id, hole)))

        if not nets:
            continue

        lowest = min(n for _, n in nets)
        low_players = [uid for uid, n in nets if n == lowest]

        if len(low_players) == 1:
            winner = low_players[0]
            result.winners[winner] += carryover
            result.holes.append(SkinsHole(hole=hole, carryover=carryover, winner=winner))
            carryover = 1
        else:
            result.holes.append(SkinsHole(hole=hole, carryover=carryover))
            carryover += 1

    logger.debug(f"Skins awarded={result.winners}, unclaimed carryover={carryover - 1}")
    return result
