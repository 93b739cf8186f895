"""
Outcome classification for match history and statistics.

Reduces a match to one user's verdict (won / lost / tied) and net cash
result. Both the verdict and the main-format cash figure come from the
main format only:

    - won:  the stake in match play, the pot less the stake in stroke play
    - lost: minus the stake
    - tied: zero

Side games (skins, Nassau) are added from the same net adjustments the
settlement path uses.
"""

from typing import Sequence

from logging_config import get_logger
from models.course import Tee
from models.match import Match, MatchFormat
from models.profile import Profile
from models.results import MatchOutcome, OutcomeResult
from models.scorecard import Scorecard
from services.payouts import build_match_report

logger = get_logger(__name__)


def main_format_winnings(match: Match, roster_size: int, verdict: OutcomeResult) -> int:
    """Cash figure for a main-format verdict."""
    stakes = match.stakes_cents
    if verdict == OutcomeResult.WON:
        if match.format == MatchFormat.MATCH_PLAY_NET:
            return stakes
        return stakes * roster_size - stakes
    if verdict == OutcomeResult.LOST:
        return -stakes
    return 0


def calculate_match_outcome(
    match: Match,
    tee: Tee,
    players: Sequence[Profile],
    scorecards: Sequence[Scorecard],
    user_id: str,
    include_side_bets: bool = True,
) -> MatchOutcome:
    """
    Classify a match for one user.

    Args:
        match: Match snapshot.
        tee: Tee played.
        players: Full roster.
        scorecards: Recorded cards.
        user_id: User to classify the match for.
        include_side_bets: Add the user's skins / Nassau net to the cash
            result. With no side games enabled this makes no difference.

    Returns:
        MatchOutcome. Any roster player other than the winner has lost,
        including match play roster members who kept no card.
    """
    log = logger.with_context(match_id=match.id, user_id=user_id)

    if not scorecards:
        log.debug("No scorecards, match classified as tied")
        return MatchOutcome(result=OutcomeResult.TIED, winnings=0)

    report = build_match_report(match, tee, players, scorecards)
    main_result = report.match_play or report.net_stroke

    if main_result is None or main_result.winner is None:
        verdict = OutcomeResult.TIED
    elif main_result.winner == user_id:
        verdict = OutcomeResult.WON
    else:
        verdict = OutcomeResult.LOST

    winnings = main_format_winnings(match, len(players), verdict)
    if include_side_bets:
        winnings += sum(
            nets.get(user_id, 0)
            for game, nets in report.net_adjustments.items()
            if game != "main"
        )

    log.debug(f"Classified match: result={verdict.value}, winnings={winnings}")
    return MatchOutcome(result=verdict, winnings=winnings)
