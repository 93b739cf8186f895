"""
Payout calculation for a match.

Runs the format engines a match calls for and turns their results into
money. Every game is expressed as a zero-sum net adjustment per roster
player; the winnings map handed to settlement is the ante plus the sum of
those adjustments, so it always adds up to the antes collected.

Games:
    - main:   the match's format. The winner takes the pot and every other
              roster player loses their ante (heads up match play moves
              one stake). No winner refunds everyone.
    - skins:  a pot of one stake, funded equally by the roster and paid out
              in proportion to skins won.
    - nassau: each decided leg moves its amount from loser to winner; a
              halved leg moves nothing.
"""

import logging
from typing import Optional, Sequence, Union

from formats import compute_match_play, compute_nassau, compute_net_stroke, compute_skins
from handicap import allocate_strokes, net_score, playing_handicaps
from logging_config import match_context
from models.course import Tee
from models.match import Match, MatchFormat
from models.profile import Profile
from models.results import (
    MatchPlayResult,
    MatchReport,
    NassauResult,
    NetStrokeResult,
    PlayerResult,
    SkinsResult,
    StrokeAllocation,
)
from models.scorecard import Scorecard
from services.settlement import resolve_settlements

logger = logging.getLogger(__name__)

MainFormatResult = Union[MatchPlayResult, NetStrokeResult]


# =============================================================================
# Format Dispatch
# =============================================================================

def run_main_format(
    match: Match,
    scorecards: Sequence[Scorecard],
    allocation: StrokeAllocation,
) -> Optional[MainFormatResult]:
    """
    Run the engine for the match's format.

    Match play is only run with exactly two cards; any other combination
    has no main result.
    """
    if match.format == MatchFormat.MATCH_PLAY_NET and len(scorecards) == 2:
        return compute_match_play(scorecards, allocation)
    if match.format == MatchFormat.NET_STROKE:
        return compute_net_stroke(scorecards, allocation)
    return None


def nassau_applies(match: Match, scorecards: Sequence[Scorecard]) -> bool:
    """Nassau is only played in two-player net match play."""
    return (
        match.options.nassau
        and match.format == MatchFormat.MATCH_PLAY_NET
        and len(scorecards) == 2
    )


# =============================================================================
# Net Adjustments
# =============================================================================

def main_format_net(
    match: Match,
    roster: Sequence[str],
    result: Optional[MainFormatResult],
) -> dict[str, int]:
    """
    Zero-sum net for the main format, keyed by roster user id.

    The winner takes the pot: every other roster player loses their ante,
    including match play roster members who have no card. Heads up, that
    is plus or minus one stake.
    """
    nets = {uid: 0 for uid in roster}
    if result is None or result.winner is None:
        return nets

    stakes = match.stakes_cents
    for uid in roster:
        nets[uid] = -stakes
    nets[result.winner] = nets.get(result.winner, 0) + stakes * len(roster)

    return nets


def apportion(pot: int, weights: dict[str, int]) -> dict[str, int]:
    """
    Split `pot` cents in proportion to `weights`, in whole cents.

    Leftover cents go to the largest fractional shares; equal fractions
    are broken by key order.
    """
    total = sum(weights.values())
    shares = {uid: 0 for uid in weights}
    if total == 0:
        return shares

    remainders = []
    for position, (uid, weight) in enumerate(weights.items()):
        shares[uid], remainder = divmod(pot * weight, total)
        remainders.append((-remainder, position, uid))

    leftover = pot - sum(shares.values())
    for _, _, uid in sorted(remainders)[:leftover]:
        shares[uid] += 1
    return shares


def skins_net(match: Match, roster: Sequence[str], result: SkinsResult) -> dict[str, int]:
    """Zero-sum net for the skins pot, keyed by roster user id."""
    nets = {uid: 0 for uid in roster}
    if result.total_skins == 0 or not roster:
        return nets

    pot = match.stakes_cents
    base, extra = divmod(pot, len(roster))
    for position, uid in enumerate(roster):
        nets[uid] -= base + (1 if position < extra else 0)

    for uid, cents in apportion(pot, result.winners).items():
        nets[uid] = nets.get(uid, 0) + cents

    return nets


def nassau_net(roster: Sequence[str], scorecards: Sequence[Scorecard], result: NassauResult) -> dict[str, int]:
    """Zero-sum net for the Nassau legs; halved legs pay nothing."""
    nets = {uid: 0 for uid in roster}
    players = [card.user_id for card in scorecards]

    for _, segment in result.segments():
        if segment.winner is None:
            continue
        loser = next(uid for uid in players if uid != segment.winner)
        nets[segment.winner] = nets.get(segment.winner, 0) + segment.amount
        nets[loser] = nets.get(loser, 0) - segment.amount

    return nets


# =============================================================================
# Match Report
# =============================================================================

def build_match_report(
    match: Match,
    tee: Tee,
    profiles: Sequence[Profile],
    scorecards: Sequence[Scorecard],
) -> MatchReport:
    """
    Score a match end to end.

    Args:
        match: Match snapshot (format, options, stakes).
        tee: Tee the match was played from.
        profiles: Full roster; every roster player antes the stake.
        scorecards: Cards recorded so far, possibly incomplete.

    Returns:
        MatchReport with format results, winnings and settlements.
    """
    with match_context(match_id=match.id):
        return _score_match(match, tee, profiles, scorecards)


def _score_match(
    match: Match,
    tee: Tee,
    profiles: Sequence[Profile],
    scorecards: Sequence[Scorecard],
) -> MatchReport:
    roster = [p.id for p in profiles]
    handicaps = playing_handicaps(profiles, tee, match.format)
    allocation = allocate_strokes(handicaps, tee.stroke_index)

    main_result = run_main_format(match, scorecards, allocation) if scorecards else None
    adjustments = {"main": main_format_net(match, roster, main_result)}

    skins_result = None
    if match.options.skins and scorecards:
        skins_result = compute_skins(scorecards, allocation)
        adjustments["skins"] = skins_net(match, roster, skins_result)

    nassau_result = None
    if nassau_applies(match, scorecards):
        nassau_result = compute_nassau(scorecards, allocation, match.stakes_cents)
        adjustments["nassau"] = nassau_net(roster, scorecards, nassau_result)

    winnings = {uid: match.stakes_cents for uid in roster}
    for nets in adjustments.values():
        for uid, amount in nets.items():
            winnings[uid] = winnings.get(uid, match.stakes_cents) + amount

    report = MatchReport(
        match_id=match.id,
        stroke_allocation=allocation,
        winnings=winnings,
        player_results=compute_player_results(profiles, scorecards, allocation, winnings),
        settlements=resolve_settlements(winnings, match.stakes_cents),
        net_adjustments=adjustments,
        match_play=main_result if isinstance(main_result, MatchPlayResult) else None,
        net_stroke=main_result if isinstance(main_result, NetStrokeResult) else None,
        skins=skins_result,
        nassau=nassau_result,
    )

    logger.info(
        f"Scored match: pot={report.total_pot}, settlements={len(report.settlements)}",
        extra={"match_format": match.format.value},
    )
    return report


def compute_winnings(
    match: Match,
    tee: Tee,
    profiles: Sequence[Profile],
    scorecards: Sequence[Scorecard],
) -> dict[str, int]:
    """Total payout per roster player across the main format and side games."""
    return build_match_report(match, tee, profiles, scorecards).winnings


def compute_net_adjustments(
    match: Match,
    tee: Tee,
    profiles: Sequence[Profile],
    scorecards: Sequence[Scorecard],
) -> dict[str, dict[str, int]]:
    """Per-game net adjustments ('main', plus 'skins' / 'nassau' when played)."""
    return build_match_report(match, tee, profiles, scorecards).net_adjustments


def compute_player_results(
    profiles: Sequence[Profile],
    scorecards: Sequence[Scorecard],
    allocation: StrokeAllocation,
    winnings: dict[str, int],
) -> list[PlayerResult]:
    """Gross, net and winnings per roster player, in roster order."""
    cards = {card.user_id: card for card in scorecards}
    results = []

    for profile in profiles:
        card = cards.get(profile.id)
        gross_total = net_total = holes = 0
        if card is not None:
            for hole in sorted({e.hole for e in card.entries}):
                entry = card.entry_for(hole)
                gross_total += entry.strokes
                net_total += net_score(entry.strokes, allocation, profile.id, hole)
                holes += 1

        results.append(PlayerResult(
            user_id=profile.id,
            gross_total=gross_total,
            net_total=net_total,
            holes_completed=holes,
            winnings=winnings.get(profile.id, 0),
        ))

    return results
