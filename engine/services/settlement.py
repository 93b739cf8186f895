"""
Settlement of a finished match into player-to-player transfers.

Every player antes `stakes_cents`. After payouts each player is up or down
`winnings - stakes_cents`; this module pairs the players who are down with
the players who are up.
"""

import logging
from typing import Mapping

from models.results import Settlement

logger = logging.getLogger(__name__)


def net_positions(winnings: Mapping[str, int], stakes_cents: int) -> dict[str, int]:
    """Each player's net result against their ante, in map order."""
    return {uid: amount - stakes_cents for uid, amount in winnings.items()}


def resolve_settlements(winnings: Mapping[str, int], stakes_cents: int) -> list[Settlement]:
    """
    Turn a winnings map into concrete transfers.

    Greedy and order dependent: creditors are visited in map order and each
    one is paid by debtors in map order, each transfer being the smaller of
    what the creditor is still owed and what the debtor still owes. The
    same input order always produces the same transfers, but the number of
    transfers is not guaranteed to be minimal.

    When net positions sum to zero, every player's inflow minus outflow
    equals their net position.

    Args:
        winnings: Total payout each player received (main format plus side games).
        stakes_cents: Ante each player put in.

    Returns:
        Transfers in the order they were generated. No zero-amount transfers.
    """
    nets = net_positions(winnings, stakes_cents)

    credit = {uid: n for uid, n in nets.items() if n > 0}
    debt = {uid: -n for uid, n in nets.items() if n < 0}

    settlements: list[Settlement] = []
    for creditor in credit:
        for debtor in debt:
            if credit[creditor] == 0:
                break
            if debt[debtor] == 0:
                continue

            amount = min(credit[creditor], debt[debtor])
            settlements.append(Settlement(from_user=debtor, to_user=creditor, amount_cents=amount))
            credit[creditor] -= amount
            debt[debtor] -= amount

    unmatched = sum(credit.values()) + sum(debt.values())
    if unmatched:
        # Only happens when the winnings map doesn't add up to the antes
        logger.warning(f"Settlement left {unmatched} cents unmatched")

    logger.debug(f"Resolved {len(settlements)} settlements from nets={nets}")
    return settlements
