"""
Course and format constants for the Golf wager engine.

This module is the single source of truth for the numbers the scoring
engine reads. Handicap allowances are configurable via environment
variables; see config.py for details.

WHS Handicap Formulas:
    - Course Handicap = Index x (Slope / 113) + (Course Rating - Par)
    - Playing Handicap = Course Handicap x format allowance
    - Singles match play plays off 100%, net stroke play off 95%
"""

from config import config


# =============================================================================
# Course Layout
# =============================================================================

HOLES_PER_ROUND: int = 18
FRONT_NINE: tuple[int, int] = (1, 9)
BACK_NINE: tuple[int, int] = (10, 18)
FULL_ROUND: tuple[int, int] = (1, HOLES_PER_ROUND)

# Slope of a course of standard difficulty
STANDARD_SLOPE: int = 113


# =============================================================================
# Format Constants
# =============================================================================

# Front nine, back nine, overall; each leg is staked at a third
NASSAU_SEGMENTS: int = 3

FORMAT_DISPLAY_NAMES: dict[str, str] = {
    "match_play_net": "Match Play",
    "net_stroke": "Stroke Play",
}


# =============================================================================
# Helper Functions
# =============================================================================

def get_allowance(format_value: str) -> float:
    """
    Get the playing handicap allowance for a match format.

    Args:
        format_value: Match format as string ('match_play_net', 'net_stroke').

    Returns:
        Allowance multiplier (1.0 = 100%). Unknown formats play off the
        stroke play allowance.
    """
    allowances = config.allowances.to_dict()
    return allowances.get(format_value, allowances["net_stroke"])
