"""Services package for match payouts, settlement and statistics."""

from .outcome import calculate_match_outcome
from .payouts import (
    build_match_report,
    compute_net_adjustments,
    compute_player_results,
    compute_winnings,
    run_main_format,
)
from .settlement import net_positions, resolve_settlements
from .stats_service import (
    MatchHistoryItem,
    calculate_course_statistics,
    calculate_format_statistics,
    calculate_handicap_progression,
    calculate_handicap_trend,
    calculate_monthly_statistics,
    calculate_performance_metrics,
    calculate_time_series_statistics,
)

__all__ = [
    "calculate_match_outcome",
    "build_match_report",
    "compute_net_adjustments",
    "compute_player_results",
    "compute_winnings",
    "run_main_format",
    "net_positions",
    "resolve_settlements",
    "MatchHistoryItem",
    "calculate_course_statistics",
    "calculate_format_statistics",
    "calculate_handicap_progression",
    "calculate_handicap_trend",
    "calculate_monthly_statistics",
    "calculate_performance_metrics",
    "calculate_time_series_statistics",
]
