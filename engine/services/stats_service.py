"""
Stats service for golfer match history.

Aggregates classified match outcomes (see services.outcome) into the
figures shown on a player's statistics page: overall performance, per
format, per course, per month, a daily time series and handicap trend.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from constants import FORMAT_DISPLAY_NAMES
from models.course import Course
from models.match import Match
from models.profile import HandicapHistoryEntry
from models.results import OutcomeResult

logger = logging.getLogger(__name__)

# Handicap moves smaller than this are reported as stable
TREND_STABLE_THRESHOLD = 0.5


@dataclass
class MatchHistoryItem:
    """A completed match as seen by one user."""
    match: Match
    outcome: OutcomeResult
    winnings: int
    course: Optional[Course] = None

    @property
    def played_at(self) -> datetime:
        return self.match.tee_time or datetime.min


@dataclass
class MatchStatistic:
    """One day in the winnings time series."""
    date: str
    wins: int = 0
    losses: int = 0
    ties: int = 0
    winnings: int = 0
    cumulative_winnings: int = 0


@dataclass
class FormatStatistic:
    format: str
    matches: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    win_rate: float = 0.0
    avg_winnings: float = 0.0


@dataclass
class CourseStatistic:
    course_name: str
    matches: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    total_winnings: int = 0


@dataclass
class MonthlyStatistic:
    month: str
    matches: int = 0
    wins: int = 0
    winnings: int = 0


@dataclass
class Streak:
    """Current run of wins or losses; kind is 'win', 'loss' or 'none'."""
    kind: str = "none"
    count: int = 0


@dataclass
class PerformanceMetrics:
    """Career summary for a user."""
    total_matches: int = 0
    total_wins: int = 0
    total_losses: int = 0
    total_ties: int = 0
    win_rate: float = 0.0
    total_winnings: int = 0
    avg_winnings_per_match: float = 0.0
    best_win: int = 0
    worst_loss: int = 0
    current_streak: Streak = field(default_factory=Streak)
    longest_win_streak: int = 0
    longest_loss_streak: int = 0


@dataclass
class HandicapProgressionData:
    date: str
    handicap_index: float
    source: str


@dataclass
class HandicapTrend:
    """
    Direction of a golfer's handicap index.

    Lower is better in golf, so a falling index is 'improving'.
    """
    current: float
    starting: float
    change: float
    percent_change: float
    trend: str
    lowest_handicap: float
    highest_handicap: float


def _win_rate(wins: int, matches: int) -> float:
    return (wins / matches) * 100 if matches > 0 else 0.0


def _day_label(d: date) -> str:
    return f"{d:%b} {d.day}"


# -------------------------------------------------------------------------
# Match Statistics
# -------------------------------------------------------------------------

def calculate_performance_metrics(items: Sequence[MatchHistoryItem]) -> PerformanceMetrics:
    """
    Summarize a user's match history.

    Streaks follow tee time order; a tie ends both win and loss streaks,
    and a most recent tie means there is no current streak.
    """
    metrics = PerformanceMetrics(total_matches=len(items))
    if not items:
        return metrics

    metrics.total_wins = sum(1 for i in items if i.outcome == OutcomeResult.WON)
    metrics.total_losses = sum(1 for i in items if i.outcome == OutcomeResult.LOST)
    metrics.total_ties = sum(1 for i in items if i.outcome == OutcomeResult.TIED)
    metrics.win_rate = _win_rate(metrics.total_wins, metrics.total_matches)
    metrics.total_winnings = sum(i.winnings for i in items)
    metrics.avg_winnings_per_match = metrics.total_winnings / metrics.total_matches
    metrics.best_win = max([i.winnings for i in items] + [0])
    metrics.worst_loss = min([i.winnings for i in items] + [0])

    ordered = sorted(items, key=lambda i: i.played_at)

    latest = ordered[-1].outcome
    if latest != OutcomeResult.TIED:
        count = 0
        for item in reversed(ordered):
            if item.outcome != latest:
                break
            count += 1
        kind = "win" if latest == OutcomeResult.WON else "loss"
        metrics.current_streak = Streak(kind=kind, count=count)

    win_run = loss_run = 0
    for item in ordered:
        if item.outcome == OutcomeResult.WON:
            win_run += 1
            loss_run = 0
            metrics.longest_win_streak = max(metrics.longest_win_streak, win_run)
        elif item.outcome == OutcomeResult.LOST:
            loss_run += 1
            win_run = 0
            metrics.longest_loss_streak = max(metrics.longest_loss_streak, loss_run)
        else:
            win_run = loss_run = 0

    return metrics


def calculate_format_statistics(items: Sequence[MatchHistoryItem]) -> list[FormatStatistic]:
    """Win/loss record per match format, in order of first appearance."""
    stats: dict[str, FormatStatistic] = {}
    totals: dict[str, int] = defaultdict(int)

    for item in items:
        name = FORMAT_DISPLAY_NAMES.get(item.match.format.value, item.match.format.value)
        stat = stats.setdefault(name, FormatStatistic(format=name))
        stat.matches += 1
        if item.outcome == OutcomeResult.WON:
            stat.wins += 1
        elif item.outcome == OutcomeResult.LOST:
            stat.losses += 1
        else:
            stat.ties += 1
        totals[name] += item.winnings

    for name, stat in stats.items():
        stat.win_rate = _win_rate(stat.wins, stat.matches)
        stat.avg_winnings = totals[name] / stat.matches

    return list(stats.values())


def calculate_course_statistics(items: Sequence[MatchHistoryItem]) -> list[CourseStatistic]:
    """Record per course, most played first. Items without a course are skipped."""
    stats: dict[str, CourseStatistic] = {}

    for item in items:
        if item.course is None:
            continue
        stat = stats.setdefault(item.course.id, CourseStatistic(course_name=item.course.name))
        stat.matches += 1
        if item.outcome == OutcomeResult.WON:
            stat.wins += 1
        elif item.outcome == OutcomeResult.LOST:
            stat.losses += 1
        stat.total_winnings += item.winnings

    for stat in stats.values():
        stat.win_rate = _win_rate(stat.wins, stat.matches)

    return sorted(stats.values(), key=lambda s: s.matches, reverse=True)


def calculate_monthly_statistics(items: Sequence[MatchHistoryItem]) -> list[MonthlyStatistic]:
    """Matches, wins and winnings per calendar month, oldest first."""
    months: dict[tuple[int, int], MonthlyStatistic] = {}

    for item in items:
        if item.match.tee_time is None:
            continue
        played = item.match.tee_time
        stat = months.setdefault(
            (played.year, played.month),
            MonthlyStatistic(month=f"{played:%b %Y}"),
        )
        stat.matches += 1
        if item.outcome == OutcomeResult.WON:
            stat.wins += 1
        stat.winnings += item.winnings

    return [months[key] for key in sorted(months)]


def calculate_time_series_statistics(
    items: Sequence[MatchHistoryItem],
    days: int = 90,
    today: Optional[date] = None,
) -> list[MatchStatistic]:
    """
    Daily results for the last `days` days, with a running winnings total.

    Returns `days + 1` buckets, oldest first, ending on `today`.
    """
    today = today or date.today()
    start = today - timedelta(days=days)

    buckets: dict[date, MatchStatistic] = {}
    for offset in range(days + 1):
        day = start + timedelta(days=offset)
        buckets[day] = MatchStatistic(date=_day_label(day))

    for item in items:
        if item.match.tee_time is None:
            continue
        stat = buckets.get(item.match.tee_time.date())
        if stat is None:
            continue
        if item.outcome == OutcomeResult.WON:
            stat.wins += 1
        elif item.outcome == OutcomeResult.LOST:
            stat.losses += 1
        else:
            stat.ties += 1
        stat.winnings += item.winnings

    running = 0
    for stat in buckets.values():
        running += stat.winnings
        stat.cumulative_winnings = running

    return list(buckets.values())


# -------------------------------------------------------------------------
# Handicap Statistics
# -------------------------------------------------------------------------

def calculate_handicap_progression(
    history: Optional[Sequence[HandicapHistoryEntry]],
) -> list[HandicapProgressionData]:
    """Handicap history as chart points, in the order given."""
    if not history:
        return []
    return [
        HandicapProgressionData(
            date=f"{entry.date:%b %Y}",
            handicap_index=entry.handicap_index,
            source=entry.source.value,
        )
        for entry in history
    ]


def calculate_handicap_trend(
    history: Optional[Sequence[HandicapHistoryEntry]],
) -> Optional[HandicapTrend]:
    """
    Compare the oldest and newest handicap index.

    Returns:
        HandicapTrend, or None with fewer than two entries.
    """
    if not history or len(history) < 2:
        return None

    ordered = sorted(history, key=lambda h: h.date)
    current = ordered[-1].handicap_index
    starting = ordered[0].handicap_index
    change = current - starting
    percent_change = (change / starting) * 100 if starting != 0 else 0.0

    if abs(change) < TREND_STABLE_THRESHOLD:
        trend = "stable"
    elif change < 0:
        trend = "improving"
    else:
        trend = "regressing"

    indexes = [h.handicap_index for h in ordered]
    logger.debug(f"Handicap trend {starting} -> {current}: {trend}")
    return HandicapTrend(
        current=current,
        starting=starting,
        change=change,
        percent_change=percent_change,
        trend=trend,
        lowest_handicap=min(indexes),
        highest_handicap=max(indexes),
    )
