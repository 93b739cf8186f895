"""
Tests for the statistics service.

Verifies:
- Career totals, best/worst results and streaks
- Per-format, per-course and per-month breakdowns
- Daily time series with a running total
- Handicap progression and trend direction
"""

from datetime import date, datetime
from typing import Optional

import pytest

from models import (
    Course,
    HandicapHistoryEntry,
    HandicapSource,
    Match,
    MatchFormat,
    OutcomeResult,
)
from services.stats_service import (
    MatchHistoryItem,
    Streak,
    calculate_course_statistics,
    calculate_format_statistics,
    calculate_handicap_progression,
    calculate_handicap_trend,
    calculate_monthly_statistics,
    calculate_performance_metrics,
    calculate_time_series_statistics,
)

WON = OutcomeResult.WON
LOST = OutcomeResult.LOST
TIED = OutcomeResult.TIED

PEBBLE = Course(id="c-1", name="Pebble Creek", lat=36.57, lng=-121.95)
OAKS = Course(id="c-2", name="The Oaks", lat=33.75, lng=-84.39)


def item(
    outcome: OutcomeResult,
    winnings: int,
    tee_time: datetime,
    fmt: MatchFormat = MatchFormat.MATCH_PLAY_NET,
    course: Optional[Course] = None,
) -> MatchHistoryItem:
    match = Match(
        id=f"m-{tee_time:%Y%m%d%H}",
        format=fmt,
        stakes_cents=500,
        tee_time=tee_time,
        course_id=course.id if course else "",
    )
    return MatchHistoryItem(match=match, outcome=outcome, winnings=winnings, course=course)


# =============================================================================
# Performance
# =============================================================================

class TestPerformanceMetrics:

    def test_empty_history(self):
        metrics = calculate_performance_metrics([])

        assert metrics.total_matches == 0
        assert metrics.win_rate == 0.0
        assert metrics.current_streak == Streak()

    def test_totals(self):
        items = [
            item(WON, 500, datetime(2026, 3, 1)),
            item(LOST, -500, datetime(2026, 3, 8)),
            item(WON, 1000, datetime(2026, 3, 15)),
            item(TIED, 0, datetime(2026, 3, 22)),
        ]

        metrics = calculate_performance_metrics(items)

        assert (metrics.total_wins, metrics.total_losses, metrics.total_ties) == (2, 1, 1)
        assert metrics.win_rate == 50.0
        assert metrics.total_winnings == 1000
        assert metrics.avg_winnings_per_match == 250.0
        assert metrics.best_win == 1000
        assert metrics.worst_loss == -500

    def test_best_and_worst_floor_at_zero(self):
        metrics = calculate_performance_metrics([item(LOST, -300, datetime(2026, 3, 1))])

        assert metrics.best_win == 0
        assert metrics.worst_loss == -300

    def test_current_streak_uses_tee_time_order(self):
        # Given out of order on purpose
        items = [
            item(WON, 500, datetime(2026, 4, 20)),
            item(LOST, -500, datetime(2026, 4, 1)),
            item(WON, 500, datetime(2026, 4, 10)),
        ]

        metrics = calculate_performance_metrics(items)

        assert metrics.current_streak == Streak(kind="win", count=2)

    def test_latest_tie_means_no_streak(self):
        items = [
            item(LOST, -500, datetime(2026, 4, 1)),
            item(TIED, 0, datetime(2026, 4, 2)),
        ]

        assert calculate_performance_metrics(items).current_streak == Streak(kind="none", count=0)

    def test_longest_streaks_broken_by_ties(self):
        outcomes = [WON, WON, TIED, WON, LOST, LOST, LOST, WON]
        items = [item(o, 0, datetime(2026, 5, day)) for day, o in enumerate(outcomes, start=1)]

        metrics = calculate_performance_metrics(items)

        assert metrics.longest_win_streak == 2
        assert metrics.longest_loss_streak == 3
        assert metrics.current_streak == Streak(kind="win", count=1)


# =============================================================================
# Breakdowns
# =============================================================================

class TestFormatStatistics:

    def test_grouped_by_display_name(self):
        items = [
            item(WON, 500, datetime(2026, 1, 1), MatchFormat.MATCH_PLAY_NET),
            item(LOST, -500, datetime(2026, 1, 2), MatchFormat.NET_STROKE),
            item(TIED, 0, datetime(2026, 1, 3), MatchFormat.MATCH_PLAY_NET),
            item(WON, 1000, datetime(2026, 1, 4), MatchFormat.NET_STROKE),
        ]

        stats = calculate_format_statistics(items)

        assert [s.format for s in stats] == ["Match Play", "Stroke Play"]
        match_play, stroke_play = stats
        assert (match_play.matches, match_play.wins, match_play.ties) == (2, 1, 1)
        assert match_play.win_rate == 50.0
        assert match_play.avg_winnings == 250.0
        assert (stroke_play.wins, stroke_play.losses) == (1, 1)
        assert stroke_play.avg_winnings == 250.0


class TestCourseStatistics:

    def test_most_played_first(self):
        items = [
            item(WON, 500, datetime(2026, 1, 1), course=OAKS),
            item(LOST, -500, datetime(2026, 1, 2), course=PEBBLE),
            item(WON, 500, datetime(2026, 1, 3), course=PEBBLE),
            item(WON, 500, datetime(2026, 1, 4)),
        ]

        stats = calculate_course_statistics(items)

        assert [s.course_name for s in stats] == ["Pebble Creek", "The Oaks"]
        assert (stats[0].matches, stats[0].wins, stats[0].losses) == (2, 1, 1)
        assert stats[0].total_winnings == 0
        assert stats[1].win_rate == 100.0


class TestMonthlyStatistics:

    def test_sorted_oldest_first(self):
        items = [
            item(WON, 500, datetime(2026, 2, 14)),
            item(LOST, -500, datetime(2025, 12, 30)),
            item(WON, 700, datetime(2026, 2, 1)),
        ]

        stats = calculate_monthly_statistics(items)

        assert [s.month for s in stats] == ["Dec 2025", "Feb 2026"]
        assert (stats[1].matches, stats[1].wins, stats[1].winnings) == (2, 2, 1200)

    def test_matches_without_tee_time_skipped(self):
        match = Match(id="m-x", format=MatchFormat.NET_STROKE, stakes_cents=100)
        assert calculate_monthly_statistics([MatchHistoryItem(match, WON, 100)]) == []


class TestTimeSeries:

    def test_bucket_per_day_with_running_total(self):
        today = date(2026, 6, 30)
        items = [
            item(WON, 500, datetime(2026, 6, 28, 9)),
            item(LOST, -200, datetime(2026, 6, 30, 14)),
            item(WON, 900, datetime(2026, 1, 1)),  # outside the window
        ]

        series = calculate_time_series_statistics(items, days=3, today=today)

        assert [s.date for s in series] == ["Jun 27", "Jun 28", "Jun 29", "Jun 30"]
        assert [s.winnings for s in series] == [0, 500, 0, -200]
        assert [s.cumulative_winnings for s in series] == [0, 500, 500, 300]
        assert series[1].wins == 1
        assert series[3].losses == 1

    def test_default_window(self):
        series = calculate_time_series_statistics([], today=date(2026, 6, 30))
        assert len(series) == 91


# =============================================================================
# Handicap
# =============================================================================

class TestHandicapStatistics:

    def history(self, *indexes: float) -> list[HandicapHistoryEntry]:
        return [
            HandicapHistoryEntry(date=datetime(2026, month, 1), handicap_index=idx)
            for month, idx in enumerate(indexes, start=1)
        ]

    def test_progression_points(self):
        history = [
            HandicapHistoryEntry(datetime(2026, 1, 5), 14.2, HandicapSource.GHIN),
            HandicapHistoryEntry(datetime(2026, 2, 5), 13.8),
        ]

        points = calculate_handicap_progression(history)

        assert [(p.date, p.handicap_index, p.source) for p in points] == [
            ("Jan 2026", 14.2, "ghin"),
            ("Feb 2026", 13.8, "manual"),
        ]

    def test_progression_empty(self):
        assert calculate_handicap_progression(None) == []

    def test_needs_two_entries(self):
        assert calculate_handicap_trend(self.history(12.0)) is None
        assert calculate_handicap_trend([]) is None

    def test_falling_index_is_improving(self):
        trend = calculate_handicap_trend(self.history(16.0, 15.1, 12.0))

        assert trend.trend == "improving"
        assert trend.change == pytest.approx(-4.0)
        assert trend.percent_change == pytest.approx(-25.0)
        assert (trend.lowest_handicap, trend.highest_handicap) == (12.0, 16.0)

    def test_rising_index_is_regressing(self):
        assert calculate_handicap_trend(self.history(8.0, 9.0)).trend == "regressing"

    def test_small_move_is_stable(self):
        assert calculate_handicap_trend(self.history(10.0, 10.3)).trend == "stable"

    def test_scratch_start_has_no_percent(self):
        trend = calculate_handicap_trend(self.history(0.0, 2.0))
        assert trend.percent_change == 0.0
