"""
Tests pour StatisticsService : bilan sur fenetre glissante.
"""
import pytest
from datetime import date

from app.domain.errors import ValidationError
from app.domain.services.statistics_service import StatisticsService


@pytest.fixture
def stats():
    return StatisticsService(default_window=7)


def _complete(session, reminders, day, count):
    for reminder in reminders.list_for_day(session, day.id)[:count]:
        reminders.complete(session, reminder.id)


class TestStatistics:

    def test_empty_window(self, session, stats):
        result = stats.compute(session, end_date=date(2024, 1, 7))

        assert result.start_date == date(2024, 1, 1)
        assert len(result.days) == 7
        assert all(not d.has_day and d.completed == 0 and d.target == 0 for d in result.days)
        assert result.total_completed == 0
        assert result.days_with_data == 0
        assert result.average_per_day == 0.0
        assert result.remaining == 0
        assert result.best_day is None

    def test_aggregates_tracked_days(self, session, make_day, reminders, stats):
        d1 = make_day("2024-01-02", target=5)
        d2 = make_day("2024-01-04", target=4)
        d3 = make_day("2024-01-06", target=6)
        _complete(session, reminders, d1, 3)
        _complete(session, reminders, d2, 1)
        _complete(session, reminders, d3, 2)

        result = stats.compute(session, end_date=date(2024, 1, 7))

        assert [d.date.day for d in result.days] == [1, 2, 3, 4, 5, 6, 7]
        assert [d.has_day for d in result.days] == [False, True, False, True, False, True, False]
        assert [d.completed for d in result.days] == [0, 3, 0, 1, 0, 2, 0]
        assert result.total_completed == 6
        assert result.days_with_data == 3
        assert result.average_per_day == pytest.approx(2.0)
        assert result.remaining == (5 - 3) + (4 - 1) + (6 - 2)
        assert result.best_day.date == date(2024, 1, 4)
        assert result.best_day.completed == 1

    def test_best_day_tie_keeps_earliest(self, session, make_day, stats):
        make_day("2024-01-03", target=3)
        make_day("2024-01-05", target=3)

        result = stats.compute(session, end_date=date(2024, 1, 7))

        assert result.best_day.date == date(2024, 1, 3)

    def test_days_outside_window_ignored(self, session, make_day, reminders, stats):
        old = make_day("2023-12-01", target=2)
        _complete(session, reminders, old, 2)

        result = stats.compute(session, end_date=date(2024, 1, 7))

        assert result.total_completed == 0
        assert result.days_with_data == 0

    def test_custom_window(self, session, stats):
        result = stats.compute(session, end_date=date(2024, 1, 31), window_days=31)
        assert result.start_date == date(2024, 1, 1)
        assert len(result.days) == 31

    @pytest.mark.parametrize("window", [0, -1, 32, 365])
    def test_invalid_window(self, session, stats, window):
        with pytest.raises(ValidationError):
            stats.compute(session, end_date=date(2024, 1, 7), window_days=window)
