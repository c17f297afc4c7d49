"""
Tests pour le generateur de planning des rappels.
"""
import pytest

from app.domain.errors import ValidationError
from app.domain.services.schedule_generator import (
    compute_reminder_minutes,
    format_clock,
    generate_schedule,
    normalize_clock,
    parse_clock,
)


class TestParseClock:
    """Tests pour parse_clock / format_clock."""

    def test_midnight_and_last_minute(self):
        assert parse_clock("00:00") == 0
        assert parse_clock("23:59") == 1439

    def test_single_digit_hour(self):
        assert parse_clock("7:05") == 425
        assert normalize_clock("7:05") == "07:05"

    @pytest.mark.parametrize("value", ["24:00", "12:60", "1200", "ab:cd", "", "12:5", None])
    def test_invalid_values_rejected(self, value):
        with pytest.raises(ValidationError):
            parse_clock(value)

    def test_format_is_zero_padded(self):
        assert format_clock(0) == "00:00"
        assert format_clock(65) == "01:05"
        assert format_clock(1439) == "23:59"


class TestGenerateSchedule:
    """Tests pour generate_schedule."""

    def test_two_reminders_06_to_23(self):
        """Fenetre 1020 min, tranche 510 : rappels a +255 et +765 min apres le reveil."""
        assert generate_schedule("06:00", "23:00", 2) == ["10:15", "18:45"]

    def test_single_reminder_at_window_midpoint(self):
        assert generate_schedule("07:00", "22:00", 1) == ["14:30"]

    def test_three_reminders(self):
        # tranche 320 : +160, +480, +800
        assert generate_schedule("06:00", "22:00", 3) == ["08:40", "14:00", "19:20"]

    def test_half_minute_rounds_up(self):
        """08:00 + 2.5 min -> 08:03 (pas d'arrondi au pair)."""
        assert generate_schedule("08:00", "08:05", 1) == ["08:03"]

    def test_fractional_slot_keeps_precision(self):
        # tranche 340/3 = 113.33 : centres 56.67, 170, 283.33 -> 57, 170, 283
        assert compute_reminder_minutes(0, 340, 3) == [57, 170, 283]

    def test_zero_target_returns_empty(self):
        assert generate_schedule("06:00", "23:00", 0) == []

    def test_deterministic(self):
        first = generate_schedule("06:30", "23:15", 17)
        second = generate_schedule("06:30", "23:15", 17)
        assert first == second


class TestScheduleProperties:
    """Nombre, ordre et bornes des rappels generes sur des fenetres variees."""

    CASES = [
        ("06:00", "23:00", 1),
        ("06:00", "23:00", 20),
        ("05:45", "21:10", 60),
        ("00:00", "23:59", 13),
        ("12:00", "13:00", 59),
        ("09:17", "09:20", 2),
    ]

    @pytest.mark.parametrize("wake,sleep,target", CASES)
    def test_count_order_and_bounds(self, wake, sleep, target):
        times = generate_schedule(wake, sleep, target)

        assert len(times) == target
        assert times == sorted(times)
        minutes = [parse_clock(t) for t in times]
        assert all(parse_clock(wake) < m < parse_clock(sleep) for m in minutes)
