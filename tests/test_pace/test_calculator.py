"""Tests for per-deadline pace calculation."""

from datetime import datetime, timezone

import pytest

from bookpace.tracker.pace.calculator import (
    KnownCalculation,
    UnknownCalculation,
    compute_deadline_calculations,
    required_pace,
    units_per_day_or_zero,
)
from bookpace.tracker.pace.urgency import PaceThresholds, UrgencyLevel, UrgencyThresholds

UTC = timezone.utc


class TestRequiredPace:
    """Tests for required_pace."""

    def test_even_split(self):
        """Test remaining work spread over the days left."""
        assert required_pace(300, 0, 10) == 30

    def test_fractional(self):
        """Test pace is not rounded up."""
        assert required_pace(100, 0, 3) == pytest.approx(33.333, abs=0.001)

    def test_nothing_remaining(self):
        """Test zero pace when done, even when overdue."""
        assert required_pace(300, 300, 10) == 0
        assert required_pace(300, 320, -1) == 0

    def test_overdue(self):
        """Test no pace once the date has passed with work left."""
        assert required_pace(300, 100, 0) is None
        assert required_pace(300, 100, -4) is None


class TestComputeDeadlineCalculations:
    """Tests for compute_deadline_calculations."""

    def test_ten_days_out(self, make_deadline, now):
        """Test 300 pages, ten days, nothing read."""
        result = compute_deadline_calculations(make_deadline(total=300), now)

        assert isinstance(result, KnownCalculation)
        assert result.is_known
        assert result.remaining == 300
        assert result.days_left == 10
        assert result.units_per_day == 30
        assert result.urgency_level == UrgencyLevel.GOOD
        assert result.unit == "pages"
        assert result.progress_percentage == 0

    def test_uses_latest_progress(self, make_deadline, now):
        """Test the most recent record is the current progress."""
        deadline = make_deadline(
            total=300,
            progress=[
                (100, datetime(2025, 1, 10, 8, 0, tzinfo=UTC)),
                (50, datetime(2025, 1, 8, 8, 0, tzinfo=UTC)),
            ],
        )
        result = compute_deadline_calculations(deadline, now)

        assert result.current_progress == 100
        assert result.remaining == 200
        assert result.units_per_day == 20
        assert result.progress_percentage == 33

    @pytest.mark.parametrize(
        "total,expected",
        [
            (500, UrgencyLevel.APPROACHING),
            (900, UrgencyLevel.URGENT),
            (2000, UrgencyLevel.IMPOSSIBLE),
        ],
    )
    def test_urgency_from_default_bands(self, make_deadline, now, total, expected):
        """Test urgency follows the configured page bands."""
        result = compute_deadline_calculations(make_deadline(total=total), now)
        assert result.urgency_level == expected

    def test_overdue(self, make_deadline, now):
        """Test a passed deadline with work left."""
        deadline = make_deadline(
            total=300,
            deadline_date=datetime(2025, 1, 5, tzinfo=UTC),
            progress=[(100, datetime(2025, 1, 4, tzinfo=UTC))],
        )
        result = compute_deadline_calculations(deadline, now)

        assert result.days_left == -5
        assert result.remaining == 200
        assert result.units_per_day is None
        assert result.urgency_level == UrgencyLevel.OVERDUE
        assert result.is_overdue
        assert result.urgency_label == "Overdue"

    def test_finished_past_date_is_good(self, make_deadline, now):
        """Test nothing remaining is never overdue."""
        deadline = make_deadline(
            total=300,
            deadline_date=datetime(2025, 1, 5, tzinfo=UTC),
            progress=[(300, datetime(2025, 1, 4, tzinfo=UTC))],
        )
        result = compute_deadline_calculations(deadline, now)

        assert result.units_per_day == 0
        assert result.urgency_level == UrgencyLevel.GOOD

    def test_progress_beyond_total(self, make_deadline, now):
        """Test remaining and percentage are capped."""
        deadline = make_deadline(
            total=300, progress=[(320, datetime(2025, 1, 9, tzinfo=UTC))]
        )
        result = compute_deadline_calculations(deadline, now)

        assert result.remaining == 0
        assert result.units_per_day == 0
        assert result.progress_percentage == 100

    @pytest.mark.parametrize("status", ["complete", "did_not_finish"])
    def test_archived_has_zero_pace(self, make_deadline, now, status):
        """Test archived deadlines need no pace."""
        deadline = make_deadline(
            total=900,
            statuses=[
                ("reading", datetime(2025, 1, 1, tzinfo=UTC)),
                (status, datetime(2025, 1, 9, tzinfo=UTC)),
            ],
        )
        result = compute_deadline_calculations(deadline, now)

        assert result.is_archived
        assert result.units_per_day == 0
        assert result.urgency_level == UrgencyLevel.GOOD
        assert result.remaining == 900

    def test_archived_overdue_is_good(self, make_deadline, now):
        """Test an abandoned overdue book is not flagged."""
        deadline = make_deadline(
            deadline_date=datetime(2025, 1, 5, tzinfo=UTC),
            statuses=[("did_not_finish", datetime(2025, 1, 6, tzinfo=UTC))],
        )
        result = compute_deadline_calculations(deadline, now)
        assert result.urgency_level == UrgencyLevel.GOOD

    def test_audio(self, make_deadline, now):
        """Test audio deadlines use minute bands."""
        deadline = make_deadline(total=600, format="audio")
        result = compute_deadline_calculations(deadline, now)

        assert result.unit == "minutes"
        assert result.units_per_day == 60
        assert result.urgency_level == UrgencyLevel.APPROACHING

    def test_missing_deadline_date(self, make_deadline, now):
        """Test no date gives an unknown result."""
        result = compute_deadline_calculations(make_deadline(deadline_date=None), now)

        assert isinstance(result, UnknownCalculation)
        assert not result.is_known
        assert result.urgency_level is None
        assert result.urgency_label == "N/A"

    @pytest.mark.parametrize("total", [None, 0])
    def test_missing_total(self, make_deadline, now, total):
        """Test no total gives an unknown result."""
        result = compute_deadline_calculations(make_deadline(total=total), now)
        assert isinstance(result, UnknownCalculation)

    def test_custom_thresholds(self, make_deadline, now):
        """Test explicit thresholds override configuration."""
        strict = PaceThresholds(
            pages=UrgencyThresholds(easy_pace=5, urgent_pace=10, max_pace=20),
            audio=UrgencyThresholds(easy_pace=5, urgent_pace=10, max_pace=20),
        )
        result = compute_deadline_calculations(make_deadline(total=300), now, strict)
        assert result.urgency_level == UrgencyLevel.IMPOSSIBLE

    def test_thresholds_from_environment(self, make_deadline, now, monkeypatch):
        """Test configured bands are used by default."""
        monkeypatch.setenv("BOOKPACE_PAGES_EASY_PACE", "10")
        result = compute_deadline_calculations(make_deadline(total=300), now)
        assert result.urgency_level == UrgencyLevel.APPROACHING

    def test_idempotent(self, make_deadline, now):
        """Test identical inputs give identical results."""
        deadline = make_deadline(progress=[(40, datetime(2025, 1, 9, tzinfo=UTC))])
        assert compute_deadline_calculations(deadline, now) == compute_deadline_calculations(deadline, now)


class TestUnitsPerDayOrZero:
    """Tests for units_per_day_or_zero."""

    def test_missing_and_unknown(self):
        """Test missing and unknown results count as zero."""
        assert units_per_day_or_zero(None) == 0
        assert units_per_day_or_zero(UnknownCalculation(reason="missing deadline date")) == 0

    def test_overdue(self, make_deadline, now):
        """Test overdue results count as zero."""
        deadline = make_deadline(deadline_date=datetime(2025, 1, 5, tzinfo=UTC))
        assert units_per_day_or_zero(compute_deadline_calculations(deadline, now)) == 0

    def test_known(self, make_deadline, now):
        """Test known results pass their pace through."""
        assert units_per_day_or_zero(compute_deadline_calculations(make_deadline(), now)) == 30
