"""Tests for configuration loading."""

from zoneinfo import ZoneInfo

from bookpace.tracker.config import Config, get_config, reset_config
from bookpace.tracker.pace.urgency import UrgencyThresholds


class TestConfig:
    """Tests for Config."""

    def test_defaults(self):
        """Test values without any environment."""
        config = Config.from_env()

        assert config.timezone == "UTC"
        assert config.pages_easy_pace == 30
        assert config.audio_max_pace == 480
        assert config.pace_window_days == 21
        assert config.validate() == []

    def test_from_environment(self, monkeypatch):
        """Test environment variables override defaults."""
        monkeypatch.setenv("BOOKPACE_TIMEZONE", "Europe/Paris")
        monkeypatch.setenv("BOOKPACE_AUDIO_EASY_PACE", "30")
        monkeypatch.setenv("BOOKPACE_PACE_WINDOW_DAYS", "14")

        config = Config.from_env()
        assert config.zone == ZoneInfo("Europe/Paris")
        assert config.audio_easy_pace == 30
        assert config.pace_window_days == 14

    def test_thresholds(self):
        """Test bands are grouped per format family."""
        thresholds = Config.from_env().pace_thresholds

        assert thresholds.pages == UrgencyThresholds(easy_pace=30, urgent_pace=60, max_pace=150)
        assert thresholds.audio == UrgencyThresholds(easy_pace=45, urgent_pace=120, max_pace=480)

    def test_unknown_timezone(self, monkeypatch):
        """Test a bad zone is reported and falls back to UTC."""
        monkeypatch.setenv("BOOKPACE_TIMEZONE", "Mars/Olympus_Mons")
        config = Config.from_env()

        assert any("timezone" in error for error in config.validate())
        assert config.zone == ZoneInfo("UTC")

    def test_bands_must_ascend(self, monkeypatch):
        """Test out-of-order bands are reported."""
        monkeypatch.setenv("BOOKPACE_PAGES_URGENT_PACE", "200")
        errors = Config.from_env().validate()
        assert any("ascending" in error for error in errors)

    def test_window_must_be_positive(self, monkeypatch):
        """Test an empty pace window is reported."""
        monkeypatch.setenv("BOOKPACE_PACE_WINDOW_DAYS", "0")
        assert "Pace window must be at least one day" in Config.from_env().validate()


class TestGlobalConfig:
    """Tests for get_config and reset_config."""

    def test_cached_until_reset(self, monkeypatch):
        """Test the global instance is reused until reset."""
        first = get_config()
        monkeypatch.setenv("BOOKPACE_TIMEZONE", "Asia/Tokyo")
        assert get_config() is first

        reset_config()
        assert get_config().timezone == "Asia/Tokyo"
