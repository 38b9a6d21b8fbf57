"""Unit tests for chart records and configuration."""

from drfchart.charts.parser import parse_chart_file
from drfchart.config import Settings, get_settings
from drfchart.models.chart import ChartHeader, ChartRace, Surface


class TestChartRace:
    """Tests for derived race attributes."""

    def test_furlongs_from_hundredths(self):
        assert ChartRace(race_number=1, distance=1650, distance_unit="F").distance_furlongs == 16.5
        assert ChartRace(race_number=1, distance=600, distance_unit="F").distance_furlongs == 6.0

    def test_furlongs_from_yards(self):
        assert ChartRace(race_number=1, distance=1760, distance_unit="Y").distance_furlongs == 8.0

    def test_unknown_unit(self):
        assert ChartRace(race_number=1, distance=1650, distance_unit="M").distance_furlongs is None
        assert ChartRace(race_number=1, distance=0, distance_unit="F").distance_furlongs is None

    def test_default_surface(self):
        assert ChartRace(race_number=1).surface is Surface.OTHER


class TestChartHeader:
    def test_is_complete(self):
        assert ChartHeader(track_code="SAR", race_date="20060727").is_complete
        assert not ChartHeader(track_code="SAR").is_complete
        assert not ChartHeader().is_complete


class TestToDict:
    """Serialisation for downstream consumers."""

    def test_chart_to_dict(self, sample_chart):
        data = parse_chart_file(sample_chart, "SAR20060727.chart.txt").to_dict()
        assert data["header"]["track_code"] == "SAR"
        assert data["filename"] == "SAR20060727.chart.txt"
        assert data["parsed_at"] is not None
        race = data["races"][0]
        assert race["surface"] == "turf"
        assert race["distance_furlongs"] == 16.5
        assert [s["horse_name"] for s in race["starters"]] == ["Langburg", "Malagash"]
        assert data["warnings"] == []


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.default_country_code == "USA"
        assert settings.raw_excerpt_length == 100
        assert settings.inferred_track_name_from_code is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DRFCHART_LOG_LEVEL", "debug")
        monkeypatch.setenv("DRFCHART_RAW_EXCERPT_LENGTH", "-5")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.raw_excerpt_length == 0

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_track_name_inference_can_be_disabled(self, lines, monkeypatch):
        monkeypatch.setenv("DRFCHART_INFERRED_TRACK_NAME_FROM_CODE", "false")
        chart = parse_chart_file(lines.race, "SAR20060727.chart.txt")
        assert chart.header.track_code == "SAR"
        assert chart.header.track_name == ""
