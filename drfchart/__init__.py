"""Parser for DRF text chart files (official race results)."""

from drfchart.charts import (
    ChartInputError,
    get_active_starters,
    get_chart_race,
    get_race_payoffs,
    get_top_finishers,
    get_winner,
    parse_chart_file,
)
from drfchart.models import (
    SCRATCH_POSITION,
    ChartFile,
    ChartHeader,
    ChartRace,
    ChartStarter,
    ParseWarning,
    Surface,
    WarningKind,
)

__version__ = "0.1.0"

__all__ = [
    "ChartInputError",
    "get_active_starters",
    "get_chart_race",
    "get_race_payoffs",
    "get_top_finishers",
    "get_winner",
    "parse_chart_file",
    "SCRATCH_POSITION",
    "ChartFile",
    "ChartHeader",
    "ChartRace",
    "ChartStarter",
    "ParseWarning",
    "Surface",
    "WarningKind",
]
