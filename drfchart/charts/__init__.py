"""DRF text chart parsing."""

from drfchart.charts.diagnostics import WarningCollector
from drfchart.charts.parser import (
    ChartAggregator,
    ChartInputError,
    infer_header_from_filename,
    parse_chart_file,
)
from drfchart.charts.queries import (
    get_active_starters,
    get_chart_race,
    get_race_payoffs,
    get_top_finishers,
    get_winner,
)
from drfchart.charts.tokenizer import split_lines, split_quoted_fields

__all__ = [
    "WarningCollector",
    "ChartAggregator",
    "ChartInputError",
    "infer_header_from_filename",
    "parse_chart_file",
    "get_active_starters",
    "get_chart_race",
    "get_race_payoffs",
    "get_top_finishers",
    "get_winner",
    "split_lines",
    "split_quoted_fields",
]
