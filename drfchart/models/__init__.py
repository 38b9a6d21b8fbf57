"""Data models for parsed DRF charts."""

from drfchart.models.chart import (
    SCRATCH_POSITION,
    ChartFile,
    ChartHeader,
    ChartRace,
    ChartStarter,
    ParseWarning,
    Surface,
    WarningKind,
)

__all__ = [
    "SCRATCH_POSITION",
    "ChartFile",
    "ChartHeader",
    "ChartRace",
    "ChartStarter",
    "ParseWarning",
    "Surface",
    "WarningKind",
]
