"""DRF text chart parser - folds classified records into a ChartFile.

File format:
- H record: header with track/date metadata
- R record: race information
- S record: starter (horse) results

Parsing is best-effort: malformed lines are skipped or defaulted and
reported as warnings on the result, never raised.
"""

import logging
import re
from typing import Optional

from drfchart.charts.diagnostics import WarningCollector
from drfchart.charts.records import (
    RecordType,
    classify_header,
    classify_race,
    classify_starter,
)
from drfchart.charts.tokenizer import split_lines, split_quoted_fields
from drfchart.config import get_settings, utc_now
from drfchart.models.chart import (
    ChartFile,
    ChartHeader,
    ChartRace,
    ChartStarter,
    WarningKind,
)

logger = logging.getLogger(__name__)

# e.g. SAR20060727.chart.txt
_CHART_FILENAME = re.compile(r"^([A-Za-z]+)(\d{8})\.chart\.txt$", re.IGNORECASE)


class ChartInputError(TypeError):
    """Raised when the parser is handed something other than text."""

    pass


def infer_header_from_filename(filename: Optional[str]) -> Optional[tuple[str, str]]:
    """Parse <TRACK><YYYYMMDD>.chart.txt into (track_code, race_date)."""
    if not filename:
        return None
    name = re.split(r"[\\/]", filename)[-1].strip()
    match = _CHART_FILENAME.match(name)
    if not match:
        return None
    track_code, race_date = match.groups()
    return track_code.upper(), race_date


class ChartAggregator:
    """Per-parse state machine that attaches starters to races.

    The header is None until an H record is seen (last one wins).
    ``current_race`` is the race most recently opened by an R record.
    """

    def __init__(self, filename: str = "", warnings: Optional[WarningCollector] = None):
        self.filename = filename
        self.warnings = warnings if warnings is not None else WarningCollector(source=filename)
        self.header: Optional[ChartHeader] = None
        self.races: list[ChartRace] = []
        self.current_race: Optional[ChartRace] = None
        self._races_by_number: dict[int, ChartRace] = {}
        self._records = 0

    @property
    def has_header(self) -> bool:
        return self.header is not None

    def feed(self, line_number: int, line: str) -> None:
        """Classify one raw line and fold it into the result."""
        try:
            self._dispatch(line_number, line)
        except Exception as e:
            logger.warning(f"Chart line parse error in {self.filename or '<unnamed>'} line {line_number}: {e}")
            self.warnings.parse_error(f"Parse error: {e}", line_number, raw_line=line)

    def _dispatch(self, line_number: int, line: str) -> None:
        fields = split_quoted_fields(line)
        if not fields:
            return

        tag = fields[0]
        if tag == RecordType.HEADER.value:
            self.header = classify_header(fields, self.warnings, line_number, line)
        elif tag == RecordType.RACE.value:
            race = classify_race(fields, self.warnings, line_number, line)
            if race is not None:
                self._open_race(race)
        elif tag == RecordType.STARTER.value:
            starter = classify_starter(fields, self.warnings, line_number, line)
            if starter is not None:
                self._attach_starter(starter, line_number, line)
        else:
            self.warnings.add(
                WarningKind.UNKNOWN_RECORD_TYPE,
                f"Unknown record type: {tag[:20]!r}",
                line_number,
                record_type=tag[:20],
                raw_line=line,
            )

    def _open_race(self, race: ChartRace) -> None:
        self._records += 1
        existing = self._races_by_number.get(race.race_number)
        if existing is None:
            self.races.append(race)
        else:
            # Repeated race number: newer attributes, same slot, same starters
            race.starters = existing.starters
            for index, seen in enumerate(self.races):
                if seen is existing:
                    self.races[index] = race
                    break
        self._races_by_number[race.race_number] = race
        self.current_race = race

    def _attach_starter(self, starter: ChartStarter, line_number: int, line: str) -> None:
        self._records += 1
        race = self._races_by_number.get(starter.race_number)
        if race is None:
            self.warnings.add(
                WarningKind.ORPHAN_STARTER,
                f"Starter {starter.horse_name or '?'} for undefined race {starter.race_number} dropped",
                line_number,
                RecordType.STARTER.value,
                line,
            )
            return
        race.starters.append(starter)

    def _resolve_header(self) -> ChartHeader:
        """Return the header, filling track code/date from the filename if needed."""
        header = self.header
        if header is not None and header.is_complete:
            return header

        reason = "No header record found" if header is None else "Header record lacks track code or race date"
        if header is None:
            header = ChartHeader(number_of_races=len(self.races))

        inferred = infer_header_from_filename(self.filename)
        if inferred is None:
            self.warnings.add(
                WarningKind.HEADER_INFERRED,
                f"{reason}; header could not be inferred from filename {self.filename!r}",
            )
            return header

        settings = get_settings()
        track_code, race_date = inferred
        header.track_code = header.track_code or track_code
        header.race_date = header.race_date or race_date
        header.country_code = header.country_code or settings.default_country_code
        if not header.track_name and settings.inferred_track_name_from_code:
            header.track_name = header.track_code
        header.inferred = True

        self.warnings.add(
            WarningKind.HEADER_INFERRED,
            f"{reason}; header inferred from filename: track {header.track_code}, date {header.race_date}",
        )
        return header

    def finish(self) -> ChartFile:
        """Sort starters by finish position and build the result."""
        for race in self.races:
            # list.sort is stable, so ties keep file order
            race.starters.sort(key=lambda s: s.finish_position)

        header = self._resolve_header()

        if self._records == 0:
            self.warnings.add(WarningKind.EMPTY_INPUT, "No race or starter records found")

        return ChartFile(
            header=header,
            races=list(self.races),
            warnings=self.warnings.warnings,
            filename=self.filename,
            parsed_at=utc_now(),
        )


def parse_chart_file(content: str, filename: str = "") -> ChartFile:
    """Parse DRF text chart content.

    Args:
        content: Full file text, already read by the caller.
        filename: Source filename, used to infer the header when it is missing.

    Returns:
        ChartFile with header, races (in file order) and warnings.
    """
    if not isinstance(content, str):
        raise ChartInputError(f"Chart content must be str, got {type(content).__name__}")
    if filename is None:
        filename = ""
    elif not isinstance(filename, str):
        raise ChartInputError(f"Chart filename must be str, got {type(filename).__name__}")

    aggregator = ChartAggregator(filename)

    if not content.strip():
        logger.warning(f"Empty chart file content: {filename or '<unnamed>'}")
        aggregator.warnings.add(WarningKind.EMPTY_INPUT, "File is empty or contains no readable data")
        return ChartFile(
            header=ChartHeader(),
            warnings=aggregator.warnings.warnings,
            filename=filename,
            parsed_at=utc_now(),
        )

    for line_number, line in split_lines(content):
        aggregator.feed(line_number, line)

    chart = aggregator.finish()
    logger.info(
        f"Parsed chart {filename or '<unnamed>'}: {len(chart.races)} races, "
        f"{chart.starter_count} starters, {len(chart.warnings)} warnings"
    )
    return chart
