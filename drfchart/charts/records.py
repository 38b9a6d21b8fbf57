"""Typed classification of chart records (H, R and S lines).

Columns are numbered from 1 as in the DRF layout, column 1 being the record
tag. Short lines are tolerated: missing trailing columns read as blank and
the record is flagged as truncated instead of being rejected.
"""

import math
from enum import Enum
from typing import Optional

from drfchart.charts.diagnostics import WarningCollector
from drfchart.models.chart import (
    SCRATCH_POSITION,
    ChartHeader,
    ChartRace,
    ChartStarter,
    Surface,
)


class RecordType(str, Enum):
    """Leading tag of a chart line."""

    HEADER = "H"
    RACE = "R"
    STARTER = "S"


SCRATCH_TOKEN = "SCR"

# --- Header (H) columns ---
HEADER_FIELDS = 7
_H_COUNTRY = 2
_H_TRACK = 3
_H_DATE = 4
_H_RACE_COUNT = 5
_H_MEET_CODE = 6
_H_TRACK_NAME = 7

# --- Race (R) columns ---
RACE_FIELDS = 43
_R_NUMBER = 2
_R_BREED = 3
_R_TYPE = 4
_R_PURSE = 9
_R_DISTANCE = 30
_R_DISTANCE_UNIT = 31
_R_SURFACE = 32
_R_CONDITIONS = 42
_R_TRACK_CONDITION = 43

# --- Starter (S) columns ---
STARTER_FIELDS = 70
_S_RACE_NUMBER = 2
_S_HORSE_ID = 3
_S_HORSE_NAME = 4
_S_JOCKEY = (28, 27)  # first, last
_S_TRAINER = (32, 33, 31)  # first, middle, last
_S_OWNER = (35, 36, 34)  # first, middle, last or stable name
_S_ODDS = 37
_S_POST_POSITION = 42
_S_PROGRAM_NUMBER = 43
_S_FINISH = 51
_S_LENGTHS_BEHIND = 63
_S_SHORT_COMMENT = 66
_S_TRIP_COMMENT = 67
_S_WIN_PAYOFF = 68
_S_PLACE_PAYOFF = 69
_S_SHOW_PAYOFF = 70

SURFACE_CODES: dict[str, Surface] = {
    "D": Surface.DIRT,
    "T": Surface.TURF,
    "S": Surface.OTHER,  # synthetic
    "A": Surface.OTHER,  # all-weather
}


# ── Field helpers ───────────────────────────────────────────────────────────


def get_field(fields: list[str], column: int) -> str:
    """Value of a 1-based column, or "" when the line is too short."""
    index = column - 1
    if 0 <= index < len(fields):
        return fields[index]
    return ""


def _has_column(fields: list[str], column: int) -> bool:
    return column <= len(fields)


def _clean_number(value: str) -> str:
    return value.replace(",", "").replace("$", "").strip()


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer field, None if blank or not numeric."""
    if not value:
        return None
    cleaned = _clean_number(value)
    if not cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        pass
    try:
        number = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number)


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a decimal field, None if blank or not numeric."""
    if not value:
        return None
    cleaned = _clean_number(value)
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _join_name(fields: list[str], columns: tuple[int, ...]) -> str:
    return " ".join(p for p in (get_field(fields, c) for c in columns) if p)


def _required_int(
    fields: list[str],
    column: int,
    label: str,
    sink: WarningCollector,
    record_type: RecordType,
    line_number: Optional[int],
    raw_line: Optional[str],
) -> int:
    """Integer column that must be numeric; 0 plus a parse-error otherwise.

    A column missing from a truncated line reads as 0 without a second warning.
    """
    if not _has_column(fields, column):
        return 0
    raw = get_field(fields, column)
    value = parse_int(raw)
    if value is None:
        sink.parse_error(
            f"Non-numeric {label} {raw!r} in {record_type.value} record",
            line_number,
            record_type.value,
            raw_line,
        )
        return 0
    return value


# ── Classifiers ─────────────────────────────────────────────────────────────


def classify_header(
    fields: list[str],
    sink: WarningCollector,
    line_number: Optional[int] = None,
    raw_line: Optional[str] = None,
) -> ChartHeader:
    """Map an H record to a ChartHeader, defaulting missing columns."""
    if len(fields) < HEADER_FIELDS:
        sink.truncated(RecordType.HEADER.value, len(fields), HEADER_FIELDS, line_number, raw_line)

    race_count_raw = get_field(fields, _H_RACE_COUNT)
    number_of_races = parse_int(race_count_raw)
    if number_of_races is None:
        if _has_column(fields, _H_RACE_COUNT):
            sink.parse_error(
                f"Non-numeric number of races {race_count_raw!r} in H record",
                line_number,
                RecordType.HEADER.value,
                raw_line,
            )
        number_of_races = 0

    return ChartHeader(
        country_code=get_field(fields, _H_COUNTRY),
        track_code=get_field(fields, _H_TRACK),
        race_date=get_field(fields, _H_DATE),
        number_of_races=number_of_races,
        meet_code=get_field(fields, _H_MEET_CODE),
        track_name=get_field(fields, _H_TRACK_NAME),
    )


def classify_race(
    fields: list[str],
    sink: WarningCollector,
    line_number: Optional[int] = None,
    raw_line: Optional[str] = None,
) -> Optional[ChartRace]:
    """Map an R record to a ChartRace (without starters).

    Returns None only when the line is too short to carry a race number.
    """
    if len(fields) < _R_NUMBER:
        sink.truncated(RecordType.RACE.value, len(fields), RACE_FIELDS, line_number, raw_line)
        return None
    if len(fields) < RACE_FIELDS:
        sink.truncated(RecordType.RACE.value, len(fields), RACE_FIELDS, line_number, raw_line)

    race_number = _required_int(
        fields, _R_NUMBER, "race number", sink, RecordType.RACE, line_number, raw_line
    )
    distance = _required_int(
        fields, _R_DISTANCE, "distance", sink, RecordType.RACE, line_number, raw_line
    )

    surface_code = get_field(fields, _R_SURFACE)
    surface = SURFACE_CODES.get(surface_code)
    if surface is None:
        surface = Surface.OTHER
        if _has_column(fields, _R_SURFACE):
            sink.parse_error(
                f"Unrecognised surface code {surface_code!r} for race {race_number}",
                line_number,
                RecordType.RACE.value,
                raw_line,
            )

    return ChartRace(
        race_number=race_number,
        breed_code=get_field(fields, _R_BREED),
        race_type=get_field(fields, _R_TYPE),
        distance=distance,
        distance_unit=get_field(fields, _R_DISTANCE_UNIT),
        surface_code=surface_code,
        surface=surface,
        track_condition=get_field(fields, _R_TRACK_CONDITION),
        purse=parse_int(get_field(fields, _R_PURSE)),
        race_conditions=get_field(fields, _R_CONDITIONS),
    )


def _finish_position(
    fields: list[str],
    sink: WarningCollector,
    line_number: Optional[int],
    raw_line: Optional[str],
) -> tuple[int, bool]:
    """Resolve (finish_position, is_scratched) for a starter.

    Scratches carry ``SCR`` in the finish or program-number column. Anything
    that is not a usable 1-based number is treated as a scratch-like anomaly.
    """
    finish_raw = get_field(fields, _S_FINISH)
    if finish_raw == SCRATCH_TOKEN or get_field(fields, _S_PROGRAM_NUMBER) == SCRATCH_TOKEN:
        return SCRATCH_POSITION, True

    if not _has_column(fields, _S_FINISH):
        return SCRATCH_POSITION, True

    position = parse_int(finish_raw)
    if position is None or position < 1:
        sink.parse_error(
            f"Invalid finish position {finish_raw!r}; treated as scratched",
            line_number,
            RecordType.STARTER.value,
            raw_line,
        )
        return SCRATCH_POSITION, True

    return position, position == SCRATCH_POSITION


def classify_starter(
    fields: list[str],
    sink: WarningCollector,
    line_number: Optional[int] = None,
    raw_line: Optional[str] = None,
) -> Optional[ChartStarter]:
    """Map an S record to a ChartStarter.

    Returns None only when the line is too short to carry a race number.
    """
    if len(fields) < _S_RACE_NUMBER:
        sink.truncated(RecordType.STARTER.value, len(fields), STARTER_FIELDS, line_number, raw_line)
        return None
    if len(fields) < STARTER_FIELDS:
        sink.truncated(RecordType.STARTER.value, len(fields), STARTER_FIELDS, line_number, raw_line)

    race_number = _required_int(
        fields, _S_RACE_NUMBER, "race number", sink, RecordType.STARTER, line_number, raw_line
    )
    finish_position, is_scratched = _finish_position(fields, sink, line_number, raw_line)

    # Lengths behind can hold trip text for some starters
    lengths_raw = get_field(fields, _S_LENGTHS_BEHIND)
    lengths_behind = parse_float(lengths_raw) if lengths_raw[:1].isdigit() else None

    return ChartStarter(
        race_number=race_number,
        horse_name=get_field(fields, _S_HORSE_NAME),
        horse_id=get_field(fields, _S_HORSE_ID),
        program_number=get_field(fields, _S_PROGRAM_NUMBER),
        post_position=parse_int(get_field(fields, _S_POST_POSITION)) or 0,
        finish_position=finish_position,
        is_scratched=is_scratched,
        odds=parse_float(get_field(fields, _S_ODDS)),
        win_payoff=parse_float(get_field(fields, _S_WIN_PAYOFF)),
        place_payoff=parse_float(get_field(fields, _S_PLACE_PAYOFF)),
        show_payoff=parse_float(get_field(fields, _S_SHOW_PAYOFF)),
        lengths_behind=lengths_behind,
        jockey_name=_join_name(fields, _S_JOCKEY),
        trainer_name=_join_name(fields, _S_TRAINER),
        owner_name=_join_name(fields, _S_OWNER),
        short_comment=get_field(fields, _S_SHORT_COMMENT),
        trip_comment=get_field(fields, _S_TRIP_COMMENT),
        line_number=line_number,
    )
