"""In-memory records for a parsed DRF text chart."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

# Finish position assigned to scratched starters; sorts them behind every finisher.
SCRATCH_POSITION = 99


class Surface(str, Enum):
    """Racing surface derived from the race record's surface code."""

    DIRT = "dirt"
    TURF = "turf"
    OTHER = "other"


class WarningKind(str, Enum):
    """Closed set of non-fatal problems the parser can report."""

    UNKNOWN_RECORD_TYPE = "unknown-record-type"
    TRUNCATED_RECORD = "truncated-record"
    PARSE_ERROR = "parse-error"
    HEADER_INFERRED = "header-inferred"
    ORPHAN_STARTER = "orphan-starter"
    EMPTY_INPUT = "empty-input"


@dataclass
class ParseWarning:
    """A single anomaly found while parsing a chart."""

    kind: WarningKind
    message: str
    line_number: Optional[int] = None
    record_type: Optional[str] = None  # H, R, S or the unrecognised tag
    raw_content: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "line_number": self.line_number,
            "record_type": self.record_type,
            "raw_content": self.raw_content,
        }


@dataclass
class ChartHeader:
    """Track/date metadata from the H record (or inferred from the filename)."""

    country_code: str = ""
    track_code: str = ""
    race_date: str = ""  # YYYYMMDD exactly as written in the file
    number_of_races: int = 0
    meet_code: str = ""  # day/evening discriminator, "D" in observed files
    track_name: str = ""
    inferred: bool = False

    @property
    def is_complete(self) -> bool:
        return bool(self.track_code and self.race_date)

    def to_dict(self) -> dict:
        return {
            "country_code": self.country_code,
            "track_code": self.track_code,
            "race_date": self.race_date,
            "number_of_races": self.number_of_races,
            "meet_code": self.meet_code,
            "track_name": self.track_name,
            "inferred": self.inferred,
        }


@dataclass
class ChartStarter:
    """One horse entered in a race, whether it ran or was scratched."""

    race_number: int
    horse_name: str = ""
    horse_id: str = ""
    program_number: str = ""
    post_position: int = 0
    finish_position: int = SCRATCH_POSITION
    is_scratched: bool = True
    odds: Optional[float] = None
    win_payoff: Optional[float] = None
    place_payoff: Optional[float] = None
    show_payoff: Optional[float] = None
    lengths_behind: Optional[float] = None
    jockey_name: str = ""
    trainer_name: str = ""
    owner_name: str = ""
    short_comment: str = ""
    trip_comment: str = ""
    line_number: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "race_number": self.race_number,
            "horse_name": self.horse_name,
            "horse_id": self.horse_id,
            "program_number": self.program_number,
            "post_position": self.post_position,
            "finish_position": self.finish_position,
            "is_scratched": self.is_scratched,
            "odds": self.odds,
            "win_payoff": self.win_payoff,
            "place_payoff": self.place_payoff,
            "show_payoff": self.show_payoff,
            "lengths_behind": self.lengths_behind,
            "jockey_name": self.jockey_name,
            "trainer_name": self.trainer_name,
            "owner_name": self.owner_name,
            "short_comment": self.short_comment,
            "trip_comment": self.trip_comment,
        }


@dataclass
class ChartRace:
    """A single race and the starters it owns."""

    race_number: int
    breed_code: str = ""
    race_type: str = ""
    distance: int = 0
    distance_unit: str = ""
    surface_code: str = ""
    surface: Surface = Surface.OTHER
    track_condition: str = ""
    purse: Optional[int] = None
    race_conditions: str = ""
    starters: list[ChartStarter] = field(default_factory=list)

    @property
    def distance_furlongs(self) -> Optional[float]:
        """Distance in furlongs when the unit is known.

        Charts write furlong distances in hundredths (1650 = 16.5f).
        """
        if self.distance <= 0:
            return None
        if self.distance_unit == "F":
            return self.distance / 100
        if self.distance_unit == "Y":
            return round(self.distance / 220, 2)
        return None

    def to_dict(self) -> dict:
        return {
            "race_number": self.race_number,
            "breed_code": self.breed_code,
            "race_type": self.race_type,
            "distance": self.distance,
            "distance_unit": self.distance_unit,
            "distance_furlongs": self.distance_furlongs,
            "surface_code": self.surface_code,
            "surface": self.surface.value,
            "track_condition": self.track_condition,
            "purse": self.purse,
            "race_conditions": self.race_conditions,
            "starters": [s.to_dict() for s in self.starters],
        }


@dataclass
class ChartFile:
    """Everything extracted from one chart file."""

    header: ChartHeader
    races: list[ChartRace] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)
    filename: str = ""
    parsed_at: Optional[datetime] = None

    @property
    def starter_count(self) -> int:
        return sum(len(r.starters) for r in self.races)

    def to_dict(self) -> dict:
        return {
            "header": self.header.to_dict(),
            "races": [r.to_dict() for r in self.races],
            "warnings": [w.to_dict() for w in self.warnings],
            "filename": self.filename,
            "parsed_at": self.parsed_at.isoformat() if self.parsed_at else None,
        }
