"""Warning collector threaded through a single chart parse."""

import logging
from typing import Iterator, Optional

from drfchart.config import get_settings
from drfchart.models.chart import ParseWarning, WarningKind

logger = logging.getLogger(__name__)


class WarningCollector:
    """Append-only list of parse warnings for one parse call."""

    def __init__(self, source: str = "", excerpt_length: Optional[int] = None):
        self.source = source
        if excerpt_length is None:
            excerpt_length = get_settings().raw_excerpt_length
        self.excerpt_length = excerpt_length
        self._warnings: list[ParseWarning] = []

    def add(
        self,
        kind: WarningKind,
        message: str,
        line_number: Optional[int] = None,
        record_type: Optional[str] = None,
        raw_line: Optional[str] = None,
    ) -> ParseWarning:
        """Record a warning and mirror it to the standard logger."""
        warning = ParseWarning(
            kind=kind,
            message=message,
            line_number=line_number,
            record_type=record_type,
            raw_content=raw_line[: self.excerpt_length] if raw_line else None,
        )
        self._warnings.append(warning)

        where = f" line {line_number}" if line_number else ""
        logger.debug(f"[{kind.value}] {self.source}{where}: {message}")
        return warning

    # Convenience wrappers for the common kinds

    def parse_error(self, message: str, line_number: Optional[int] = None,
                    record_type: Optional[str] = None, raw_line: Optional[str] = None) -> ParseWarning:
        return self.add(WarningKind.PARSE_ERROR, message, line_number, record_type, raw_line)

    def truncated(self, record_type: str, found: int, expected: int,
                  line_number: Optional[int] = None, raw_line: Optional[str] = None) -> ParseWarning:
        return self.add(
            WarningKind.TRUNCATED_RECORD,
            f"{record_type} record has {found} fields, expected {expected}; missing fields defaulted",
            line_number,
            record_type,
            raw_line,
        )

    def has(self, kind: WarningKind) -> bool:
        return any(w.kind == kind for w in self._warnings)

    def count(self, kind: Optional[WarningKind] = None) -> int:
        if kind is None:
            return len(self._warnings)
        return sum(1 for w in self._warnings if w.kind == kind)

    @property
    def warnings(self) -> list[ParseWarning]:
        return list(self._warnings)

    def __iter__(self) -> Iterator[ParseWarning]:
        return iter(self._warnings)

    def __len__(self) -> int:
        return len(self._warnings)
