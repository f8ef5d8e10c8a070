"""
CredScan Match Report Model

A MatchReport lists the matching lines of one file together with the
character spans to highlight. Reports carry structured segments rather
than markup; escaping is left to whichever reporter renders them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


Span = tuple[int, int]


class ScanKind(Enum):
    CREDENTIALS = "credentials"
    QUERY = "query"


class ScanStatus(Enum):
    FOUND = "found"
    NO_MATCHES = "no_matches"
    NO_FILES_LOADED = "no_files_loaded"
    INVALID_QUERY = "invalid_query"


@dataclass(frozen=True)
class Segment:
    text: str
    highlighted: bool = False


@dataclass(frozen=True)
class MatchedLine:
    text: str
    spans: tuple[Span, ...]
    line_number: int
    # Offset of text[0] within its source line; spans are relative to text.
    column: int = 0

    def segments(self) -> list[Segment]:
        """Split the line into plain and highlighted segments."""
        result: list[Segment] = []
        cursor = 0
        for start, end in self.spans:
            if start > cursor:
                result.append(Segment(self.text[cursor:start]))
            result.append(Segment(self.text[start:end], highlighted=True))
            cursor = end
        if cursor < len(self.text):
            result.append(Segment(self.text[cursor:]))
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "line": self.line_number,
            "column": self.column,
            "spans": [list(span) for span in self.spans],
        }


@dataclass(frozen=True)
class MatchReport:
    file_name: str
    lines: tuple[MatchedLine, ...]
    path: Optional[str] = None

    @property
    def match_count(self) -> int:
        return sum(len(line.spans) for line in self.lines)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"file": self.file_name}
        if self.path is not None:
            result["path"] = self.path
        result["match_count"] = self.match_count
        result["lines"] = [line.to_dict() for line in self.lines]
        return result


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan over a file snapshot."""

    kind: ScanKind
    status: ScanStatus
    reports: tuple[MatchReport, ...] = ()
    query: Optional[str] = None
    files_scanned: int = 0

    @property
    def found(self) -> bool:
        return self.status is ScanStatus.FOUND

    @property
    def total_matches(self) -> int:
        return sum(report.match_count for report in self.reports)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "kind": self.kind.value,
            "status": self.status.value,
            "found": self.found,
        }
        if self.query is not None:
            result["query"] = self.query
        result["summary"] = {
            "files_scanned": self.files_scanned,
            "files_matched": len(self.reports),
            "total_matches": self.total_matches,
        }
        result["reports"] = [report.to_dict() for report in self.reports]
        return result
