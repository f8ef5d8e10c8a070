"""
CredScan Literal Query Scanner

Searches each file line by line for a literal, case-sensitive substring.
The query is escaped before compiling, so regex metacharacters match
themselves. Every non-overlapping occurrence on a line becomes a span.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from credscan.core.records import FileRecord
from credscan.core.report import MatchedLine, MatchReport, ScanKind, ScanResult, ScanStatus

logger = logging.getLogger(__name__)


def find_query(content: str, pattern: re.Pattern) -> list[MatchedLine]:
    """Return the lines of ``content`` that contain ``pattern``, with spans."""
    matches: list[MatchedLine] = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        spans = tuple(m.span() for m in pattern.finditer(line))
        if spans:
            matches.append(MatchedLine(text=line, spans=spans, line_number=line_number))
    return matches


def scan_for_query(files: Sequence[FileRecord], query: str) -> ScanResult:
    """
    Scan every file for lines containing ``query``.

    The query is trimmed first; an empty query yields INVALID_QUERY without
    scanning. An empty file set yields NO_FILES_LOADED.
    """
    needle = query.strip()
    if not needle:
        return ScanResult(kind=ScanKind.QUERY, status=ScanStatus.INVALID_QUERY, query=needle)

    if not files:
        return ScanResult(kind=ScanKind.QUERY, status=ScanStatus.NO_FILES_LOADED, query=needle)

    pattern = re.compile(re.escape(needle))
    reports: list[MatchReport] = []
    for record in files:
        lines = find_query(record.content, pattern)
        if lines:
            logger.debug("%s: %d matching line(s)", record.name, len(lines))
            reports.append(
                MatchReport(file_name=record.name, lines=tuple(lines), path=record.path)
            )

    return ScanResult(
        kind=ScanKind.QUERY,
        status=ScanStatus.FOUND if reports else ScanStatus.NO_MATCHES,
        reports=tuple(reports),
        query=needle,
        files_scanned=len(files),
    )
