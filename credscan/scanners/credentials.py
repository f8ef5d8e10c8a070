"""
CredScan Credential Scanner

Finds email-like ``user@domain:password`` pairs anywhere in a file's text.
The pattern is applied to the whole content, not line by line; matches are
greedy and non-overlapping, reported in order of occurrence.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from credscan.core.records import FileRecord
from credscan.core.report import MatchedLine, MatchReport, ScanKind, ScanResult, ScanStatus

logger = logging.getLogger(__name__)

# Group 1 is the email-like identifier, group 2 the password.
CREDENTIAL_PATTERN = re.compile(
    r"([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9._-]+):([a-zA-Z0-9!@#$%^&*()_+]+)"
)


def find_credentials(content: str) -> list[MatchedLine]:
    """Return every credential match in ``content`` as a one-span line."""
    matches: list[MatchedLine] = []
    line_number = 1
    counted_to = 0

    for match in CREDENTIAL_PATTERN.finditer(content):
        line_number += content.count("\n", counted_to, match.start())
        counted_to = match.start()
        text = match.group(0)
        column = match.start() - (content.rfind("\n", 0, match.start()) + 1)
        matches.append(
            MatchedLine(
                text=text,
                spans=((0, len(text)),),
                line_number=line_number,
                column=column,
            )
        )

    return matches


def scan_for_credentials(files: Sequence[FileRecord]) -> ScanResult:
    """
    Scan every file for credential patterns.

    Returns NO_FILES_LOADED for an empty file set and NO_MATCHES when no
    file contains a credential. Files without matches get no report.
    """
    if not files:
        return ScanResult(kind=ScanKind.CREDENTIALS, status=ScanStatus.NO_FILES_LOADED)

    reports: list[MatchReport] = []
    for record in files:
        lines = find_credentials(record.content)
        if lines:
            logger.debug("%s: %d credential match(es)", record.name, len(lines))
            reports.append(
                MatchReport(file_name=record.name, lines=tuple(lines), path=record.path)
            )

    return ScanResult(
        kind=ScanKind.CREDENTIALS,
        status=ScanStatus.FOUND if reports else ScanStatus.NO_MATCHES,
        reports=tuple(reports),
        files_scanned=len(files),
    )
