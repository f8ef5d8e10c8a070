"""
Helpers shared by the CredScan reporters.
"""

from __future__ import annotations

from dataclasses import replace

from credscan.core.report import MatchedLine, ScanKind, ScanResult, ScanStatus


def status_message(result: ScanResult) -> str:
    """The user-facing sentence describing a scan outcome."""
    if result.status is ScanStatus.NO_FILES_LOADED:
        return "No files loaded"
    if result.status is ScanStatus.INVALID_QUERY:
        return "Enter a search query"
    if result.status is ScanStatus.NO_MATCHES:
        if result.kind is ScanKind.CREDENTIALS:
            return "No user:pass patterns found"
        return f'No matches found for "{result.query}"'
    return f"Found {result.total_matches} match(es) in {len(result.reports)} file(s)"


def redact_password(value: str, visible: int = 1) -> str:
    """Mask a password, keeping ``visible`` characters at each end."""
    if len(value) <= visible * 2:
        return "*" * len(value)
    return f"{value[:visible]}{'*' * (len(value) - visible * 2)}{value[-visible:]}"


def redact_line(line: MatchedLine) -> MatchedLine:
    """Return a credential match with its password part masked."""
    identifier, sep, password = line.text.partition(":")
    if not sep:
        return line
    text = f"{identifier}:{redact_password(password)}"
    return replace(line, text=text, spans=((0, len(text)),))


def display_reports(result: ScanResult, redact: bool = False):
    """Yield the reports of ``result`` ready for display."""
    for report in result.reports:
        if redact and result.kind is ScanKind.CREDENTIALS:
            report = replace(report, lines=tuple(redact_line(line) for line in report.lines))
        yield report
