"""
CredScan Console Reporter

Prints scan results to the terminal with matched text highlighted.
"""

from __future__ import annotations

import sys
from typing import Sequence

import click

from credscan import __version__
from credscan.core.records import DecodeFailure
from credscan.core.report import MatchedLine, ScanKind, ScanResult
from credscan.reporting.common import display_reports, status_message


def _safe_echo(text: str = "", **kwargs) -> None:
    """Echo text, handling Unicode issues on Windows consoles."""
    try:
        click.echo(text, **kwargs)
    except UnicodeEncodeError:
        safe = text.encode(sys.stdout.encoding or "utf-8", errors="replace").decode(
            sys.stdout.encoding or "utf-8", errors="replace"
        )
        click.echo(safe, **kwargs)


HIGHLIGHT_STYLE = {"fg": "black", "bg": "yellow", "bold": True}


class ConsoleReporter:
    """Prints a formatted scan report to the console."""

    def __init__(self, redact: bool = False) -> None:
        self.redact = redact

    def report(
        self,
        result: ScanResult,
        failures: Sequence[DecodeFailure] = (),
        loaded: int = 0,
    ) -> None:
        """
        Print the full scan report.

        Args:
            result: The scan result to display.
            failures: Files that could not be loaded.
            loaded: Number of files that were loaded successfully.
        """
        self._print_header(result, loaded)
        self._print_failures(failures)

        if result.found:
            self._print_reports(result)

        self._print_footer(result)

    def _print_header(self, result: ScanResult, loaded: int) -> None:
        _safe_echo("")
        _safe_echo(click.style("=" * 55, fg="bright_blue"))
        _safe_echo(click.style(f"  CredScan {__version__}", fg="bright_white", bold=True))
        if result.kind is ScanKind.CREDENTIALS:
            _safe_echo(click.style("  Mode: user:pass patterns", fg="white"))
        else:
            _safe_echo(click.style(f'  Mode: search for "{result.query}"', fg="white"))
        if loaded:
            _safe_echo(click.style(f"  Loaded {loaded} file(s)", fg="white"))
        _safe_echo(click.style("=" * 55, fg="bright_blue"))

    def _print_failures(self, failures: Sequence[DecodeFailure]) -> None:
        if not failures:
            return
        _safe_echo("")
        for failure in failures:
            _safe_echo(
                click.style(f"  [!] {failure.name}: ", fg="yellow")
                + click.style(failure.reason, fg="white")
            )

    def _print_reports(self, result: ScanResult) -> None:
        for report in display_reports(result, redact=self.redact):
            _safe_echo("")
            _safe_echo(click.style(f"  File: {report.file_name}", fg="bright_white", bold=True))
            _safe_echo(click.style("-" * 55, fg="bright_black"))
            for line in report.lines:
                _safe_echo(self._format_line(line))

    def _format_line(self, line: MatchedLine) -> str:
        prefix = click.style(f"  {line.line_number:>5}: ", fg="bright_black")
        body = "".join(
            click.style(seg.text, **HIGHLIGHT_STYLE) if seg.highlighted else seg.text
            for seg in line.segments()
        )
        return prefix + body

    def _print_footer(self, result: ScanResult) -> None:
        _safe_echo("")
        color = "green" if result.found else "yellow"
        _safe_echo(click.style(f"  {status_message(result)}", fg=color, bold=True))
        _safe_echo(click.style("=" * 55, fg="bright_blue"))
        _safe_echo("")
