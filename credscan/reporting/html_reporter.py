"""
CredScan HTML Reporter

Renders a standalone results page. All text taken from scanned files is
escaped with html.escape before it is placed into markup; highlights are
built from the precomputed segments of each matched line.
"""

from __future__ import annotations

import html
from pathlib import Path
from typing import Optional, Sequence

from credscan import __version__
from credscan.core.records import DecodeFailure
from credscan.core.report import MatchedLine, ScanKind, ScanResult
from credscan.reporting.common import display_reports, status_message


PAGE_STYLE = """\
body { font-family: sans-serif; background: #10131a; color: #e6e6e6; margin: 2rem; }
h1 { font-size: 1.3rem; }
h3 { margin-bottom: .3rem; }
pre { background: #1b2030; padding: .8rem; border-radius: 6px; overflow-x: auto; }
.highlight { background: #ffd54f; color: #000; font-weight: bold; }
.empty-state { color: #9aa3b5; font-style: italic; }
.failure { color: #ffb74d; }
.lineno { color: #6b7385; user-select: none; }
"""


class HTMLReporter:
    """Generates a self-contained HTML results page."""

    def __init__(self, redact: bool = False) -> None:
        self.redact = redact

    def report(
        self,
        result: ScanResult,
        failures: Sequence[DecodeFailure] = (),
        output_file: Optional[str] = None,
    ) -> str:
        """
        Generate HTML report.

        Args:
            result: The scan result to render.
            failures: Files that could not be loaded.
            output_file: Optional file path to write the page to.

        Returns:
            The HTML document.
        """
        if result.kind is ScanKind.CREDENTIALS:
            title = "user:pass patterns"
        else:
            title = f'Search for "{result.query}"'

        body: list[str] = [f"<h1>CredScan &mdash; {html.escape(title)}</h1>"]

        for failure in failures:
            body.append(
                f'<p class="failure">{html.escape(failure.name)}: {html.escape(failure.reason)}</p>'
            )

        if result.found:
            for report in display_reports(result, redact=self.redact):
                body.append('<div class="result-item">')
                body.append(f"<h3>File: {html.escape(report.file_name)}</h3>")
                body.append("<pre>" + "\n".join(self._render_line(l) for l in report.lines) + "</pre>")
                body.append("</div>")

        css_class = "results-header" if result.found else "empty-state"
        body.append(f'<p class="{css_class}">{html.escape(status_message(result))}</p>')

        page = (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
            f"<title>CredScan {__version__} results</title>\n"
            f"<style>\n{PAGE_STYLE}</style>\n</head>\n<body>\n"
            + "\n".join(body)
            + "\n</body>\n</html>\n"
        )

        if output_file:
            Path(output_file).write_text(page, encoding="utf-8")

        return page

    @staticmethod
    def _render_line(line: MatchedLine) -> str:
        parts = [f'<span class="lineno">{line.line_number}:</span> ']
        for seg in line.segments():
            text = html.escape(seg.text)
            parts.append(f'<span class="highlight">{text}</span>' if seg.highlighted else text)
        return "".join(parts)
