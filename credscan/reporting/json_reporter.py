"""
CredScan JSON Reporter

Generates machine-readable JSON output format:
{
    "version": "1.0",
    "tool": {"name": "CredScan", "version": "..."},
    "kind": "credentials" | "query",
    "status": "found" | "no_matches" | "no_files_loaded" | "invalid_query",
    "summary": {"files_scanned": N, "files_matched": N, "total_matches": N},
    "reports": [...],
    "failures": [...]
}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Sequence

from credscan import __version__
from credscan.core.records import DecodeFailure
from credscan.core.report import ScanResult
from credscan.reporting.common import display_reports, status_message


class JSONReporter:
    """Generates JSON-formatted scan reports."""

    def __init__(self, redact: bool = False) -> None:
        self.redact = redact

    def report(
        self,
        result: ScanResult,
        failures: Sequence[DecodeFailure] = (),
        output_file: Optional[str] = None,
    ) -> str:
        """
        Generate JSON report.

        Args:
            result: The scan result to serialize.
            failures: Files that could not be loaded.
            output_file: Optional file path to write the report to.

        Returns:
            The JSON string.
        """
        data = result.to_dict()
        if self.redact:
            data["reports"] = [
                report.to_dict() for report in display_reports(result, redact=True)
            ]

        report_data = {
            "version": "1.0",
            "tool": {
                "name": "CredScan",
                "version": __version__,
            },
            **data,
            "message": status_message(result),
            "failures": [f.to_dict() for f in failures],
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)

        if output_file:
            Path(output_file).write_text(json_str, encoding="utf-8")

        return json_str
