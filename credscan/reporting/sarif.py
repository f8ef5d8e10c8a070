"""
CredScan SARIF Reporter

Generates SARIF 2.1.0 (Static Analysis Results Interchange Format) output
so credential matches show up in code-scanning viewers such as
GitHub Code Scanning and VSCode's SARIF viewer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from credscan import __version__
from credscan.core.report import MatchReport, ScanKind, ScanResult
from credscan.reporting.common import display_reports


# One rule per scan kind
SARIF_RULES = {
    ScanKind.CREDENTIALS: {
        "id": "CS-CRED-001",
        "name": "CredentialPattern",
        "shortDescription": {"text": "user:pass credential pattern"},
        "fullDescription": {
            "text": "An email-like identifier followed by ':' and a password-like token."
        },
        "defaultConfiguration": {"level": "error"},
    },
    ScanKind.QUERY: {
        "id": "CS-QUERY-001",
        "name": "LiteralQuery",
        "shortDescription": {"text": "Literal query match"},
        "fullDescription": {"text": "A line containing the searched literal text."},
        "defaultConfiguration": {"level": "note"},
    },
}


class SARIFReporter:
    """Generates SARIF 2.1.0-formatted scan reports."""

    def __init__(self, redact: bool = False) -> None:
        self.redact = redact

    def report(
        self,
        result: ScanResult,
        output_file: Optional[str] = None,
    ) -> str:
        """
        Generate SARIF report.

        Args:
            result: The scan result to convert.
            output_file: Optional file path to write the report to.

        Returns:
            The SARIF JSON string.
        """
        rule = SARIF_RULES[result.kind]
        results: list[dict] = []

        for report in display_reports(result, redact=self.redact):
            uri = self._artifact_uri(report)
            for line in report.lines:
                for start, end in line.spans:
                    results.append(
                        {
                            "ruleId": rule["id"],
                            "ruleIndex": 0,
                            "level": rule["defaultConfiguration"]["level"],
                            "message": {"text": self._message(result, line.text[start:end])},
                            "locations": [
                                {
                                    "physicalLocation": {
                                        "artifactLocation": {"uri": uri},
                                        "region": {
                                            "startLine": max(1, line.line_number),
                                            "startColumn": line.column + start + 1,
                                            "snippet": {"text": line.text},
                                        },
                                    }
                                }
                            ],
                        }
                    )

        sarif = {
            "$schema": "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/sarif-2.1/schema/sarif-schema-2.1.0.json",
            "version": "2.1.0",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "CredScan",
                            "version": __version__,
                            "rules": [rule],
                        }
                    },
                    "results": results,
                    "columnKind": "unicodeCodePoints",
                }
            ],
        }

        sarif_str = json.dumps(sarif, indent=2, ensure_ascii=False)

        if output_file:
            Path(output_file).write_text(sarif_str, encoding="utf-8")

        return sarif_str

    @staticmethod
    def _artifact_uri(report: MatchReport) -> str:
        """File URI for absolute paths, forward-slash relative path otherwise."""
        if report.path is None:
            return report.file_name.replace("\\", "/")
        path = Path(report.path)
        if path.is_absolute():
            return path.as_uri()
        return path.as_posix()

    @staticmethod
    def _message(result: ScanResult, matched: str) -> str:
        if result.kind is ScanKind.CREDENTIALS:
            return f"Credential pattern found: {matched}"
        return f'Found "{result.query}"'
