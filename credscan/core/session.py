"""
CredScan Workspace

Holds the state a front end owns between scans: the current file snapshot,
the failures from the last load, and the last scan result. Each load
replaces the snapshot wholesale; each scan replaces the last result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from credscan.core.records import (
    DEFAULT_ENCODING,
    DEFAULT_ERRORS,
    DecodeFailure,
    FileRecord,
    load_files,
)
from credscan.core.report import ScanResult
from credscan.core.request import ScanRequest
from credscan.core.scanner import Scanner

logger = logging.getLogger(__name__)


class Workspace:
    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        errors: str = DEFAULT_ERRORS,
        scanner: Optional[Scanner] = None,
    ) -> None:
        self.encoding = encoding
        self.errors = errors
        self.scanner = scanner or Scanner()
        self.records: tuple[FileRecord, ...] = ()
        self.failures: tuple[DecodeFailure, ...] = ()
        self.last_result: Optional[ScanResult] = None

    async def load(self, paths: Iterable[Union[str, Path]]) -> tuple[FileRecord, ...]:
        """Replace the file snapshot with the decoded contents of ``paths``."""
        loaded = await load_files(paths, encoding=self.encoding, errors=self.errors)
        self.records = loaded.records
        self.failures = loaded.failures
        logger.debug("Workspace now holds %d file(s)", len(self.records))
        return self.records

    async def scan(self, request: ScanRequest) -> ScanResult:
        """Scan the current snapshot and remember the result."""
        result = await self.scanner.submit(self.records, request)
        self.last_result = result
        return result
