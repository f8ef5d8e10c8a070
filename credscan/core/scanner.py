"""
CredScan Scanner

The Scanner is a pure function of (file snapshot, scan request). It holds
no file state of its own; callers pass the records in on every call.

Example:
    scanner = Scanner()
    result = scanner.scan(records, QueryScan("password"))
    future = scanner.submit(records, CredentialScan())
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Sequence

from credscan.core.records import FileRecord
from credscan.core.report import ScanResult
from credscan.core.request import CredentialScan, QueryScan, ScanRequest
from credscan.scanners.credentials import scan_for_credentials
from credscan.scanners.query import scan_for_query

logger = logging.getLogger(__name__)


class Scanner:
    """Dispatches scan requests to the credential and query scanners."""

    def scan(self, files: Sequence[FileRecord], request: ScanRequest) -> ScanResult:
        """Run the scan synchronously and return its result."""
        snapshot = tuple(files)
        t0 = time.perf_counter()

        if isinstance(request, CredentialScan):
            result = scan_for_credentials(snapshot)
        elif isinstance(request, QueryScan):
            result = scan_for_query(snapshot, request.query)
        else:
            raise TypeError(f"Unsupported scan request: {request!r}")

        logger.info(
            "%s scan over %d file(s): %s (%d match(es)) in %.3fs",
            result.kind.value,
            len(snapshot),
            result.status.value,
            result.total_matches,
            time.perf_counter() - t0,
        )
        return result

    def submit(
        self, files: Sequence[FileRecord], request: ScanRequest
    ) -> "asyncio.Future[ScanResult]":
        """
        Schedule the scan on the running loop's default executor.

        Must be called from inside a running event loop. The returned future
        resolves to the ScanResult; the caller is free to show progress while
        it runs.
        """
        loop = asyncio.get_running_loop()
        snapshot = tuple(files)
        logger.debug("Submitting %s over %d file(s)", type(request).__name__, len(snapshot))
        return loop.run_in_executor(None, self.scan, snapshot, request)
