"""
Tests for the Scanner and Workspace
"""

from pathlib import Path

import pytest

from credscan.core.records import FileRecord
from credscan.core.report import ScanKind, ScanStatus
from credscan.core.request import CredentialScan, QueryScan
from credscan.core.scanner import Scanner
from credscan.core.session import Workspace


class TestScanner:
    """Tests for Scanner dispatch."""

    def test_credential_request(self, credential_record: FileRecord):
        result = Scanner().scan([credential_record], CredentialScan())
        assert result.kind is ScanKind.CREDENTIALS
        assert result.found

    def test_query_request(self, plain_record: FileRecord):
        result = Scanner().scan([plain_record], QueryScan("foo"))
        assert result.kind is ScanKind.QUERY
        assert len(result.reports[0].lines) == 2

    def test_empty_file_set(self):
        scanner = Scanner()
        assert scanner.scan([], CredentialScan()).status is ScanStatus.NO_FILES_LOADED
        assert scanner.scan([], QueryScan("q")).status is ScanStatus.NO_FILES_LOADED

    def test_empty_query(self, plain_record: FileRecord):
        result = Scanner().scan([plain_record], QueryScan(""))
        assert result.status is ScanStatus.INVALID_QUERY

    def test_idempotent(self, credential_record: FileRecord, plain_record: FileRecord):
        scanner = Scanner()
        files = [credential_record, plain_record]
        for request in (CredentialScan(), QueryScan("foo")):
            assert scanner.scan(files, request) == scanner.scan(files, request)

    def test_unknown_request(self):
        with pytest.raises(TypeError):
            Scanner().scan([], "credentials")

    @pytest.mark.asyncio
    async def test_submit_returns_future(self, credential_record: FileRecord):
        scanner = Scanner()
        future = scanner.submit([credential_record], CredentialScan())
        result = await future
        assert result == scanner.scan([credential_record], CredentialScan())


class TestQueryScanRequest:
    """Tests for QueryScan validation."""

    def test_needle_is_trimmed(self):
        assert QueryScan("  foo \n").needle == "foo"

    def test_validity(self):
        assert QueryScan("x").is_valid
        assert not QueryScan("   ").is_valid


class TestWorkspace:
    """Tests for Workspace state handling."""

    @pytest.mark.asyncio
    async def test_load_and_scan(self, credentials_file: Path):
        workspace = Workspace()
        records = await workspace.load([credentials_file])

        assert [r.name for r in records] == ["dump.txt"]
        result = await workspace.scan(CredentialScan())
        assert result.found
        assert workspace.last_result is result

    @pytest.mark.asyncio
    async def test_load_replaces_snapshot(self, credentials_file: Path, text_file: Path):
        workspace = Workspace()
        await workspace.load([credentials_file])
        await workspace.load([text_file])

        assert [r.name for r in workspace.records] == ["lines.txt"]
        result = await workspace.scan(CredentialScan())
        assert result.status is ScanStatus.NO_MATCHES

    @pytest.mark.asyncio
    async def test_newer_scan_overwrites_result(self, text_file: Path):
        workspace = Workspace()
        await workspace.load([text_file])

        await workspace.scan(QueryScan("foo"))
        second = await workspace.scan(QueryScan("baz"))
        assert workspace.last_result is second
        assert workspace.last_result.query == "baz"

    @pytest.mark.asyncio
    async def test_scan_without_files(self):
        result = await Workspace().scan(CredentialScan())
        assert result.status is ScanStatus.NO_FILES_LOADED
