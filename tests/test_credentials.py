"""
Tests for the Credential Scanner
"""

from credscan.core.records import FileRecord
from credscan.core.report import ScanKind, ScanStatus
from credscan.scanners.credentials import (
    CREDENTIAL_PATTERN,
    find_credentials,
    scan_for_credentials,
)


class TestCredentialPattern:
    """Tests for the credential regular expression."""

    def test_matches_simple_credential(self):
        """The match excludes text before the identifier."""
        matches = find_credentials("contact: alice@example.com:Secr3t!")
        assert [m.text for m in matches] == ["alice@example.com:Secr3t!"]

    def test_no_match_in_plain_text(self):
        assert find_credentials("no credentials here") == []

    def test_domain_requires_dot(self):
        assert find_credentials("alice@localhost:secret") == []

    def test_password_character_class(self):
        """Characters outside the password class end the match."""
        matches = find_credentials("a@b.io:abc!@#$%^&*()_+def-ghi")
        assert matches[0].text == "a@b.io:abc!@#$%^&*()_+def"

    def test_groups_split_identifier_and_password(self):
        m = CREDENTIAL_PATTERN.search("x bob@mail.co.uk:hunter2 y")
        assert m.group(1) == "bob@mail.co.uk"
        assert m.group(2) == "hunter2"

    def test_multiple_matches_in_order(self):
        content = "a@b.com:one c@d.org:two\ne@f.net:three"
        matches = find_credentials(content)
        assert [m.text for m in matches] == ["a@b.com:one", "c@d.org:two", "e@f.net:three"]

    def test_matches_do_not_overlap(self):
        """The first match consumes its span; scanning resumes after it."""
        matches = find_credentials("a@b.com:x@y.com:z")
        assert [m.text for m in matches] == ["a@b.com:x@y"]

    def test_match_does_not_cross_newline(self):
        assert find_credentials("alice@example.com:\nSecr3t") == []

    def test_line_numbers(self):
        matches = find_credentials("\n\na@b.com:one\nx\nc@d.org:two c@d.org:three")
        assert [m.line_number for m in matches] == [3, 5, 5]

    def test_column_within_line(self):
        content = "contact: alice@example.com:Secr3t!\nx c@d.org:two e@f.net:three"
        matches = find_credentials(content)
        assert [(m.line_number, m.column) for m in matches] == [(1, 9), (2, 2), (2, 14)]
        for m in matches:
            line = content.split("\n")[m.line_number - 1]
            assert line[m.column:m.column + len(m.text)] == m.text

    def test_whole_match_is_one_span(self):
        (match,) = find_credentials("alice@example.com:Secr3t!")
        assert match.spans == ((0, len("alice@example.com:Secr3t!")),)


class TestScanForCredentials:
    """Tests for scan_for_credentials."""

    def test_no_files_loaded(self):
        result = scan_for_credentials([])
        assert result.status is ScanStatus.NO_FILES_LOADED
        assert result.kind is ScanKind.CREDENTIALS
        assert not result.found

    def test_no_matches(self, plain_record: FileRecord):
        result = scan_for_credentials([plain_record])
        assert result.status is ScanStatus.NO_MATCHES
        assert result.reports == ()
        assert result.files_scanned == 1

    def test_found(self, credential_record: FileRecord, plain_record: FileRecord):
        result = scan_for_credentials([plain_record, credential_record])

        assert result.found
        assert len(result.reports) == 1
        report = result.reports[0]
        assert report.file_name == "combo.txt"
        assert [line.text for line in report.lines] == [
            "alice@example.com:Secr3t!",
            "bob.smith@mail.co.uk:hunter2",
        ]
        assert report.match_count == 2

    def test_report_order_follows_input(self):
        files = [
            FileRecord("b.txt", "b@b.com:2"),
            FileRecord("a.txt", "a@a.com:1"),
            FileRecord("b.txt", "c@c.com:3"),
        ]
        result = scan_for_credentials(files)
        assert [r.file_name for r in result.reports] == ["b.txt", "a.txt", "b.txt"]

    def test_binary_content_is_scanned_as_text(self):
        record = FileRecord("blob.bin", "\x00\ufffdzz@q.io:pw\x01\x02")
        result = scan_for_credentials([record])
        assert result.reports[0].lines[0].text == "zz@q.io:pw"
