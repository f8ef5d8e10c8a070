"""
Pytest Configuration and Fixtures

Shared fixtures for CredScan tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from credscan.core.records import FileRecord


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def credential_record() -> FileRecord:
    """A file containing two credentials on separate lines."""
    return FileRecord(
        name="combo.txt",
        content=(
            "# leaked list\n"
            "alice@example.com:Secr3t!\n"
            "nothing on this line\n"
            "bob.smith@mail.co.uk:hunter2 trailing text\n"
        ),
    )


@pytest.fixture
def plain_record() -> FileRecord:
    """A file without any credentials."""
    return FileRecord(name="notes.txt", content="no credentials here\nfoo\nbar foo\nbaz")


@pytest.fixture
def credentials_file(temp_dir: Path) -> Path:
    """Create a test file with credentials."""
    path = temp_dir / "dump.txt"
    path.write_text(
        "contact: alice@example.com:Secr3t!\n"
        "user=carol\n"
        "root@db.internal.net:P@ssw0rd\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def text_file(temp_dir: Path) -> Path:
    """Create a test file for literal searches."""
    path = temp_dir / "lines.txt"
    path.write_text("foo\nbar foo\nbaz\n<b>foo</b>\n", encoding="utf-8")
    return path
