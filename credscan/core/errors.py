"""
CredScan Exceptions

User-level conditions (no files, empty query, nothing found) are reported as
ScanResult statuses; exceptions are reserved for programming and I/O faults.
"""

from __future__ import annotations


class CredScanError(Exception):
    """Base class for all CredScan errors."""


class DecodeError(CredScanError):
    """A file could not be decoded as text under the active error policy."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


class ConfigError(CredScanError):
    """A configuration value is not one CredScan understands."""
