"""
CredScan Scan Requests

A scan is either a credential-pattern scan or a literal query scan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CredentialScan:
    pass


@dataclass(frozen=True)
class QueryScan:
    query: str

    @property
    def needle(self) -> str:
        """The query as it is matched: surrounding whitespace removed."""
        return self.query.strip()

    @property
    def is_valid(self) -> bool:
        return bool(self.needle)


ScanRequest = Union[CredentialScan, QueryScan]
