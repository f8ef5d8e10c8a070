"""
CredScan File Records

A FileRecord is the decoded text of one loaded file. Loading reads every
file concurrently and aggregates the records in the order the paths were
given, whatever order the reads finish in.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from credscan.core.errors import DecodeError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "replace"
ERROR_POLICIES = ("replace", "strict", "ignore")


@dataclass(frozen=True)
class FileRecord:
    name: str
    content: str
    # Path as the caller gave it; None for text not read from disk.
    path: Optional[str] = None


@dataclass(frozen=True)
class DecodeFailure:
    """A file that could not be read or decoded."""

    name: str
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "reason": self.reason}


@dataclass(frozen=True)
class LoadResult:
    records: tuple[FileRecord, ...] = ()
    failures: tuple[DecodeFailure, ...] = ()


def decode_bytes(
    name: str,
    data: bytes,
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ERRORS,
    path: Optional[str] = None,
) -> FileRecord:
    """
    Decode raw file bytes into a FileRecord.

    Binary content is treated as text. With the default ``replace`` policy
    invalid sequences become U+FFFD and decoding never fails; ``strict``
    raises DecodeError instead.
    """
    try:
        content = data.decode(encoding, errors=errors)
    except UnicodeDecodeError as exc:
        raise DecodeError(name, f"not valid {encoding} at byte {exc.start}") from exc
    except LookupError as exc:
        raise DecodeError(name, f"unknown encoding '{encoding}'") from exc
    return FileRecord(name=name, content=content, path=path)


async def _load_one(
    path: Path, encoding: str, errors: str
) -> Union[FileRecord, DecodeFailure]:
    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return DecodeFailure(name=path.name, reason=exc.strerror or str(exc))

    try:
        record = decode_bytes(
            path.name, data, encoding=encoding, errors=errors, path=str(path)
        )
    except DecodeError as exc:
        logger.warning("Could not decode %s: %s", path, exc.reason)
        return DecodeFailure(name=exc.name, reason=exc.reason)

    logger.debug("Loaded %s (%d chars)", path, len(record.content))
    return record


async def load_files(
    paths: Iterable[Union[str, Path]],
    encoding: str = DEFAULT_ENCODING,
    errors: str = DEFAULT_ERRORS,
) -> LoadResult:
    """
    Read and decode every path concurrently.

    Completes once every read has finished. Records keep the input order;
    files that fail to load are collected as DecodeFailure entries and do
    not abort the batch.
    """
    path_list: Sequence[Path] = [Path(p) for p in paths]
    if not path_list:
        return LoadResult()

    # gather() returns results by input position, not completion order
    outcomes = await asyncio.gather(
        *(_load_one(path, encoding, errors) for path in path_list)
    )

    records = tuple(o for o in outcomes if isinstance(o, FileRecord))
    failures = tuple(o for o in outcomes if isinstance(o, DecodeFailure))
    logger.info("Loaded %d file(s), %d failure(s)", len(records), len(failures))
    return LoadResult(records=records, failures=failures)
