# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


import os
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .exceptions import stat_failed, utimes_failed


@dataclass(frozen=True)
class TimestampPair:
    """Access and modification times of a file, in nanoseconds since the epoch."""

    atime_ns: int
    mtime_ns: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "TimestampPair":
        return cls(st.st_atime_ns, st.st_mtime_ns)


@dataclass(frozen=True)
class SourceMetadata:
    size: int
    timestamps: TimestampPair


def read_metadata(path: Path) -> SourceMetadata:
    """Query size and timestamps of the source file in one stat call."""
    try:
        st = os.stat(path)
    except OSError as e:
        raise stat_failed(str(path)) from e

    return SourceMetadata(st.st_size, TimestampPair.from_stat(st))


def capture_timestamps(path: Path) -> TimestampPair:
    return read_metadata(path).timestamps


def apply_timestamps(path: Path, timestamps: TimestampPair) -> None:
    """Set access and modification times of an already written and closed file."""
    try:
        os.utime(path, ns=(timestamps.atime_ns, timestamps.mtime_ns))
    except OSError as e:
        raise utimes_failed(str(path)) from e

    logger.debug(
        "Applied timestamps atime_ns={atime} mtime_ns={mtime} to {path}",
        atime=timestamps.atime_ns,
        mtime=timestamps.mtime_ns,
        path=str(path),
    )
