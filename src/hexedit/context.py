# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


from dataclasses import dataclass
from pathlib import Path

from hexedit.core.timestamp_cloner import TimestampPair


@dataclass
class GlobalConfig:
    verbose: bool = False
    silent: bool = False

    descriptions = {
        "verbose": "Show debug output on the console",
        "silent": "Do not log anything to the console",
    }


@dataclass(frozen=True)
class PatchContext:
    """Inputs of one patch run."""

    offset: int
    hex_data: str
    source: Path
    destination: Path


@dataclass(frozen=True)
class PatchResult:
    source: Path
    destination: Path
    file_size: int
    # payload bytes copied into the file
    bytes_written: int
    # payload bytes dropped at end of file (or all of them on a no-op)
    bytes_discarded: int
    timestamps: TimestampPair

    @property
    def is_noop(self) -> bool:
        return self.bytes_written == 0
