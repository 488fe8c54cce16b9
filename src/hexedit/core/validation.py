# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


import re
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from hexedit.constants import EXPECTED_FLAGS, USAGE
from hexedit.context import PatchContext

from .exceptions import UsageError

# leading C whitespace, optional sign, decimal digits
_OFFSET_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", re.ASCII)
_OFFSET_EXACT = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_offset(text: str) -> int:
    """
    Parse a base-10 offset the way C strtol does.

    Leading whitespace and a sign are accepted and parsing stops at the first
    non-digit, so "12abc" is 12 and text without leading digits is 0.
    """
    match = _OFFSET_PREFIX.match(text)
    value = int(match.group(1)) if match else 0

    if not _OFFSET_EXACT.fullmatch(text):
        logger.warning(f"Offset {text!r} is not a plain integer, using {value}")

    return value


def parse_invocation(args: Sequence[str]) -> PatchContext:
    """
    Turn `-pos X -w HEXDATA -r SOURCE_FILE -o OUTPUT_FILE` into a PatchContext.

    The flags must appear in exactly this order, each followed by one value.
    """
    if len(args) != 2 * len(EXPECTED_FLAGS):
        raise UsageError(USAGE, f"Expected 8 arguments, got {len(args)}")

    flags = tuple(args[0::2])
    if flags != EXPECTED_FLAGS:
        raise UsageError(
            "Invalid parameter order.",
            f"Expected flags {' '.join(EXPECTED_FLAGS)}, got {' '.join(flags)}",
        )

    _, pos, _, hex_data, _, source, _, destination = args

    return PatchContext(
        offset=parse_offset(pos),
        hex_data=hex_data,
        source=Path(source),
        destination=Path(destination),
    )
