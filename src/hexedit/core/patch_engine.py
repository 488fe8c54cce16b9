# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


from pathlib import Path

from loguru import logger

from .exceptions import DestinationWriteError, SourceAccessError, destination_not_created


def read_source(path: Path, size: int) -> bytearray:
    """
    Read exactly `size` bytes of the source file into a new bytearray.

    `size` comes from the metadata query made before loading, so a file that
    shrank in between shows up as a short read.
    """
    buffer = bytearray(size)

    try:
        f = open(path, "rb")
    except OSError as e:
        raise SourceAccessError(f"could not open file {path}", str(e)) from e

    with f:
        try:
            read = f.readinto(buffer)
        except OSError as e:
            raise SourceAccessError(f"reading file {path} failed", str(e)) from e

    if read != size:
        raise SourceAccessError(
            f"reading file {path} failed",
            f"Expected {size} bytes, got {read}",
        )

    logger.debug("Loaded {size} bytes from {path}", size=size, path=str(path))
    return buffer


def apply_patch(buffer: bytearray, offset: int, payload: bytes | bytearray) -> int:
    """
    Overwrite buffer[offset:] with as much of payload as fits, in place.

    Offsets before the start or at/after the end of the buffer leave it
    untouched. Payload bytes that would land past the end are dropped; the
    buffer never changes size.

    Returns:
        Number of payload bytes written into the buffer
    """
    size = len(buffer)
    if offset < 0 or offset >= size:
        return 0

    count = min(len(payload), size - offset)
    with memoryview(payload) as view:
        buffer[offset : offset + count] = view[:count]

    return count


def write_destination(path: Path, buffer: bytearray) -> None:
    """Create or truncate the destination and write the whole buffer to it."""
    try:
        f = open(path, "wb")
    except OSError as e:
        raise destination_not_created(str(path)) from e

    try:
        with f:
            written = f.write(buffer)
    except OSError as e:
        raise DestinationWriteError(f"writing to file {path} failed", str(e)) from e

    if written != len(buffer):
        raise DestinationWriteError(
            f"writing to file {path} failed",
            f"Wrote {written} of {len(buffer)} bytes",
        )

    logger.debug(
        "Wrote {size} bytes to {path}", size=len(buffer), path=str(path)
    )
