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

from hexedit.context import PatchContext, PatchResult
from hexedit.core.hex_decoder import check_hex_length, decode_hex
from hexedit.core.logging.utils import time_block
from hexedit.core.patch_engine import apply_patch, read_source, write_destination
from hexedit.core.secure_eraser import SecureBuffer, erased
from hexedit.core.timestamp_cloner import apply_timestamps, read_metadata


def _ascii_copy(hex_data: str) -> bytearray:
    if not hex_data.isascii():
        # decoding the text raises InvalidHexDigit naming the offending character
        decode_hex(hex_data)
    return bytearray(hex_data, "ascii")


class PatchPipeline:
    """
    One patch run: decode, load, patch, erase, write, copy timestamps.

    Any step that fails raises and the remaining steps are skipped. A
    destination that was already written is left in place.
    """

    def __init__(self, patch_context: PatchContext):
        self.patch_context = patch_context

    def run(self) -> PatchResult:
        ctx = self.patch_context

        logger.debug(
            "Patch started: offset={offset} payload_chars={chars} source={source} destination={destination}",
            offset=ctx.offset,
            chars=len(ctx.hex_data),
            source=str(ctx.source),
            destination=str(ctx.destination),
        )

        # 1. Validate and decode before touching any file
        check_hex_length(ctx.hex_data)
        with SecureBuffer(_ascii_copy(ctx.hex_data)) as hex_buffer:
            payload = decode_hex(hex_buffer)

        with erased(payload):
            # 2. Size and timestamps, captured before anything is written
            metadata = read_metadata(ctx.source)

            # 3. Load
            with time_block("Load source"):
                buffer = read_source(ctx.source, metadata.size)

            # 4. Patch
            written = apply_patch(buffer, ctx.offset, payload)
            discarded = len(payload) - written
        # 5. payload is zeroed from here on

        if written == 0 and discarded:
            logger.warning(
                f"Offset {ctx.offset} is outside {ctx.source} (size {metadata.size}), no bytes were patched"
            )
        elif discarded:
            logger.warning(
                f"{discarded} byte(s) past the end of {ctx.source} were discarded"
            )

        # 6. Write
        with erased(buffer), time_block("Write destination"):
            write_destination(ctx.destination, buffer)

        # 7. Timestamps
        apply_timestamps(ctx.destination, metadata.timestamps)

        logger.debug(
            "Patch finished: written={written} discarded={discarded}",
            written=written,
            discarded=discarded,
        )

        return PatchResult(
            source=ctx.source,
            destination=ctx.destination,
            file_size=metadata.size,
            bytes_written=written,
            bytes_discarded=discarded,
            timestamps=metadata.timestamps,
        )


def patch_file(
    offset: int, hex_data: str, source: Path | str, destination: Path | str
) -> PatchResult:
    """Library entry point: run one patch with plain arguments."""
    context = PatchContext(offset, hex_data, Path(source), Path(destination))
    return PatchPipeline(context).run()
