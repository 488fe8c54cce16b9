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

from hexedit.context import GlobalConfig, PatchContext, PatchResult
from hexedit.core.timestamp_cloner import TimestampPair

# -----------------------------------------------------------------------------
# GlobalConfig Tests
# -----------------------------------------------------------------------------


def test_global_config_defaults():
    config = GlobalConfig()
    assert config.verbose is False
    assert config.silent is False


def test_global_config_descriptions_cover_fields():
    assert set(GlobalConfig.descriptions) == {"verbose", "silent"}


# -----------------------------------------------------------------------------
# PatchContext / PatchResult Tests
# -----------------------------------------------------------------------------


def test_patch_context():
    ctx = PatchContext(5, "AA", Path("in.bin"), Path("out.bin"))
    assert ctx.offset == 5
    assert ctx.hex_data == "AA"
    assert ctx.source == Path("in.bin")
    assert ctx.destination == Path("out.bin")


def test_patch_result_noop():
    result = PatchResult(
        Path("in"), Path("out"), 4, 0, 2, TimestampPair(1, 2)
    )
    assert result.is_noop is True


def test_patch_result_applied():
    result = PatchResult(
        Path("in"), Path("out"), 4, 2, 0, TimestampPair(1, 2)
    )
    assert result.is_noop is False
