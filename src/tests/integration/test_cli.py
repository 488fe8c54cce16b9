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

import pytest
from hexedit.cli import app
from typer.testing import CliRunner

runner = CliRunner()

ATIME_NS = 1_600_000_000_000_001_000
MTIME_NS = 1_600_000_500_999_999_000


def run_cli(args):
    return runner.invoke(app, args)


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "source.bin"
    path.write_bytes(bytes(20))
    os.utime(path, ns=(ATIME_NS, MTIME_NS))
    return path


class TestBasicCLI:
    def test_help(self):
        result = run_cli(["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output
        assert "SOURCE_FILE" in result.output

    def test_version(self):
        result = run_cli(["--version"])
        assert result.exit_code == 0
        assert "hexedit version" in result.output

    def test_log_dir(self, tmp_path):
        result = run_cli(["--log-dir"])
        assert result.exit_code == 0
        assert str(tmp_path / "logs") in result.output


class TestPatch:
    def test_patch_success(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "10", "-w", "AABBCC", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 0
        assert (
            f'File "{source}" modified and saved as "{destination}"' in result.stdout
        )
        assert destination.read_bytes() == bytes(10) + b"\xaa\xbb\xcc" + bytes(7)

        st = os.stat(destination)
        assert st.st_atime_ns == ATIME_NS
        assert st.st_mtime_ns == MTIME_NS

    def test_negative_offset_copies_source(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "-1", "-w", "FFFF", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 0
        assert destination.read_bytes() == source.read_bytes()

    def test_non_numeric_offset_falls_back_to_zero(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "abc", "-w", "01", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 0
        assert destination.read_bytes() == b"\x01" + bytes(19)

    def test_ambient_options_before_patch_arguments(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            [
                "--silent",
                "-pos",
                "0",
                "-w",
                "ff",
                "-r",
                str(source),
                "-o",
                str(destination),
            ]
        )

        assert result.exit_code == 0
        assert destination.read_bytes() == b"\xff" + bytes(19)

    def test_invalid_config_value_does_not_block_patch(
        self, source, tmp_path, monkeypatch
    ):
        monkeypatch.setenv("HEXEDIT_VERBOSE", "sometimes")
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "1", "-w", "ab", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 0
        assert "Invalid configuration value" in result.output
        assert "modified and saved as" in result.stdout
        assert destination.read_bytes() == b"\x00\xab" + bytes(18)

    def test_invalid_custom_config_keeps_command_line_flags(
        self, source, tmp_path
    ):
        custom = tmp_path / "custom.toml"
        custom.write_text('verbose = "loud"\n', encoding="utf-8")
        destination = tmp_path / "out.bin"

        result = run_cli(
            [
                "--custom-config",
                str(custom),
                "--silent",
                "-pos",
                "0",
                "-w",
                "01",
                "-r",
                str(source),
                "-o",
                str(destination),
            ]
        )

        assert result.exit_code == 0
        assert destination.read_bytes() == b"\x01" + bytes(19)
        # --silent survives the fallback to defaults
        assert "Invalid configuration value" not in result.output

    def test_run_writes_log_file(self, source, tmp_path):
        run_cli(
            ["-pos", "0", "-w", "00", "-r", str(source), "-o", str(tmp_path / "o")]
        )
        assert list((tmp_path / "logs").glob("hexedit_*.log"))


class TestFailures:
    def test_no_arguments(self):
        result = run_cli([])
        assert result.exit_code == 1
        assert "Usage: hexedit" in result.output

    def test_wrong_order(self, source, tmp_path):
        result = run_cli(
            ["-w", "00", "-pos", "0", "-r", str(source), "-o", str(tmp_path / "o")]
        )
        assert result.exit_code == 1
        assert "Invalid parameter order." in result.output
        assert not (tmp_path / "o").exists()

    def test_odd_hex(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "0", "-w", "ABC", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 1
        assert "Hex string length is odd." in result.output
        assert not destination.exists()

    def test_invalid_hex_digit(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "0", "-w", "0G", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 1
        assert "Invalid hex character: G" in result.output
        assert not destination.exists()

    def test_oversized_hex(self, source, tmp_path):
        destination = tmp_path / "out.bin"

        result = run_cli(
            ["-pos", "0", "-w", "0" * 1002, "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 1
        assert "exceeds maximum allowed (1000 characters)" in result.output
        assert not destination.exists()

    def test_missing_source(self, tmp_path):
        missing = tmp_path / "missing.bin"

        result = run_cli(
            ["-pos", "0", "-w", "00", "-r", str(missing), "-o", str(tmp_path / "o")]
        )

        assert result.exit_code == 1
        assert f"stat() failed for {missing}" in result.output

    def test_unwritable_destination(self, source, tmp_path):
        destination = tmp_path / "no_such_dir" / "out.bin"

        result = run_cli(
            ["-pos", "0", "-w", "00", "-r", str(source), "-o", str(destination)]
        )

        assert result.exit_code == 1
        assert f"could not create file {destination}" in result.output

