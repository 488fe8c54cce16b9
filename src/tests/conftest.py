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
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep log files, global config and HEXEDIT_ variables out of the user's machine."""
    log_dir = tmp_path / "logs"
    monkeypatch.setattr("hexedit.core.logging.logging.LOG_DIR", log_dir)
    monkeypatch.setattr("hexedit.cli.GLOBAL_CONFIG_FILE", tmp_path / "no_global.toml")

    for key in list(os.environ):
        if key.upper().startswith("HEXEDIT_"):
            monkeypatch.delenv(key)

    yield

    # release file sinks that point into tmp_path
    logger.remove()
