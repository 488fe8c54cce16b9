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

from platformdirs import user_config_dir, user_log_path

APP_NAME = "hexedit"
ENV_APP_PREFIX = APP_NAME.upper() + "_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "hexeditconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME

# longest accepted hex string (500 payload bytes)
MAX_HEX_LENGTH = 1000

USAGE = f'Usage: {APP_NAME} -pos X -w "HEXDATA" -r SOURCE_FILE -o OUTPUT_FILE'

# flags expected at argv positions 0, 2, 4 and 6
EXPECTED_FLAGS = ("-pos", "-w", "-r", "-o")
