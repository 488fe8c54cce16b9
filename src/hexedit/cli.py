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

import typer
from colorama import init
from loguru import logger

from hexedit.constants import APP_NAME, ENV_APP_PREFIX, GLOBAL_CONFIG_FILE, USAGE
from hexedit.context import GlobalConfig
from hexedit.core.config.config_loader import ConfigLoader
from hexedit.core.exceptions import ConfigurationError, handle_hexedit_exception
from hexedit.core.logging.logging import setup_logger
from hexedit.core.logging.utils import time_block
from hexedit.core.validation import parse_invocation
from hexedit.pipelines.patch_pipeline import PatchPipeline
from hexedit.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

app = typer.Typer(
    help=f"{APP_NAME}: overwrite bytes of a binary file at an offset, keeping its timestamps",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)


def load_global_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {}

    for key, item in input_args.items():
        if item is not None:
            config_args[key] = item

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


# patch flags are single-dash words (-pos, -w, -r, -o) and offsets may be
# negative, so unknown options are handed to the command untouched. No option
# of this command may use a short name.
@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    epilog=USAGE,
)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for hexedit live) and exit",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        help=GlobalConfig.descriptions["verbose"],
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        help=GlobalConfig.descriptions["silent"],
    ),
    args: list[str] | None = typer.Argument(
        None,
        metavar="-pos X -w HEXDATA -r SOURCE_FILE -o OUTPUT_FILE",
        help="Patch arguments, in exactly this order",
        show_default=False,
    ),
) -> None:
    """Overwrite bytes of SOURCE_FILE starting at offset X with HEXDATA and save the result as OUTPUT_FILE.

    The output keeps the size and the access/modification times of the source.
    Offsets outside the file produce an unmodified copy; bytes that would pass
    the end of the file are dropped.

    Examples:
        # Write AA BB CC at offset 16
        hexedit -pos 16 -w AABBCC -r firmware.bin -o firmware_patched.bin
    """
    with handle_hexedit_exception(exit_on_fail=True):
        # initial setup of logger, updated once the config is known
        setup_logger(APP_NAME, debug=verbose or False, silent=silent or False)

        try:
            config, used_config_sources, _ = load_global_config(
                custom_config, verbose=verbose, silent=silent
            )
        except ConfigurationError as e:
            # ambient settings never decide whether a patch runs
            logger.warning(f"{e.message}, using defaults: {e.details}")
            config = GlobalConfig(verbose=verbose or False, silent=silent or False)
            used_config_sources = ["Input Args"]
        setup_logger(APP_NAME, debug=config.verbose, silent=config.silent)
        logger.debug(f"Used {used_config_sources} to build global config.")

        patch_context = parse_invocation(args or [])

        with time_block("Patch Pipeline E2E"):
            result = PatchPipeline(patch_context).run()

        typer.echo(
            f'File "{result.source}" modified and saved as "{result.destination}"'
        )


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8 as it can be weird with typers console.print sometimes
    ensure_utf8_output()
    # Initialize colorama (colored output in terminal)
    init(autoreset=True)
    # Set up signal handlers for graceful shutdown
    setup_signal_handlers()
    # launch cli
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
