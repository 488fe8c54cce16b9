# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


"""
Custom exception hierarchy for the hexedit CLI application.

Every failure a patch run can hit maps onto one of these classes so the
command line boundary can report it once and exit with a non-zero status.
"""

import contextlib

import typer
from colorama import Fore, Style
from loguru import logger


class hexeditError(Exception):
    """
    Base exception for all hexedit-related errors.

    All hexedit-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a hexeditError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class UsageError(hexeditError):
    """
    Wrong argument count or order on the command line.
    """

    pass


class ParseError(hexeditError):
    """
    Malformed patch input.

    Raised before any file is touched, when the hex payload
    cannot be turned into bytes.
    """

    pass


class MalformedHex(ParseError):
    """Raised when the hex string has an odd number of characters."""

    pass


class InvalidHexDigit(ParseError):
    """Raised when the hex string contains a character outside 0-9, A-F, a-f."""

    def __init__(
        self, message: str, details: str = None, char: str = None, index: int = None
    ):
        self.char = char
        self.index = index
        super().__init__(message, details)


class PayloadTooLarge(ParseError):
    """Raised when the hex string is longer than the accepted maximum."""

    pass


class SourceAccessError(hexeditError):
    """
    Errors reading the source file.

    Raised when the source is missing, unreadable,
    or shorter than its reported size.
    """

    pass


class MetadataReadError(SourceAccessError):
    """Raised when the source metadata (size, timestamps) cannot be queried."""

    pass


class DestinationWriteError(hexeditError):
    """
    Errors writing the destination file.

    Raised when the destination cannot be created, written or closed.
    """

    pass


class ConfigurationError(hexeditError):
    """
    Configuration-related errors.

    Raised when a config file or HEXEDIT_ environment variable holds
    a value of the wrong type.
    """

    pass


class TimestampApplyError(hexeditError):
    """
    Raised when the captured timestamps cannot be applied to the destination.
    """

    pass


@contextlib.contextmanager
def handle_hexedit_exception(exit_on_fail: bool = True):
    """
    Report a hexeditError once on stderr and turn it into exit status 1.

    typer.Exit passes through untouched. With exit_on_fail=False the error
    is reported and re-raised to the caller instead.
    """
    try:
        yield
    except hexeditError as e:
        # the console sees the message once, through typer.echo below
        logger.debug(f"{type(e).__name__}: {e.message}")
        if e.details:
            logger.debug(e.details)
        if e.__cause__ is not None:
            logger.debug(f"Caused by: {e.__cause__!r}")

        if isinstance(e, UsageError):
            typer.echo(e.message, err=True)
        else:
            typer.echo(f"{Fore.RED}Error:{Style.RESET_ALL} {e.message}", err=True)

        if not exit_on_fail:
            raise
        raise typer.Exit(1) from e


# Convenience functions for creating common errors
def odd_hex_length(length: int) -> MalformedHex:
    """Create a MalformedHex for a hex string with an odd length."""
    return MalformedHex(
        "Hex string length is odd.",
        f"Got {length} characters; every byte needs two hex digits",
    )


def invalid_hex_digit(char: str, index: int) -> InvalidHexDigit:
    """Create an InvalidHexDigit for the first bad character found."""
    return InvalidHexDigit(
        f"Invalid hex character: {char}",
        f"Character at index {index} is not one of 0-9, A-F, a-f",
        char=char,
        index=index,
    )


def payload_too_large(length: int, limit: int) -> PayloadTooLarge:
    """Create a PayloadTooLarge for an oversized hex string."""
    return PayloadTooLarge(
        f"HEX data length exceeds maximum allowed ({limit} characters).",
        f"Got {length} characters",
    )


def stat_failed(path: str) -> MetadataReadError:
    """Create a MetadataReadError for a failed metadata query."""
    return MetadataReadError(
        f"stat() failed for {path}",
        "Please check that the source file exists and is accessible",
    )


def destination_not_created(path: str) -> DestinationWriteError:
    """Create a DestinationWriteError for a destination that cannot be opened."""
    return DestinationWriteError(
        f"could not create file {path}",
        "Please check that the target directory exists and is writable",
    )


def utimes_failed(path: str) -> TimestampApplyError:
    """Create a TimestampApplyError for a destination whose times cannot be set."""
    return TimestampApplyError(
        f"utimes failed for {path}",
        "The destination was written but keeps its current timestamps",
    )
