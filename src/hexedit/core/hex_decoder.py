# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


from hexedit.constants import MAX_HEX_LENGTH

from .exceptions import invalid_hex_digit, odd_hex_length, payload_too_large

HexInput = str | bytes | bytearray


def _nibble(code: int) -> int:
    """Value of one ASCII hex digit, or -1 when it is not one."""
    if 0x30 <= code <= 0x39:  # 0-9
        return code - 0x30
    if 0x41 <= code <= 0x46:  # A-F
        return code - 0x41 + 10
    if 0x61 <= code <= 0x66:  # a-f
        return code - 0x61 + 10
    return -1


def check_hex_length(hex_data: HexInput, limit: int = MAX_HEX_LENGTH) -> None:
    if len(hex_data) > limit:
        raise payload_too_large(len(hex_data), limit)


def decode_hex(hex_data: HexInput) -> bytearray:
    """
    Convert a hexadecimal string into bytes, two digits per byte, high nibble first.

    Example: "0102030A" -> bytearray(b"\\x01\\x02\\x03\\n").

    No whitespace or separators are accepted. Every character is validated
    before the first byte is produced, and the result is a bytearray so
    callers can erase it once it is no longer needed.

    Raises:
        MalformedHex: the input has an odd number of characters
        InvalidHexDigit: a character is not a hex digit
    """
    if len(hex_data) % 2 != 0:
        raise odd_hex_length(len(hex_data))

    as_text = isinstance(hex_data, str)

    def code_at(index: int) -> int:
        return ord(hex_data[index]) if as_text else hex_data[index]

    for index in range(len(hex_data)):
        if _nibble(code_at(index)) < 0:
            raise invalid_hex_digit(chr(code_at(index)), index)

    result = bytearray(len(hex_data) // 2)
    for i in range(len(result)):
        result[i] = (_nibble(code_at(2 * i)) << 4) | _nibble(code_at(2 * i + 1))

    return result
