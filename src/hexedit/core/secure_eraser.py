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
Zero-fill helpers for buffers that may hold sensitive data.

The hex input and the decoded payload can carry key material on its way into
a file. They are kept in bytearrays and scrubbed through ctypes.memset, a
foreign call whose writes land in the buffer's memory regardless of what the
interpreter does with the object afterwards.
"""

import contextlib
import ctypes


def secure_zero(buffer: bytearray | memoryview) -> None:
    """Overwrite every byte of a writable, contiguous buffer with zero."""
    with memoryview(buffer) as view:
        if view.readonly:
            raise TypeError("cannot erase a read-only buffer")

        size = view.nbytes
        if size == 0:
            return

        region = (ctypes.c_char * size).from_buffer(view)
        ctypes.memset(ctypes.addressof(region), 0, size)
        # drop the export before the view is released
        del region


class SecureBuffer:
    """
    A bytearray that is zero-filled and emptied when its scope ends.

    Usage:
        with SecureBuffer(bytearray(secret, "ascii")) as buf:
            use(buf)
        # buf is now empty and its old storage is all zeros
    """

    def __init__(self, data: bytearray):
        self.data = data

    def __enter__(self) -> bytearray:
        return self.data

    def __exit__(self, exc_type, exc, tb) -> bool:
        secure_zero(self.data)
        self.data.clear()
        return False


@contextlib.contextmanager
def erased(buffer: bytearray):
    """Yield the buffer and zero-fill it on every exit path."""
    try:
        yield buffer
    finally:
        secure_zero(buffer)
