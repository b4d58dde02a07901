"""
Binary Reader for UE3 files.

Provides low-level reads over a seekable byte source with UE3 format
support, including name table entries and construct-based records.
"""

import io
import os
import struct
from typing import BinaryIO

from construct import Construct, StreamError

from .errors import TruncatedInput
from .types import Guid


class BinaryReader:
    """Binary reader over a seekable byte stream.

    Every read is bounds-checked: a read that would run past the end of the
    source raises TruncatedInput instead of returning short data.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        pos = stream.tell()
        self.size = stream.seek(0, os.SEEK_END)
        stream.seek(pos)

    @classmethod
    def from_bytes(cls, data: bytes) -> "BinaryReader":
        return cls(io.BytesIO(data))

    def seek(self, pos: int, whence: int = os.SEEK_SET):
        """Seek to an absolute (or whence-relative) position."""
        if whence == os.SEEK_CUR:
            pos += self.tell()
            whence = os.SEEK_SET
        if whence == os.SEEK_SET and pos < 0:
            raise TruncatedInput(f"Seek before start of data ({pos})", pos)
        self.stream.seek(pos, whence)

    def skip(self, count: int):
        """Advance without reading."""
        self.seek(count, os.SEEK_CUR)

    def tell(self) -> int:
        """Return current position."""
        return self.stream.tell()

    def remaining(self) -> int:
        """Return remaining bytes."""
        return max(self.size - self.tell(), 0)

    def read_bytes(self, count: int) -> bytes:
        """Read exactly count raw bytes."""
        if count < 0:
            raise TruncatedInput(f"Negative read length {count}", self.tell())
        pos = self.tell()
        if count > self.remaining():
            raise TruncatedInput(
                f"Wanted {count} bytes at offset {pos:#x}, {self.remaining()} left", pos
            )
        return self.stream.read(count)

    def read_int32(self) -> int:
        return struct.unpack("<i", self.read_bytes(4))[0]

    def read_uint32(self) -> int:
        return struct.unpack("<I", self.read_bytes(4))[0]

    def read_guid(self) -> Guid:
        """Read four consecutive 32-bit words."""
        return Guid.from_words(struct.unpack("<4I", self.read_bytes(16)))

    def read_name_entry(self) -> str:
        """Read one name table entry.

        Format:
        - int32 length, including the trailing NUL (negative = UTF-16LE)
        - String data
        - 8 bytes of object flags (skipped)
        """
        length = self.read_int32()
        if length < 0:
            result = (
                self.read_bytes(-length * 2)
                .decode("utf-16-le", errors="replace")
                .rstrip("\x00")
            )
        elif length > 0:
            result = (
                self.read_bytes(length)
                .decode("latin-1", errors="replace")
                .rstrip("\x00")
            )
        else:
            result = ""
        self.read_bytes(8)
        return result

    def read_struct(self, con: Construct):
        """Parse a construct layout at the current position."""
        pos = self.tell()
        try:
            return con.parse_stream(self.stream)
        except StreamError as e:
            raise TruncatedInput(f"Truncated record at offset {pos:#x}: {e}", pos) from e
