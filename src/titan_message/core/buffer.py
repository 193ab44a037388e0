"""Little-endian reader and writer over in-memory buffers."""

import struct

from titan_message.errors import TruncatedInputError


class ByteReader:
    """
    Cursor over a bytes buffer with explicit seeks.

    Every read is bounds-checked; reading past the end raises
    TruncatedInputError instead of returning short data.
    """

    def __init__(self, data: bytes):
        self.data = data
        self.position = 0

    def __len__(self) -> int:
        return len(self.data)

    def seek(self, position: int) -> None:
        """Move the cursor to an absolute position."""
        if not 0 <= position <= len(self.data):
            raise TruncatedInputError(
                f"Offset 0x{position:X} is outside the buffer (size 0x{len(self.data):X})"
            )
        self.position = position

    def skip(self, count: int) -> None:
        """Move the cursor forward by ``count`` bytes."""
        self.seek(self.position + count)

    def remaining(self) -> int:
        return len(self.data) - self.position

    def read(self, count: int) -> bytes:
        """Read exactly ``count`` bytes."""
        end = self.position + count
        if count < 0 or end > len(self.data):
            raise TruncatedInputError(
                f"Cannot read {count} bytes at 0x{self.position:X} "
                f"(buffer size 0x{len(self.data):X})"
            )
        chunk = self.data[self.position:end]
        self.position = end
        return chunk

    def unpack(self, fmt: str) -> tuple:
        """Read and unpack a struct format string."""
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def read_u8(self) -> int:
        return self.read(1)[0]

    def read_u16(self) -> int:
        return self.unpack('<H')[0]

    def read_u32(self) -> int:
        return self.unpack('<I')[0]

    def read_i32(self) -> int:
        return self.unpack('<i')[0]


class ByteWriter:
    """
    Growable output buffer with a seekable write cursor.

    Writing past the current end extends the buffer; writing inside it
    overwrites, which is how table slots are backfilled.
    """

    def __init__(self) -> None:
        self.buffer = bytearray()
        self.position = 0

    def __len__(self) -> int:
        return len(self.buffer)

    def seek(self, position: int) -> None:
        if position < 0:
            raise ValueError(f"Negative write position: {position}")
        self.position = position

    def seek_end(self) -> None:
        self.position = len(self.buffer)

    def write(self, data: bytes) -> int:
        """Write bytes at the cursor and return the position they start at."""
        start = self.position
        end = start + len(data)
        if start > len(self.buffer):
            self.buffer.extend(bytes(start - len(self.buffer)))
        self.buffer[start:end] = data
        self.position = end
        return start

    def pack(self, fmt: str, *values) -> int:
        """Pack values with a struct format string and write them."""
        return self.write(struct.pack(fmt, *values))

    def write_zeros(self, count: int) -> int:
        return self.write(bytes(count))

    def write_u16(self, value: int) -> int:
        return self.pack('<H', value)

    def write_u32(self, value: int) -> int:
        return self.pack('<I', value)

    def getvalue(self) -> bytes:
        return bytes(self.buffer)
