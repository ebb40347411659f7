from __future__ import annotations
import struct


class CursorUnderrun(ValueError):
    """Raised when a read asks for more bytes than remain in the buffer."""

    def __init__(self, offset: int, needed: int, available: int):
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(f"need {needed} byte(s), only {available} left")


class Cursor:
    __slots__ = ("buf", "pos", "_bitbuf", "_bitcnt")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data)
        self.pos = 0
        self._bitbuf = 0
        self._bitcnt = 0

    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos

    def take(self, n: int) -> bytes:
        if n < 0: raise ValueError("negative read length")
        end = self.pos + n
        if end > len(self.buf): raise CursorUnderrun(self.pos, n, self.remaining())
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    # byte-aligned big-endian reads
    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.take(n))[0]
    def u8(self) -> int:  return self._unpack(">B", 1)
    def u16(self) -> int: return self._unpack(">H", 2)
    def u32(self) -> int: return self._unpack(">I", 4)

    def scalar(self, width: int) -> int:
        """Big-endian unsigned integer of 1, 2 or 4 bytes."""
        if width == 1: return self.u8()
        if width == 2: return self.u16()
        if width == 4: return self.u32()
        raise ValueError(f"unsupported scalar width {width}")

    # bits (MSB-first)
    def bits(self, n: int) -> int:
        if not (0 < n <= 32): raise ValueError("bits 1..32")
        while self._bitcnt < n:
            self._bitbuf = (self._bitbuf << 8) | self.u8()
            self._bitcnt += 8
        shift = self._bitcnt - n
        val = (self._bitbuf >> shift) & ((1 << n) - 1)
        self._bitbuf &= (1 << shift) - 1
        self._bitcnt = shift
        return val
