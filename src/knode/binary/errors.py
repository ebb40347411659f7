from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator

from .codecs.bitcursor import CursorUnderrun


class KnodeError(ValueError):
    """Base class for everything the decoder raises."""


class ParseError(KnodeError):
    """
    Structural failure inside a .knode buffer.

    `phase` names what was being parsed, `offset` is where the cursor stood
    when the offending field started.
    """

    def __init__(self, phase: str, message: str, offset: int):
        self.phase = phase
        self.message = message
        self.offset = offset
        super().__init__(f"error while {phase}: {message} (at offset {offset} [0x{offset:x}])")


class InvalidMagicError(ParseError):
    def __init__(self, phase: str, magic: bytes, offset: int):
        self.magic = magic
        super().__init__(phase, f"invalid magic {magic!r}", offset)


class UnsupportedVersionError(ParseError):
    def __init__(self, phase: str, version: int, latest: int, offset: int):
        self.version = version
        self.latest = latest
        super().__init__(
            phase,
            f"invalid version number {version} (higher than latest [{latest}])",
            offset,
        )


class OutOfDataError(ParseError):
    def __init__(self, phase: str, underrun: CursorUnderrun):
        self.needed = underrun.needed
        self.available = underrun.available
        super().__init__(phase, f"out of data: {underrun}", underrun.offset)


class StreamReadError(KnodeError):
    """The input could not be read; no bytes were decoded."""


@contextmanager
def phase(label: str) -> Iterator[str]:
    """Label a parsing step; cursor underruns inside it become OutOfDataError."""
    try:
        yield label
    except CursorUnderrun as e:
        raise OutOfDataError(label, e) from e
