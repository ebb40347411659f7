from __future__ import annotations
from typing import Sequence, Tuple
from .bitcursor import Cursor
from ...models.common import Position, POSITION_BIAS

ROOT_WINDOW_SIZE = 5
INSTANCE_WINDOW_SIZE = 4

# Field widths, MSB-first. Each layout fills its window exactly.
ROOT_LAYOUT = (10, 10, 10, 10)       # input x, input y, output x, output y
INSTANCE_LAYOUT = (10, 10, 6, 6)     # x, y, name length, socket count


def split_bits(window: bytes, widths: Sequence[int]) -> Tuple[int, ...]:
    """Split `window` MSB-first into unsigned fields of the given bit widths."""
    if sum(widths) != len(window) * 8:
        raise ValueError(f"layout of {sum(widths)} bits does not fill a {len(window)}-byte window")
    cur = Cursor(window)
    return tuple(cur.bits(w) for w in widths)


def unbias(raw: int) -> int:
    return raw - POSITION_BIAS


def unpack_root_window(window: bytes) -> Tuple[Position, Position]:
    """Decode the 5-byte root window into (input root, output root) positions."""
    if len(window) != ROOT_WINDOW_SIZE:
        raise ValueError(f"root window must be {ROOT_WINDOW_SIZE} bytes, got {len(window)}")
    ix, iy, ox, oy = split_bits(window, ROOT_LAYOUT)
    return (
        Position(x=unbias(ix), y=unbias(iy)),
        Position(x=unbias(ox), y=unbias(oy)),
    )


def unpack_instance_window(window: bytes) -> Tuple[Position, int, int]:
    """Decode an instance's 4-byte window into (position, name length, socket count)."""
    if len(window) != INSTANCE_WINDOW_SIZE:
        raise ValueError(f"instance window must be {INSTANCE_WINDOW_SIZE} bytes, got {len(window)}")
    x, y, name_len, sock_count = split_bits(window, INSTANCE_LAYOUT)
    return Position(x=unbias(x), y=unbias(y)), name_len, sock_count
