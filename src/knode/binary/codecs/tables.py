from __future__ import annotations
import logging
from typing import List
from .bitcursor import Cursor
from ..errors import phase

logger = logging.getLogger(__name__)


def read_text(cur: Cursor, n: int) -> str:
    # Tables and names are raw bytes on disk; undecodable sequences are kept visible.
    return cur.take(n).decode("utf-8", errors="replace")


def decode_string_table(cur: Cursor, *, what: str, entry: str) -> List[str]:
    """
    One count byte, then per entry a length byte and that many bytes of text.
    File order is kept: later fields refer to entries by position.
    """
    with phase(f"reading amount of {what}"):
        count = cur.u8()

    out: List[str] = []
    for i in range(count):
        with phase(f"reading {entry} [{i}]"):
            n = cur.u8()
            out.append(read_text(cur, n))

    logger.debug("%s table: %d entr%s", what, count, "y" if count == 1 else "ies")
    return out


def decode_node_table(cur: Cursor) -> List[str]:
    return decode_string_table(cur, what="nodes", entry="node path")


def decode_type_table(cur: Cursor) -> List[str]:
    return decode_string_table(cur, what="types", entry="type name")
