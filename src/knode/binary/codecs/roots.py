from __future__ import annotations
import logging
from typing import Tuple
from .bitcursor import Cursor
from .bitfields import unpack_root_window, ROOT_WINDOW_SIZE
from ..errors import phase
from ...models.common import Position, Connection
from ...models.document import OutputRoot

logger = logging.getLogger(__name__)


def decode_roots(cur: Cursor) -> Tuple[Position, OutputRoot]:
    """
    5-byte packed root window, then the output root's connection list:
    one count byte followed by that many (instance, socket) byte pairs.
    """
    with phase("unpacking root positions"):
        input_pos, output_pos = unpack_root_window(cur.take(ROOT_WINDOW_SIZE))

    with phase("reading amount of connections"):
        count = cur.u8()

    connections = []
    for i in range(count):
        with phase(f"reading outgoing connection [{i}]"):
            pair = cur.take(2)
        connections.append(Connection(instance=pair[0], socket=pair[1]))

    logger.debug("roots: input=%s output=%s, %d connection(s)", input_pos, output_pos, count)
    return input_pos, OutputRoot(position=output_pos, connections=connections)
