from __future__ import annotations
import logging
from typing import List
from .bitcursor import Cursor
from .bitfields import unpack_instance_window, INSTANCE_WINDOW_SIZE
from .socket_codec import decode_socket
from .tables import read_text
from ..errors import phase
from ...models.instance import Instance

logger = logging.getLogger(__name__)


def decode_instance(cur: Cursor, idx: int) -> Instance:
    with phase(f"parsing instance [{idx}]"):
        key = cur.u8()
        type_idx = cur.u8()
        position, name_len, sock_count = unpack_instance_window(cur.take(INSTANCE_WINDOW_SIZE))
        name = read_text(cur, name_len)

    sockets = []
    for si in range(sock_count):
        with phase(f"parsing socket [{si}] in instance [{idx}]"):
            sockets.append(decode_socket(cur))

    logger.debug("instance [%d] key=%d type=0x%02x name=%r sockets=%d", idx, key, type_idx, name, sock_count)
    return Instance(key=key, type=type_idx, name=name, position=position, sockets=sockets)


def decode_instances(cur: Cursor) -> List[Instance]:
    """Count byte followed by that many instances, kept in file order."""
    with phase("reading amount of instances"):
        count = cur.u8()
    return [decode_instance(cur, i) for i in range(count)]
