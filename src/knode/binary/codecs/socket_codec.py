from __future__ import annotations
from .bitcursor import Cursor
from .tables import read_text
from ...models.common import Connection
from ...models.socket import Socket, SocketKind

# Flags byte, bit 0 = LSB. Bits 6-7 are padding.
FLAG_SWITCH_VALUE = 0b0000_0001
FLAG_CONNECTED    = 0b0000_0010
FLAG_REPETITIVE   = 0b0000_0100
KIND_SHIFT = 3
KIND_MASK = 0b111


def socket_kind(flags: int) -> int:
    return (flags >> KIND_SHIFT) & KIND_MASK


def decode_socket(cur: Cursor) -> Socket:
    """
    Flags, value-type index and port slot, then a tail that depends on kind:
      - outgoing named: nothing more
      - connected: instance index byte, socket index byte
      - switch (not connected): no bytes, value is the switch bit as text
      - otherwise: u32 length + that many bytes of text
    Underruns propagate as CursorUnderrun; the caller labels the phase.
    """
    flags = cur.u8()
    kind = SocketKind(socket_kind(flags))

    value_type = cur.u8()
    port_slot = cur.u8()

    connection = None
    value = None
    if kind is not SocketKind.OUTGOING_NAMED:
        if flags & FLAG_CONNECTED:
            node = cur.u8()
            sock = cur.u8()
            connection = Connection(instance=node, socket=sock)
        elif kind is not SocketKind.INCOMING_SWITCH:
            n = cur.u32()
            value = read_text(cur, n)
        else:
            value = "true" if flags & FLAG_SWITCH_VALUE else "false"

    return Socket(
        kind=kind,
        value_type=value_type,
        port_slot=port_slot,
        repetitive=bool(flags & FLAG_REPETITIVE),
        connection=connection,
        value=value,
    )
