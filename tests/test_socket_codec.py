import pytest
from knode.binary.codecs.bitcursor import Cursor
from knode.binary.codecs.socket_codec import decode_socket
from knode.binary.errors import phase, OutOfDataError
from knode.models.socket import SocketKind
from _builders import flags


def _decode(buf):
    cur = Cursor(buf)
    s = decode_socket(cur)
    return s, cur


def test_switch_socket_synthesizes_value():
    s, cur = _decode(bytes([flags(SocketKind.INCOMING_SWITCH, switch=True), 0xF7, 2]))
    assert s.value == "true"
    assert s.connection is None
    assert cur.remaining() == 0

    s, _ = _decode(bytes([flags(SocketKind.INCOMING_SWITCH), 0xF7, 2]))
    assert s.value == "false"


def test_connected_select_socket():
    s, cur = _decode(bytes([flags(SocketKind.INCOMING_SELECT, connected=True), 0, 1, 3, 1]))
    assert s.kind is SocketKind.INCOMING_SELECT
    assert (s.connection.instance, s.connection.socket) == (3, 1)
    assert s.value is None
    assert s.connected
    assert cur.remaining() == 0


def test_connected_switch_reads_reference_not_value():
    s, _ = _decode(bytes([flags(SocketKind.INCOMING_SWITCH, connected=True, switch=True), 0, 0, 4, 2]))
    assert (s.connection.instance, s.connection.socket) == (4, 2)
    assert s.value is None


def test_text_socket_inline_value():
    buf = bytes([flags(SocketKind.INCOMING_TEXT, repetitive=True), 0xF5, 9]) + (5).to_bytes(4, "big") + b"hello"
    s, cur = _decode(buf)
    assert s.value == "hello"
    assert s.repetitive
    assert s.port_slot == 9
    assert s.builtin_value_type == "builtin-type:text"
    assert cur.remaining() == 0


def test_number_socket_empty_value():
    s, _ = _decode(bytes([flags(SocketKind.INCOMING_NUMBER), 0, 0]) + bytes(4))
    assert s.value == ""


@pytest.mark.parametrize("extra", [
    dict(),
    dict(connected=True),
    dict(connected=True, switch=True, repetitive=True),
])
def test_outgoing_named_reads_nothing_more(extra):
    buf = bytes([flags(SocketKind.OUTGOING_NAMED, **extra), 1, 2]) + b"\xaa\xbb"
    s, cur = _decode(buf)
    assert s.connection is None and s.value is None
    assert cur.tell() == 3


def test_padding_bits_are_ignored():
    f = flags(SocketKind.INCOMING_SWITCH, switch=True) | 0b1100_0000
    s, _ = _decode(bytes([f, 0, 0]))
    assert s.kind is SocketKind.INCOMING_SWITCH and s.value == "true"


def test_reserved_kinds_read_inline_value():
    for raw in (6, 7):
        buf = bytes([raw << 3, 0, 0]) + (2).to_bytes(4, "big") + b"hi"
        s, cur = _decode(buf)
        assert s.kind == raw
        assert s.value == "hi"
        assert s.connection is None
        assert cur.remaining() == 0


def test_reserved_kind_connected():
    s, cur = _decode(bytes([(7 << 3) | 0b10, 0, 0, 5, 6]))
    assert s.kind is SocketKind.RESERVED_7
    assert (s.connection.instance, s.connection.socket) == (5, 6)
    assert cur.remaining() == 0


def test_value_length_past_end():
    buf = bytes([flags(SocketKind.INCOMING_TEXT), 0, 0]) + (10).to_bytes(4, "big") + b"abc"
    cur = Cursor(buf)
    with pytest.raises(OutOfDataError) as ei:
        with phase("socket"):
            decode_socket(cur)
    assert ei.value.offset == 7
    assert ei.value.needed == 10
