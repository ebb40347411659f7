from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

from .codecs.bitcursor import Cursor
from .codecs.header import decode_header
from .codecs.roots import decode_roots
from .codecs.tables import decode_node_table, decode_type_table
from .codecs.instance_codec import decode_instances
from .errors import StreamReadError

from knode.models.document import KnodeDocument

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# -----------------------------
# Core decode
# -----------------------------

def decode_buffer(data: BytesLike) -> KnodeDocument:
    """
    Decode a complete .knode buffer.

    Phases run in file order against one cursor owned by this call:
    header, roots, node/type tables, instances. The first failure raises a
    ParseError and nothing is returned; the document is only built once
    every phase has succeeded.
    """
    cur = Cursor(data)

    version = decode_header(cur)
    input_root, output_root = decode_roots(cur)
    nodes = decode_node_table(cur)
    types = decode_type_table(cur)
    instances = decode_instances(cur)

    if cur.remaining():
        logger.debug("ignoring %d trailing byte(s) at offset %d", cur.remaining(), cur.tell())

    return KnodeDocument(
        version=version,
        input_root=input_root,
        output_root=output_root,
        nodes=nodes,
        types=types,
        instances=instances,
    )


# -----------------------------
# I/O wrappers
# -----------------------------

def decode_stream(stream: BinaryIO) -> KnodeDocument:
    """Read `stream` to the end, then decode. Read failures raise StreamReadError."""
    try:
        raw = stream.read()
    except (OSError, ValueError) as e:
        # closed file objects raise ValueError rather than OSError
        raise StreamReadError(f"could not read input: {e}") from e
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise StreamReadError(f"stream yielded {type(raw).__name__}, expected bytes")
    return decode_buffer(raw)


def decode_file(path: Union[str, Path]) -> KnodeDocument:
    p = Path(path)
    logger.info("decoding %s", p)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise StreamReadError(f"could not read {p}: {e}") from e
    return decode_buffer(raw)
