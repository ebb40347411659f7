from __future__ import annotations
import logging
from .bitcursor import Cursor
from ..errors import phase, InvalidMagicError, UnsupportedVersionError

logger = logging.getLogger(__name__)

MAGIC_NUMBER = b"kronarknode"
LATEST_VERSION = 1


def decode_header(cur: Cursor) -> int:
    """
    Magic literal (11 bytes) followed by the version byte.
    Returns the version.
    """
    with phase("parsing magic") as label:
        start = cur.tell()
        magic = cur.take(len(MAGIC_NUMBER))
        if magic != MAGIC_NUMBER:
            raise InvalidMagicError(label, magic, start)

    with phase("reading version number") as label:
        start = cur.tell()
        version = cur.u8()
        if version > LATEST_VERSION:
            raise UnsupportedVersionError(label, version, LATEST_VERSION, start)

    logger.debug("header ok, version %d", version)
    return version
