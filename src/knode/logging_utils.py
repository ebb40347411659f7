from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(*, console_level: int = logging.WARNING, stream: Optional[TextIO] = None, replace_existing: bool = True) -> None:
    # stdout carries the JSON dump, so records go to stderr.
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if replace_existing:
        root.handlers.clear()
    console_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler) and (not isinstance(h, logging.FileHandler))]
    if not console_handlers:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handlers = [console_handler]
        root.addHandler(console_handler)
    formatter = logging.Formatter(FORMAT)
    for handler in console_handlers:
        handler.setLevel(console_level)
        handler.setFormatter(formatter)


def verbosity_to_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
