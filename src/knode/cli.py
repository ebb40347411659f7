from __future__ import annotations
import argparse, sys
from .binary.errors import KnodeError
from .logging_utils import setup_logging, verbosity_to_level
from .models.document import KnodeDocument


def cmd_dump(args) -> int:
    try:
        if args.input == "-":
            doc = KnodeDocument.from_stream(sys.stdin.buffer)
        else:
            doc = KnodeDocument.from_binary(args.input)
    except KnodeError as e:
        print(e, file=sys.stderr)
        return 1

    indent = args.indent if args.indent > 0 else None
    print(doc.to_json(indent=indent))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="knode", description="Decode a Kronark node (.knode) file and print it as JSON")
    p.add_argument("input", help="Path to .knode file, or - for stdin")
    p.add_argument("--indent", type=int, default=2, help="JSON indent; 0 prints a single line")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Log decoding progress to stderr (repeat for debug)")
    p.set_defaults(func=cmd_dump)
    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    setup_logging(console_level=verbosity_to_level(ns.verbose))
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
