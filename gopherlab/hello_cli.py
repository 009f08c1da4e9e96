"""Command-line greeter: ``hello [options] [name]``."""

from __future__ import annotations

import argparse
import sys

from gopherlab.reverse import reverse_string


def greet(name: str = "world", greeting: str = "Hello", reverse: bool = False) -> str:
    """Return the greeting line, optionally with both parts reversed."""
    if reverse:
        greeting, name = reverse_string(greeting), reverse_string(name)
    return f"{greeting}, {name}!"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hello", usage="hello [options] [name]", add_help=False
    )
    parser.add_argument(
        "-g", metavar="greeting", dest="greeting", default="Hello",
        help="Greet with greeting",
    )
    parser.add_argument(
        "-r", dest="reverse", action="store_true", help="Greet in reverse"
    )
    parser.add_argument("names", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and print a greeting."""
    parser = _parser()
    args = parser.parse_args(argv)
    if len(args.names) >= 2:
        parser.print_help(sys.stderr)
        raise SystemExit(2)
    name = args.names[0] if args.names else "world"
    if name == "":
        print('hello: invalid name ""', file=sys.stderr)
        raise SystemExit(1)
    print(greet(name, args.greeting, args.reverse))
    return 0


if __name__ == "__main__":
    sys.exit(main())