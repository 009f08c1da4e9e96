"""Hello-world web servers: a greeter with a version page, and a fixed /hello reply."""

from __future__ import annotations

import argparse
import logging
import platform
import sys

from flask import Flask, Response, request

_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"]

_ESCAPES = {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _build_info() -> str:
    return f"python\t{platform.python_version()}\npath\tgopherlab.helloserver\n"


def create_app(greeting: str = "Hello") -> Flask:
    """Return an app that serves /version and greets the name in any other path."""
    app = Flask(__name__)

    @app.route("/version", methods=_METHODS)
    def version() -> Response:
        body = "<!DOCTYPE html>\n<pre>\n" + _escape(_build_info()) + "\n"
        return Response(body, mimetype="text/html")

    @app.route("/", defaults={"name": ""}, methods=_METHODS)
    @app.route("/<path:name>", methods=_METHODS)
    def greet(name: str) -> Response:
        who = request.path.strip("/") or "Gopher"
        body = f"<!DOCTYPE html>\n{greeting}, {_escape(who)}!\n"
        return Response(body, mimetype="text/html")

    return app


def create_hello_app() -> Flask:
    """Return an app that answers /hello with a welcoming message."""
    app = Flask(__name__)

    @app.route("/hello", methods=_METHODS)
    def hello() -> Response:
        return Response("Hello from the Go app\n", mimetype="text/plain")

    return app


def _split_addr(addr: str) -> tuple[str, int]:
    host, _, port = addr.rpartition(":")
    try:
        return host or "0.0.0.0", int(port)
    except ValueError as err:
        raise SystemExit(f"helloserver: invalid address {addr!r}") from err


def main(argv: list[str] | None = None) -> int:
    """Parse options and serve the greeter."""
    parser = argparse.ArgumentParser(
        prog="helloserver", usage="helloserver [options]", add_help=False
    )
    parser.add_argument("-g", dest="greeting", default="Hello", metavar="greeting",
                        help="Greet with greeting")
    parser.add_argument("-addr", default="localhost:8080", help="address to serve")
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    args = parser.parse_args(argv)
    if args.rest:
        parser.print_help(sys.stderr)
        raise SystemExit(2)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    host, port = _split_addr(args.addr)
    logger.info("serving http://%s", args.addr)
    create_app(args.greeting).run(host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())