"""Web server that announces whether a particular release tag exists yet.

It polls a change URL with HEAD requests until it answers 200 OK, and serves
a page saying whether the release is out.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
import threading
import time
import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass, field

from flask import Flask, Response, jsonify

logger = logging.getLogger(__name__)

_ESCAPES = {"&": "&amp;", "'": "&#39;", "<": "&lt;", ">": "&gt;", '"': "&#34;"}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


@dataclass
class Stats:
    """Counters for monitoring the server."""

    hit_count: int = 0
    poll_count: int = 0
    poll_error: str = ""
    poll_error_count: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def as_dict(self) -> dict[str, object]:
        """Return the counters under their exported names."""
        with self.lock:
            return {
                "hitCount": self.hit_count,
                "pollCount": self.poll_count,
                "pollError": self.poll_error,
                "pollErrorCount": self.poll_error_count,
            }


STATS = Stats()


def is_tagged(url: str, stats: Stats | None = None) -> bool:
    """Make a HEAD request to ``url`` and report whether it answered 200 OK."""
    stats = STATS if stats is None else stats
    with stats.lock:
        stats.poll_count += 1
    request = urllib.request.Request(url, method="HEAD")
    try:
        with urllib.request.urlopen(request) as response:
            return response.status == 200
    except urllib.error.HTTPError as err:
        err.close()
        return err.code == 200
    except (urllib.error.URLError, OSError, ValueError) as err:
        logger.warning("%s", err)
        with stats.lock:
            stats.poll_error = str(err)
            stats.poll_error_count += 1
        return False


def _render_page(version: str, url: str, yes: bool) -> str:
    if yes:
        answer = f'\n\t\t<a href="{_escape(url)}">YES!</a>\n\t'
    else:
        answer = "\n\t\tNo. :-(\n\t"
    return (
        "\n<!DOCTYPE html><html><body><center>\n"
        f"\t<h2>Is Go {_escape(version)} out yet?</h2>\n"
        "\t<h1>\n\t"
        f"{answer}"
        "\n\t</h1>\n"
        "</center></body></html>\n"
    )


class Server:
    """Polls a change URL and renders whether the release is out."""

    def __init__(
        self,
        version: str,
        url: str,
        period: float,
        *,
        stats: Stats | None = None,
        sleep: Callable[[float], None] = time.sleep,
        on_done: Callable[[], None] | None = None,
    ) -> None:
        self.version = version
        self.url = url
        self.period = period
        self.stats = STATS if stats is None else stats
        self._sleep = sleep
        self._on_done = on_done
        self._lock = threading.Lock()
        self._yes = False

    @property
    def yes(self) -> bool:
        """Whether the tag has been seen."""
        with self._lock:
            return self._yes

    def start(self) -> Server:
        """Start polling in a background thread and return the server."""
        threading.Thread(target=self.poll, daemon=True).start()
        return self

    def poll(self) -> None:
        """Poll the URL every period until it is tagged, then mark the server yes."""
        while not is_tagged(self.url, self.stats):
            self._sleep(self.period)
        with self._lock:
            self._yes = True
        if self._on_done is not None:
            self._on_done()

    def render(self) -> str:
        """Count a hit and return the HTML page."""
        with self.stats.lock:
            self.stats.hit_count += 1
        return _render_page(self.version, self.url, self.yes)


def create_app(server: Server) -> Flask:
    """Return an app serving the page on every path and counters on /debug/vars."""
    app = Flask(__name__)

    @app.route("/debug/vars")
    def debug_vars() -> Response:
        data = {"cmdline": sys.argv, **server.stats.as_dict()}
        return jsonify(data)

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def page(path: str) -> Response:
        return Response(server.render(), mimetype="text/html")

    return app


_UNITS = {"ns": 1e-9, "us": 1e-6, "µs": 1e-6, "ms": 1e-3, "s": 1.0, "m": 60.0, "h": 3600.0}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def _parse_duration(text: str) -> float:
    """Parse a duration such as ``5s``, ``1m30s`` or ``250ms`` into seconds."""
    body = text.lstrip("+-")
    sign = -1.0 if text.startswith("-") else 1.0
    if body == "0":
        return 0.0
    if not body:
        raise argparse.ArgumentTypeError(f"invalid duration {text!r}")
    total = 0.0
    pos = 0
    while pos < len(body):
        match = _DURATION_PART.match(body, pos)
        if match is None:
            raise argparse.ArgumentTypeError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def _split_addr(addr: str) -> tuple[str, int]:
    host, _, port = addr.rpartition(":")
    try:
        return host or "0.0.0.0", int(port)
    except ValueError as err:
        raise SystemExit(f"outyet: invalid address {addr!r}") from err


def main(argv: list[str] | None = None) -> int:
    """Parse options, start polling and serve the page."""
    parser = argparse.ArgumentParser(prog="outyet")
    parser.add_argument("-http", default="localhost:8080", help="Listen address")
    parser.add_argument("-poll", type=_parse_duration, default=5.0, help="Poll period")
    parser.add_argument("-version", default="1.4", help="release version")
    parser.add_argument("-base", required=True, help="base URL of release tags")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    change_url = f"{args.base}go{args.version}"
    server = Server(args.version, change_url, args.poll).start()
    host, port = _split_addr(args.http)
    logger.info("serving http://%s", args.http)
    create_app(server).run(host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())