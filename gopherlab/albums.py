"""REST service over an in-memory collection of vintage jazz records.

Endpoints:

* ``GET /albums`` lists every album as JSON.
* ``POST /albums`` adds the album described by the JSON request body.
* ``GET /albums/<id>`` returns the album with that ID.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
import threading
from dataclasses import asdict, dataclass
from typing import Any

from flask import Flask, Response, request

logger = logging.getLogger(__name__)

_JSON_MIMETYPE = "application/json; charset=utf-8"
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class AlbumDecodeError(ValueError):
    """Raised when a request body does not describe an album."""


@dataclass
class Album:
    """Data about one record album."""

    id: str = ""
    title: str = ""
    artist: str = ""
    price: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return the album as a JSON-ready mapping in field order."""
        data = asdict(self)
        price = float(self.price)
        if math.isfinite(price) and price.is_integer() and abs(price) < 1e21:
            data["price"] = int(price)
        else:
            data["price"] = price
        return data

    @classmethod
    def from_json(cls, payload: Any) -> Album:
        """Build an album from decoded JSON, matching keys case-insensitively.

        Unknown keys are ignored, missing keys keep their zero values and a
        ``null`` value leaves a field unchanged.
        """
        album = cls()
        if payload is None:
            return album
        if not isinstance(payload, dict):
            raise AlbumDecodeError("cannot unmarshal non-object into album")
        fields = {"id": "id", "title": "title", "artist": "artist", "price": "price"}
        for key, value in payload.items():
            name = fields.get(key.lower())
            if name is None or value is None:
                continue
            if name == "price":
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise AlbumDecodeError("cannot unmarshal into field price of type float64")
                album.price = float(value)
            else:
                if not isinstance(value, str):
                    raise AlbumDecodeError(f"cannot unmarshal into field {name} of type string")
                setattr(album, name, value)
        return album


def default_albums() -> list[Album]:
    """Return the starting collection of albums."""
    return [
        Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
        Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
        Album(
            id="3",
            title="Sarah Vaughan and Clifford Brown",
            artist="Sarah Vaughan",
            price=39.99,
        ),
    ]


def _indented_json(status: int, data: Any) -> Response:
    text = json.dumps(data, indent=4, ensure_ascii=False)
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return Response(text, status=status, mimetype=_JSON_MIMETYPE)


def create_app(albums: list[Album] | None = None) -> Flask:
    """Return an app serving ``albums`` (a fresh default collection if omitted)."""
    store = list(default_albums() if albums is None else albums)
    lock = threading.Lock()
    app = Flask(__name__)

    @app.get("/albums")
    def get_albums() -> Response:
        with lock:
            data = [album.to_dict() for album in store]
        return _indented_json(200, data)

    @app.post("/albums")
    def post_albums() -> Response:
        raw = request.get_data(as_text=True)
        try:
            if raw.strip() == "":
                raise AlbumDecodeError("EOF")
            new_album = Album.from_json(json.loads(raw))
        except (ValueError, AlbumDecodeError) as err:
            logger.info("bad album request: %s", err)
            return Response("", status=400, mimetype="text/plain")
        with lock:
            store.append(new_album)
        return _indented_json(201, new_album.to_dict())

    @app.get("/albums/<album_id>")
    def get_album_by_id(album_id: str) -> Response:
        with lock:
            found = next((a for a in store if a.id == album_id), None)
        if found is None:
            return _indented_json(404, {"message": "album not found"})
        return _indented_json(200, found.to_dict())

    return app


def _split_addr(addr: str) -> tuple[str, int]:
    host, _, port = addr.rpartition(":")
    try:
        return host or "0.0.0.0", int(port)
    except ValueError as err:
        raise SystemExit(f"albums: invalid address {addr!r}") from err


def main(argv: list[str] | None = None) -> int:
    """Parse options and serve the album API."""
    parser = argparse.ArgumentParser(prog="albums")
    parser.add_argument("-addr", default="localhost:8080", help="address to serve")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    host, port = _split_addr(args.addr)
    logger.info("serving http://%s", args.addr)
    create_app().run(host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())