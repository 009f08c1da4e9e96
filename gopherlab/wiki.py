"""A small wiki: pages are viewed, edited and saved as text files.

Routes:

* ``/view/<title>`` shows a page, or redirects to its edit form if it does not exist.
* ``/edit/<title>`` shows an edit form for a page, empty if it does not exist.
* ``/save/<title>`` stores the submitted ``body`` field and redirects to the page.

Titles must consist of ASCII letters and digits only; any other path under
these prefixes answers 404. A separate greeting app answers every path with
``Hi there, I love <path>!``.
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from dataclasses import dataclass
from typing import Any

from flask import Flask, Response, redirect, request

logger = logging.getLogger(__name__)

VALID_PATH = re.compile(r"^/(edit|save|view)/([a-zA-Z0-9]+)$")

_TEMPLATE_NAMES = ("edit.html", "view.html")

_DEFAULT_TEMPLATES = {
    "edit.html": (
        "<h1>Editing {{ title }}</h1>\n"
        '<form action="/save/{{ title }}" method="POST">\n'
        '\t<div><textarea name="body" rows="20" cols="80">{{ body }}</textarea></div>\n'
        '\t<div><input type="submit" value="Save"></div>\n'
        "</form>\n"
    ),
    "view.html": (
        "<h1>{{ title }}</h1>\n"
        '<p>[<a href="/edit/{{ title }}">edit</a>]</p>\n'
        "<div>{{ body }}</div>\n"
    ),
}

_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"]


def _page_path(directory: str | os.PathLike[str], title: str) -> str:
    return os.path.join(os.fspath(directory), title + ".txt")


@dataclass
class Page:
    """A wiki page: a title and its body."""

    title: str
    body: bytes = b""

    def save(self, directory: str | os.PathLike[str]) -> None:
        """Write the body to ``<directory>/<title>.txt``, readable only by the owner."""
        filename = _page_path(directory, self.title)
        logger.info("save %s", filename)
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as stream:
            stream.write(self.body)


def load_page(directory: str | os.PathLike[str], title: str) -> Page:
    """Read the page called ``title`` from ``directory``; raises OSError if absent."""
    filename = _page_path(directory, title)
    logger.info("load %s", filename)
    with open(filename, "rb") as stream:
        body = stream.read()
    return Page(title=title, body=body)


def _read_templates(template_dir: str | os.PathLike[str] | None) -> dict[str, str]:
    if template_dir is None:
        return dict(_DEFAULT_TEMPLATES)
    texts = {}
    for name in _TEMPLATE_NAMES:
        with open(os.path.join(os.fspath(template_dir), name), encoding="utf-8") as stream:
            texts[name] = stream.read()
    return texts


def _not_found() -> Response:
    return Response("404 page not found\n", status=404, mimetype="text/plain")


def _server_error(message: str) -> Response:
    return Response(message + "\n", status=500, mimetype="text/plain")


def create_app(
    data_dir: str | os.PathLike[str],
    template_dir: str | os.PathLike[str] | None = None,
) -> Flask:
    """Return the wiki app storing pages in ``data_dir``.

    Templates ``edit.html`` and ``view.html`` are read from ``template_dir``
    when it is given (they receive ``title`` and ``body``); otherwise built-in
    ones are used. They are read and compiled once, here.
    """
    app = Flask(__name__)
    templates = {
        name: app.jinja_env.from_string(text)
        for name, text in _read_templates(template_dir).items()
    }

    def render(name: str, page: Page) -> Response:
        context: dict[str, Any] = {
            "title": page.title,
            "body": page.body.decode("utf-8", errors="replace"),
        }
        try:
            with app.app_context():
                html = templates[name + ".html"].render(**context)
        except Exception as err:  # any failure while executing a template
            return _server_error(str(err))
        return Response(html, mimetype="text/html")

    def view(title: str) -> Response:
        try:
            page = load_page(data_dir, title)
        except OSError:
            return redirect("/edit/" + title, code=302)
        return render("view", page)

    def edit(title: str) -> Response:
        try:
            page = load_page(data_dir, title)
        except OSError:
            page = Page(title=title)
        return render("edit", page)

    def save(title: str) -> Response:
        body = request.values.get("body", "")
        page = Page(title=title, body=body.encode("utf-8"))
        try:
            page.save(data_dir)
        except OSError as err:
            return _server_error(str(err))
        return redirect("/view/" + title, code=302)

    handlers = {"view": view, "edit": edit, "save": save}

    def dispatch(rest: str) -> Response:
        match = VALID_PATH.match(request.path)
        if match is None:
            return _not_found()
        return handlers[match.group(1)](match.group(2))

    for prefix in handlers:
        app.add_url_rule(
            f"/{prefix}/",
            endpoint=f"{prefix}_root",
            view_func=dispatch,
            defaults={"rest": ""},
            methods=_METHODS,
        )
        app.add_url_rule(
            f"/{prefix}/<path:rest>",
            endpoint=prefix,
            view_func=dispatch,
            methods=_METHODS,
        )
    return app


def create_greeting_app() -> Flask:
    """Return an app answering every path with ``Hi there, I love <path>!``."""
    app = Flask(__name__)

    @app.route("/", defaults={"path": ""}, methods=_METHODS)
    @app.route("/<path:path>", methods=_METHODS)
    def greet(path: str) -> Response:
        return Response(f"Hi there, I love {request.path[1:]}!", mimetype="text/plain")

    return app


def _split_addr(addr: str) -> tuple[str, int]:
    host, _, port = addr.rpartition(":")
    try:
        return host or "0.0.0.0", int(port)
    except ValueError as err:
        raise SystemExit(f"wiki: invalid address {addr!r}") from err


def main(argv: list[str] | None = None) -> int:
    """Parse options and serve the wiki, or the greeting app with ``-greeting``."""
    parser = argparse.ArgumentParser(prog="wiki")
    parser.add_argument("-addr", default=":8080", help="address to serve")
    parser.add_argument("-data", default=".", help="directory holding page files")
    parser.add_argument("-templates", default=None,
                        help="directory holding edit.html and view.html")
    parser.add_argument("-greeting", action="store_true",
                        help="serve the greeting app instead of the wiki")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if args.greeting:
        app = create_greeting_app()
    else:
        try:
            app = create_app(args.data, args.templates)
        except OSError as err:
            print(f"wiki: {err}", file=sys.stderr)
            raise SystemExit(1) from err
    host, port = _split_addr(args.addr)
    app.run(host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())