# gopherlab

A collection of small, self-contained tools and helpers:

- **String and number reversal** (`gopherlab.reverse`): reverses strings
  character by character and integers by their decimal digits.
- **Greeter** (`gopherlab.hello_cli`): a command-line greeting, optionally
  reversed.
- **Sums** (`gopherlab.sums`): adds up the values of a mapping of numbers.
- **Web apps**: a hello server (`gopherlab.helloserver`), a release watcher
  that reports whether a tag exists yet (`gopherlab.outyet`), a JSON album
  service (`gopherlab.albums`) and a small file-backed wiki (`gopherlab.wiki`).
  All are Flask applications.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from gopherlab.reverse import reverse_string, reverse_int
from gopherlab.hello_cli import greet
from gopherlab.sums import sum_ints, sum_floats, sum_numbers

reverse_string("Hello, 世界")   # "界世 ,olleH"
reverse_int(24601)              # 10642
reverse_int(-12)                # 0 (the reversed text is not a number)

greet("Gopher")                 # "Hello, Gopher!"
greet("Gopher", "Hi", True)     # "iH, rehpoG!"

sum_ints({"first": 34, "second": 12})   # 46
sum_numbers({"a": 1.5, "b": 2.5})       # 4.0
```

Each web module has a `create_app` function returning a Flask app, so it can
be run under any WSGI server or exercised with Flask's test client:

- `gopherlab.helloserver.create_app(greeting="Hello")` answers `/version`
  with build information and any other path `/name` with `Hello, name!`
  (`Gopher` for the root). `create_hello_app()` answers `/hello` with a fixed
  welcome line.
- `gopherlab.outyet.Server(version, url, period)` polls `url` with HEAD
  requests every `period` seconds until it answers 200 OK; `start()` runs the
  polling in a background thread and `render()` returns the status page.
  `create_app(server)` serves that page on every path and the counters kept in
  a `Stats` object as JSON on `/debug/vars`. `is_tagged(url)` makes a single
  check.
- `gopherlab.albums.create_app(albums=None)` serves `GET /albums`,
  `POST /albums` and `GET /albums/<id>` over an in-memory list of `Album`
  records, starting from `default_albums()` when none are given. Data is kept
  in memory only and is lost when the process ends.
- `gopherlab.wiki.create_app(data_dir, template_dir=None)` serves
  `/view/<title>`, `/edit/<title>` and `/save/<title>`, storing each page as
  `<title>.txt` in `data_dir`. Titles must be ASCII letters and digits; other
  paths answer 404. `Page.save(directory)` and `load_page(directory, title)`
  work with the files directly. `create_greeting_app()` answers every path
  with `Hi there, I love <path>!`.

## Commands

```
hello [-g greeting] [-r] [name]
generic-sums
helloserver [-g greeting] [-addr host:port]
outyet -base URL [-http host:port] [-poll 5s] [-version 1.4]
albums-server [-addr host:port]
wiki-server [-addr host:port] [-data DIR] [-templates DIR] [-greeting]
```

`hello` greets the world by default, or the given name; `-g` changes the
greeting and `-r` prints it reversed. An empty name is an error, as is more
than one name.

`generic-sums` prints the sums of two sample mappings, one of integers and one
of floats.

`outyet` watches `<base>go<version>` and serves a page saying whether it is out
yet; `-poll` takes a duration such as `5s`, `250ms` or `1m30s`.

`wiki-server` uses built-in templates unless `-templates` names a directory
holding `edit.html` and `view.html`; with `-greeting` it serves the greeting
app instead of the wiki.

## What this package does not do

There is no randomised greeting generator for lists of names, no structured
log handler and no markdown preprocessor. The web apps have no persistent
database: the album service keeps its records in memory and the wiki stores
plain text files.