"""Seed content for newly created JSON directories.

Plain Python strings, no template engine. When a configured directory
does not exist the scanner creates it and writes ``INDEX_JSON`` as its
``index.json``, so the directory immediately serves a root document.
"""

INDEX_JSON = """\
{
  "name": "jsonshelf",
  "message": "This directory was created by jsonshelf. Replace this file with your own JSON.",
  "usage": {
    "index": "index.json is served at the directory path, e.g. GET /json",
    "documents": "any other name.json is served at GET /json/name"
  },
  "examples": [
    {"id": 1, "title": "First item", "done": false},
    {"id": 2, "title": "Second item", "done": true}
  ]
}
"""


def index_json() -> str:
    """Return the default ``index.json`` document."""
    return INDEX_JSON
