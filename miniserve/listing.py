import posixpath
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from flask import render_template_string

LISTING_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>Index of {{ display_path }}</title>
</head>
<body>
<h1>Index of {{ display_path }}</h1>
<ul>
{%- if parent %}
<li><a href="{{ parent }}">../</a></li>
{%- endif %}
{%- for entry in entries %}
<li><a href="{{ entry.href }}">{{ entry.name }}{% if entry.is_dir %}/{% endif %}</a></li>
{%- endfor %}
</ul>
</body>
</html>
"""


@dataclass(frozen=True)
class ListingEntry:
    name: str
    is_dir: bool
    href: str

    def to_dict(self) -> dict:
        return asdict(self)


def _href(url_path: str, name: str = "", is_dir: bool = True) -> str:
    href = posixpath.join("/", url_path, name)
    if is_dir and not href.endswith("/"):
        href += "/"
    # Undecodable file names come back from the OS as surrogates
    return quote(href, errors="surrogateescape")


def display_name(name: str) -> str:
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def list_directory(directory: Path, url_path: str = "") -> List[ListingEntry]:
    """Immediate children of `directory`, sorted by name.

    `url_path` is the request path of `directory` relative to the served
    root, used to build the absolute links of each entry.
    """
    url_path = url_path.strip("/")
    entries = []
    for child in sorted(directory.iterdir(), key=lambda p: p.name):
        is_dir = child.is_dir()
        entries.append(ListingEntry(display_name(child.name), is_dir, _href(url_path, child.name, is_dir)))
    return entries


def parent_href(url_path: str) -> Optional[str]:
    url_path = url_path.strip("/")
    if not url_path:
        return None
    return _href(posixpath.dirname(url_path))


def render_listing(url_path: str, entries: List[ListingEntry]) -> str:
    url_path = url_path.strip("/")
    return render_template_string(
        LISTING_TEMPLATE,
        display_path=display_name(f"/{url_path}"),
        parent=parent_href(url_path),
        entries=entries,
    )
