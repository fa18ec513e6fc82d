"""URI derivation: requested format and route path segments."""

from __future__ import annotations

import re

# Everything from the first "?" or "."
_SUFFIX = re.compile(r"[?.].*$", re.DOTALL)


def derive_format(uri: str) -> str | None:
    """Return the format suffix of ``uri`` (``/users/1.json`` -> ``json``)."""
    path = uri.split("?", 1)[0]
    parts = path.split(".")
    if len(parts) >= 2:
        return parts[-1]
    return None


def remove_base_url(path: str, base_url: str | None) -> str:
    """Trim slashes from both sides and drop ``base_url`` from the front of ``path``."""
    path = path.strip("/")
    base = (base_url or "").strip("/")
    if path.startswith(base):
        path = path[len(base) :]
    return path


def derive_request_chain(uri: str, base_url: str | None = None) -> tuple[str, ...]:
    """Break ``uri`` into the path segments a router walks."""
    path = _SUFFIX.sub("", uri)
    path = remove_base_url(path, base_url)

    chain = path.split("/")
    if not chain[0]:
        chain = chain[1:]
    return tuple(chain)
