"""Validation of attribute values that end up inside HTML attributes."""

from __future__ import annotations

import re
from urllib.parse import urlparse

SAFE_LINK_SCHEMES = frozenset({"http", "https", "mailto"})

# RFC 3986 unreserved, reserved and percent-encoded characters.
_URI_RE = re.compile(r"^(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+$")

_COLOR_RE = re.compile(
    r"^(?:#[0-9a-fA-F]{3,8}"
    r"|(?:rgb|rgba|hsl|hsla)\(\s*[0-9.%]+(?:\s*,\s*[0-9.%]+){2,3}\s*\)"
    r"|[a-zA-Z]{3,20})$"
)


def safe_link(value: object) -> str | None:
    """Return ``value`` if it is a well-formed http(s)/mailto URI, else ``None``."""
    if not isinstance(value, str) or not _URI_RE.match(value):
        return None
    try:
        parsed = urlparse(value)
    except ValueError:
        return None

    scheme = parsed.scheme.lower()
    if scheme not in SAFE_LINK_SCHEMES:
        return None
    if scheme == "mailto":
        # mailto takes a bare address, never an authority.
        return value if parsed.path and not parsed.netloc else None
    return value if parsed.netloc else None


def safe_color(value: object) -> str | None:
    if isinstance(value, str) and _COLOR_RE.match(value.strip()):
        return value.strip()
    return None
