"""URL helpers for portal addresses and subdomain-style CIDs."""

from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

DEFAULT_PORTAL_URL = "http://127.0.0.1:5522"
S5_URI_PREFIX = "s5://"

_SUBDOMAIN_RE = re.compile(r"^(?:https?://)?([^./]+)\.", re.IGNORECASE)


def get_subdomain(url: str) -> str | None:
    """Return the first DNS label of *url*, or None if the host has no dot."""
    m = _SUBDOMAIN_RE.match(url)
    return m.group(1) if m else None


def add_subdomain(url: str, subdomain: str) -> str:
    """Prepend *subdomain* to the host of *url*; the trailing slash is dropped."""
    parts = urlsplit(url)
    netloc = f"{subdomain}.{parts.netloc}"
    return urlunsplit(parts._replace(netloc=netloc)).rstrip("/")


def format_s5_uri(cid: str) -> str:
    """Add the ``s5://`` scheme to a CID unless it is empty or already present."""
    if not cid or cid.startswith(S5_URI_PREFIX):
        return cid
    return f"{S5_URI_PREFIX}{cid}"
