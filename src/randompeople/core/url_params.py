"""Query-string parameter lookup for page URLs."""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import unquote, urlsplit


def query_string_from_url(url: str) -> str:
    """Return the ``?``-prefixed query part of a URL, like ``location.search``."""
    query = urlsplit(url).query
    return f"?{query}" if query else ""


def get_url_parameter(name: str, query_string: str) -> Optional[str]:
    """Return the decoded value of ``name`` in ``query_string``, or None.

    Literal ``+`` characters decode to spaces. The first matching pair wins;
    a leading ``?`` on the query string is optional.
    """
    if not query_string:
        return None
    if not query_string.startswith(("?", "&")):
        query_string = "?" + query_string
    pattern = r"[?|&]" + re.escape(name) + r"=([^&;]+?)(&|#|;|$)"
    match = re.search(pattern, query_string)
    if not match:
        return None
    return unquote(match.group(1).replace("+", "%20")) or None
