"""
URL parsing and normalization helpers.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import ParseResult, quote, urlparse

# Characters allowed unescaped in a path (RFC 3986 pchar plus "/" and "%")
PATH_SAFE = "/%:@!$&'()*+,;="


def parse_absolute(url: str) -> Optional[ParseResult]:
    """Parse an absolute URL, returning None for relative or malformed input."""
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return None
    if not parsed.scheme:
        return None
    return parsed


def same_host(url: str, other: str) -> bool:
    """Check if two absolute URLs point at the same host (case-insensitive)."""
    a = parse_absolute(url)
    b = parse_absolute(other)
    if a is None or b is None:
        return False
    return a.hostname == b.hostname


def canonical_path(path: str) -> str:
    """Resolve "." and ".." segments and percent-encode unsafe characters."""
    if not path:
        return ""
    segments = path.split("/")
    resolved: List[str] = []
    for segment in segments[1:]:
        if segment == "..":
            if resolved:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)
    # "/a/." and "/a/b/.." both name the directory "/a/"
    if segments[-1] in (".", ".."):
        resolved.append("")
    return quote("/" + "/".join(resolved), safe=PATH_SAFE)


def normalize_url(url: str) -> Optional[str]:
    """
    Normalize URL into the key used to count page visits.

    - Lowercases host and path
    - Resolves dot segments and percent-encodes the path
    - Removes a single trailing slash from the path
    - Drops scheme, port, userinfo, query string and fragment

    Returns None when the URL is not absolute or has no host.
    """
    parsed = parse_absolute(url)
    if parsed is None or not parsed.hostname:
        return None

    path = canonical_path(parsed.path).lower()
    if path.endswith("/"):
        path = path[:-1]

    return f"{parsed.hostname.lower()}{path}"
