"""
Link extraction from HTML pages.
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, SoupStrainer

from sitecrawler.urls import parse_absolute

# SoupStrainer to parse only <a> tags (faster link extraction)
LINK_STRAINER = SoupStrainer("a", href=True)


def resolve_link(href: str, base_url: str) -> Optional[str]:
    """
    Turn an href into an absolute URL.

    Absolute hrefs are returned untouched, whatever host or scheme they use.
    Relative hrefs are joined onto base_url; None if that is not possible.
    """
    href = href.strip()
    if parse_absolute(href) is not None:
        return href
    if parse_absolute(base_url) is None:
        return None
    try:
        return urljoin(base_url, href)
    except ValueError:
        return None


def extract_links(html: str, base_url: str) -> List[str]:
    """Extract every <a href> target in document order, duplicates included."""
    soup = BeautifulSoup(html, "lxml", parse_only=LINK_STRAINER)
    links = []
    for anchor in soup.find_all("a", href=True):
        url = resolve_link(anchor["href"], base_url)
        if url is not None:
            links.append(url)
    return links
