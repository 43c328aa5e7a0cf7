"""
Core crawling logic.
"""
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional

import requests

from sitecrawler.links import extract_links
from sitecrawler.pages import VisitedPages
from sitecrawler.urls import normalize_url, same_host

DEFAULT_TIMEOUT_S = 15.0
DEFAULT_USER_AGENT = "SiteCrawler/1.0"


def print_notice(message: str) -> None:
    """Print a progress or diagnostic line to stderr."""
    sys.stderr.write(f"{message}\n")
    sys.stderr.flush()


@contextmanager
def _session_scope(
    session: Optional[requests.Session],
    user_agent: str,
) -> Iterator[requests.Session]:
    """Yield the given session, or a fresh one that is closed afterwards."""
    if session is not None:
        yield session
        return
    own = requests.Session()
    own.headers["User-Agent"] = user_agent
    try:
        yield own
    finally:
        own.close()


def fetch_html(
    session: requests.Session,
    url: str,
    timeout_s: float,
    verbose: bool = False,
) -> Optional[str]:
    """
    GET a page and return its body if it is an HTML document.

    Returns None on connection errors, 4xx/5xx responses and
    non-HTML (or missing) content types.
    """
    if verbose:
        print_notice(f"crawling {url}")

    try:
        resp = session.get(url, timeout=timeout_s, allow_redirects=True)
    except requests.RequestException as e:
        if verbose:
            print_notice(f"  ✗ ERROR {url}: {e}")
        return None

    if 400 <= resp.status_code < 600:
        if verbose:
            print_notice(f"  → Got HTTP error, status code: {resp.status_code}")
        return None

    content_type = (resp.headers.get("content-type") or "").lower()
    if "text/html" not in content_type:
        if verbose:
            print_notice(f"  → Got non-html response: {content_type}")
        return None

    return resp.text


def _visit(
    session: requests.Session,
    base_url: str,
    url: str,
    pages: VisitedPages,
    timeout_s: float,
    verbose: bool,
) -> List[str]:
    """Count one link to url and return the links found on it, if fetched."""
    # Offsite and unparseable URLs are dropped without a trace
    if not same_host(url, base_url):
        return []

    key = normalize_url(url)
    if key is None:
        return []

    # Seen before: count it, never fetch twice
    if not pages.record(key):
        return []

    html = fetch_html(session, url, timeout_s, verbose)
    if html is None:
        return []
    return extract_links(html, base_url)


def crawl_page(
    base_url: str,
    current_url: str,
    pages: Optional[VisitedPages] = None,
    *,
    session: Optional[requests.Session] = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    user_agent: str = DEFAULT_USER_AGENT,
    verbose: bool = False,
) -> VisitedPages:
    """
    Crawl current_url and everything reachable from it on base_url's host.

    Pages are visited depth-first in the order their links appear, each
    child subtree finishing before the next sibling starts. Counts are
    accumulated into pages (updated in place) which is also returned.

    Progress lines ("crawling <url>", HTTP errors, non-HTML responses,
    connection errors) go to stderr only when verbose is set; they never
    change which pages are visited.

    Args:
        base_url: URL whose host bounds the crawl; relative links resolve against it.
        current_url: URL to start from.
        pages: Visit counts from an earlier call, or None to start empty.
        session: HTTP session used for every request; a new one is opened if None.
        timeout_s: HTTP request timeout in seconds.
        user_agent: User-Agent header used when the session is created here.
        verbose: Whether to print progress information to stderr.

    Returns:
        The visit count per normalized URL.
    """
    if pages is None:
        pages = VisitedPages()
    elif not isinstance(pages, VisitedPages):
        pages = VisitedPages(pages)

    with _session_scope(session, user_agent) as http:
        # Children are pushed reversed so they pop in document order
        stack: List[str] = [current_url]
        while stack:
            url = stack.pop()
            next_urls = _visit(http, base_url, url, pages, timeout_s, verbose)
            stack.extend(reversed(next_urls))

    return pages


def crawl(
    start_url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    user_agent: str = DEFAULT_USER_AGENT,
    verbose: bool = False,
) -> VisitedPages:
    """
    Crawl every same-host page reachable from start_url.

    Args:
        start_url: The URL to start crawling from; also the base for relative links.
        session: HTTP session to reuse; a new one is opened (and closed) if None.
        timeout_s: HTTP request timeout in seconds.
        user_agent: User-Agent header used when the session is created here.
        verbose: Whether to print progress information.

    Returns:
        The visit count per normalized URL.
    """
    return crawl_page(
        start_url,
        start_url,
        session=session,
        timeout_s=timeout_s,
        user_agent=user_agent,
        verbose=verbose,
    )
