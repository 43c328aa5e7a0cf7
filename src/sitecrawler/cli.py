"""
Command-line interface for the crawler.
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union
from urllib.parse import urlparse

from sitecrawler.core import DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT, crawl
from sitecrawler.pages import VisitedPages
from sitecrawler.urls import normalize_url


def print_summary(pages: VisitedPages) -> None:
    """Print crawl summary to stderr."""
    sys.stderr.write("=" * 50 + "\n")
    sys.stderr.write("CRAWL SUMMARY\n")
    sys.stderr.write("=" * 50 + "\n\n")

    sys.stderr.write(f"Distinct pages found:   {len(pages)}\n")
    sys.stderr.write(f"Total links followed:   {pages.total_links}\n\n")

    if pages:
        sys.stderr.write("Most linked pages:\n")
        for url, count in pages.most_common(10):
            sys.stderr.write(f"  {count:>5}  {url}\n")
    else:
        sys.stderr.write("No pages found.\n")

    sys.stderr.write("\n")


def build_report(pages: VisitedPages) -> List[Dict[str, Union[str, int]]]:
    """Turn visit counts into JSON-ready rows, most linked first."""
    return [{"url": url, "count": count} for url, count in pages.most_common()]


def default_output_path(start_url: str, now: Optional[datetime] = None) -> Path:
    """Report location when --out is not given: crawls/<host>_<timestamp>.json"""
    host = urlparse(start_url).hostname or "unknown"
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return Path("crawls") / f"{host.replace('.', '_')}_{stamp}.json"


def write_report(
    pages: VisitedPages,
    out: Optional[str],
    start_url: str,
    pretty: bool = False,
) -> Optional[Path]:
    """Write the JSON report to out ("-" for stdout). Returns the file written, if any."""
    json_text = json.dumps(build_report(pages), ensure_ascii=False, indent=2 if pretty else None)
    if out == "-":
        print(json_text)
        return None

    path = Path(out) if out else default_output_path(start_url)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json_text, encoding="utf-8")
    return path


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the crawler CLI."""
    parser = argparse.ArgumentParser(
        prog="site-crawler",
        description="Crawl every page on the start URL's host and count links to each page.",
    )
    parser.add_argument("start_url", help="Start URL (e.g. https://example.com)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT_S:g})",
    )
    parser.add_argument("--user-agent", default=DEFAULT_USER_AGENT, help="User-Agent header")
    parser.add_argument("--out", help="Output file path, or '-' for stdout (default: auto-generated in crawls/)")
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    parser.add_argument("--verbose", action="store_true", help="Show progress and summary")
    args = parser.parse_args(argv)

    if normalize_url(args.start_url) is None:
        parser.error(f"invalid start URL: {args.start_url}")

    pages = crawl(
        args.start_url,
        timeout_s=args.timeout,
        user_agent=args.user_agent,
        verbose=args.verbose,
    )

    if args.verbose:
        print_summary(pages)

    written = write_report(pages, args.out, args.start_url, pretty=args.pretty)
    if written is not None and args.verbose:
        sys.stderr.write(f"Results written to: {written}\n")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
