"""
Single-host web crawler that counts how many links point at each page.
"""
from sitecrawler.core import crawl, crawl_page
from sitecrawler.links import extract_links
from sitecrawler.pages import VisitedPages
from sitecrawler.urls import normalize_url

__version__ = "1.0.0"
__all__ = ["crawl", "crawl_page", "extract_links", "normalize_url", "VisitedPages"]
