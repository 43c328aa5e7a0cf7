"""
Visit tracking for crawled pages.
"""
from __future__ import annotations

from typing import List, Optional, Tuple


class VisitedPages(dict):
    """Map of normalized URL key to the number of times a link to it was seen."""

    def record(self, key: str) -> bool:
        """Count one more link to key. Returns True if the page is new."""
        if key in self:
            self[key] += 1
            return False
        self[key] = 1
        return True

    def count(self, key: str) -> int:
        """Return how many links to key were seen (0 if never)."""
        return self.get(key, 0)

    @property
    def total_links(self) -> int:
        """Total number of links followed, across all pages."""
        return sum(self.values())

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Pages sorted by count (highest first), ties broken by key."""
        ordered = sorted(self.items(), key=lambda item: (-item[1], item[0]))
        return ordered if n is None else ordered[:n]
