import sys
from pathlib import Path

import requests
from requests.structures import CaseInsensitiveDict

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

HTML = "text/html; charset=utf-8"


class FakeResponse:
    def __init__(self, text="", status_code=200, content_type=HTML):
        self.text = text
        self.status_code = status_code
        self.headers = CaseInsensitiveDict()
        if content_type is not None:
            self.headers["Content-Type"] = content_type


class FakeSession:
    """Serves canned responses by exact URL and records every request."""

    def __init__(self, pages=None, errors=()):
        self.pages = dict(pages or {})
        self.errors = set(errors)
        self.requested = []
        self.closed = False

    def get(self, url, timeout=None, allow_redirects=True):
        self.requested.append(url)
        if url in self.errors:
            raise requests.ConnectionError(f"connection refused: {url}")
        page = self.pages.get(url)
        if page is None:
            return FakeResponse("not found", 404)
        if isinstance(page, FakeResponse):
            return page
        return FakeResponse(page)

    def close(self):
        self.closed = True


def anchors(*hrefs):
    links = "".join(f'<a href="{h}"><span>link</span></a>' for h in hrefs)
    return f"<html><body>{links}</body></html>"


