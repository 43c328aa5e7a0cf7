from conftest import anchors

from sitecrawler.links import extract_links, resolve_link

BASE = "https://blog.boot.dev"


def test_extract_links_absolute():
    html = '<html><body><a href="https://blog.boot.dev/"><span>Boot.dev</span></a></body></html>'
    assert extract_links(html, BASE) == ["https://blog.boot.dev/"]


def test_extract_links_relative():
    html = '<html><body><a href="/path/one"><span>Boot.dev</span></a></body></html>'
    assert extract_links(html, BASE) == ["https://blog.boot.dev/path/one"]


def test_extract_links_both():
    html = anchors("/path/one", "https://other.com/path/one")
    assert extract_links(html, BASE) == [
        "https://blog.boot.dev/path/one",
        "https://other.com/path/one",
    ]


def test_extract_links_keeps_order_and_duplicates():
    html = anchors("/b", "/a", "/b")
    assert extract_links(html, BASE) == [
        "https://blog.boot.dev/b",
        "https://blog.boot.dev/a",
        "https://blog.boot.dev/b",
    ]


def test_extract_links_two_identical_anchors():
    links = extract_links(anchors("/same", "/same"), BASE)
    assert len(links) == 2
    assert links[0] == links[1]


def test_extract_links_absolute_href_left_untouched():
    html = anchors("http://BLOG.boot.dev/Mixed?x=1#y")
    assert extract_links(html, "https://blog.boot.dev/") == ["http://BLOG.boot.dev/Mixed?x=1#y"]


def test_extract_links_resolves_against_base_not_page():
    html = anchors("next", "../up")
    assert extract_links(html, "https://blog.boot.dev/docs/") == [
        "https://blog.boot.dev/docs/next",
        "https://blog.boot.dev/up",
    ]


def test_extract_links_skips_anchors_without_href():
    html = '<a name="top">top</a><a href="/x">x</a>'
    assert extract_links(html, BASE) == ["https://blog.boot.dev/x"]


def test_extract_links_tolerates_malformed_html():
    html = '<html><body><div><a href="/one">one<p><a href="/two">two</div>'
    assert extract_links(html, BASE) == [
        "https://blog.boot.dev/one",
        "https://blog.boot.dev/two",
    ]


def test_extract_links_drops_relative_when_base_is_not_absolute():
    html = anchors("/path/one", "https://blog.boot.dev/ok")
    assert extract_links(html, "not a url") == ["https://blog.boot.dev/ok"]


def test_extract_links_empty_document():
    assert extract_links("", BASE) == []


def test_resolve_link_strips_whitespace():
    assert resolve_link("  /a  ", BASE) == "https://blog.boot.dev/a"
    assert resolve_link(" https://x.dev/b\n", BASE) == "https://x.dev/b"


def test_extract_links_drops_unresolvable_href_and_keeps_going():
    assert extract_links(anchors("http://[bad", "/ok"), BASE) == ["https://blog.boot.dev/ok"]
    assert resolve_link("http://[bad", BASE) is None
