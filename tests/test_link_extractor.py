# File: tests/test_link_extractor.py
from unittest import mock

from bs4 import ParserRejectedMarkup

import site_crawler.crawler.link_extractor as link_extractor
from site_crawler.crawler.link_extractor import (
    extract_links,
    extract_links_pattern,
    extract_links_structural,
)

BASE = "http://example.com/"


def test_structural_reads_href_then_src(sample_html):
    assert extract_links_structural(BASE, sample_html) == [
        "http://example.com/style.css",
        "http://example.com/app.js",
        "http://example.com/link1",
        "http://external.com/",
    ]


def test_structural_ignores_other_tags_and_missing_attributes():
    html = (
        '<div href="/div"></div><iframe src="/frame"></iframe>'
        "<a>no href</a><img alt='no src'>"
        '<picture><source src="/video.webm"></picture>'
    )
    assert extract_links_structural(BASE, html) == ["http://example.com/video.webm"]


def test_structural_decodes_entities_in_attributes():
    html = '<a href="/search?a=1&amp;b=2">s</a>'
    assert extract_links_structural(BASE, html) == ["http://example.com/search?a=1&b=2"]


def test_pattern_sees_comments_and_is_case_insensitive(sample_html):
    links = extract_links_pattern(BASE, sample_html + '<IMG SRC="/upper.png">')
    assert "http://example.com/commented" in links
    assert links[-1] == "http://example.com/upper.png"


def test_pattern_skips_empty_values():
    assert extract_links_pattern(BASE, 'href="" src=\'\'') == []


def test_union_keeps_duplicates_and_order():
    html = "<a href=\"/a\">A</a><script>var tpl = \"<img src='/b'>\";</script>"
    assert extract_links(BASE, html) == [
        "http://example.com/a",
        "http://example.com/a",
        "http://example.com/b",
    ]


def test_unresolvable_candidates_are_dropped():
    html = '<a href="http://[::1/">bad</a><a href="/ok">ok</a>'
    assert extract_links(BASE, html) == ["http://example.com/ok", "http://example.com/ok"]


def test_rejected_markup_yields_only_pattern_links():
    html = '<a href="/a">A</a>'
    with mock.patch.object(link_extractor, "BeautifulSoup", side_effect=ParserRejectedMarkup("boom")):
        assert extract_links(BASE, html) == ["http://example.com/a"]
