"""Tests for pagination links."""

from __future__ import annotations

import pytest

from linkheader import MalformedEntryError, PaginationLinkData


def test_link_data() -> None:
    header = (
        '<https://example.com/query>; rel="first", '
        '<https://example.com/query?cursor=1600000000.5_1>; rel="next"'
    )
    link = PaginationLinkData.from_header(header)
    assert not link.prev_url
    assert link.next_url == "https://example.com/query?cursor=1600000000.5_1"
    assert link.first_url == "https://example.com/query"
    assert not link.last_url

    header = (
        '<https://example.com/query?limit=10>; rel="first", '
        '<https://example.com/query?limit=10&cursor=15_2>; rel="next", '
        '<https://example.com/query?limit=10&cursor=p5_1>; rel="prev", '
        '<https://example.com/query?limit=10&cursor=99_1>; rel="last"'
    )
    link = PaginationLinkData.from_header(header)
    assert link.prev_url == "https://example.com/query?limit=10&cursor=p5_1"
    assert link.next_url == "https://example.com/query?limit=10&cursor=15_2"
    assert link.first_url == "https://example.com/query?limit=10"
    assert link.last_url == "https://example.com/query?limit=10&cursor=99_1"

    header = (
        '<https://example.com/query>; rel="first", '
        '<https://example.com/query?cursor=p1510000000_2>; rel="previous"'
    )
    link = PaginationLinkData.from_header(header)
    assert link.prev_url == "https://example.com/query?cursor=p1510000000_2"
    assert not link.next_url
    assert link.first_url == "https://example.com/query"

    header = '</query?cursor=p1>; rel="prev", </query?cursor=p2>; rel=previous'
    link = PaginationLinkData.from_header(header)
    assert link.prev_url == "/query?cursor=p1"

    header = '<https://example.com/query?foo=b>; rel="first"'
    link = PaginationLinkData.from_header(header)
    assert not link.prev_url
    assert not link.next_url
    assert link.first_url == "https://example.com/query?foo=b"

    for header in ("", None):
        link = PaginationLinkData.from_header(header)
        assert link == PaginationLinkData()


def test_link_data_invalid() -> None:
    with pytest.raises(MalformedEntryError):
        PaginationLinkData.from_header('https://example.com/; rel="next"')
