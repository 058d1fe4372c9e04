"""Pagination links from a ``Link`` header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ._parser import parse_with_relation

__all__ = ["PaginationLinkData"]


@dataclass
class PaginationLinkData:
    """Holds the pagination URLs returned in an :rfc:`8288` ``Link`` header.

    URLs are returned exactly as they appeared in the header. Relative URLs
    are not resolved.
    """

    first_url: str | None = None
    """URL of the first page."""

    prev_url: str | None = None
    """URL of the previous page, or `None` for the first page."""

    next_url: str | None = None
    """URL of the next page, or `None` for the last page."""

    last_url: str | None = None
    """URL of the last page, if the server provides it."""

    @classmethod
    def from_header(cls, header: str | None) -> Self:
        """Parse an :rfc:`8288` ``Link`` header with pagination URLs.

        Parameters
        ----------
        header
            Contents of an RFC 8288 ``Link`` header, or `None` if the
            response had no such header.

        Returns
        -------
        PaginationLinkData
            Parsed form of that header. ``rel="previous"`` is accepted for
            the previous page if there is no ``rel="prev"`` link.

        Raises
        ------
        LinkHeaderError
            Raised if the header cannot be parsed.
        """
        if not header:
            return cls()
        links = {
            rel: link.raw_uri
            for rel, link in parse_with_relation(header).items()
        }
        return cls(
            first_url=links.get("first"),
            prev_url=links.get("prev", links.get("previous")),
            next_url=links.get("next"),
            last_url=links.get("last"),
        )
