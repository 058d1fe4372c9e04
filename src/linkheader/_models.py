"""Representation of a parsed ``Link`` HTTP header."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from pydantic import AnyUrl
from starlette.datastructures import URL

__all__ = [
    "Link",
    "LinkMap",
    "Relation",
    "RelationLinkMap",
    "Uri",
    "UriKind",
]


class UriKind(StrEnum):
    """How the target of a link is parsed and represented."""

    reference = "reference"
    """Any RFC 3986 URI-reference, absolute or relative, as a Starlette URL."""

    url = "url"
    """Only absolute URLs, as a Pydantic `~pydantic.AnyUrl`."""


Uri: TypeAlias = URL | AnyUrl
"""Structured form of a link target, depending on the `UriKind`."""

Relation: TypeAlias = str
"""Value of the ``rel`` attribute of a link."""


@dataclass(frozen=True)
class Link:
    """One entry of an :rfc:`8288` ``Link`` header."""

    uri: Uri
    """Parsed target of the link."""

    raw_uri: str
    """Target of the link exactly as it appeared between ``<`` and ``>``."""

    queries: dict[str, str] = field(default_factory=dict)
    """Decoded query parameters of the target, if it has a query."""

    params: dict[str, str] = field(default_factory=dict)
    """Attributes of the link, including ``rel``, with quotes removed."""

    @property
    def rel(self) -> Relation | None:
        """Relation of the link, or `None` if it has no ``rel`` attribute."""
        return self.params.get("rel")


LinkMap: TypeAlias = dict[Relation | None, Link]
"""Result of `~linkheader.parse`, keyed by relation or `None`."""

RelationLinkMap: TypeAlias = dict[Relation, Link]
"""Result of `~linkheader.parse_with_relation`, keyed by relation."""
