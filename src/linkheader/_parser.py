"""Parser for :rfc:`8288` ``Link`` headers."""

from __future__ import annotations

import re
from functools import cache
from typing import Self
from urllib.parse import parse_qsl

import structlog
from structlog.stdlib import BoundLogger

from ._config import LinkHeaderConfig
from ._exceptions import LinkHeaderError, MalformedEntryError
from ._models import Link, LinkMap, Relation, RelationLinkMap, UriKind
from ._uri import URI_PARSERS, split_query

_ENTRY_REGEX = re.compile(
    r"(?P<prefix>[^<]*)<(?P<target>[^>]*)>(?P<rest>.*)", re.DOTALL
)
"""Splits a ``Link`` header entry around its bracketed target."""

_QUOTED_PAIR_REGEX = re.compile(r"\\(.)", re.DOTALL)
"""Matches a backslash escape inside a quoted string."""

__all__ = [
    "LinkHeaderParser",
    "get_default_parser",
    "parse",
    "parse_with_relation",
    "reset_default_parser",
]


def _split(text: str, separator: str) -> list[str]:
    """Split on a separator that is not inside a quoted string or a target.

    A ``<`` only opens a target when it is the first non-whitespace character
    of a part and is closed by a ``>`` before any other ``<``, so stray or
    unterminated angle brackets never hide a separator. Backslash escapes
    are honored inside quoted strings.

    Raises
    ------
    MalformedEntryError
        Raised if a quoted string is not terminated.
    """
    parts: list[str] = []
    start = 0
    closing: str | None = None
    escaped = False
    for i, char in enumerate(text):
        if escaped:
            escaped = False
        elif closing == '"' and char == "\\":
            escaped = True
        elif closing:
            if char == closing:
                closing = None
        elif char == '"':
            closing = '"'
        elif char == "<" and not text[start:i].strip():
            end = text.find(">", i)
            reopened = text.find("<", i + 1)
            if end != -1 and (reopened == -1 or end < reopened):
                closing = ">"
        elif char == separator:
            parts.append(text[start:i])
            start = i + 1
    if closing == '"':
        raise MalformedEntryError(text[start:], "unterminated quoted string")
    parts.append(text[start:])
    return parts


class LinkHeaderParser:
    """Parse :rfc:`8288` ``Link`` headers into links keyed by relation.

    Parameters
    ----------
    uri_kind
        How to parse and represent link targets. The default accepts any
        URI-reference. Use `UriKind.url` to require absolute URLs.
    unescape_quoted
        If `True`, decode backslash escapes in quoted attribute values. By
        default only the surrounding quotes are removed.
    logger
        Logger for debug messages. If not given, the ``linkheader`` logger
        is used.
    """

    def __init__(
        self,
        uri_kind: UriKind | str = UriKind.reference,
        *,
        unescape_quoted: bool = False,
        logger: BoundLogger | None = None,
    ) -> None:
        self._uri_kind = UriKind(uri_kind)
        self._parse_uri = URI_PARSERS[self._uri_kind]
        self._unescape_quoted = unescape_quoted
        self._logger = logger or structlog.get_logger("linkheader")

    @classmethod
    def from_config(
        cls, config: LinkHeaderConfig, logger: BoundLogger | None = None
    ) -> Self:
        """Construct a parser from its configuration."""
        return cls(
            config.uri_kind,
            unescape_quoted=config.unescape_quoted,
            logger=logger,
        )

    @property
    def uri_kind(self) -> UriKind:
        """How link targets are represented."""
        return self._uri_kind

    def parse(self, header: str) -> LinkMap:
        """Parse a ``Link`` header.

        Parameters
        ----------
        header
            Value of the header. Surrounding whitespace is ignored.

        Returns
        -------
        dict of Link
            Links keyed by the value of their ``rel`` attribute, or by `None`
            for links without one. If several links have the same key, the
            last one in the header wins.

        Raises
        ------
        InvalidUriError
            Raised if the target of any link is not a valid URI.
        MalformedEntryError
            Raised if any entry in the header cannot be parsed.
        """
        return dict(self._parse_links(header))

    def parse_with_relation(self, header: str) -> RelationLinkMap:
        """Parse a ``Link`` header, using the empty string for no relation.

        Identical to `parse` except that links without a ``rel`` attribute
        are stored under the key ``""``.
        """
        return {
            "" if rel is None else rel: link
            for rel, link in self._parse_links(header)
        }

    def _parse_links(self, header: str) -> list[tuple[Relation | None, Link]]:
        links: list[tuple[Relation | None, Link]] = []
        for entry in _split(header, ","):
            if not entry.strip():
                continue
            try:
                links.append(self._parse_entry(entry))
            except LinkHeaderError as e:
                self._logger.debug(
                    "Rejected Link header entry", entry=entry, error=str(e)
                )
                raise
        self._logger.debug("Parsed Link header", count=len(links))
        return links

    def _parse_entry(self, entry: str) -> tuple[Relation | None, Link]:
        match = _ENTRY_REGEX.match(entry)
        if not match:
            raise MalformedEntryError(entry, "link target must be in <>")
        if match.group("prefix").strip():
            raise MalformedEntryError(entry, "text before link target")

        params: dict[str, str] = {}
        for segment in _split(match.group("rest"), ";"):
            if not segment.strip():
                continue
            name, _, value = segment.partition("=")
            params[name.strip()] = self._unquote(value.strip())

        raw_uri = match.group("target")
        uri = self._parse_uri(raw_uri)
        queries: dict[str, str] = {}
        query = split_query(raw_uri)
        if query is not None:
            queries = dict(parse_qsl(query, keep_blank_values=True))

        link = Link(uri=uri, raw_uri=raw_uri, queries=queries, params=params)
        return params.get("rel"), link

    def _unquote(self, value: str) -> str:
        if len(value) < 2 or value[0] != '"' or value[-1] != '"':
            return value
        value = value[1:-1]
        if self._unescape_quoted:
            value = _QUOTED_PAIR_REGEX.sub(lambda m: m.group(1), value)
        return value


@cache
def get_default_parser() -> LinkHeaderParser:
    """Return the parser used by `parse` and `parse_with_relation`.

    The parser is created from `LinkHeaderConfig` on first use and reused
    afterwards.
    """
    return LinkHeaderParser.from_config(LinkHeaderConfig())


def reset_default_parser() -> None:
    """Discard the default parser so that it is rebuilt on next use.

    Intended for tests that change the ``LINK_HEADER_*`` environment
    variables.
    """
    get_default_parser.cache_clear()


def parse(header: str) -> LinkMap:
    """Parse a ``Link`` header with the default parser.

    Parameters
    ----------
    header
        Value of the header.

    Returns
    -------
    dict of Link
        Links keyed by relation, or by `None` for links with no ``rel``.

    Raises
    ------
    InvalidUriError
        Raised if the target of any link is not a valid URI.
    MalformedEntryError
        Raised if any entry in the header cannot be parsed.

    Examples
    --------
    .. code-block:: python

       from linkheader import parse


       links = parse(
           '<https://api.example.com/items?page=2>; rel="next", '
           '<https://api.example.com/items?page=14>; rel="last"'
       )
       assert links["next"].queries == {"page": "2"}
    """
    return get_default_parser().parse(header)


def parse_with_relation(header: str) -> RelationLinkMap:
    """Parse a ``Link`` header with the default parser.

    Links without a ``rel`` attribute are stored under the key ``""``.
    Otherwise identical to `parse`.
    """
    return get_default_parser().parse_with_relation(header)
