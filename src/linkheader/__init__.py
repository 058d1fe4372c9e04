"""Parse :rfc:`8288` ``Link`` HTTP headers."""

from ._config import LinkHeaderConfig
from ._exceptions import InvalidUriError, LinkHeaderError, MalformedEntryError
from ._models import Link, LinkMap, Relation, RelationLinkMap, Uri, UriKind
from ._pagination import PaginationLinkData
from ._parser import (
    LinkHeaderParser,
    get_default_parser,
    parse,
    parse_with_relation,
    reset_default_parser,
)

__all__ = [
    "InvalidUriError",
    "Link",
    "LinkHeaderConfig",
    "LinkHeaderError",
    "LinkHeaderParser",
    "LinkMap",
    "MalformedEntryError",
    "PaginationLinkData",
    "Relation",
    "RelationLinkMap",
    "Uri",
    "UriKind",
    "get_default_parser",
    "parse",
    "parse_with_relation",
    "reset_default_parser",
]
