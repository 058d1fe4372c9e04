"""Validation and parsing of link targets.

The grammar here is the ``URI-reference`` production of :rfc:`3986`, built up
from its named rules so that it can be checked against the RFC. The only
simplification is that IPv6 literals are checked for their alphabet rather
than their exact shape.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from pydantic import AnyUrl, TypeAdapter, ValidationError
from starlette.datastructures import URL

from ._exceptions import InvalidUriError
from ._models import Uri, UriKind

_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"
_PCHAR = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@]|{_PCT_ENCODED})"

_SCHEME = r"[A-Za-z][A-Za-z0-9+\-.]*"
_USERINFO = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT_ENCODED})*"
_IP_LITERAL = (
    r"\[(?:[0-9A-Fa-f:.]+"
    rf"|v[0-9A-Fa-f]+\.[{_UNRESERVED}{_SUB_DELIMS}:]+)\]"
)
_REG_NAME = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT_ENCODED})*"
_AUTHORITY = rf"(?:{_USERINFO}@)?(?:{_IP_LITERAL}|{_REG_NAME})(?::[0-9]*)?"

_SEGMENT = rf"{_PCHAR}*"
_SEGMENT_NZ = rf"{_PCHAR}+"
_SEGMENT_NZ_NC = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}@]|{_PCT_ENCODED})+"
_PATH_ABEMPTY = rf"(?:/{_SEGMENT})*"
_PATH_ABSOLUTE = rf"/(?:{_SEGMENT_NZ}(?:/{_SEGMENT})*)?"
_PATH_ROOTLESS = rf"{_SEGMENT_NZ}(?:/{_SEGMENT})*"
_PATH_NOSCHEME = rf"{_SEGMENT_NZ_NC}(?:/{_SEGMENT})*"

_QUERY = rf"(?:{_PCHAR}|[/?])*"
_SUFFIX = rf"(?:\?{_QUERY})?(?:#{_QUERY})?"

_HIER_PART = (
    rf"(?://{_AUTHORITY}{_PATH_ABEMPTY}|{_PATH_ABSOLUTE}|{_PATH_ROOTLESS}|)"
)
_RELATIVE_PART = (
    rf"(?://{_AUTHORITY}{_PATH_ABEMPTY}|{_PATH_ABSOLUTE}|{_PATH_NOSCHEME}|)"
)

_URI_PATTERN = re.compile(rf"{_SCHEME}:{_HIER_PART}{_SUFFIX}")
"""Matches an absolute URI, possibly with a fragment."""

_URI_REFERENCE_PATTERN = re.compile(
    rf"{_SCHEME}:{_HIER_PART}{_SUFFIX}|{_RELATIVE_PART}{_SUFFIX}"
)
"""Matches a URI or a relative reference."""

_URL_ADAPTER = TypeAdapter(AnyUrl)
"""Pydantic validator for absolute URLs."""

__all__ = [
    "URI_PARSERS",
    "parse_absolute_url",
    "parse_uri_reference",
    "split_query",
]


def parse_uri_reference(text: str) -> URL:
    """Parse an absolute or relative URI-reference.

    Parameters
    ----------
    text
        Text of the reference. No surrounding whitespace is allowed.

    Returns
    -------
    starlette.datastructures.URL
        Parsed reference. Relative references are not resolved.

    Raises
    ------
    InvalidUriError
        Raised if the text does not match the :rfc:`3986` grammar.
    """
    if not _URI_REFERENCE_PATTERN.fullmatch(text):
        raise InvalidUriError(text)
    return URL(text)


def parse_absolute_url(text: str) -> AnyUrl:
    """Parse an absolute URL.

    The text must match the :rfc:`3986` ``URI`` production as well as be
    accepted by Pydantic, since Pydantic quietly percent-encodes some
    characters that are not valid in a URI.

    Raises
    ------
    InvalidUriError
        Raised if the text is not an absolute URL.
    """
    if not _URI_PATTERN.fullmatch(text):
        raise InvalidUriError(text)
    try:
        return _URL_ADAPTER.validate_python(text)
    except ValidationError as e:
        raise InvalidUriError(text) from e


def split_query(text: str) -> str | None:
    """Return the query component of a URI-reference.

    Parameters
    ----------
    text
        A valid URI-reference.

    Returns
    -------
    str or None
        Everything between the first ``?`` and any ``#``, or `None` if the
        reference has no query component.
    """
    without_fragment = text.partition("#")[0]
    _, separator, query = without_fragment.partition("?")
    return query if separator else None


URI_PARSERS: dict[UriKind, Callable[[str], Uri]] = {
    UriKind.reference: parse_uri_reference,
    UriKind.url: parse_absolute_url,
}
"""Parser to use for each kind of URI representation."""
