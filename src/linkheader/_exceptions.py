"""Exceptions raised while parsing ``Link`` headers."""

from __future__ import annotations

__all__ = [
    "InvalidUriError",
    "LinkHeaderError",
    "MalformedEntryError",
]


class LinkHeaderError(ValueError):
    """Base class for all errors in parsing a ``Link`` header.

    Subclasses `ValueError` so that callers that only care whether the
    header is parseable can catch either.
    """


class MalformedEntryError(LinkHeaderError):
    """One of the comma-separated entries of the header is malformed.

    Parameters
    ----------
    entry
        The text of the offending entry.
    reason
        Short description of what is wrong with it.
    """

    def __init__(self, entry: str, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"Malformed Link header entry {entry!r}: {reason}")


class InvalidUriError(LinkHeaderError):
    """The text between the angle brackets is not a valid URI.

    Parameters
    ----------
    uri
        The bracketed text, exactly as it appeared in the header.
    """

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Invalid URI in Link header: {uri!r}")
