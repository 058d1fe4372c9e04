"""Test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from linkheader import reset_default_parser


@pytest.fixture(autouse=True)
def default_parser() -> Iterator[None]:
    """Rebuild the default parser around each test.

    Tests may change the ``LINK_HEADER_*`` environment variables, and the
    default parser is otherwise cached for the life of the process.
    """
    reset_default_parser()
    yield
    reset_default_parser()
