"""Configuration for the default ``Link`` header parser."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._models import UriKind

__all__ = ["LinkHeaderConfig"]


class LinkHeaderConfig(BaseSettings):
    """Settings for the parser used by `~linkheader.parse` and
    `~linkheader.parse_with_relation`.

    These are read from environment variables the first time one of those
    functions is called. Applications that need different settings in
    different places should construct their own
    `~linkheader.LinkHeaderParser` instead.
    """

    model_config = SettingsConfigDict(env_prefix="LINK_HEADER_")

    uri_kind: UriKind = Field(
        UriKind.reference,
        title="URI representation",
        description=(
            "Set to url to accept only absolute URLs as link targets and"
            " represent them as Pydantic URLs. The default accepts any"
            " URI-reference, including relative references."
        ),
    )

    unescape_quoted: bool = Field(
        False,
        title="Unescape quoted attribute values",
        description=(
            "Whether to decode backslash escapes inside quoted attribute"
            " values. By default they are kept as written."
        ),
    )
