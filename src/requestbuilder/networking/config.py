"""Configuration models for the requests-backed transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _default_headers() -> Mapping[str, str]:
    """Return immutable empty default headers mapping."""

    return MappingProxyType({})


@dataclass(frozen=True)
class TransportConfig:
    """Configuration shared by every connection a transport opens.

    Timeouts here are fallbacks; a timeout set on the builder always wins.
    ``trust_env`` lets requests read CA bundles and netrc credentials from
    the environment. Proxy variables are never used: a connection without
    an explicit proxy is always direct.
    """

    user_agent: str | None = None
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    verify_tls: bool = True
    trust_env: bool = False
    default_connect_timeout_ms: int | None = None
    default_read_timeout_ms: int | None = None

    def __post_init__(self) -> None:
        if (
            self.default_connect_timeout_ms is not None
            and self.default_connect_timeout_ms <= 0
        ):
            raise ValueError(
                "default_connect_timeout_ms must be > 0 when provided"
            )
        if (
            self.default_read_timeout_ms is not None
            and self.default_read_timeout_ms <= 0
        ):
            raise ValueError(
                "default_read_timeout_ms must be > 0 when provided"
            )

        # Freeze copied headers to avoid post-init mutation side effects.
        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(dict(self.default_headers)),
        )
