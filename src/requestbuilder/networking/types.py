"""Value types used across the request builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class RequestMethod(str, Enum):
    """HTTP methods a request can be fired with."""

    GET = "GET"
    POST = "POST"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PUT = "PUT"
    DELETE = "DELETE"
    TRACE = "TRACE"


class StreamType(Enum):
    """Which response body stream to open.

    CHOOSE picks the success stream for status 200 and the error stream
    otherwise.
    """

    DEFAULT = "default"
    ERROR = "error"
    CHOOSE = "choose"


class TimeUnit(Enum):
    """Units accepted by the timeout setters, valued in milliseconds."""

    MILLISECONDS = 1
    SECONDS = 1_000
    MINUTES = 60_000
    HOURS = 3_600_000

    def to_millis(self, amount: float) -> int:
        return int(amount * self.value)


@dataclass(frozen=True)
class MimeType:
    """A MIME table entry: lookup key and canonical type string."""

    key: str
    value: str


def _empty_attributes() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Cookie:
    """A cookie sent with a request or parsed from a response header."""

    name: str
    value: str
    attributes: Mapping[str, str] = field(default_factory=_empty_attributes)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )
