"""Result wrapper around a fired connection handle.

Status, connectivity and headers are read from the live handle on every
call. Body streams come from the transport and can only be consumed once.
"""

from __future__ import annotations

import re
from http import HTTPStatus
from http.cookies import CookieError, SimpleCookie
from typing import BinaryIO

import structlog

from .errors import InvalidArgument, IOFailure, RequestBuilderError
from .transport import ConnectionHandle
from .types import Cookie, StreamType
from .validation import not_none

logger = structlog.get_logger(__name__)

SET_COOKIE_HEADER = "Set-Cookie"

# A comma starts a new cookie only when a "name=" follows, so the comma in
# "Expires=Wed, 21 Oct 2015 07:28:00 GMT" stays inside its attribute.
_COOKIE_SEPARATOR = re.compile(r",\s*(?=[^;,=\s]+=)")


def _parse_cookie(header: str, value: str) -> list[Cookie]:
    jar: SimpleCookie = SimpleCookie()
    try:
        jar.load(value)
    except CookieError as exc:
        raise InvalidArgument(f"malformed {header} header: {value}") from exc
    # SimpleCookie drops input it cannot parse instead of raising.
    if not jar:
        raise InvalidArgument(f"malformed {header} header: {value}")
    return [
        Cookie(
            name,
            morsel.value,
            {key: str(attr) for key, attr in morsel.items() if attr},
        )
        for name, morsel in jar.items()
    ]


def _parse_cookie_header(header: str, value: str) -> list[Cookie]:
    if not value.strip():
        return []
    cookies: list[Cookie] = []
    for part in _COOKIE_SEPARATOR.split(value.strip()):
        cookies.extend(_parse_cookie(header, part))
    return cookies


class RequestResult:
    """Response side of one fired request.

    The result owns its connection handle and disconnects it on ``close()``.
    Usable as a context manager.
    """

    def __init__(self, connection: ConnectionHandle) -> None:
        not_none(connection, "The connection may not be null")
        self._connection = connection

    def __enter__(self) -> RequestResult:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_stream(
        self, stream_type: StreamType = StreamType.DEFAULT
    ) -> BinaryIO | None:
        """Open one of the response body streams.

        Args:
            stream_type: DEFAULT for the success body, ERROR for the error
                body, CHOOSE to pick by status (200 means success).

        Returns:
            The stream, or None if the transport has no error body.

        Raises:
            IOFailure: If the handle is closed or the transport cannot open
                the stream.
        """
        not_none(stream_type, "Cannot use null stream type")
        if stream_type is StreamType.DEFAULT:
            return self._connection.get_input_stream()
        if stream_type is StreamType.CHOOSE and self.get_status_code() == 200:
            return self._connection.get_input_stream()
        return self._connection.get_error_stream()

    def get_output_stream(self) -> BinaryIO:
        return self._connection.get_output_stream()

    def is_connected(self) -> bool:
        try:
            self._connection.get_response_code()
        except RequestBuilderError as exc:
            logger.warning(
                "connection_status_unavailable",
                error=type(exc).__name__,
                detail=str(exc),
            )
            return False
        return True

    def has_failed(self) -> bool:
        """Return True unless the status is exactly 200."""
        return self.get_status_code() != 200

    def get_success_result_as_string(self) -> str:
        return self._read_stream(self._connection.get_input_stream())

    def get_error_result_as_string(self) -> str:
        return self._read_stream(self._connection.get_error_stream())

    def get_result_as_string(self) -> str:
        if self.get_status_code() == 200:
            return self.get_success_result_as_string()
        return self.get_error_result_as_string()

    def get_cookies(self, header: str = SET_COOKIE_HEADER) -> list[Cookie]:
        """Parse cookies from every value of a response header.

        Returns an empty list when the header is absent.
        """
        not_none(header, "Cookie header name can not be null")
        cookies: list[Cookie] = []
        for value in self._connection.get_header_fields(header):
            cookies.extend(_parse_cookie_header(header, value))
        return cookies

    def get_status_code(self) -> int:
        """Return the response status, or -1 when none can be read."""
        try:
            return self._connection.get_response_code()
        except RequestBuilderError as exc:
            logger.warning(
                "status_code_unavailable",
                error=type(exc).__name__,
                detail=str(exc),
            )
            return -1

    def get_status(self) -> HTTPStatus:
        code = self.get_status_code()
        try:
            return HTTPStatus(code)
        except ValueError as exc:
            raise InvalidArgument(f"Unknown status code {code}") from exc

    def close(self) -> None:
        self._connection.disconnect()

    @staticmethod
    def _read_stream(stream: BinaryIO | None) -> str:
        if stream is None:
            return ""
        try:
            with stream:
                data = stream.read()
        except OSError as exc:
            raise IOFailure(str(exc)) from exc
        return data.decode("utf-8", errors="replace")
