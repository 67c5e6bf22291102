"""Connection-handle transport backed by requests.

A handle is configured first, then connected. Without output the request is
sent by ``connect()``. With output enabled it is sent when the output stream
is closed, or on the first response query if the stream is never closed.
"""

from __future__ import annotations

import io
from http.client import HTTPException
from types import MappingProxyType
from typing import BinaryIO, Callable, Protocol
from urllib.parse import urlparse

import requests
import structlog
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from .config import TransportConfig
from .errors import InvalidArgument, IOFailure, TransportUnavailable

logger = structlog.get_logger(__name__)

_SUPPORTED_SCHEMES = frozenset({"http", "https"})

# Explicit None entries stop requests from merging proxies from the
# environment, even when the session trusts it.
_DIRECT = MappingProxyType({"http": None, "https": None, "all": None})


class ConnectionHandle(Protocol):
    """One HTTP exchange, owned by exactly one request result."""

    def set_request_method(self, method: str) -> None: ...

    def set_do_input(self, enabled: bool) -> None: ...

    def set_do_output(self, enabled: bool) -> None: ...

    def set_use_caches(self, enabled: bool) -> None: ...

    def set_allow_user_interaction(self, enabled: bool) -> None: ...

    def set_instance_follow_redirects(self, enabled: bool) -> None: ...

    def set_fixed_length_streaming_mode(self, length: int) -> None: ...

    def set_connect_timeout(self, millis: int) -> None: ...

    def set_read_timeout(self, millis: int) -> None: ...

    def set_request_property(self, key: str, value: str) -> None: ...

    def get_output_stream(self) -> BinaryIO: ...

    def connect(self) -> None: ...

    def get_response_code(self) -> int: ...

    def get_input_stream(self) -> BinaryIO: ...

    def get_error_stream(self) -> BinaryIO | None: ...

    def get_header_field(self, name: str) -> str | None: ...

    def get_header_fields(self, name: str) -> list[str]: ...

    def disconnect(self) -> None: ...


class Transport(Protocol):
    """Opens connection handles to a URL, optionally through a proxy."""

    def open(self, url: str, proxy: str | None = None) -> ConnectionHandle: ...


class _ResponseBodyStream(io.RawIOBase):
    """Read-only view of a response body that reports faults as IOFailure."""

    def __init__(self, response: requests.Response) -> None:
        super().__init__()
        self._response = response
        self._response.raw.decode_content = True
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: memoryview | bytearray) -> int:
        if not self._pending:
            try:
                self._pending = self._response.raw.read(len(buffer))
            except (
                requests.exceptions.RequestException,
                Urllib3HTTPError,
            ) as exc:
                raise IOFailure(str(exc)) from exc
        # Decoded reads may return more than was asked for.
        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        self._pending = self._pending[size:]
        return size

    def close(self) -> None:
        if not self.closed:
            self._response.close()
        super().close()


class _RequestBodyStream(io.BytesIO):
    """In-memory request body that hands its bytes over when closed."""

    def __init__(self, on_close: Callable[[bytes], None]) -> None:
        super().__init__()
        self._on_close = on_close

    def close(self) -> None:
        if self.closed:
            return
        data = self.getvalue()
        super().close()
        self._on_close(data)


def _body_stream(response: requests.Response) -> BinaryIO:
    stream = io.BufferedReader(_ResponseBodyStream(response))
    return stream  # type: ignore[return-value]


def _seconds(millis: int | None) -> float | None:
    # 0 means no timeout, as on a URL connection.
    return millis / 1000 if millis else None


class RequestsConnection:
    """ConnectionHandle implementation on top of a requests session."""

    def __init__(
        self,
        session: requests.Session,
        url: str,
        proxy: str | None,
        config: TransportConfig,
    ) -> None:
        self._session = session
        self._url = url
        self._proxies = (
            {"http": proxy, "https": proxy} if proxy else dict(_DIRECT)
        )
        self._config = config

        self._method = "GET"
        self._do_input = True
        self._do_output = False
        self._use_caches = True
        self._allow_user_interaction = False
        self._follow_redirects = True
        self._fixed_length: int | None = None
        self._connect_timeout_ms = config.default_connect_timeout_ms
        self._read_timeout_ms = config.default_read_timeout_ms
        self._headers: dict[str, str] = {}

        self._body = _RequestBodyStream(self._send_body)
        self._body_data: bytes | None = None
        self._connected = False
        self._closed = False
        self._response: requests.Response | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def allow_user_interaction(self) -> bool:
        # requests never prompts, so the flag is recorded but has no effect.
        return self._allow_user_interaction

    def set_request_method(self, method: str) -> None:
        self._ensure_not_connected()
        self._method = method

    def set_do_input(self, enabled: bool) -> None:
        self._ensure_not_connected()
        self._do_input = enabled

    def set_do_output(self, enabled: bool) -> None:
        self._ensure_not_connected()
        self._do_output = enabled

    def set_use_caches(self, enabled: bool) -> None:
        self._ensure_not_connected()
        self._use_caches = enabled

    def set_allow_user_interaction(self, enabled: bool) -> None:
        self._ensure_not_connected()
        self._allow_user_interaction = enabled

    def set_instance_follow_redirects(self, enabled: bool) -> None:
        self._follow_redirects = enabled

    def set_fixed_length_streaming_mode(self, length: int) -> None:
        self._ensure_not_connected()
        if length < 0:
            raise InvalidArgument("fixed length must be >= 0")
        self._fixed_length = length

    def set_connect_timeout(self, millis: int) -> None:
        if millis < 0:
            raise InvalidArgument("connect timeout must be >= 0")
        self._connect_timeout_ms = millis

    def set_read_timeout(self, millis: int) -> None:
        if millis < 0:
            raise InvalidArgument("read timeout must be >= 0")
        self._read_timeout_ms = millis

    def set_request_property(self, key: str, value: str) -> None:
        self._ensure_not_connected()
        self._headers[key] = value

    def get_output_stream(self) -> BinaryIO:
        self._ensure_open()
        if not self._do_output:
            raise IOFailure(
                "cannot write to a connection if output is not enabled"
            )
        if self._response is not None:
            raise IOFailure("cannot write output after reading input")
        if self._body.closed:
            raise IOFailure("output stream is already closed")
        return self._body

    def connect(self) -> None:
        self._ensure_open()
        if self._connected:
            return
        self._connected = True
        logger.debug(
            "connection_connected", method=self._method, url=self._url
        )
        if not self._do_output:
            self._exchange()

    def get_response_code(self) -> int:
        return self._exchange().status_code

    def get_input_stream(self) -> BinaryIO:
        if not self._do_input:
            raise IOFailure(
                "cannot read from a connection if input is not enabled"
            )
        response = self._exchange()
        if response.status_code >= 400:
            raise IOFailure(
                f"server returned HTTP response code: {response.status_code} "
                f"for URL: {self._url}"
            )
        return _body_stream(response)

    def get_error_stream(self) -> BinaryIO | None:
        return _body_stream(self._exchange())

    def get_header_field(self, name: str) -> str | None:
        return self._exchange().headers.get(name)

    def get_header_fields(self, name: str) -> list[str]:
        response = self._exchange()
        return list(response.raw.headers.getlist(name))

    def disconnect(self) -> None:
        self._closed = True
        self._body.close()
        if self._response is not None:
            self._response.close()
        self._session.close()
        logger.debug("connection_disconnected", url=self._url)

    def _send_body(self, data: bytes) -> None:
        self._body_data = data
        if self._connected and not self._closed:
            self._exchange()

    def _ensure_open(self) -> None:
        if self._closed:
            raise IOFailure("connection is already closed")

    def _ensure_not_connected(self) -> None:
        if self._connected:
            raise IOFailure("already connected")

    def _timeout(self) -> tuple[float | None, float | None] | None:
        if self._connect_timeout_ms is None and self._read_timeout_ms is None:
            return None
        return (
            _seconds(self._connect_timeout_ms),
            _seconds(self._read_timeout_ms),
        )

    def _request_headers(self) -> dict[str, str]:
        headers = dict(self._headers)
        if not self._use_caches and not any(
            key.lower() == "cache-control" for key in headers
        ):
            headers["Cache-Control"] = "no-cache"
        return headers

    def _exchange(self) -> requests.Response:
        """Send the request on first use and return the cached response."""
        self._ensure_open()
        if self._response is not None:
            return self._response
        if not self._connected:
            raise IOFailure("connection is not connected")

        data = None
        if self._do_output:
            data = (
                self._body_data if self._body.closed else self._body.getvalue()
            )
        if self._fixed_length is not None and self._do_output:
            written = len(data or b"")
            if written != self._fixed_length:
                raise IOFailure(
                    f"fixed length streaming mode expects "
                    f"{self._fixed_length} bytes but {written} were written"
                )

        try:
            response = self._session.request(
                self._method,
                self._url,
                headers=self._request_headers(),
                data=data,
                timeout=self._timeout(),
                allow_redirects=self._follow_redirects,
                proxies=self._proxies,
                stream=True,
                verify=self._config.verify_tls,
            )
        except (
            requests.exceptions.RequestException,
            Urllib3HTTPError,
            HTTPException,
            OSError,
            ValueError,
        ) as exc:
            logger.debug(
                "exchange_failed",
                method=self._method,
                url=self._url,
                error=type(exc).__name__,
            )
            raise IOFailure(str(exc)) from exc

        self._response = response
        logger.debug(
            "exchange_completed",
            method=self._method,
            url=self._url,
            status_code=response.status_code,
        )
        return response


class RequestsTransport:
    """Default transport: one fresh requests session per connection."""

    def __init__(self, config: TransportConfig | None = None) -> None:
        """Create a new RequestsTransport.

        Args:
            config: User agent, default headers, TLS and timeout fallbacks.
        """
        self._config = config or TransportConfig()

    @property
    def config(self) -> TransportConfig:
        return self._config

    def _new_session(self) -> requests.Session:
        session = requests.Session()
        session.trust_env = self._config.trust_env
        if self._config.user_agent:
            session.headers["User-Agent"] = self._config.user_agent
        session.headers.update(self._config.default_headers)
        return session

    def open(self, url: str, proxy: str | None = None) -> RequestsConnection:
        """Open a connection handle for ``url``.

        Raises:
            TransportUnavailable: If the URL cannot be used by this transport.
        """
        try:
            parsed = urlparse(url)
        except ValueError as exc:
            raise TransportUnavailable(f"malformed URL: {url}") from exc
        if parsed.scheme not in _SUPPORTED_SCHEMES:
            raise TransportUnavailable(
                f"unsupported URL scheme {parsed.scheme!r}: {url}"
            )
        if not parsed.netloc:
            raise TransportUnavailable(f"URL has no host: {url}")

        return RequestsConnection(
            self._new_session(), url, proxy, self._config
        )
