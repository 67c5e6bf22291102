"""Fluent builder for configuring and firing a single HTTP request.

The builder only accumulates configuration. Firing opens a connection handle
through a Transport, applies everything in a fixed order, writes the body
and hands the connected handle to a RequestResult.
"""

from __future__ import annotations

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from types import MappingProxyType
from typing import Iterable, Mapping, overload

import structlog

from .errors import InvalidArgument, IOFailure
from .result import RequestResult
from .transport import ConnectionHandle, RequestsTransport, Transport
from .types import Cookie, MimeType, RequestMethod, TimeUnit
from .validation import check_argument, not_none

logger = structlog.get_logger(__name__)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _background_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                thread_name_prefix="requestbuilder"
            )
        return _executor


class RequestBuilder:
    """Mutable, chainable configuration for one HTTP request.

    Every setter validates its input, mutates this instance and returns it.
    Instances are not safe for concurrent mutation from several threads.

    Example:
        >>> result = (
        ...     RequestBuilder("https://example.com/api")
        ...     .set_method(RequestMethod.POST)
        ...     .set_content_type(MimeLookup.mime_type("json"))
        ...     .add_body('{"name": "example"}')
        ...     .fire()
        ... )
    """

    def __init__(
        self,
        url: str,
        proxy: str | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        """Create a new RequestBuilder.

        Args:
            url: Absolute URL the request is sent to.
            proxy: Optional proxy URL; None means a direct connection.
            transport: Connection factory; defaults to a RequestsTransport.

        Raises:
            InvalidArgument: If the URL is None or empty.
        """
        not_none(url, "Invalid url None")
        check_argument(bool(url), "The url may not be empty")
        self._url = url
        self._proxy = proxy
        self._transport = transport

        self._method = RequestMethod.GET
        self._headers: dict[str, str] = {}
        self._cookies: list[Cookie] = []
        self._bodies: list[bytes] = []
        self._content_type: MimeType | None = None
        self._accept: MimeType | None = None
        self._fixed_output_length: int | None = None
        self._connect_timeout_ms: int | None = None
        self._read_timeout_ms: int | None = None

        self._follow_redirects = False
        self._use_caches = True
        self._output_enabled = False
        self._input_enabled = True
        self._user_interaction_enabled = False

    @classmethod
    def new_builder(
        cls, url: str, proxy: str | None = None
    ) -> RequestBuilder:
        return cls(url, proxy)

    def __enter__(self) -> RequestBuilder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def url(self) -> str:
        return self._url

    @property
    def proxy(self) -> str | None:
        return self._proxy

    @property
    def method(self) -> RequestMethod:
        return self._method

    @property
    def headers(self) -> Mapping[str, str]:
        return MappingProxyType(self._headers)

    @property
    def cookies(self) -> tuple[Cookie, ...]:
        return tuple(self._cookies)

    @property
    def body_chunks(self) -> tuple[bytes, ...]:
        return tuple(self._bodies)

    @property
    def content_type(self) -> MimeType | None:
        return self._content_type

    @property
    def accept(self) -> MimeType | None:
        return self._accept

    @property
    def fixed_output_length(self) -> int | None:
        return self._fixed_output_length

    @property
    def connect_timeout_ms(self) -> int | None:
        return self._connect_timeout_ms

    @property
    def read_timeout_ms(self) -> int | None:
        return self._read_timeout_ms

    @property
    def follow_redirects(self) -> bool:
        return self._follow_redirects

    @property
    def use_caches(self) -> bool:
        return self._use_caches

    @property
    def output_enabled(self) -> bool:
        return self._output_enabled

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    @property
    def user_interaction_enabled(self) -> bool:
        return self._user_interaction_enabled

    def set_method(self, method: RequestMethod | str) -> RequestBuilder:
        not_none(method, "Invalid request method None")
        try:
            self._method = RequestMethod(method)
        except ValueError as exc:
            raise InvalidArgument(
                f"Invalid request method {method!r}"
            ) from exc
        return self

    @overload
    def add_body(self, body: bytes | str) -> RequestBuilder: ...

    @overload
    def add_body(self, body: str, value: str) -> RequestBuilder: ...

    def add_body(
        self, body: bytes | str, value: str | None = None
    ) -> RequestBuilder:
        """Append a chunk to the request body and enable output.

        Args:
            body: Raw bytes, a string (sent as UTF-8), or a form key when
                ``value`` is given.
            value: Form value; the chunk becomes ``body=value``.
        """
        not_none(body, "The body of a connection may not be null")
        if value is not None:
            check_argument(
                isinstance(body, str), f"Invalid key for body {body!r}"
            )
            body = f"{body}={value}"
        if isinstance(body, str):
            body = body.encode("utf-8")
        check_argument(
            isinstance(body, (bytes, bytearray)),
            f"Invalid body {body!r}",
        )
        self._output_enabled = True
        self._bodies.append(bytes(body))
        return self

    def add_header(self, key: str, value: str) -> RequestBuilder:
        not_none(key, "Invalid key for header None")
        not_none(value, f"Invalid value for header {key}")
        self._headers[key] = value
        return self

    def set_content_type(self, mime_type: MimeType) -> RequestBuilder:
        not_none(mime_type, "Invalid mime type None")
        self._content_type = mime_type
        return self

    def set_accept(self, mime_type: MimeType) -> RequestBuilder:
        not_none(mime_type, "Invalid accept-mime-type None")
        self._accept = mime_type
        return self

    def set_fixed_output_length(self, length: int) -> RequestBuilder:
        """Declare the exact body length in advance.

        The transport then rejects a body of any other length.
        """
        not_none(length, "The fixed stream length may not be null")
        check_argument(
            length > 0,
            f"The fixed stream length must be greater than 0 ({length})",
        )
        self._fixed_output_length = length
        return self

    def enable_redirect_follow(self) -> RequestBuilder:
        self._follow_redirects = True
        return self

    def disable_caches(self) -> RequestBuilder:
        self._use_caches = False
        return self

    def enable_output(self) -> RequestBuilder:
        self._output_enabled = True
        return self

    def disable_input(self) -> RequestBuilder:
        self._input_enabled = False
        return self

    def enable_user_interaction(self) -> RequestBuilder:
        self._user_interaction_enabled = True
        return self

    def set_connect_timeout(
        self, timeout: int, unit: TimeUnit = TimeUnit.MILLISECONDS
    ) -> RequestBuilder:
        self._connect_timeout_ms = self._timeout_millis(timeout, unit)
        return self

    def set_read_timeout(
        self, timeout: int, unit: TimeUnit = TimeUnit.MILLISECONDS
    ) -> RequestBuilder:
        self._read_timeout_ms = self._timeout_millis(timeout, unit)
        return self

    def add_cookie(self, name: str, value: str) -> RequestBuilder:
        not_none(name, "Cookie name can not be null")
        not_none(value, "Cookie value can not be null")
        self._cookies.append(Cookie(name, value))
        return self

    def add_cookies(self, cookies: Iterable[Cookie]) -> RequestBuilder:
        not_none(cookies, "Cookies can not be null")
        new_cookies = list(cookies)
        for cookie in new_cookies:
            check_argument(
                isinstance(cookie, Cookie), f"Invalid cookie {cookie!r}"
            )
        self._cookies.extend(new_cookies)
        return self

    def fire(self) -> RequestResult:
        """Open a connection, apply this configuration and send the request.

        Returns:
            A RequestResult owning the connected handle.

        Raises:
            TransportUnavailable: If the connection cannot be opened.
            IOFailure: If connecting, writing the body or sending the
                request fails.
        """
        transport = self._transport or RequestsTransport()
        connection = transport.open(self._url, self._proxy)
        try:
            self._apply(connection)
            connection.connect()
            self._write_bodies(connection)
        except Exception as exc:
            try:
                connection.disconnect()
            except Exception as cleanup_exc:
                logger.warning(
                    "disconnect_after_failure_failed",
                    url=self._url,
                    error=type(cleanup_exc).__name__,
                    detail=str(cleanup_exc),
                    cause=type(exc).__name__,
                )
            raise

        logger.debug(
            "request_fired",
            method=self._method.value,
            url=self._url,
            body_chunks=len(self._bodies),
            proxied=self._proxy is not None,
        )
        return RequestResult(connection)

    def fire_and_forget(self) -> None:
        """Fire the request, wait for the status line and discard the result.

        Raises:
            IOFailure: If no response status could be read.
        """
        with self.fire() as result:
            status_code = result.get_status_code()
        if status_code == -1:
            raise IOFailure(f"no response received from {self._url}")
        logger.debug(
            "request_forgotten", url=self._url, status_code=status_code
        )

    def fire_asynchronously(
        self, executor: Executor | None = None
    ) -> Future[RequestResult]:
        """Run ``fire()`` on a background worker.

        Errors are set on the returned future. Cancelling the future does not
        abort a request that is already running.

        Args:
            executor: Where to run; defaults to a shared thread pool.
        """
        return (executor or _background_executor()).submit(self.fire)

    def close(self) -> None:
        """Nothing to release; the builder holds no live resources."""

    @staticmethod
    def _timeout_millis(timeout: int, unit: TimeUnit) -> int:
        not_none(timeout, "Invalid timeout None")
        not_none(unit, "Invalid timeout unit None")
        check_argument(timeout > 0, f"Invalid timeout time {timeout}")
        return unit.to_millis(timeout)

    def _apply(self, connection: ConnectionHandle) -> None:
        connection.set_request_method(self._method.value)

        connection.set_do_input(self._input_enabled)
        connection.set_do_output(self._output_enabled)
        connection.set_use_caches(self._use_caches)
        connection.set_allow_user_interaction(self._user_interaction_enabled)
        connection.set_instance_follow_redirects(self._follow_redirects)

        for key, value in self._headers.items():
            connection.set_request_property(key, value)

        fixed_length = self._fixed_output_length
        if fixed_length is not None and fixed_length > 0:
            connection.set_fixed_length_streaming_mode(fixed_length)
        if self._read_timeout_ms is not None and self._read_timeout_ms > 0:
            connection.set_read_timeout(self._read_timeout_ms)
        connect_timeout = self._connect_timeout_ms
        if connect_timeout is not None and connect_timeout > 0:
            connection.set_connect_timeout(connect_timeout)

        if self._content_type is not None:
            connection.set_request_property(
                "Content-Type", self._content_type.value
            )
        if self._accept is not None:
            connection.set_request_property("Accept", self._accept.value)
        if self._cookies:
            connection.set_request_property(
                "Cookie", self._cookie_header(self._cookies)
            )

    @staticmethod
    def _cookie_header(cookies: Iterable[Cookie]) -> str:
        # Comma separated, not the "; " a browser would send.
        return ",".join(f"{cookie.name}={cookie.value}" for cookie in cookies)

    def _write_bodies(self, connection: ConnectionHandle) -> None:
        if not self._output_enabled:
            return
        stream = connection.get_output_stream()
        try:
            for chunk in self._bodies:
                stream.write(chunk)
                stream.flush()
            # Closing the stream completes the request and sends it.
            stream.close()
        except OSError as exc:
            raise IOFailure(str(exc)) from exc
