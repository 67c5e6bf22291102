# pyright: reportUnknownParameterType=false, reportMissingParameterType=false
import io

import pytest

from requestbuilder.networking.errors import IOFailure


class RecordingStream(io.BytesIO):
    """Body stream that stays readable after close, for assertions."""

    def __init__(self, on_close=None):
        super().__init__()
        self.writes = []
        self.flushes = 0
        self.close_count = 0
        self.on_close = on_close

    def write(self, data):
        self.writes.append(bytes(data))
        return super().write(data)

    def flush(self):
        self.flushes += 1
        super().flush()

    def close(self):
        self.close_count += 1
        if self.on_close is not None:
            self.on_close()


class FakeConnection:
    """In-memory connection handle that records how it was configured."""

    def __init__(
        self,
        *,
        status=200,
        body=b"",
        error_body=b"",
        headers=None,
    ):
        self.status = status
        self.body = body
        self.error_body = error_body
        self.headers = headers or {}
        self.calls = []
        self.properties = {}
        self.output = RecordingStream(on_close=lambda: self._record("send"))
        self.connected = False
        self.closed = False
        self.disconnect_count = 0

    def _record(self, name, *args):
        self.calls.append((name, *args))

    def set_request_method(self, method):
        self._record("method", method)

    def set_do_input(self, enabled):
        self._record("do_input", enabled)

    def set_do_output(self, enabled):
        self._record("do_output", enabled)

    def set_use_caches(self, enabled):
        self._record("use_caches", enabled)

    def set_allow_user_interaction(self, enabled):
        self._record("allow_user_interaction", enabled)

    def set_instance_follow_redirects(self, enabled):
        self._record("follow_redirects", enabled)

    def set_fixed_length_streaming_mode(self, length):
        self._record("fixed_length", length)

    def set_connect_timeout(self, millis):
        self._record("connect_timeout", millis)

    def set_read_timeout(self, millis):
        self._record("read_timeout", millis)

    def set_request_property(self, key, value):
        self._record("header", key, value)
        self.properties[key] = value

    def get_output_stream(self):
        self._check_open()
        return self.output

    def connect(self):
        self._record("connect")
        self.connected = True

    def get_response_code(self):
        self._check_open()
        if not self.connected:
            raise IOFailure("connection is not connected")
        return self.status

    def get_input_stream(self):
        self._check_open()
        if self.status >= 400:
            raise IOFailure(
                f"server returned HTTP response code: {self.status}"
            )
        return io.BytesIO(self.body)

    def get_error_stream(self):
        self._check_open()
        if self.status < 400 and not self.error_body:
            return None
        return io.BytesIO(self.error_body)

    def get_header_field(self, name):
        values = self.get_header_fields(name)
        return values[0] if values else None

    def get_header_fields(self, name):
        return list(self.headers.get(name, []))

    def disconnect(self):
        self.closed = True
        self.disconnect_count += 1

    def _check_open(self):
        if self.closed:
            raise IOFailure("connection is already closed")


class FakeTransport:
    def __init__(self, connection):
        self.connection = connection
        self.opened = []

    def open(self, url, proxy=None):
        self.opened.append((url, proxy))
        return self.connection


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def transport(connection):
    return FakeTransport(connection)
