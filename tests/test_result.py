# pyright: reportUnknownParameterType=false, reportUnknownMemberType=false
# pyright: reportMissingParameterType=false
import io

import pytest

from requestbuilder.networking.errors import InvalidArgument, IOFailure
from requestbuilder.networking.result import RequestResult
from requestbuilder.networking.types import Cookie, StreamType


@pytest.fixture
def result(connection):
    connection.connect()
    return RequestResult(connection)


def test_result_rejects_missing_connection():
    with pytest.raises(InvalidArgument):
        RequestResult(None)  # type: ignore[arg-type]


def test_status_code_is_read_from_live_handle(result, connection):
    assert result.get_status_code() == 200

    connection.status = 503

    assert result.get_status_code() == 503


def test_status_code_is_minus_one_when_never_connected(connection):
    result = RequestResult(connection)

    assert result.get_status_code() == -1
    assert result.is_connected() is False


def test_status_code_is_minus_one_after_close(result):
    result.close()

    assert result.get_status_code() == -1
    assert result.is_connected() is False


def test_is_connected_true_for_connected_handle(result):
    assert result.is_connected() is True


def test_get_stream_default_returns_success_body(result, connection):
    connection.body = b"hello"

    assert result.get_stream().read() == b"hello"
    assert result.get_stream(StreamType.DEFAULT).read() == b"hello"


def test_get_stream_error_returns_error_body(result, connection):
    connection.status = 404
    connection.error_body = b"missing"

    assert result.get_stream(StreamType.ERROR).read() == b"missing"


def test_get_stream_choose_follows_status(result, connection):
    connection.body = b"ok"
    connection.error_body = b"nope"

    assert result.get_stream(StreamType.CHOOSE).read() == b"ok"

    connection.status = 500

    assert result.get_stream(StreamType.CHOOSE).read() == b"nope"


def test_get_stream_rejects_missing_type(result):
    with pytest.raises(InvalidArgument):
        result.get_stream(None)  # type: ignore[arg-type]


def test_get_stream_after_close_raises(result):
    result.close()

    with pytest.raises(IOFailure):
        result.get_stream()


def test_get_output_stream_returns_handle_stream(result, connection):
    assert result.get_output_stream() is connection.output


def test_result_strings_match_stream_payloads(result, connection):
    connection.body = "grüße".encode("utf-8")
    connection.error_body = b"error"

    assert result.get_success_result_as_string() == "grüße"
    assert result.get_error_result_as_string() == "error"
    assert result.get_result_as_string() == "grüße"


def test_result_string_uses_error_body_when_not_200(result, connection):
    connection.status = 201
    connection.body = b"created"
    connection.error_body = b"error"

    assert result.get_result_as_string() == result.get_error_result_as_string()
    assert result.get_result_as_string() == "error"


def test_missing_error_stream_reads_as_empty(result):
    assert result.get_error_result_as_string() == ""


def test_success_string_propagates_transport_error(result, connection):
    connection.status = 500

    with pytest.raises(IOFailure):
        result.get_success_result_as_string()


def test_read_errors_are_wrapped(result, connection, monkeypatch):
    class BrokenStream(io.BytesIO):
        def read(self, *args):
            raise OSError("connection reset by peer")

    monkeypatch.setattr(connection, "get_input_stream", BrokenStream)

    with pytest.raises(IOFailure, match="connection reset by peer"):
        result.get_success_result_as_string()


def test_get_cookies_parses_set_cookie(result, connection):
    connection.headers = {"Set-Cookie": ["a=1; Path=/"]}

    cookies = result.get_cookies()

    assert len(cookies) == 1
    assert cookies[0].name == "a"
    assert cookies[0].value == "1"
    assert cookies[0].attributes["path"] == "/"


def test_get_cookies_reads_every_header_value(result, connection):
    connection.headers = {
        "Set-Cookie": ["a=1; Path=/", "session=abc; HttpOnly; Secure"],
    }

    cookies = result.get_cookies()

    assert [(c.name, c.value) for c in cookies] == [
        ("a", "1"),
        ("session", "abc"),
    ]
    assert "httponly" in cookies[1].attributes
    assert "secure" in cookies[1].attributes


def test_get_cookies_from_custom_header(result, connection):
    connection.headers = {"Set-Cookie2": ["b=2"]}

    assert result.get_cookies("Set-Cookie2") == [Cookie("b", "2")]


def test_get_cookies_empty_without_header(result):
    assert result.get_cookies() == []


@pytest.mark.parametrize("value", ["a b=1", "=1", "garbage"])
def test_get_cookies_rejects_malformed_header(result, connection, value):
    connection.headers = {"Set-Cookie": [value]}

    with pytest.raises(InvalidArgument, match="malformed Set-Cookie"):
        result.get_cookies()


def test_get_cookies_splits_comma_separated_cookies(result, connection):
    connection.headers = {"Set-Cookie": ["a=1, b=2; Path=/app"]}

    cookies = result.get_cookies()

    assert [(c.name, c.value) for c in cookies] == [("a", "1"), ("b", "2")]
    assert cookies[1].attributes["path"] == "/app"


def test_get_cookies_keeps_comma_inside_expires(result, connection):
    connection.headers = {
        "Set-Cookie": ["id=7; Expires=Wed, 21 Oct 2015 07:28:00 GMT"]
    }

    (cookie,) = result.get_cookies()

    assert cookie.value == "7"
    assert cookie.attributes["expires"] == "Wed, 21 Oct 2015 07:28:00 GMT"


def test_get_cookies_ignores_blank_header_value(result, connection):
    connection.headers = {"Set-Cookie": ["  "]}

    assert result.get_cookies() == []


def test_close_disconnects_handle(connection):
    connection.connect()
    with RequestResult(connection):
        pass

    assert connection.disconnect_count == 1
