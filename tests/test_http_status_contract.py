# pyright: reportUnknownParameterType=false, reportUnknownMemberType=false
from http import HTTPStatus

import pytest

from requestbuilder.networking.builder import RequestBuilder
from requestbuilder.networking.errors import InvalidArgument


def _fire(transport, connection, status):
    connection.status = status
    return RequestBuilder("http://example.com", transport=transport).fire()


def test_200_is_the_only_success(transport, connection):
    result = _fire(transport, connection, 200)

    assert result.has_failed() is False
    assert result.get_status() is HTTPStatus.OK


@pytest.mark.parametrize("status", [201, 204, 301, 302, 404, 500])
def test_any_other_status_counts_as_failed(transport, connection, status):
    result = _fire(transport, connection, status)

    assert result.has_failed() is True
    assert result.get_status_code() == status
    assert result.get_status() == HTTPStatus(status)


def test_unmapped_status_code_is_invalid_argument(transport, connection):
    result = _fire(transport, connection, 299)

    with pytest.raises(InvalidArgument):
        result.get_status()


def test_unreadable_status_maps_to_invalid_argument(transport, connection):
    result = _fire(transport, connection, 200)
    result.close()

    assert result.get_status_code() == -1
    with pytest.raises(InvalidArgument):
        result.get_status()
