import pytest

from requestbuilder.networking.errors import InvalidArgument
from requestbuilder.networking.mime import MimeLookup
from requestbuilder.networking.types import MimeType


def test_get_returns_canonical_value():
    assert MimeLookup.get("json") == "application/json"
    assert MimeLookup.get("pdf") == "application/pdf"
    assert MimeLookup.get("html") == "text/html"


def test_mime_type_returns_key_and_value():
    assert MimeLookup.mime_type("www-form") == MimeType(
        "www-form", "application/x-www-form-urlencoded"
    )


def test_lookup_is_exact_match():
    assert MimeLookup.is_supported("json") is True
    assert MimeLookup.is_supported("JSON") is False
    assert MimeLookup.is_supported("doesnotexist") is False


@pytest.mark.parametrize("key", ["doesnotexist", "JSON", None])
def test_unknown_key_is_invalid_argument(key):
    with pytest.raises(InvalidArgument):
        MimeLookup.get(key)  # type: ignore[arg-type]


def test_types_lists_every_entry():
    types = MimeLookup.types()

    assert MimeType("json", "application/json") in types
    assert len({mime.key for mime in types}) == len(types)
