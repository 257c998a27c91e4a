import pytest

from service_coordinator.exceptions import InvalidURLError
from service_coordinator.urls import build_url


def test_base_url_returned_unchanged_without_params():
    assert build_url("https://example.com/api/items") == "https://example.com/api/items"
    assert build_url("https://example.com/api/items", {}) == "https://example.com/api/items"


def test_params_are_appended_as_query_items():
    url = build_url("https://example.com/search", {"q": "pokemon", "limit": 20})

    assert url == "https://example.com/search?q=pokemon&limit=20"


def test_existing_query_and_fragment_are_preserved():
    url = build_url("https://example.com/path?a=1#top", {"b": True, "c": "x y"})

    assert url == "https://example.com/path?a=1&b=True&c=x%20y#top"


@pytest.mark.parametrize(
    "base",
    [
        "Esto no es una url valida",
        "https://exa mple.com",
        "https://example.com/with space",
        "https://example.com/\n",
        "example.com/items",
        "https://",
        "http://[::1",
        "https://example.com:99999",
        "https://example.com/{id}",
        "",
    ],
)
def test_invalid_base_raises(base):
    with pytest.raises(InvalidURLError):
        build_url(base, {"q": "1"})


def test_invalid_url_error_is_value_error():
    with pytest.raises(ValueError):
        build_url("not a url")
