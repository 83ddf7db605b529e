import pytest

from pieces_core import AuthenticationError
from pieces_http import get_access_token_or_throw, is_absolute_url, join_base_url


@pytest.mark.parametrize(
    ("base", "path"),
    [
        ("https://api.example.com/v1", "users"),
        ("https://api.example.com/v1/", "users"),
        ("https://api.example.com/v1", "/users"),
        ("https://api.example.com/v1/", "/users"),
    ],
)
def test_join_base_url_uses_exactly_one_slash(base, path):
    assert join_base_url(base, path) == "https://api.example.com/v1/users"


def test_access_token_returned():
    assert get_access_token_or_throw({"access_token": "tok"}) == "tok"


@pytest.mark.parametrize("auth", [None, {}, {"refresh_token": "r"}])
def test_missing_access_token_raises(auth):
    with pytest.raises(AuthenticationError, match="Invalid bearer token"):
        get_access_token_or_throw(auth)


def test_is_absolute_url():
    assert is_absolute_url("http://a.test")
    assert is_absolute_url("https://a.test/x")
    assert not is_absolute_url("/api/v1/users")
