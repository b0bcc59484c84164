import time

import pytest

from monolith.cookies import (
    Cookie,
    CookieFileContentsParseError,
    parse_cookie_file_contents,
)


def make_cookie(**overrides):
    fields = dict(
        domain="example.com",
        include_subdomains=False,
        path="/",
        https_only=False,
        expires=0,
        name="session",
        value="token",
    )
    fields.update(overrides)
    return Cookie(**fields)


def test_parse_netscape_file():
    contents = (
        "# Netscape HTTP Cookie File\n"
        "# comment line\n"
        "EXAMPLE.com\tFALSE\t/\tTRUE\t0\tsession\ttoken\n"
        ".example.com\tTRUE\t/docs\tFALSE\t9999999999\tother\tsecret\n"
    )
    cookies = parse_cookie_file_contents(contents)
    assert cookies == [
        Cookie("example.com", False, "/", True, 0, "session", "token"),
        Cookie(".example.com", True, "/docs", False, 9999999999, "other", "secret"),
    ]


def test_parse_alternative_header_and_crlf():
    contents = "# HTTP Cookie File\r\nexample.com\tFALSE\t/\tFALSE\t0\tname\ttoken\r\n"
    cookies = parse_cookie_file_contents(contents)
    assert len(cookies) == 1
    assert cookies[0].value == "token"


def test_parse_skips_lines_with_wrong_field_count():
    contents = "# HTTP Cookie File\nnot\ta\tcookie\n\n"
    assert parse_cookie_file_contents(contents) == []


def test_parse_empty_contents():
    assert parse_cookie_file_contents("") == []


def test_parse_invalid_header():
    with pytest.raises(CookieFileContentsParseError):
        parse_cookie_file_contents("not a cookie file\n")


def test_parse_invalid_expiry():
    contents = "# HTTP Cookie File\nexample.com\tFALSE\t/\tFALSE\tsoon\tname\ttoken\n"
    with pytest.raises(CookieFileContentsParseError):
        parse_cookie_file_contents(contents)


def test_session_cookie_never_expires():
    assert make_cookie(expires=0).is_expired() is False


def test_expiry_relative_to_now():
    now = int(time.time())
    assert make_cookie(expires=now - 3600).is_expired() is True
    assert make_cookie(expires=now + 3600).is_expired() is False


def test_matches_plain_domain():
    cookie = make_cookie()
    assert cookie.matches_url("https://example.com/") is True
    assert cookie.matches_url("http://EXAMPLE.com/page") is True
    assert cookie.matches_url("https://other.example.com/") is False


def test_matches_root_path_without_trailing_slash():
    assert make_cookie().matches_url("https://example.com") is True


def test_https_only_rejects_http():
    cookie = make_cookie(https_only=True)
    assert cookie.matches_url("http://example.com/") is False
    assert cookie.matches_url("https://example.com/") is True


def test_non_http_schemes_never_match():
    cookie = make_cookie()
    assert cookie.matches_url("ftp://example.com/") is False
    assert cookie.matches_url("file:///etc/hosts") is False
    assert cookie.matches_url("not a url") is False


def test_subdomain_matching():
    cookie = make_cookie(domain=".example.com", include_subdomains=True)
    assert cookie.matches_url("https://www.example.com/") is True
    assert cookie.matches_url("https://deep.sub.example.com/x") is True
    assert cookie.matches_url("https://example.org/") is False


def test_path_matching():
    cookie = make_cookie(path="/docs")
    assert cookie.matches_url("https://example.com/docs") is True
    assert cookie.matches_url("https://example.com/DOCS") is True
    assert cookie.matches_url("https://example.com/docs/page") is True
    assert cookie.matches_url("https://example.com/other") is False