"""Netscape cookie file parsing and cookie-to-URL matching."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator
from urllib.parse import urlsplit

_VALID_HEADERS = ("# HTTP Cookie File", "# Netscape HTTP Cookie File")


class CookieFileContentsParseError(ValueError):
    """Raised when cookie file contents cannot be parsed."""


@dataclass
class Cookie:
    domain: str
    include_subdomains: bool
    path: str
    https_only: bool
    expires: int
    name: str
    value: str

    def is_expired(self) -> bool:
        """Return True if the cookie has an expiry time that has passed."""
        if self.expires == 0:
            return False  # Session cookie, never expires
        return self.expires < int(time.time())

    def matches_url(self, url: str) -> bool:
        """Return True if the cookie should be sent along with a request to ``url``."""
        try:
            parts = urlsplit(url)
            host = parts.hostname
        except ValueError:
            return False

        if parts.scheme == "http":
            if self.https_only:
                return False
        elif parts.scheme != "https":
            return False

        if not host:
            return False

        domain_lower = self.domain.lower()
        if self.domain.startswith(".") and self.include_subdomains:
            if not host.lower().endswith(self.domain) and host.lower() != domain_lower[1:-1]:
                return False
        elif host.lower() != domain_lower:
            return False

        path = parts.path or "/"
        if path.lower() != self.path.lower() and not path.startswith(self.path):
            return False

        return True


def _lines(text: str) -> Iterator[str]:
    if not text:
        return
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece


def _parse_expires(field: str) -> int:
    digits = field[1:] if field.startswith("+") else field
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise CookieFileContentsParseError(f"invalid expiry time {field!r}")
    return int(digits)


def parse_cookie_file_contents(cookie_file_contents: str) -> list[Cookie]:
    """Parse the contents of a Netscape-format cookie file into cookies."""
    cookies: list[Cookie] = []

    for index, line in enumerate(_lines(cookie_file_contents)):
        if index == 0:
            if line not in _VALID_HEADERS:
                raise CookieFileContentsParseError("invalid header")
            continue

        if line.startswith("#"):
            continue

        fields = line.split("\t")
        if len(fields) != 7:
            continue

        domain, include_subdomains, path, https_only, expires, name, value = fields
        cookies.append(
            Cookie(
                domain=domain.lower(),
                include_subdomains=include_subdomains == "TRUE",
                path=path,
                https_only=https_only == "TRUE",
                expires=_parse_expires(expires),
                name=name,
                value=value,
            )
        )

    return cookies