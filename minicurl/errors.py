"""Error types raised by minicurl, each carrying the exit status the CLI reports."""

from __future__ import annotations


class MinicurlError(Exception):
    """Base class for every failure the CLI reports to the user."""

    exit_code = 1


class HeaderError(MinicurlError):
    """The user-supplied header specification could not be used."""

    exit_code = 2


class MalformedHeaderSpec(HeaderError):
    """A header segment had no colon, or an empty name or value."""


class InvalidHeaderName(HeaderError):
    """A header name contains characters outside the HTTP token grammar."""


class InvalidHeaderValue(HeaderError):
    """A header value contains control characters."""


class RequestError(MinicurlError):
    """The request could not be completed or its body could not be decoded."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.message = message
