"""Single-shot HTTP GET dispatch."""

from __future__ import annotations

from collections.abc import Mapping
from email.message import Message
import logging

import requests
from urllib3.exceptions import LocationValueError

from minicurl.errors import RequestError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def dispatch(
    url: str,
    headers: Mapping[str, str],
    *,
    session: requests.Session | None = None,
) -> str:
    """Send one GET request to *url* and return the response body as text.

    Any HTTP status is a completed request: the body of an error page is
    returned like any other.  The body is decoded strictly with the charset
    the ``Content-Type`` header declares (UTF-8 when it declares none).

    Args:
        url: Target URL.
        headers: Headers sent on top of the transport defaults.
        session: Session to send with.  When omitted, a fresh session is
            created and closed once the body has been read.

    Raises:
        RequestError: On any transport failure, or if the body cannot be
            decoded.
    """
    owns_session = session is None
    if session is None:
        session = requests.Session()

    # urllib3 raises LocationValueError for some malformed hosts without
    # requests wrapping it.
    try:
        response = session.get(url, headers=dict(headers))
        content = response.content
    except (requests.RequestException, LocationValueError) as e:
        raise RequestError(url, str(e)) from e
    finally:
        if owns_session:
            session.close()

    logger.debug(
        "%s %s (%d bytes)", response.status_code, response.reason, len(content)
    )
    charset = declared_charset(response.headers.get("Content-Type"))
    return decode_body(url, content, charset)


def declared_charset(content_type: str | None) -> str | None:
    """Return the ``charset`` parameter of a ``Content-Type`` value, if any."""
    if not content_type:
        return None
    message = Message()
    message["Content-Type"] = content_type
    charset = message.get_param("charset")
    if not isinstance(charset, str) or not charset.strip():
        return None
    return charset.strip().strip("'\"")


def decode_body(url: str, content: bytes, encoding: str | None) -> str:
    """Decode *content* without replacing undecodable bytes."""
    encoding = encoding or DEFAULT_ENCODING
    try:
        return content.decode(encoding)
    except LookupError as e:
        raise RequestError(url, f"unknown response charset {encoding!r}") from e
    except UnicodeDecodeError as e:
        raise RequestError(
            url, f"response body is not valid {encoding}: {e.reason}"
        ) from e
