"""Header specification parsing and header map construction.

A header specification is the string given to ``-H/--headers``::

    "Accept: text/plain, X-Token: abc123"

``parse_header_spec`` turns it into ``HeaderPair`` objects and
``build_header_map`` validates them against the HTTP grammar and collapses
them into a case-insensitive mapping where the last occurrence of a name wins.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
import re

from pydantic import BaseModel, ConfigDict
from requests.structures import CaseInsensitiveDict

from minicurl.errors import InvalidHeaderName, InvalidHeaderValue, MalformedHeaderSpec

logger = logging.getLogger(__name__)

# RFC 9110 token: 1*tchar
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
# Field values may carry HTAB, visible ASCII and obs-text, nothing else.
_INVALID_VALUE_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]|[^\x00-\xff]")


class HeaderPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


def parse_header_spec(spec: str) -> list[HeaderPair]:
    """Split a ``"Name: value, Name: value"`` string into header pairs.

    Each comma-separated segment is split on its first colon, so values may
    contain further colons (URLs, times).  Surrounding whitespace is trimmed
    from both sides.  An empty spec means no headers.

    Raises:
        MalformedHeaderSpec: If a segment has no colon (whitespace-only and
            empty segments included) or its name or value is empty.
    """
    if spec == "":
        return []

    pairs: list[HeaderPair] = []
    for position, segment in enumerate(spec.split(","), start=1):
        name, sep, value = segment.partition(":")
        if not sep:
            raise MalformedHeaderSpec(
                f"header #{position} {segment!r} has no ':' separator"
            )
        name, value = name.strip(), value.strip()
        if not name:
            raise MalformedHeaderSpec(f"header #{position} {segment!r} has an empty name")
        if not value:
            raise MalformedHeaderSpec(f"header #{position} {segment!r} has an empty value")
        pairs.append(HeaderPair(name=name, value=value))

    logger.debug("Parsed %d header(s) from spec", len(pairs))
    return pairs


def validate_header_name(name: str) -> None:
    if not _TOKEN_RE.match(name):
        raise InvalidHeaderName(f"invalid header name {name!r}")


def validate_header_value(name: str, value: str) -> None:
    if _INVALID_VALUE_RE.search(value):
        raise InvalidHeaderValue(f"invalid value for header {name!r}: {value!r}")


def build_header_map(pairs: Iterable[HeaderPair]) -> CaseInsensitiveDict[str]:
    """Build a case-insensitive header map; later pairs replace earlier ones.

    Raises:
        InvalidHeaderName: If a name is not an HTTP token.
        InvalidHeaderValue: If a value holds control characters other than tab.
    """
    headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
    for pair in pairs:
        validate_header_name(pair.name)
        validate_header_value(pair.name, pair.value)
        if pair.name in headers:
            logger.debug("Header %s overrides an earlier value", pair.name)
        headers[pair.name] = pair.value
    return headers
