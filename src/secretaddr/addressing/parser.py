"""Secret address parsing.

This module implements parsing for the address syntax:
    secret://<provider>/<path or name>[:<key>][?option=value1&option=value2]

Where:
    - secret://: Mandatory scheme, replaced by a single '/' in bare URIs
    - provider: Secret provider id
    - path or name: Free string, may contain '/' but no blank segment
    - :key: Optional key within the secret
    - ?options: Optional query string, each option may be repeated
"""

import logging
from typing import Dict, List

from .types import SCHEME, URI_KEY_SEPARATOR, URL_SEPARATOR, Address

logger = logging.getLogger(__name__)

EXPECTED_FORMAT = (
    f"{SCHEME}<provider>/<path or name>[:<key>][?option=value1&option=value2]"
)


class FormatError(ValueError):
    """Secret address does not follow the expected format."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(
            f"Secret URL '{url}' should have the following format {EXPECTED_FORMAT}"
        )


def parse_address(url: str, is_uri: bool = False) -> Address:
    """Parse a secret URL (or bare URI) into an Address.

    Args:
        url: String to parse
        is_uri: True when the string has no ``secret://`` scheme and starts
            with '/' instead

    Returns:
        Parsed Address object

    Raises:
        FormatError: When the string does not follow the expected format

    Examples:
        >>> parse_address("secret://vault/db/creds:password")
        Address(provider="vault", path="db/creds", key="password", query={}, is_uri=False)

        >>> parse_address("secret://k8s/tls/?watch")
        Address(provider="k8s", path="tls", key=None, query={"watch": ("true",)}, is_uri=False)

        >>> parse_address("/vault/db/creds:password?renewable=true", is_uri=True)
        Address(provider="vault", path="db/creds", key="password", query={"renewable": ("true",)}, is_uri=True)
    """
    url = url.strip()

    # Step 1: Remove scheme, or the leading separator of a bare URI
    if is_uri:
        if not url.startswith(URL_SEPARATOR):
            _fail(url, "bare URI must start with '/'")
        schemeless = url[1:]
    else:
        if not url.startswith(SCHEME):
            _fail(url, "missing scheme")
        schemeless = url[len(SCHEME):]

    # Step 2: Provider must be followed by a separator and at least one char
    first_slash = schemeless.find(URL_SEPARATOR)
    if first_slash < 0 or first_slash == len(schemeless) - 1:
        _fail(url, "no path after provider")

    provider = schemeless[:first_slash].strip()
    if not provider:
        _fail(url, "empty provider")

    # Step 3: Split path region from query string
    question_mark = schemeless.find("?")
    if 0 <= question_mark < first_slash:
        _fail(url, "query string before path")
    if question_mark == first_slash + 1:
        _fail(url, "query string without path")

    if question_mark > 0:
        path = schemeless[first_slash + 1:question_mark].strip()
        query = _parse_query_string(schemeless[question_mark + 1:])
    else:
        path = schemeless[first_slash + 1:].strip()
        query = {}

    # Step 4: A colon is a key separator only within the last segment
    key = None
    colon = path.rfind(URI_KEY_SEPARATOR)
    if colon > path.rfind(URL_SEPARATOR):
        key = path[colon + 1:]
        path = path[:colon]

    # Step 5: Validate path
    path = path.rstrip(URL_SEPARATOR).strip()
    if not path.strip():
        _fail(url, "blank path")
    if any(not segment.strip() for segment in path.split(URL_SEPARATOR)):
        _fail(url, "blank path segment")

    return Address(
        provider=provider,
        path=path,
        key=key,
        query=query,
        is_uri=is_uri,
    )


def _parse_query_string(query_string: str) -> Dict[str, List[str]]:
    """Parse query string into a dict of value lists.

    Pairs are split on the first '='. A pair without '=' gets the value
    "true". Repeated names accumulate values in order. Empty pairs and
    pairs without a name are skipped.
    """
    query: Dict[str, List[str]] = {}
    for pair in query_string.split("&"):
        if not pair:
            continue
        name, sep, value = pair.partition("=")
        if not name:
            logger.debug("Skipping query pair without name: '%s'", pair)
            continue
        query.setdefault(name, []).append(value if sep else "true")
    return query


def _fail(url: str, reason: str) -> None:
    logger.debug("Rejecting secret URL '%s': %s", url, reason)
    raise FormatError(url)
