"""Secret addressing.

This module provides parsing and formatting of secret locations:
- Secret URLs: secret://vault/db/creds:password
- Bare URIs: /vault/db/creds:password (as stored in secret specs)

Syntax:
    secret://<provider>/<path or name>[:<key>][?option=value1&option=value2]

Examples:
    secret://vault/db/creds                      # Whole secret
    secret://vault/db/creds:password             # Single key
    secret://k8s/tls?watch                       # Watch for changes
    secret://k8s/tls?keymap=certificate:tls.crt  # Map tls.crt to CERTIFICATE
"""

from .formatter import format_uri_and_key_and_params
from .parser import EXPECTED_FORMAT, FormatError, parse_address
from .types import (
    SCHEME,
    URI_KEY_SEPARATOR,
    URL_SEPARATOR,
    Address,
    KeyMappingError,
    QueryParams,
    WellKnownQueryParam,
)

__all__ = [
    "Address",
    "EXPECTED_FORMAT",
    "FormatError",
    "KeyMappingError",
    "QueryParams",
    "SCHEME",
    "URI_KEY_SEPARATOR",
    "URL_SEPARATOR",
    "WellKnownQueryParam",
    "format_uri_and_key_and_params",
    "parse_address",
]
