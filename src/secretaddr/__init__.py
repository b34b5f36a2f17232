"""secretaddr: secret://<provider>/<path>[:<key>][?options] addressing."""

from .addressing import (
    Address,
    FormatError,
    KeyMappingError,
    WellKnownQueryParam,
    format_uri_and_key_and_params,
    parse_address,
)
from .core import Secret, SecretMap, WellKnownSecretKey

__all__ = [
    "__version__",
    "Address",
    "FormatError",
    "KeyMappingError",
    "Secret",
    "SecretMap",
    "WellKnownQueryParam",
    "WellKnownSecretKey",
    "format_uri_and_key_and_params",
    "parse_address",
]

__version__ = "0.1.0"
