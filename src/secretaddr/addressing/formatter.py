"""Canonical string form of a secret location.

The output of :func:`format_uri_and_key_and_params` is a bare URI that
:func:`~secretaddr.addressing.parser.parse_address` reads back with
``is_uri=True``.
"""

from typing import Optional

from .types import URI_KEY_SEPARATOR, WellKnownQueryParam


def format_uri_and_key_and_params(
    uri: str,
    key: Optional[str],
    renewable: bool,
    publish_event_on_value_changed: bool,
) -> str:
    """Concatenate uri, key and lifecycle flags.

    Args:
        uri: Bare URI, e.g. "/vault/db/creds"
        key: Key within the secret, appended after ':' when not None
        renewable: Append "renewable=true"
        publish_event_on_value_changed: Append "reloadOnChange=true"

    Returns:
        uri[:key][?renewable=true][&reloadOnChange=true]

    Examples:
        >>> format_uri_and_key_and_params("/vault/db", "password", True, True)
        '/vault/db:password?renewable=true&reloadOnChange=true'

        >>> format_uri_and_key_and_params("/vault/db", None, False, True)
        '/vault/db?reloadOnChange=true'
    """
    params = []
    if renewable:
        params.append(f"{WellKnownQueryParam.RENEWABLE}=true")
    if publish_event_on_value_changed:
        params.append(f"{WellKnownQueryParam.RELOAD_ON_CHANGE}=true")

    uri_key = uri if key is None else f"{uri}{URI_KEY_SEPARATOR}{key}"
    if params:
        return f"{uri_key}?{'&'.join(params)}"
    return uri_key
