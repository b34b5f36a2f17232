"""Address types for secret locations."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from ..core.secret_map import WellKnownSecretKey

logger = logging.getLogger(__name__)

SCHEME = "secret://"
URL_SEPARATOR = "/"
URI_KEY_SEPARATOR = ":"

QueryParams = Mapping[str, Tuple[str, ...]]


class KeyMappingError(ValueError):
    """A ``keymap`` query value is not ``<well known key>:<key in secret>``."""

    pass


class WellKnownQueryParam:
    """Query parameter names with a meaning shared by all providers."""

    WATCH = "watch"
    KEYMAP = "keymap"
    NAMESPACE = "namespace"
    RESOLVE_BEFORE_WATCH = "resolveBeforeWatch"
    RENEWABLE = "renewable"
    RELOAD_ON_CHANGE = "reloadOnChange"


@dataclass(frozen=True)
class Address:
    """Parsed secret location.

    The Address represents a parsed string following the syntax:
        secret://<provider>/<path or name>[:<key>][?option=value1&option=value2]

    Examples:
        "secret://vault/db/creds:password" → Address(provider="vault", path="db/creds", key="password")
        "secret://k8s/tls?keymap=certificate:tls.crt" → Address(provider="k8s", path="tls", key=None,
                                                               query={"keymap": ("certificate:tls.crt",)})
    """

    provider: str
    """Identifier of the secret provider (plugin id)."""

    path: str
    """Location of the secret within the provider, may contain '/'."""

    key: Optional[str] = None
    """Key within the secret map, None when not specified."""

    query: QueryParams = field(default_factory=dict)
    """Query string parameters; every name maps to one or more values in encounter order."""

    is_uri: bool = False
    """True when parsed from the bare form (no ``secret://`` scheme)."""

    def __post_init__(self):
        frozen = {name: tuple(values) for name, values in self.query.items()}
        object.__setattr__(self, "query", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash(
            (
                self.provider,
                self.path,
                self.key,
                frozenset(self.query.items()),
                self.is_uri,
            )
        )

    def __str__(self) -> str:
        """Canonical representation."""
        parts = [URL_SEPARATOR if self.is_uri else SCHEME, self.provider]
        parts.append(URL_SEPARATOR)
        parts.append(self.path)
        if self.key is not None:
            parts.append(f"{URI_KEY_SEPARATOR}{self.key}")
        if self.query:
            param_str = "&".join(
                f"{name}={value}"
                for name, values in self.query.items()
                for value in values
            )
            parts.append(f"?{param_str}")
        return "".join(parts)

    def is_key_empty(self) -> bool:
        return self.key is None or not self.key.strip()

    def is_watchable(self) -> bool:
        """Search query string for 'watch' with value 'true'."""
        return self.query_param_equals_ignore_case(WellKnownQueryParam.WATCH, "true")

    def query_param_exists(self, name: str) -> bool:
        return name in self.query

    def query_param_equals_ignore_case(self, name: str, value: Optional[str]) -> bool:
        """Check whether query param ``name`` holds ``value``, ignoring case.

        Args:
            name: Query param name (case-sensitive)
            value: Value to find (case-insensitive)

        Returns:
            True if the name exists and one of its values matches, False
            when value is None
        """
        if value is None:
            return False
        wanted = value.lower()
        return any(v.lower() == wanted for v in self.query.get(name, ()))

    def well_known_key_map(self) -> Dict[str, WellKnownSecretKey]:
        """Extract well-known keys from the ``keymap`` query param.

        Each value is formatted as <well known key>:<key in secret>,
        e.g. ``keymap=certificate:tls.crt``. Unknown well-known keys are
        ignored.

        Returns:
            Mapping of key in secret to its well-known key

        Raises:
            KeyMappingError: If a value does not have two non-blank parts
        """
        mapping: Dict[str, WellKnownSecretKey] = {}
        for keymap in self.query.get(WellKnownQueryParam.KEYMAP, ()):
            parts = keymap.split(URI_KEY_SEPARATOR)
            if len(parts) != 2:
                raise KeyMappingError(f"keymap '{keymap}' is not valid")
            well_known = parts[0].strip().upper()
            secret_key = parts[1].strip()
            if not well_known or not secret_key:
                raise KeyMappingError(f"keymap '{keymap}' is not valid")
            try:
                mapping[secret_key] = WellKnownSecretKey[well_known]
            except KeyError:
                logger.debug("Ignoring unknown well-known key in keymap '%s'", keymap)
        return mapping
