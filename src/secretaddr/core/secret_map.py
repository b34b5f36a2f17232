"""Secret map returned by providers, with well-known key handling."""

from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from .secret import Secret

if TYPE_CHECKING:
    from ..addressing.types import Address


class WellKnownSecretKey(str, Enum):
    """Semantic roles a key in a secret can be mapped to."""

    CERTIFICATE = "certificate"
    PRIVATE_KEY = "private_key"
    PUBLIC_KEY = "public_key"
    USERNAME = "username"
    PASSWORD = "password"
    KEYSTORE = "keystore"


class SecretMap:
    """Key/value pairs of a secret, as fetched from a provider.

    Well-known keys let consumers ask for e.g. the certificate of a TLS
    secret without knowing how the provider names it. They are populated
    by :meth:`handle_well_known_secret_keys` from an address ``keymap``.
    """

    def __init__(
        self,
        secrets: Mapping[str, Secret],
        expire_at: Optional[datetime] = None,
    ):
        self._secrets = MappingProxyType(dict(secrets))
        self._expire_at = expire_at
        self._well_known: Dict[WellKnownSecretKey, Secret] = {}

    @classmethod
    def of_secrets(
        cls, secrets: Mapping[str, Secret], expire_at: Optional[datetime] = None
    ) -> "SecretMap":
        return cls(secrets, expire_at)

    @classmethod
    def of(
        cls, values: Mapping[str, Any], expire_at: Optional[datetime] = None
    ) -> "SecretMap":
        """Build a map from raw values, wrapping them in :class:`Secret`.

        Raises:
            ValueError: If a value is neither str, bytes nor Secret
        """
        secrets = {
            key: value if isinstance(value, Secret) else Secret(value)
            for key, value in values.items()
        }
        return cls(secrets, expire_at)

    @property
    def expire_at(self) -> Optional[datetime]:
        return self._expire_at

    def get_secret(self, address: "Address") -> Optional[Secret]:
        """Secret stored under the key of ``address``, if any."""
        if address.key is None:
            return None
        return self._secrets.get(address.key)

    def handle_well_known_secret_keys(
        self, mapping: Mapping[str, WellKnownSecretKey]
    ) -> None:
        for secret_key, well_known in mapping.items():
            secret = self._secrets.get(secret_key)
            if secret is not None:
                self._well_known[well_known] = secret

    def well_known(self, key: WellKnownSecretKey) -> Optional[Secret]:
        return self._well_known.get(key)

    def as_dict(self) -> Dict[str, Secret]:
        return dict(self._secrets)

    def __len__(self) -> int:
        return len(self._secrets)

    def __repr__(self) -> str:
        return f"SecretMap(keys={sorted(self._secrets)}, expire_at={self._expire_at!r})"


__all__ = ["SecretMap", "WellKnownSecretKey"]
