"""Interfaces implemented by secret provider plugins.

A plugin of type "secret-provider" ships a :class:`SecretProviderFactory`.
The host builds the plugin configuration, asks the factory for a
:class:`SecretProvider` and hands it parsed addresses.
"""

from typing import Callable, Protocol, TypeVar, runtime_checkable

from ..addressing.types import Address
from ..core.secret_map import SecretMap

C = TypeVar("C", bound="SecretManagerConfiguration", contravariant=True)


@runtime_checkable
class SecretManagerConfiguration(Protocol):
    """Configuration of a secret provider plugin."""

    def is_enabled(self) -> bool: ...


@runtime_checkable
class SecretProvider(Protocol):
    """Fetches secrets designated by an Address from a backend."""

    def resolve(self, address: Address) -> SecretMap:
        """Fetch the secret at ``address.path``."""
        ...

    def watch(
        self, address: Address, on_change: Callable[[SecretMap], None]
    ) -> Callable[[], None]:
        """Call ``on_change`` whenever the secret changes.

        Only called for addresses where ``address.is_watchable()``.
        Returns a function that stops watching.
        """
        ...


class SecretProviderFactory(Protocol[C]):
    def create(self, configuration: C) -> SecretProvider:
        """Create a provider if the configuration can be consumed."""
        ...


__all__ = ["SecretManagerConfiguration", "SecretProvider", "SecretProviderFactory"]
