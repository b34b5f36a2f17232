"""Tests for the provider plugin interfaces with an in-memory provider."""

from secretaddr.addressing import parse_address
from secretaddr.core import Secret, SecretMap, WellKnownSecretKey
from secretaddr.plugin import (
    SecretManagerConfiguration,
    SecretProvider,
    SecretProviderFactory,
)


class MemoryConfiguration:
    def __init__(self, secrets, enabled=True):
        self.secrets = secrets
        self.enabled = enabled

    def is_enabled(self):
        return self.enabled


class MemoryProvider:
    def __init__(self, secrets):
        self.secrets = secrets
        self.watchers = []

    def resolve(self, address):
        secret_map = SecretMap.of(self.secrets[address.path])
        secret_map.handle_well_known_secret_keys(address.well_known_key_map())
        return secret_map

    def watch(self, address, on_change):
        self.watchers.append(on_change)
        return lambda: self.watchers.remove(on_change)


class MemoryProviderFactory:
    def create(self, configuration):
        return MemoryProvider(configuration.secrets)


def test_protocols_satisfied():
    configuration = MemoryConfiguration({})
    assert isinstance(configuration, SecretManagerConfiguration)
    factory: SecretProviderFactory[MemoryConfiguration] = MemoryProviderFactory()
    assert isinstance(factory.create(configuration), SecretProvider)


def test_resolve_through_provider():
    configuration = MemoryConfiguration({"tls/prod": {"tls.crt": "CERT", "tls.key": "KEY"}})
    provider = MemoryProviderFactory().create(configuration)

    address = parse_address("secret://memory/tls/prod:tls.key?keymap=certificate:tls.crt")
    secret_map = provider.resolve(address)

    assert secret_map.get_secret(address) == Secret("KEY")
    assert secret_map.well_known(WellKnownSecretKey.CERTIFICATE) == Secret("CERT")


def test_watch_only_watchable():
    provider = MemoryProvider({})
    address = parse_address("secret://memory/tls?watch")
    assert address.is_watchable()

    stop = provider.watch(address, lambda secret_map: None)
    assert len(provider.watchers) == 1
    stop()
    assert provider.watchers == []
