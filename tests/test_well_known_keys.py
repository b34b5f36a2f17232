"""Tests for keymap extraction from secret addresses."""

import logging

import pytest

from secretaddr.addressing import KeyMappingError, parse_address
from secretaddr.core import WellKnownSecretKey


@pytest.mark.parametrize(
    "url, expected",
    [
        (
            "secret://foo/bar?keymap=certificate:tls.crt&keymap=private_key:tls.key",
            {"tls.crt": WellKnownSecretKey.CERTIFICATE, "tls.key": WellKnownSecretKey.PRIVATE_KEY},
        ),
        (
            "secret://foo/bar:key?keymap=certificate:tls.crt&keymap=private_key:tls.key",
            {"tls.crt": WellKnownSecretKey.CERTIFICATE, "tls.key": WellKnownSecretKey.PRIVATE_KEY},
        ),
        (
            "secret://foo/bar?keymap=username:user&keymap=password:passwd",
            {"user": WellKnownSecretKey.USERNAME, "passwd": WellKnownSecretKey.PASSWORD},
        ),
        (
            "secret://foo/bar?keymap=certificate:tls.crt&keymap=key:tls.key",
            {"tls.crt": WellKnownSecretKey.CERTIFICATE},
        ),
        (
            "secret://foo/bar?keymap=cert:tls.crt&keymap=private_key:tls.key",
            {"tls.key": WellKnownSecretKey.PRIVATE_KEY},
        ),
        (
            "secret://foo/bar?keymap=public_key:tls.pub&keymap=keystore:ks.p12",
            {"tls.pub": WellKnownSecretKey.PUBLIC_KEY, "ks.p12": WellKnownSecretKey.KEYSTORE},
        ),
        ("secret://foo/bar?keymap=CERTIFICATE: tls.crt ", {"tls.crt": WellKnownSecretKey.CERTIFICATE}),
        ("secret://foo/bar?keymap=foo:tls.crt&keymap=bar:tls.key", {}),
        ("secret://foo/bar", {}),
    ],
)
def test_well_known_key_map(url, expected):
    assert parse_address(url).well_known_key_map() == expected


def test_last_mapping_wins():
    addr = parse_address("secret://foo/bar?keymap=certificate:tls&keymap=private_key:tls")
    assert addr.well_known_key_map() == {"tls": WellKnownSecretKey.PRIVATE_KEY}


def test_unknown_role_logged(caplog):
    addr = parse_address("secret://foo/bar?keymap=foo:tls.crt")
    with caplog.at_level(logging.DEBUG, logger="secretaddr.addressing.types"):
        assert addr.well_known_key_map() == {}
    assert "foo:tls.crt" in caplog.text


@pytest.mark.parametrize(
    "url",
    [
        "secret://foo/bar?keymap=certificate:&keymap=private_key:foo",
        "secret://foo/bar:key?keymap=certificate:&keymap=private_key:foo",
        "secret://foo/bar?keymap=certificate: &keymap=private_key:foo",
        "secret://foo/bar?keymap=:tls.key&keymap=private_key:foo",
        "secret://foo/bar?keymap= :tls.key&keymap=private_key:foo",
        "secret://foo/bar?keymap=:&keymap=private_key:foo",
        "secret://foo/bar?keymap=: &keymap=private_key:foo",
        "secret://foo/bar?keymap= : &keymap=private_key:foo",
        "secret://foo/bar?keymap=private_key:foo&keymap=certificate",
        "secret://foo/bar?keymap=certificate:tls:crt",
        "secret://foo/bar?keymap",
    ],
)
def test_malformed_keymap_fails(url):
    """Test one malformed entry aborts the whole extraction."""
    addr = parse_address(url)
    with pytest.raises(KeyMappingError, match="is not valid"):
        addr.well_known_key_map()


def test_malformed_keymap_found_lazily():
    """Test parsing succeeds, only the extraction fails."""
    addr = parse_address("secret://foo/bar?keymap=certificate:")
    assert addr.query_param_exists("keymap")
    with pytest.raises(ValueError):
        addr.well_known_key_map()
