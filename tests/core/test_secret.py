"""Tests for the Secret value wrapper."""

import base64

import pytest

from secretaddr.core import Secret

SECRET_STRING = "that'll remain our dirty little secret"
SECRET_BYTES = SECRET_STRING.encode("utf-8")


@pytest.mark.parametrize("data", [None, ["foo"], 42])
def test_invalid_data_rejected(data):
    with pytest.raises(ValueError):
        Secret(data)


@pytest.mark.parametrize("data", [SECRET_STRING, SECRET_BYTES])
def test_secret_as_is(data):
    secret = Secret(data)
    assert secret.as_string() == SECRET_STRING
    assert secret.as_bytes() == SECRET_BYTES


@pytest.mark.parametrize(
    "data",
    [
        base64.b64encode(SECRET_BYTES).decode("ascii"),
        base64.b64encode(SECRET_BYTES),
    ],
)
def test_secret_base64(data):
    secret = Secret(data, base64_encoded=True)
    assert secret.as_string() == SECRET_STRING
    assert secret.as_bytes() == SECRET_BYTES


def test_empty():
    assert Secret("").is_empty()
    assert Secret(b"").is_empty()
    assert not Secret("a").is_empty()
    assert not Secret(b"\x00").is_empty()


def test_equality():
    assert Secret("foo") == Secret("foo")
    assert hash(Secret("foo")) == hash(Secret("foo"))
    assert Secret("foo") != Secret(b"foo")
    assert Secret("foo") != Secret("foo", base64_encoded=True)
    assert Secret("foo") != "foo"


def test_repr_hides_value():
    assert "foo" not in repr(Secret("foo"))
    assert "str" in repr(Secret("foo"))
