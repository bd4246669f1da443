import os
from datetime import timedelta
from ipaddress import IPv4Address

import pytest

from typedenv import EnvironmentStoreError, Kind, OsEnvironment, TypedEnv

PREFIX = "TYPEDENV_IT_"


@pytest.fixture
def os_env(monkeypatch):
    for key in [k for k in os.environ if k.startswith(PREFIX)]:
        monkeypatch.delenv(key)
    yield TypedEnv(OsEnvironment())
    for key in [k for k in os.environ if k.startswith(PREFIX)]:
        os.environ.pop(key, None)


def test_writes_reach_process_environment(os_env):
    os_env.set(PREFIX + "TIMEOUT", timedelta(seconds=90))
    os_env.set_slice(PREFIX + "HOSTS", [IPv4Address("10.0.0.1"), IPv4Address("10.0.0.2")])

    assert os.environ[PREFIX + "TIMEOUT"] == "1m30s"
    assert os.environ[PREFIX + "HOSTS"] == "10.0.0.1,10.0.0.2"
    assert os_env.get(PREFIX + "TIMEOUT", Kind.DURATION) == timedelta(seconds=90)
    assert os_env.get_slice(PREFIX + "HOSTS", Kind.IP)[1] == IPv4Address("10.0.0.2")


def test_reads_values_set_externally(os_env, monkeypatch):
    monkeypatch.setenv(PREFIX + "WORKERS", " 8 ")
    assert os_env.get(PREFIX + "WORKERS", Kind.UINT8) == 8
    assert os_env.get_default(PREFIX + "MISSING", 3) == 3


def test_empty_value_is_present(os_env, monkeypatch):
    monkeypatch.setenv(PREFIX + "EMPTY", "")
    default = [1, 2]
    assert os_env.get_slice_default(PREFIX + "EMPTY", default) is default
    assert os_env.get_default(PREFIX + "EMPTY", 5) == 5
    assert os_env.store.get_raw(PREFIX + "EMPTY") == ("", True)


def test_unset(os_env):
    os_env.set(PREFIX + "GONE", "x")
    os_env.unset(PREFIX + "GONE")
    assert PREFIX + "GONE" not in os.environ
    os_env.unset(PREFIX + "GONE")


@pytest.mark.parametrize("name", ["", PREFIX + "A=B", PREFIX + "NUL\x00"])
def test_invalid_names_raise(os_env, name):
    with pytest.raises(EnvironmentStoreError):
        os_env.set(name, 1)
    with pytest.raises(EnvironmentStoreError):
        os_env.unset(name)


def test_nul_in_value_raises(os_env):
    with pytest.raises(EnvironmentStoreError):
        os_env.set(PREFIX + "BAD", "a\x00b")
    assert PREFIX + "BAD" not in os.environ
