import pytest

from typedenv import EnvironmentStore, EnvironmentStoreError, ErrorCode, InMemoryEnvironment, OsEnvironment


def test_stores_satisfy_port():
    assert isinstance(InMemoryEnvironment(), EnvironmentStore)
    assert isinstance(OsEnvironment(), EnvironmentStore)


def test_get_set_unset():
    store = InMemoryEnvironment()
    assert store.get_raw("A") == ("", False)

    store.set_raw("A", "")
    assert store.get_raw("A") == ("", True)

    store.set_raw("A", "1")
    assert store.get_raw("A") == ("1", True)

    store.unset_raw("A")
    store.unset_raw("A")
    assert store.get_raw("A") == ("", False)


def test_stores_are_isolated():
    a, b = InMemoryEnvironment(), InMemoryEnvironment()
    a.set_raw("X", "1")
    assert b.get_raw("X") == ("", False)
    assert a.snapshot() == {"X": "1"}


def test_rejects_bad_names_and_values(caplog):
    store = InMemoryEnvironment()
    with pytest.raises(EnvironmentStoreError) as exc:
        store.set_raw("BAD=NAME", "1")
    assert exc.value.code is ErrorCode.INVALID_NAME
    assert exc.value.name == "BAD=NAME"

    with pytest.raises(EnvironmentStoreError) as exc:
        store.set_raw("OK", "a\x00b")
    assert exc.value.code is ErrorCode.INVALID_VALUE

    assert "rejected environment variable name" in caplog.text
    assert store.snapshot() == {}
