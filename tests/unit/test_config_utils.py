from datetime import timedelta

import pytest

from typedenv import EnvConfig, ErrorCode, InMemoryEnvironment, MissingVariableError


def test_env_config_parsers():
    store = InMemoryEnvironment()
    store.set_raw("X_STR", " hello ")
    store.set_raw("X_BOOL_T", "true")
    store.set_raw("X_BOOL_F", "0")
    store.set_raw("X_BOOL_BAD", "perhaps")
    store.set_raw("X_INT", "42")
    store.set_raw("X_INT_BAD", "4x2")
    store.set_raw("X_FLOAT", "3.14")
    store.set_raw("X_WAIT", "90s")
    store.set_raw("X_LIST", "a, b,,c ")

    cfg = EnvConfig(store)

    assert cfg.get_str("X_STR") == "hello"
    assert cfg.get_str("X_STR_MISSING") is None
    assert cfg.get_str("X_STR_MISSING", "fallback") == "fallback"

    assert cfg.get_bool("X_BOOL_T") is True
    assert cfg.get_bool("X_BOOL_F", default=True) is False
    assert cfg.get_bool("X_BOOL_BAD", default=True) is True
    assert cfg.get_bool("X_BOOL_UNKNOWN", default=True) is True

    assert cfg.get_int("X_INT") == 42
    assert cfg.get_int("X_INT_BAD", default=7) == 7

    assert cfg.get_float("X_FLOAT") == 3.14
    assert cfg.get_float("X_FLOAT_BAD", default=2.71) == 2.71

    assert cfg.get_duration("X_WAIT") == timedelta(seconds=90)
    assert cfg.get_duration("X_WAIT_MISSING", timedelta(seconds=1)) == timedelta(seconds=1)

    assert cfg.get_list("X_LIST") == ["a", "b", "c"]
    assert cfg.get_list("X_LIST_MISSING") == []
    assert cfg.get_list("X_LIST_MISSING", ["x"]) == ["x"]


def test_get_str_required():
    store = InMemoryEnvironment()
    cfg = EnvConfig(store)
    with pytest.raises(MissingVariableError) as exc:
        cfg.get_str_required("MISSING_ENV_VAR_FOR_TEST")
    assert exc.value.code is ErrorCode.MISSING_VARIABLE
    assert exc.value.name == "MISSING_ENV_VAR_FOR_TEST"

    store.set_raw("BLANK", "   ")
    with pytest.raises(LookupError):
        cfg.get_str_required("BLANK")

    store.set_raw("NEEDED", "ok")
    assert cfg.get_str_required("NEEDED") == "ok"


def test_env_config_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("TYPEDENV_TEST_PORT", "9000")
    assert EnvConfig().get_int("TYPEDENV_TEST_PORT") == 9000
