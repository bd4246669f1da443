import logging

import pytest

import typedenv
from typedenv import InMemoryEnvironment, TypedEnv


@pytest.fixture
def store():
    return InMemoryEnvironment()


@pytest.fixture
def env(store):
    return TypedEnv(store)


@pytest.fixture
def default_store():
    """Routes the module-level functions to an isolated store for one test."""
    mem = InMemoryEnvironment()
    typedenv.use_store(mem)
    try:
        yield mem
    finally:
        typedenv.use_store(None)


@pytest.fixture(autouse=True)
def _reset_typedenv_logger():
    lib = logging.getLogger("typedenv")
    handlers, level = list(lib.handlers), lib.level
    try:
        yield
    finally:
        lib.handlers = handlers
        lib.setLevel(level)
