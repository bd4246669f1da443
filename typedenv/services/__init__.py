from .environment import InMemoryEnvironment, OsEnvironment, load_env_file
from .typed_env import TypedEnv

__all__ = [
    "TypedEnv",
    "OsEnvironment",
    "InMemoryEnvironment",
    "load_env_file",
]
