"""
Domain layer: the environment store port.
"""

from .ports import EnvironmentStore

__all__ = [
    "EnvironmentStore",
]
