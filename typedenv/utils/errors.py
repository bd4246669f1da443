from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to typedenv exceptions."""
    INVALID_NAME = "invalid_name"
    INVALID_VALUE = "invalid_value"
    STORE_FAILURE = "store_failure"

    MISSING_VARIABLE = "missing_variable"
    UNSUPPORTED_TYPE = "unsupported_type"


class TypedEnvError(Exception):
    """Base error for typedenv."""

    code: ErrorCode = ErrorCode.STORE_FAILURE

    def __init__(self, message: str, *, name: str | None = None, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.name = name
        if code is not None:
            self.code = code


class EnvironmentStoreError(TypedEnvError):
    """The environment store rejected a write or unset."""


class MissingVariableError(TypedEnvError, LookupError):
    """A required variable is absent or blank."""

    code = ErrorCode.MISSING_VARIABLE


class UnsupportedTypeError(TypedEnvError, TypeError):
    """Target type is outside the supported set."""

    code = ErrorCode.UNSUPPORTED_TYPE
