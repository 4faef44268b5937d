"""Error codes and the exception raised throughout the package."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes describing what went wrong."""

    SUCCESS = 0
    NULL_POINTER = -1
    LIBCONFIG = -2
    UNKNOWN_TYPE = -3
    ITEM_NOT_FOUND = -4
    INVALID_RANGE = -5
    SYSTEM = -6
    SDL = -7
    NOT_IMPLEMENTED = -8
    DIVIDE_ZERO = -9

    @property
    def description(self) -> str:
        """A short human-readable description of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "success",
    ErrorCode.NULL_POINTER: "missing object",
    ErrorCode.LIBCONFIG: "configuration error",
    ErrorCode.UNKNOWN_TYPE: "unknown type",
    ErrorCode.ITEM_NOT_FOUND: "item not found",
    ErrorCode.INVALID_RANGE: "value out of range",
    ErrorCode.SYSTEM: "system error",
    ErrorCode.SDL: "graphics backend error",
    ErrorCode.NOT_IMPLEMENTED: "operation not supported",
    ErrorCode.DIVIDE_ZERO: "division by zero",
}


class StartError(Exception):
    """Raised when an operation fails; carries an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.message = message if message is not None else self.code.description
        super().__init__(self.message)