import json
from enum import Enum


class ErrorCode(Enum):
    """Enumeration of error codes reported by gradle-docs."""

    INVALID_ARGUMENT = "DOCS001"
    INVALID_VERSION = "DOCS002"


class ErrorEnumEncoder(json.JSONEncoder):
    """JSON encoder that writes ErrorCode members as their code string."""

    def default(self, o):
        if isinstance(o, ErrorCode):
            return o.value
        return super().default(o)


class DocumentationError(Exception):
    """Base class for errors raised while building documentation links."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class InvalidArgumentError(DocumentationError, ValueError):
    """An identifier passed to the locator is missing or has the wrong type."""

    code = ErrorCode.INVALID_ARGUMENT


class InvalidVersionError(DocumentationError, ValueError):
    """A product version string could not be parsed."""

    code = ErrorCode.INVALID_VERSION
