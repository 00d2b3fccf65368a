"""Structured errors raised by the syntax compiler and parser."""

from typing import Any

PARSE_ERROR = "PARSE_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


class SyntaxParserError(Exception):
    """Base error carrying a kind and a structured detail payload."""

    def __init__(self, kind: str, detail: dict[str, Any]):
        self.kind = kind
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        parts = ", ".join(f"{key}={value!r}" for key, value in self.detail.items())
        return f"{self.kind}: {parts}"

    def to_payload(self) -> dict[str, Any]:
        return {"kind": self.kind, "detail": dict(self.detail)}


class ParseError(SyntaxParserError):
    """User-facing failure to apply a signature to message tokens."""

    def __init__(self, index: int, **detail: Any):
        super().__init__(PARSE_ERROR, {"index": index, **detail})

    @property
    def index(self) -> int:
        return self.detail["index"]

    @property
    def token(self) -> str | None:
        return self.detail.get("token")

    @property
    def descriptor(self) -> Any:
        return self.detail.get("descriptor")

    @property
    def reason(self) -> str:
        if "reason" in self.detail:
            return self.detail["reason"]
        if "descriptor" in self.detail:
            return "missing argument"
        return "too many arguments"


class CompilationError(SyntaxParserError):
    """Developer-facing failure to compile a signature string."""

    def __init__(self, message: str, **detail: Any):
        super().__init__(INTERNAL_ERROR, {"message": message, **detail})

    @property
    def message(self) -> str:
        return self.detail["message"]


InternalError = CompilationError


class UnsupportedFeatureError(CompilationError, NotImplementedError):
    """Raised by extension points that are declared but not implemented."""


class CommandTreeError(ValueError):
    """Raised when a group registration would make the command tree cyclic."""
