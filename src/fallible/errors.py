from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Error:
    code: str
    message: str

    def __str__(self) -> str:
        return self.message

    @staticmethod
    def from_exception(exc: Exception, code: str | None = None) -> "Error":
        return Error(code=code or type(exc).__name__, message=str(exc))
