from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, cast

from .errors import Error

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Result(Generic[T, E]):
    """Either a success holding ``value`` or a failure holding ``error``.

    ``ok`` is the variant tag and the only thing that decides which one a
    result is: ``Result.failure(None)`` is still a failure. The payload slot
    of a failure is ``None``, so ``val()`` returns ``None`` there; use
    ``val_or`` when a typed default is needed.
    """

    ok: bool
    value: T | None
    error: E | None

    def __post_init__(self) -> None:
        if self.ok and self.error is not None:
            raise ValueError("a success cannot carry an error")
        if not self.ok and self.value is not None:
            raise ValueError("a failure cannot carry a value")

    @staticmethod
    def success(value: T) -> "Result[T, E]":
        return Result(True, value, None)

    @staticmethod
    def failure(error: E) -> "Result[T, E]":
        return Result(False, None, error)

    @staticmethod
    def wrap(value: T, error: E | None) -> "Result[T, E]":
        """Adapt a ``(value, error)`` pair; a present error wins."""
        if error is not None:
            return Result.failure(error)
        return Result.success(value)

    @staticmethod
    def attempt(fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Result[T, Error]":
        """Call ``fn`` and capture a raised ``Exception`` as a failure."""
        try:
            value: T = fn(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001
            return Result.failure(Error.from_exception(exc))
        return Result.success(value)

    def val(self) -> T | None:
        if not self.ok:
            return None
        return self.value

    def val_or(self, default: T) -> T:
        if not self.ok:
            return default
        return cast(T, self.value)

    def err(self) -> E | None:
        if self.ok:
            return None
        return self.error

    def unwrap(self) -> tuple[T | None, E | None]:
        return self.val(), self.err()

    def fallback(self, value: T) -> "Result[T, E]":
        if self.ok:
            return self
        return Result.success(value)

    def ensure(self, predicate: Callable[[T], bool], error: E) -> "Result[T, E]":
        if not self.ok:
            return self
        if predicate(self.value):  # type: ignore[arg-type]
            return self
        return Result.failure(error)

    def tap(self, on_success: Callable[[T], object], on_error: Callable[[E], object]) -> "Result[T, E]":
        if self.ok:
            on_success(self.value)  # type: ignore[arg-type]
        else:
            on_error(self.error)  # type: ignore[arg-type]
        return self

    def pipe(self, fn: Callable[[T], tuple[U, E | None]]) -> "Result[U, E]":
        """Chain a step that reports failure through a ``(value, error)`` pair."""
        if not self.ok:
            return Result.failure(self.error)  # type: ignore[arg-type]
        value, error = fn(self.value)  # type: ignore[arg-type]
        return Result.wrap(value, error)

    def bind(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        if not self.ok:
            return Result.failure(self.error)  # type: ignore[arg-type]
        return fn(self.value)  # type: ignore[arg-type]

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        if not self.ok:
            return Result.failure(self.error)  # type: ignore[arg-type]
        return Result.success(fn(self.value))  # type: ignore[arg-type]

    def map_err(self, fn: Callable[[E], F]) -> "Result[T, F]":
        if self.ok:
            return self  # type: ignore[return-value]
        return Result.failure(fn(self.error))  # type: ignore[arg-type]

    def fold(self, on_success: Callable[[T], U], on_error: Callable[[E], U]) -> U:
        if self.ok:
            return on_success(self.value)  # type: ignore[arg-type]
        return on_error(self.error)  # type: ignore[arg-type]


# Free-function forms of the type-changing combinators.


def pipe(result: Result[T, E], fn: Callable[[T], tuple[U, E | None]]) -> Result[U, E]:
    return result.pipe(fn)


def map_result(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    return result.map(fn)


def fold(result: Result[T, E], on_success: Callable[[T], U], on_error: Callable[[E], U]) -> U:
    return result.fold(on_success, on_error)
