"""Result type for dist-ci tasks."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, PrivateAttr

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """
    Outcome of a task.

    Use Ok(value) or Err(message) to construct results.
    """

    status: Literal["success", "failure"] = "success"
    error: str | None = None
    warnings: tuple[str, ...] = ()
    _value: T | None = PrivateAttr(default=None)

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """True if the task succeeded."""
        return self.status == "success"

    @property
    def failed(self) -> bool:
        """True if the task failed."""
        return self.status == "failure"

    def value(self) -> T:
        """
        Get the result value.

        Raises RuntimeError if the result is a failure.
        """
        if self.failed:
            raise RuntimeError(f"Attempted to get value from a failed result: {self.error}")
        return self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Get the value, or `default` if the result is a failure or has no value."""
        if self.ok and self._value is not None:
            return self._value
        return default


def Ok(value: T, *, warnings: tuple[str, ...] = ()) -> Result[T]:
    """Create a successful result, optionally carrying non-fatal warnings."""
    result = Result[T](status="success", warnings=warnings)
    object.__setattr__(result, "_value", value)
    return result


def Err(error: str) -> Result[Any]:
    """Create a failed result with an error message."""
    return Result(status="failure", error=error)
