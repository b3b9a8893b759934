"""Result-or-error value returned by the try-variants of parsing.

ParseResult replaces the boolean-plus-out-parameter convention: it always
carries a fully constructed value (the documented default on failure), a
success flag and, on failure, the error that would have been raised.

Example:
    >>> ok, length = Length.try_parse("5 m")
    >>> result = Length.try_parse("5 parsecs")
    >>> bool(result), result.value, type(result.error).__name__
    (False, Length(0.0, LengthUnit.METER), 'UnrecognizedUnitError')
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import MeasureKitError

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Tagged success/failure outcome of a try-parse call.

    Attributes:
        success: True when parsing succeeded.
        value: Parsed value, or the documented default on failure.
        error: The error that caused the failure, None on success.
    """

    success: bool
    value: T
    error: MeasureKitError | None = None

    @classmethod
    def ok(cls, value: T) -> ParseResult[T]:
        return cls(True, value)

    @classmethod
    def fail(cls, default: T, error: MeasureKitError | None = None) -> ParseResult[T]:
        return cls(False, default, error)

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator[Any]:
        yield self.success
        yield self.value
