# src/outcome/result.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Optional,
    Type,
    TypeVar,
    Union,
    get_origin,
)

from loguru import logger

from outcome.constants import DEFAULT_ERROR_MESSAGE, FailurePrefixes
from outcome.exceptions import InvalidResultError


T = TypeVar("T")
R = TypeVar("R")
V = TypeVar("V")

FieldKey = Union[str, Enum]


def _field_name(key: FieldKey) -> str:
    return key.value if isinstance(key, Enum) else key


def _copy_fields(fields: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not fields:
        return None
    return {_field_name(key): value for key, value in fields.items()}


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    A result object that represents the outcome of an operation.

    The class implements the Result pattern to handle success and error cases
    without requiring exception handling for expected error conditions. Besides the
    optional value, a result carries a mapping of auxiliary fields (warnings,
    correlation ids, timings, ...) that is None when nothing was attached.

    Results are immutable: with_field, map and bind always return a new instance.
    They compare by value but are unhashable, since fields is a dict.
    """

    success: bool
    value: Optional[T] = None
    error: Optional[Exception] = None
    error_message: Optional[str] = None
    fields: Optional[Dict[str, Any]] = None

    __hash__ = None

    def __post_init__(self):
        if self.success and (self.error_message is not None or self.error is not None):
            raise InvalidResultError("A successful result cannot carry an error.")

    @classmethod
    def ok(
        cls, value: Optional[T] = None, fields: Optional[Dict[str, Any]] = None
    ) -> "Result[T]":
        return cls(success=True, value=value, fields=_copy_fields(fields))

    @classmethod
    def fail(
        cls,
        error_message: Optional[str] = None,
        fields: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> "Result[T]":
        if error_message is None:
            error_message = str(error) if error else DEFAULT_ERROR_MESSAGE
        return cls(
            success=False,
            error=error,
            error_message=error_message,
            fields=_copy_fields(fields),
        )

    @classmethod
    def of(cls, value: T) -> "Result[T]":
        """Wrap a plain value as a successful result."""
        return cls.ok(value)

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def is_failure(self) -> bool:
        return not self.success

    @property
    def has_value(self) -> bool:
        # Falsy values such as 0 or "" still count as present.
        return self.value is not None

    def unwrap(self) -> Optional[T]:
        """Return the value of a successful result, or None for a failure."""
        return self.value if self.success else None

    def get_field(
        self,
        key: FieldKey,
        expected_type: Type[V] = object,
        default: Optional[V] = None,
    ) -> Optional[V]:
        """
        Return the field stored under key if it is an instance of expected_type.

        A missing key or a value of another type is not an error; default is returned.
        """
        if not self.fields:
            return default
        value = self.fields.get(_field_name(key))
        if value is None:
            return default
        # List[int] and friends are checked against their origin, List -> list.
        try:
            matches = isinstance(value, get_origin(expected_type) or expected_type)
        except TypeError:
            return default
        return value if matches else default

    get_additional_field = get_field

    def with_field(self, key: FieldKey, value: Any) -> "Result[T]":
        fields = dict(self.fields) if self.fields else {}
        fields[_field_name(key)] = value
        return replace(self, fields=fields)

    def map(self, mapper: Callable[[Optional[T]], R]) -> "Result[R]":
        """
        Transform the value of a successful result.

        Failures are passed through untouched and the mapper is not called. An
        exception raised by the mapper is turned into a failure.
        """
        if self.is_failure:
            return Result(
                success=False,
                error=self.error,
                error_message=self.error_message,
                fields=self.fields,
            )

        try:
            mapped = mapper(self.value)
        except Exception as e:
            logger.warning(f"Mapping of result value raised {type(e).__name__}: {e}")
            return Result.fail(
                f"{FailurePrefixes.MAPPING}{e}", fields=self.fields, error=e
            )

        return Result(success=True, value=mapped, fields=self.fields)

    def bind(self, binder: Callable[[Optional[T]], "Result[R]"]) -> "Result[R]":
        """
        Chain an operation that itself returns a Result.

        The binder's result is returned as is; fields of this result are not merged in.
        """
        if self.is_failure:
            return Result(
                success=False,
                error=self.error,
                error_message=self.error_message,
                fields=self.fields,
            )

        try:
            return binder(self.value)
        except Exception as e:
            logger.warning(f"Binding of result value raised {type(e).__name__}: {e}")
            return Result.fail(
                f"{FailurePrefixes.BINDING}{e}", fields=self.fields, error=e
            )

    def on_success(self, action: Callable[[Optional[T]], Any]) -> "Result[T]":
        """
        Call action with the value if the result is successful.

        The action always takes one argument; for results without a value it
        receives None, so a zero-argument callable is not supported.
        """
        if self.success:
            action(self.value)
        return self

    def on_success_with_value(self, action: Callable[[T], Any]) -> "Result[T]":
        if self.success and self.has_value:
            action(self.value)
        return self

    def on_failure(self, action: Callable[[Optional[str]], Any]) -> "Result[T]":
        if self.is_failure:
            action(self.error_message)
        return self

    def __bool__(self) -> bool:
        return self.success


EmptyResult = Result[None]
