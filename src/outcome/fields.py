# src/outcome/fields.py
from datetime import timedelta
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from outcome.result import Result


T = TypeVar("T")
V = TypeVar("V")


class FieldType(str, Enum):
    """Well-known names for auxiliary result fields."""

    WARNING = "Warning"
    DEBUG = "Debug"
    METADATA = "Metadata"
    VALIDATION_ERRORS = "ValidationErrors"
    EXECUTION_TIME = "ExecutionTime"
    SOURCE = "Source"
    CORRELATION_ID = "CorrelationId"
    USER_CONTEXT = "UserContext"
    PAGINATION = "Pagination"
    CACHE = "Cache"


def with_field(result: Result[T], field_type: FieldType, value: Any) -> Result[T]:
    return result.with_field(field_type.value, value)


def get_field(
    result: Result[T],
    field_type: FieldType,
    expected_type: Type[V] = object,
    default: Optional[V] = None,
) -> Optional[V]:
    return result.get_field(field_type.value, expected_type, default)


def with_warning(result: Result[T], warning: str) -> Result[T]:
    return with_field(result, FieldType.WARNING, warning)


def with_correlation_id(result: Result[T], correlation_id: str) -> Result[T]:
    return with_field(result, FieldType.CORRELATION_ID, correlation_id)


def with_execution_time(result: Result[T], execution_time: timedelta) -> Result[T]:
    return with_field(result, FieldType.EXECUTION_TIME, execution_time)
