# src/enrichment/result_factory.py
from typing import Any, Callable, Dict, Optional, TypeVar, Union

from loguru import logger

from enrichment.context import ResultContext
from outcome.fields import FieldType
from outcome.result import Result
from outcome.settings import ResultOptions


T = TypeVar("T")

ContextSource = Union[ResultContext, Callable[[], ResultContext]]


class ResultFactory:
    """
    Creates results enriched with the correlation id and user context of the
    current request.

    The context may be given directly or as a callable returning the current one;
    a callable is read again on every call.
    """

    def __init__(self, context: ContextSource, options: Optional[ResultOptions] = None):
        self._context = context
        self.options = options or ResultOptions()

    @property
    def context(self) -> ResultContext:
        if isinstance(self._context, ResultContext):
            return self._context
        return self._context()

    def success(
        self, value: Optional[T] = None, fields: Optional[Dict[str, Any]] = None
    ) -> Result[T]:
        return Result.ok(value, fields=self._enrich(fields))

    def failure(
        self, error_message: str, fields: Optional[Dict[str, Any]] = None
    ) -> Result[T]:
        return Result.fail(error_message, fields=self._enrich(fields))

    def _enrich(self, fields: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        enriched = dict(fields) if fields else {}
        context = self.context

        if self.options.include_correlation_id and context.correlation_id:
            enriched[FieldType.CORRELATION_ID.value] = context.correlation_id

        if self.options.include_user_context and context.user_context:
            enriched[FieldType.USER_CONTEXT.value] = context.user_context

        logger.debug(f"Enriched result fields: {sorted(enriched)}")
        return enriched or None
