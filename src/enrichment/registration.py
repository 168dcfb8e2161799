# src/enrichment/registration.py
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from typing import Iterator, Optional, Union

from loguru import logger

from enrichment.context import ResultContext
from enrichment.result_factory import ResultFactory
from outcome.exceptions import NoActiveScopeError, UnknownLifetimeError
from outcome.settings import ResultOptions, get_options


class Lifetime(str, Enum):
    """How often a new ResultFactory is created."""

    SCOPED = "scoped"
    SINGLETON = "singleton"
    TRANSIENT = "transient"


class ServiceScope:
    """A single request: owns one context and, for scoped lifetime, one factory."""

    def __init__(self, services: "ResultServices", context: ResultContext):
        self.services = services
        self.context = context
        self.factory: Optional[ResultFactory] = None

    def get_factory(self) -> ResultFactory:
        return self.services.resolve_factory(self)


class ResultServices:
    def __init__(self, options: ResultOptions, lifetime: Lifetime = Lifetime.SCOPED):
        self.options = options
        self.lifetime = lifetime
        self._shared_factory: Optional[ResultFactory] = None
        # One variable per registry so scopes of different registries can nest.
        self._active_scope: ContextVar[Optional[ServiceScope]] = ContextVar(
            f"result_services_scope_{id(self)}", default=None
        )

    @contextmanager
    def scope(
        self,
        correlation_id: Optional[str] = None,
        user_context: Optional[str] = None,
    ) -> Iterator[ServiceScope]:
        context = ResultContext(user_context=user_context)
        if correlation_id:
            context.correlation_id = correlation_id

        scope = ServiceScope(self, context)
        token = self._active_scope.set(scope)
        try:
            with logger.contextualize(correlation_id=context.correlation_id):
                yield scope
        finally:
            self._active_scope.reset(token)

    def current_scope(self) -> ServiceScope:
        scope = self._active_scope.get()
        if scope is None:
            raise NoActiveScopeError("No result services scope is active.")
        return scope

    def get_context(self) -> ResultContext:
        return self.current_scope().context

    def get_factory(self) -> ResultFactory:
        return self.resolve_factory(self.current_scope())

    def resolve_factory(self, scope: ServiceScope) -> ResultFactory:
        if self.lifetime is Lifetime.SINGLETON:
            if self._shared_factory is None:
                self._shared_factory = ResultFactory(self.get_context, self.options)
            return self._shared_factory

        if self.lifetime is Lifetime.TRANSIENT:
            return ResultFactory(scope.context, self.options)

        if scope.factory is None:
            scope.factory = ResultFactory(scope.context, self.options)
        return scope.factory


def add_result_services(
    lifetime: Union[Lifetime, str] = Lifetime.SCOPED,
    options: Optional[ResultOptions] = None,
    **overrides,
) -> ResultServices:
    """
    Build the services a host application needs to create enriched results.

    Either pass a ready ResultOptions or keyword overrides for its fields; both
    resolve to the single options instance shared by every factory. Without
    explicit options the process defaults from get_options() are used.
    """
    try:
        lifetime = Lifetime(lifetime)
    except ValueError:
        raise UnknownLifetimeError(
            f"Unsupported service lifetime: {lifetime!r}"
        ) from None

    if options is None:
        options = get_options()
    if overrides:
        options = ResultOptions(**{**options.model_dump(), **overrides})

    logger.info(f"Result services registered with {lifetime.value} factory lifetime")
    return ResultServices(options, lifetime)
