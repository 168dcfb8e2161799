import pytest
from loguru import logger

from enrichment.context import ResultContext
from enrichment.registration import Lifetime, ResultServices, add_result_services
from enrichment.result_factory import ResultFactory
from outcome.exceptions import NoActiveScopeError, RegistrationError
from outcome.fields import FieldType
from outcome.settings import ResultOptions


def test_default_lifetime_is_scoped():
    services = add_result_services()
    assert isinstance(services, ResultServices)
    assert services.lifetime is Lifetime.SCOPED

    with services.scope() as scope:
        factory = services.get_factory()
        assert isinstance(factory, ResultFactory)
        assert isinstance(services.get_context(), ResultContext)
        assert scope.get_factory() is factory

    with services.scope():
        assert services.get_factory() is not factory


def test_singleton_lifetime_shares_factory():
    services = add_result_services(Lifetime.SINGLETON)

    with services.scope(correlation_id="first"):
        factory = services.get_factory()
        assert factory.success().get_field(FieldType.CORRELATION_ID) == "first"

    with services.scope(correlation_id="second"):
        assert services.get_factory() is factory
        assert factory.success().get_field(FieldType.CORRELATION_ID) == "second"


def test_transient_lifetime_creates_new_factories():
    services = add_result_services("transient")

    with services.scope():
        first = services.get_factory()
        second = services.get_factory()
        assert first is not second
        assert first.context is second.context


def test_unknown_lifetime():
    with pytest.raises(RegistrationError, match="Unsupported service lifetime"):
        add_result_services("forever")


def test_options_overrides():
    services = add_result_services(
        include_correlation_id=False,
        include_execution_time=True,
        correlation_id_header="Custom-Correlation-ID",
    )

    assert services.options.include_correlation_id is False
    assert services.options.include_execution_time is True
    assert services.options.correlation_id_header == "Custom-Correlation-ID"


def test_explicit_options_are_shared():
    options = ResultOptions(include_user_context=True)
    services = add_result_services(options=options)

    with services.scope():
        assert services.get_factory().options is options


def test_resolving_outside_scope_fails():
    services = add_result_services()

    with pytest.raises(NoActiveScopeError):
        services.get_factory()
    with pytest.raises(NoActiveScopeError):
        services.get_context()


def test_scope_enriches_results():
    services = add_result_services(include_user_context=True)

    with services.scope(correlation_id="req-1", user_context="user123") as scope:
        result = scope.get_factory().failure("Not found", fields={"Source": "db"})

    assert result.fields == {
        "Source": "db",
        "CorrelationId": "req-1",
        "UserContext": "user123",
    }


def test_scope_binds_correlation_id_to_log_records():
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="INFO")
    services = add_result_services()

    try:
        with services.scope(correlation_id="req-42"):
            logger.info("handling request")
    finally:
        logger.remove(sink_id)

    handled = [r for r in records if r["message"] == "handling request"]
    assert handled[0]["extra"]["correlation_id"] == "req-42"


def test_nested_scopes_of_different_registries():
    outer = add_result_services()
    inner = add_result_services()

    with outer.scope(correlation_id="a"):
        with inner.scope(correlation_id="b"):
            assert outer.get_context().correlation_id == "a"
            assert inner.get_context().correlation_id == "b"
            assert outer.get_factory().success().get_field(
                FieldType.CORRELATION_ID
            ) == "a"
        assert outer.get_context().correlation_id == "a"

    with pytest.raises(NoActiveScopeError):
        inner.get_context()


def test_default_options_come_from_environment(monkeypatch):
    monkeypatch.setenv("RESULT_INCLUDE_USER_CONTEXT", "true")

    services = add_result_services()
    assert services.options.include_user_context is True


def test_overrides_apply_on_top_of_explicit_options():
    options = ResultOptions(include_user_context=True)
    services = add_result_services(options=options, include_correlation_id=False)

    assert services.options.include_user_context is True
    assert services.options.include_correlation_id is False
