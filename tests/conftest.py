import pytest

from enrichment.context import ResultContext
from enrichment.result_factory import ResultFactory
from outcome.settings import ResultOptions, get_options


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep RESULT_* variables of the host out of option defaults."""
    for name in (
        "RESULT_INCLUDE_CORRELATION_ID",
        "RESULT_INCLUDE_USER_CONTEXT",
        "RESULT_INCLUDE_EXECUTION_TIME",
        "RESULT_CORRELATION_ID_HEADER",
    ):
        monkeypatch.delenv(name, raising=False)
    get_options.cache_clear()
    yield
    get_options.cache_clear()


@pytest.fixture
def result_context():
    """Create a context with a fixed correlation id and user."""
    return ResultContext(correlation_id="test-correlation", user_context="user123")


@pytest.fixture
def result_options():
    return ResultOptions(include_correlation_id=True, include_user_context=True)


@pytest.fixture
def result_factory(result_context, result_options):
    return ResultFactory(result_context, result_options)
