import sys
from datetime import timedelta
from typing import List

from loguru import logger

from enrichment.context import new_correlation_id
from enrichment.registration import add_result_services
from outcome.fields import (
    FieldType,
    get_field,
    with_correlation_id,
    with_execution_time,
    with_warning,
)
from outcome.result import EmptyResult, Result

MAX_CART_ITEMS = 5


def configure_logging(level: str = "INFO") -> None:
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>",
        level=level,
        backtrace=True,
        diagnose=True,
    )


def process_cart(items: List[str]) -> Result[List[str]]:
    if not items:
        return Result.fail("Cart cannot be empty")

    result = with_correlation_id(Result.ok(list(items)), new_correlation_id())
    result = with_execution_time(result, timedelta(milliseconds=50))

    if len(items) > MAX_CART_ITEMS:
        result = with_warning(result, "Cart contains too many items")

    return result


def basic_examples() -> None:
    logger.info("1. Basic usage")

    success = EmptyResult.ok()
    logger.info(f"Success: {success.is_success}")

    failure = EmptyResult.fail("Something went wrong")
    logger.info(f"Failure: {failure.is_failure}, error: {failure.error_message}")

    user = Result.ok("Ahmet")
    logger.info(f"User: {user.value}")

    number = Result.of(42).unwrap()
    logger.info(f"Wrapped and unwrapped: {number}")


def monadic_examples() -> None:
    logger.info("2. Monadic operations")

    result = Result.ok(10)
    logger.info(f"Map: {result.map(lambda x: f'Number: {x}').value}")

    final = result.bind(
        lambda x: Result.ok(x * 2) if x > 5 else Result.fail("Too small")
    ).map(lambda x: f"Final: {x}")
    logger.info(f"Bind: {final.value}")

    result.on_success(lambda data: logger.info(f"on_success: data={data}")).on_failure(
        lambda error: logger.info(f"on_failure: {error}")
    )


def additional_fields_examples() -> None:
    logger.info("3. Additional fields")

    result = with_warning(Result.ok("test data"), "This is a warning")
    result = with_correlation_id(result, "abc-123")
    result = with_execution_time(result, timedelta(milliseconds=150))
    result = result.with_field("CustomKey", "CustomValue")

    execution_time = get_field(result, FieldType.EXECUTION_TIME, timedelta)
    logger.info(f"Warning: {get_field(result, FieldType.WARNING, str)}")
    logger.info(f"Correlation ID: {get_field(result, FieldType.CORRELATION_ID, str)}")
    logger.info(f"Execution time: {execution_time.total_seconds() * 1000:.0f}ms")
    logger.info(f"Custom field: {result.get_additional_field('CustomKey', str)}")

    logger.info("4. Shopping cart")
    cart = process_cart(["Laptop", "Mouse"])
    cart.on_success(lambda items: logger.info(f"Cart processed: {', '.join(items)}"))
    cart.on_failure(lambda error: logger.error(f"Cart error: {error}"))

    warning = get_field(cart, FieldType.WARNING, str)
    if warning:
        logger.warning(f"Warning: {warning}")


def factory_examples() -> None:
    logger.info("5. Factory with request context")

    services = add_result_services(include_user_context=True)
    with services.scope(user_context="user123") as scope:
        factory = scope.get_factory()
        result = factory.success("payload", fields={"Source": "demo"})
        logger.info(f"Enriched fields: {result.fields}")


if __name__ == "__main__":
    configure_logging()

    basic_examples()
    monadic_examples()
    additional_fields_examples()
    factory_examples()
