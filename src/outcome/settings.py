# src/outcome/settings.py
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from outcome.constants import CorrelationIds, SETTINGS_ENV_PREFIX


class ResultOptions(BaseModel):
    # ENRICHMENT
    include_correlation_id: bool = True
    include_user_context: bool = False

    # Declared for host integrations, never consulted by the factory.
    include_execution_time: bool = False

    # HOST INTEGRATION
    correlation_id_header: str = Field(
        default=CorrelationIds.DEFAULT_HEADER,
        description="Header a host application reads the correlation id from",
    )

    model_config = ConfigDict(frozen=True)


class ResultSettings(BaseSettings):
    """Process-level option values read from RESULT_* variables and .env."""

    include_correlation_id: bool = True
    include_user_context: bool = False
    include_execution_time: bool = False
    correlation_id_header: str = CorrelationIds.DEFAULT_HEADER

    model_config = SettingsConfigDict(
        env_prefix=SETTINGS_ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_options() -> ResultOptions:
    return ResultOptions(**ResultSettings().model_dump())
