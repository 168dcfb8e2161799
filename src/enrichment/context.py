# src/enrichment/context.py
from typing import Any, Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from outcome.constants import CorrelationIds


def new_correlation_id() -> str:
    return uuid4().hex[: CorrelationIds.LENGTH]


class ResultContext(BaseModel):
    """Per-request information the factory attaches to the results it creates."""

    correlation_id: Optional[str] = Field(default_factory=new_correlation_id)
    user_context: Optional[str] = None
    custom_data: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(validate_assignment=True)
