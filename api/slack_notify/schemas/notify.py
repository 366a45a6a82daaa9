"""Pydantic schemas for the notify endpoint and per-kind payload data."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class NotifyRequest(BaseModel):
    site_id: Optional[str] = Field(None, alias="siteId", description="Site to notify for")
    test: Optional[bool] = Field(None, description="Send the fixed test message")
    type: Optional[str] = Field(
        None, description="Notification kind: daily_digest, goal_completed, traffic_spike"
    )
    data: Optional[dict[str, Any]] = Field(None, description="Kind-specific template values")

    model_config = {"populate_by_name": True}


class NotifyResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str


# ---------------------------------------------------------------------------
# Template data, one model per notification kind. Values are display-only and
# are not type-checked; unknown keys are ignored.
# ---------------------------------------------------------------------------

class _TemplateData(BaseModel):
    model_config = {"populate_by_name": True, "extra": "ignore"}


class DigestData(_TemplateData):
    visitors: Any = None
    pageviews: Any = None
    bounce_rate: Any = Field(None, alias="bounceRate")
    avg_duration: Any = Field(None, alias="avgDuration")


class GoalData(_TemplateData):
    goal_name: Any = Field(None, alias="goalName")
    conversions: Any = None


class SpikeData(_TemplateData):
    current_visitors: Any = Field(None, alias="currentVisitors")
    average_visitors: Any = Field(None, alias="averageVisitors")
    increase_percent: Any = Field(None, alias="increasePercent")
