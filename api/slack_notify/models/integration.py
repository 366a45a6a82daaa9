"""Slack integration model (owned by the settings UI, read-only here)."""

import uuid
from typing import Optional

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from slack_notify.models.base import Base, TimestampMixin


def default_notify_on() -> dict:
    return {
        "daily_digest": True,
        "weekly_digest": False,
        "goal_completed": True,
        "traffic_spike": True,
    }


class SlackIntegration(Base, TimestampMixin):
    __tablename__ = "slack_integrations"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    site_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("sites.id", ondelete="CASCADE"), nullable=False, index=True
    )
    webhook_url: Mapped[str] = mapped_column(Text, nullable=False)
    channel_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    is_active: Mapped[bool] = mapped_column(default=True)
    notify_on: Mapped[dict] = mapped_column(JSON, nullable=False, default=default_notify_on)
