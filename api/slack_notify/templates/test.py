"""Test notification template."""

from datetime import datetime, timezone
from typing import Optional

from slack_notify.templates import SiteLabels, SlackMessage, mrkdwn, section


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_test(site: SiteLabels, now: Optional[datetime] = None) -> SlackMessage:
    body = (
        "*🧪 Test Notification*\n\n"
        "This is a test message from your analytics dashboard.\n\n"
        f"*Site:* {site.name or 'Unknown'}\n"
        f"*Domain:* {site.domain or 'Not set'}"
    )
    return SlackMessage(
        text=f"🧪 Test notification from {site.name or 'your site'}",
        blocks=[
            section(body),
            {"type": "context", "elements": [mrkdwn(f"Sent at {iso_timestamp(now)}")]},
        ],
    )
