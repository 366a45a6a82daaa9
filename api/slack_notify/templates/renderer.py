"""Pick and fill the message template for a notify request."""

from datetime import datetime
from typing import Optional

from slack_notify.errors import ValidationError
from slack_notify.schemas.notify import DigestData, GoalData, NotifyRequest, SpikeData
from slack_notify.templates import SiteLabels, SlackMessage
from slack_notify.templates.digest import format_digest
from slack_notify.templates.goal import format_goal
from slack_notify.templates.spike import format_spike
from slack_notify.templates.test import format_test

# Notification kind -> (data schema, formatter)
TEMPLATES = {
    "daily_digest": (DigestData, format_digest),
    "goal_completed": (GoalData, format_goal),
    "traffic_spike": (SpikeData, format_spike),
}


def render_message(
    request: NotifyRequest,
    site=None,
    now: Optional[datetime] = None,
) -> SlackMessage:
    """
    Build the Slack message for *request*.

    A test request wins over any ``type``. *site* may be ``None`` when the
    site row is missing; templates fall back to generic labels.

    Raises:
        ValidationError: the request is not a test and ``type`` is unknown.
    """
    labels = SiteLabels.from_site(site)

    if request.test:
        return format_test(labels, now)

    template = TEMPLATES.get(request.type or "")
    if template is None:
        raise ValidationError("Unknown notification type")

    schema, formatter = template
    return formatter(labels, schema.model_validate(request.data or {}))
