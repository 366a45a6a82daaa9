"""Goal completed template."""

from slack_notify.schemas.notify import GoalData
from slack_notify.templates import SiteLabels, SlackMessage, section
from slack_notify.templates.format_value import verbatim_or


def format_goal(site: SiteLabels, data: GoalData) -> SlackMessage:
    goal_name = verbatim_or(data.goal_name, "Unnamed goal")
    conversions = verbatim_or(data.conversions, "0")
    return SlackMessage(
        text=f"🎯 Goal Achieved: {goal_name}",
        blocks=[
            section(
                "*🎯 Goal Achieved!*\n\n"
                f"*Goal:* {goal_name}\n"
                f"*Conversions:* {conversions}\n"
                f"*Site:* {site.name or 'Unknown'}"
            )
        ],
    )
