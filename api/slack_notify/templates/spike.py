"""Traffic spike template."""

from slack_notify.schemas.notify import SpikeData
from slack_notify.templates import SiteLabels, SlackMessage, section
from slack_notify.templates.format_value import value_or


def format_spike(site: SiteLabels, data: SpikeData) -> SlackMessage:
    return SlackMessage(
        text=f"🚀 Traffic Spike Detected on {site.name or 'your site'}",
        blocks=[
            section(
                "*🚀 Traffic Spike Detected!*\n\n"
                f"*Site:* {site.name or 'Unknown'}\n"
                f"*Current Visitors:* {value_or(data.current_visitors, '0')}\n"
                f"*Normal Average:* {value_or(data.average_visitors, '0')}\n"
                f"*Increase:* {value_or(data.increase_percent, '0')}%"
            )
        ],
    )
