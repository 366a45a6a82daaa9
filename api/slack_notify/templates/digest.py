"""Daily digest template."""

from slack_notify.schemas.notify import DigestData
from slack_notify.templates import SiteLabels, SlackMessage, mrkdwn, section
from slack_notify.templates.format_value import value_or


def format_digest(site: SiteLabels, data: DigestData) -> SlackMessage:
    """
    Header, site section and a four-field metrics section.

    Missing metrics render as ``0`` (``0s`` for the duration).
    """
    fields = [
        ("Visitors", value_or(data.visitors, "0")),
        ("Page Views", value_or(data.pageviews, "0")),
        ("Bounce Rate", f"{value_or(data.bounce_rate, '0')}%"),
        ("Avg. Duration", value_or(data.avg_duration, "0s")),
    ]
    return SlackMessage(
        text=f"📊 Daily Analytics Digest for {site.name or 'your site'}",
        blocks=[
            {
                "type": "header",
                "text": {"type": "plain_text", "text": "📊 Daily Analytics Digest"},
            },
            section(f"*{site.name or 'Unknown'}*\n{site.domain or 'No domain set'}"),
            {
                "type": "section",
                "fields": [mrkdwn(f"*{label}*\n{value}") for label, value in fields],
            },
        ],
    )
