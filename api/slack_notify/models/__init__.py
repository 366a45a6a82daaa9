from slack_notify.models.base import Base
from slack_notify.models.integration import SlackIntegration
from slack_notify.models.site import Site

__all__ = ["Base", "SlackIntegration", "Site"]
