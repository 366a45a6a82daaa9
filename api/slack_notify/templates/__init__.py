"""Base types for Slack message templates."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SlackMessage:
    """A Slack incoming-webhook payload."""
    text: str
    blocks: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        body: dict = {"text": self.text}
        if self.blocks:
            body["blocks"] = self.blocks
        return body


@dataclass
class SiteLabels:
    """Display strings for a site, with fallbacks when the row is missing."""
    name: Optional[str] = None
    domain: Optional[str] = None

    @classmethod
    def from_site(cls, site) -> "SiteLabels":
        if site is None:
            return cls()
        return cls(name=site.name or None, domain=site.domain or None)


def mrkdwn(text: str) -> dict:
    return {"type": "mrkdwn", "text": text}


def section(text: str) -> dict:
    return {"type": "section", "text": mrkdwn(text)}
