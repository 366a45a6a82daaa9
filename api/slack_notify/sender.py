"""Outbound webhook delivery."""

import logging
from typing import Optional

import httpx

from slack_notify.config import settings
from slack_notify.errors import DeliveryError
from slack_notify.security import SSRFSafeTransport, validate_webhook_url
from slack_notify.templates import SlackMessage

logger = logging.getLogger(__name__)

_BODY_SNIPPET = 200


class WebhookSender:
    """
    POST a rendered message to a webhook URL, once.

    Any 2xx counts as delivered; the receiver's body is ignored. Pass a
    *transport* to swap out the network (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        if transport is None and not settings.allow_private_webhooks:
            transport = SSRFSafeTransport()
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.webhook_timeout

    async def send(self, webhook_url: str, message: SlackMessage) -> dict:
        err = validate_webhook_url(webhook_url)
        if err:
            logger.error("Refusing to send Slack notification: %s", err)
            raise DeliveryError(err)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.post(
                    webhook_url,
                    json=message.to_dict(),
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Slack webhook request failed: %s", e, exc_info=True)
            raise DeliveryError(f"Slack webhook request failed: {e}") from e

        if not response.is_success:
            body = response.text[:_BODY_SNIPPET]
            logger.error("Slack API error %s: %s", response.status_code, body)
            raise DeliveryError(
                f"Slack API error: {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        return {"success": True}


def get_webhook_sender() -> WebhookSender:
    return WebhookSender()
