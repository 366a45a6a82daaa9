"""Slack notification dispatcher."""

import logging

from slack_notify.errors import NotFoundError, NotifyError, ValidationError
from slack_notify.schemas.notify import NotifyRequest
from slack_notify.sender import WebhookSender
from slack_notify.store import IntegrationStore
from slack_notify.templates.renderer import render_message

logger = logging.getLogger(__name__)


async def dispatch_notification(
    request: NotifyRequest,
    store: IntegrationStore,
    sender: WebhookSender,
) -> dict:
    """
    Render and deliver one notification for ``request.site_id``.

    The active integration must be resolved before anything is rendered or
    sent. A missing site row only downgrades the message to fallback labels.

    Returns:
        The sender's result, ``{"success": True}``.

    Raises:
        ValidationError: missing site id or unknown notification type.
        NotFoundError: the site has no active integration.
        UpstreamError: the store could not be read.
        DeliveryError: the webhook was unreachable or answered non-2xx.
    """
    site_id = request.site_id
    if not site_id:
        raise ValidationError("Site ID is required")

    try:
        integration = await store.get_active_integration(site_id)
        if integration is None:
            raise NotFoundError("No active Slack integration found for this site")

        site = await store.get_site(site_id)
        if site is None:
            logger.info("Site %s not found, using fallback labels", site_id)

        message = render_message(request, site)
        result = await sender.send(integration.webhook_url, message)
    except NotifyError as e:
        logger.error("Slack notification for site %s failed (%s): %s", site_id, e.kind, e.message)
        raise

    logger.info(
        "Slack notification sent for site %s (%s)",
        site_id,
        "test" if request.test else request.type,
    )
    return result
