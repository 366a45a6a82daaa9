from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from slack_notify.auth import require_function_key
from slack_notify.database import get_db
from slack_notify.dispatcher import dispatch_notification
from slack_notify.schemas.notify import ErrorResponse, NotifyRequest, NotifyResponse
from slack_notify.sender import WebhookSender, get_webhook_sender
from slack_notify.store import IntegrationStore

router = APIRouter(tags=["notify"])


@router.post(
    "/slack-notify",
    response_model=NotifyResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Send a Slack notification for a site",
)
async def slack_notify(
    body: NotifyRequest,
    db: AsyncSession = Depends(get_db),
    sender: WebhookSender = Depends(get_webhook_sender),
    _key=Depends(require_function_key),
):
    return await dispatch_notification(body, IntegrationStore(db), sender)
