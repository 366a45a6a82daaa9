"""Read-only access to the integration and site tables."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from slack_notify.errors import UpstreamError
from slack_notify.models import SlackIntegration, Site

logger = logging.getLogger(__name__)


class IntegrationStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_active_integration(self, site_id: str) -> Optional[SlackIntegration]:
        """Return the site's active integration, or None.

        More than one active row is treated as a store error.
        """
        try:
            result = await self.db.execute(
                select(SlackIntegration).where(
                    SlackIntegration.site_id == site_id,
                    SlackIntegration.is_active.is_(True),
                )
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error fetching integration for site %s: %s", site_id, e)
            raise UpstreamError("Failed to fetch Slack integration") from e

    async def get_site(self, site_id: str) -> Optional[Site]:
        try:
            result = await self.db.execute(select(Site).where(Site.id == site_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Error fetching site %s: %s", site_id, e)
            raise UpstreamError("Failed to fetch site") from e
