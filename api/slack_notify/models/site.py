from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from slack_notify.models.base import Base


class Site(Base):
    __tablename__ = "sites"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    domain: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
