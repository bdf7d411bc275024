"""Option ORM model. Named site-wide settings blobs."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin


class Option(TimestampMixin, Base):
    """Named JSON value. Table: option."""

    __tablename__ = "option"

    name: Mapped[str] = mapped_column(String(191), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
