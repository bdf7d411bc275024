"""ContentType ORM model. Registered record types (article, news, page...)."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin


class ContentType(TimestampMixin, Base):
    """Content type keyed by its name. Table: content_type.

    show_ui=False types exist but are hidden from the settings screen.
    """

    __tablename__ = "content_type"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    show_ui: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default="true"
    )
