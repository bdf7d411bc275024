"""Record ORM model. A content item of one content type."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import TimestampMixin


class Record(TimestampMixin, Base):
    """Content record. Table: record.

    Deleting a record deletes its meta rows (ON DELETE CASCADE).
    """

    __tablename__ = "record"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content_type: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("content_type.name", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    slug: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft", index=True
    )
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")

    meta = relationship(
        "RecordMeta",
        back_populates="record",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('publish', 'draft', 'pending', 'private', 'trash')",
            name="record_status_check",
        ),
    )
