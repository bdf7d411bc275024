"""RecordMeta ORM model. Per-record key/value rows; attachment lists live under '_ref_<key>'."""

from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base


class RecordMeta(Base):
    """One meta value of one record. Table: record_meta.

    meta_value holds JSON text. Unique (record_id, meta_key).
    """

    __tablename__ = "record_meta"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    record_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("record.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    meta_key: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    meta_value: Mapped[str | None] = mapped_column(Text, nullable=True)

    record = relationship("Record", back_populates="meta")

    __table_args__ = (
        UniqueConstraint("record_id", "meta_key", name="uq_record_meta_record_key"),
    )
