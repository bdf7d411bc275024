"""Initial schema: content types, records, record meta, options

Revision ID: 3f1c2a7b9d40
Revises:
Create Date: 2026-10-17 09:12:41.518204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a7b9d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial schema."""
    # Create content_type table
    op.create_table(
        "content_type",
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("label", sa.String(length=255), nullable=False),
        sa.Column("show_ui", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("name"),
    )

    # Create record table
    op.create_table(
        "record",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("content_type", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "status IN ('publish', 'draft', 'pending', 'private', 'trash')",
            name="record_status_check",
        ),
        sa.ForeignKeyConstraint(
            ["content_type"], ["content_type.name"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_record_content_type"), "record", ["content_type"], unique=False)
    op.create_index(op.f("ix_record_status"), "record", ["status"], unique=False)

    # Create record_meta table
    op.create_table(
        "record_meta",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("record_id", sa.Integer(), nullable=False),
        sa.Column("meta_key", sa.String(length=255), nullable=False),
        sa.Column("meta_value", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["record_id"], ["record.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("record_id", "meta_key", name="uq_record_meta_record_key"),
    )
    op.create_index(op.f("ix_record_meta_record_id"), "record_meta", ["record_id"], unique=False)
    op.create_index(op.f("ix_record_meta_meta_key"), "record_meta", ["meta_key"], unique=False)

    # Create option table
    op.create_table(
        "option",
        sa.Column("name", sa.String(length=191), nullable=False),
        sa.Column("value", sa.JSON(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("name"),
    )


def downgrade() -> None:
    """Drop initial schema."""
    op.drop_table("option")
    op.drop_index(op.f("ix_record_meta_meta_key"), table_name="record_meta")
    op.drop_index(op.f("ix_record_meta_record_id"), table_name="record_meta")
    op.drop_table("record_meta")
    op.drop_index(op.f("ix_record_status"), table_name="record")
    op.drop_index(op.f("ix_record_content_type"), table_name="record")
    op.drop_table("record")
    op.drop_table("content_type")
