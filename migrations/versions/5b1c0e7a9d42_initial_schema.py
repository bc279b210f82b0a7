"""initial schema

Revision ID: 5b1c0e7a9d42
Revises:
Create Date: 2026-10-19 09:12:44.381022

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b1c0e7a9d42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

FIRST_SERIAL = 1002


def _tile_payload_columns() -> list[sa.Column]:
    return [
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("embed_html", sa.Text(), nullable=True),
        sa.Column("external_id", sa.String(length=255), nullable=True),
    ]


def _positioned_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _serial_scope_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "serial_number",
            sa.Integer(),
            sa.ForeignKey("users.serial_number", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "room_id",
            sa.String(length=36),
            sa.ForeignKey("rooms.id", ondelete="SET NULL"),
            nullable=True,
        ),
    ]


def upgrade() -> None:
    """Create identity, page, tile and room tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("serial_number", sa.Integer(), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("serial_number"),
    )
    serial_counter = op.create_table(
        "serial_counter",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("last_serial", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.bulk_insert(serial_counter, [{"id": 1, "last_serial": FIRST_SERIAL - 1}])

    op.create_table(
        "footprints",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column(
            "user_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("icon", sa.String(length=10), nullable=True),
        sa.Column("display_name", sa.String(length=255), nullable=True),
        sa.Column("handle", sa.String(length=100), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("theme", sa.String(length=50), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False),
        sa.Column("is_primary", sa.Boolean(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index("ix_footprints_user_id", "footprints", ["user_id"])

    op.create_table(
        "rooms",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column(
            "serial_number",
            sa.Integer(),
            sa.ForeignKey("users.serial_number", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("hidden", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_rooms_serial_number", "rooms", ["serial_number"])

    op.create_table(
        "content",
        *_positioned_columns(),
        sa.Column(
            "footprint_id",
            sa.String(length=36),
            sa.ForeignKey("footprints.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_tile_payload_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_content_footprint_id", "content", ["footprint_id"])

    op.create_table(
        "links",
        *_positioned_columns(),
        *_serial_scope_columns(),
        *_tile_payload_columns(),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_links_serial_number", "links", ["serial_number"])

    op.create_table(
        "library",
        *_positioned_columns(),
        *_serial_scope_columns(),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_library_serial_number", "library", ["serial_number"])


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_index("ix_library_serial_number", table_name="library")
    op.drop_table("library")
    op.drop_index("ix_links_serial_number", table_name="links")
    op.drop_table("links")
    op.drop_index("ix_content_footprint_id", table_name="content")
    op.drop_table("content")
    op.drop_index("ix_rooms_serial_number", table_name="rooms")
    op.drop_table("rooms")
    op.drop_index("ix_footprints_user_id", table_name="footprints")
    op.drop_table("footprints")
    op.drop_table("serial_counter")
    op.drop_table("users")
