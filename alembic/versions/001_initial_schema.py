"""Initial schema - role, role_permission, subject, permission_override.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("name", sa.String(100), primary_key=True),
        sa.Column("position", sa.Integer(), sa.Identity(), nullable=False),
    )

    op.create_table(
        "role_permission",
        sa.Column("role_name", sa.String(100), sa.ForeignKey("role.name", ondelete="CASCADE"), primary_key=True),
        sa.Column("permission", sa.String(50), primary_key=True),
    )

    op.create_table(
        "subject",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("role_name", sa.String(100), sa.ForeignKey("role.name"), nullable=False),
    )
    op.create_index("ix_subject_role_name", "subject", ["role_name"])

    # Empty array = explicit "no permissions"; missing row = role defaults.
    op.create_table(
        "permission_override",
        sa.Column("subject_id", sa.String(255), sa.ForeignKey("subject.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("permissions", postgresql.ARRAY(sa.Text()), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("permission_override")
    op.drop_index("ix_subject_role_name", table_name="subject")
    op.drop_table("subject")
    op.drop_table("role_permission")
    op.drop_table("role")
