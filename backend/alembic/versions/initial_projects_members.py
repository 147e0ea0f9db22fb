"""initial_projects_members

Revision ID: initial_projects_members
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "initial_projects_members"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create projects and members tables."""
    op.create_table(
        "projects",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("creator_id", postgresql.UUID(as_uuid=True), nullable=True, comment="User that created the project"),
        sa.Column("create_time", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )

    project_role_enum = postgresql.ENUM(
        "ADMIN",
        "USER",
        name="project_role",
        create_type=True,
    )
    project_role_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "members",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("project_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("project_role", postgresql.ENUM(name="project_role", create_type=False), nullable=False),
        sa.UniqueConstraint("project_id", "user_id", name="uq_member_project_user"),
    )

    op.create_index("ix_members_project_id", "members", ["project_id"])
    op.create_index("ix_members_user_id", "members", ["user_id"])


def downgrade() -> None:
    """Drop members and projects tables."""
    op.drop_table("members")
    op.drop_table("projects")
    op.execute("DROP TYPE IF EXISTS project_role")
