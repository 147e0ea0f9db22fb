"""Member model linking users to projects with a role."""

import enum
import uuid

from sqlalchemy import Enum, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from project_service.database import Base


class ProjectRole(str, enum.Enum):
    """Role of a member within a project."""

    ADMIN = "ADMIN"
    USER = "USER"


class Member(Base):
    """Membership of a user in a project."""

    __tablename__ = "members"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        index=True,
    )
    project_role: Mapped[ProjectRole] = mapped_column(
        Enum(ProjectRole, name="project_role", create_constraint=True),
        nullable=False,
        default=ProjectRole.USER,
    )

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_member_project_user"),
    )

    def __repr__(self) -> str:
        return f"<Member(project_id={self.project_id}, user_id={self.user_id}, role={self.project_role})>"
