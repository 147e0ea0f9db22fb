"""Member API routes for a single project."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from project_service.dependencies import get_member_service
from project_service.models.member import ProjectRole
from project_service.schemas.member import MemberCreate, MemberResponse, MemberUpdate
from project_service.services import (
    MemberConflictError,
    MemberNotFoundError,
    MemberService,
    ProjectNotFoundError,
)

router = APIRouter(prefix="/projects/{project_id}/members", tags=["members"])


@router.get("", response_model=list[MemberResponse])
async def get_members(
    project_id: uuid.UUID,
    service: MemberService = Depends(get_member_service),
) -> list[MemberResponse]:
    """List all members of a project."""
    return [MemberResponse.model_validate(member) async for member in service.get_members(project_id)]


@router.get("/{user_id}/exists")
async def is_member(
    project_id: uuid.UUID,
    user_id: uuid.UUID,
    service: MemberService = Depends(get_member_service),
) -> bool:
    """Check if a user is a member of the project."""
    return await service.is_member(project_id, user_id)


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def add_member(
    project_id: uuid.UUID,
    member_data: MemberCreate,
    service: MemberService = Depends(get_member_service),
) -> MemberResponse:
    """Add a user to a project.

    Adding an existing member again with the same role is a no-op.

    Raises:
        HTTPException: 404 if project not found, 409 if the user is already
            a member with a different role.
    """
    try:
        member = await service.add_member(
            project_id, member_data.user_id, ProjectRole(member_data.project_role.value)
        )
    except ProjectNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    except MemberConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return MemberResponse.model_validate(member)


@router.patch("/{user_id}", response_model=MemberResponse)
async def update_member_role(
    project_id: uuid.UUID,
    user_id: uuid.UUID,
    member_data: MemberUpdate,
    service: MemberService = Depends(get_member_service),
) -> MemberResponse:
    """Change the role of a member.

    Raises:
        HTTPException: 404 if the user is not a member.
    """
    try:
        member = await service.update_member_role(
            project_id, user_id, ProjectRole(member_data.project_role.value)
        )
    except MemberNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )
    return MemberResponse.model_validate(member)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    project_id: uuid.UUID,
    user_id: uuid.UUID,
    service: MemberService = Depends(get_member_service),
) -> None:
    """Remove a user from a project.

    Raises:
        HTTPException: 404 if the user is not a member.
    """
    try:
        await service.delete_member(project_id, user_id)
    except MemberNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )
