"""Project API routes.

Endpoints for listing, reading, creating, renaming and deleting projects.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from project_service.dependencies import get_project_service
from project_service.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from project_service.services import ProjectNotFoundError, ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Project not found",
    )


@router.get("", response_model=list[ProjectResponse])
async def get_all_projects(
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Return all stored projects.

    Returns:
        JSON array of projects, empty when none exist.
    """
    return [ProjectResponse.model_validate(project) async for project in service.get_all_projects()]


@router.get("/user/{user_id}", response_model=list[ProjectResponse])
async def get_all_projects_of_user(
    user_id: uuid.UUID,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Return all projects in which the user is included as a member.

    Args:
        user_id: The user UUID.
    """
    return [
        ProjectResponse.model_validate(project)
        async for project in service.get_all_projects_of_user(user_id)
    ]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: uuid.UUID,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Get a single project by ID.

    Args:
        project_id: The project UUID.

    Raises:
        HTTPException: 404 if project not found.
    """
    try:
        project = await service.get_project_by_id(project_id)
    except ProjectNotFoundError:
        raise _not_found()
    return ProjectResponse.model_validate(project)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Create a new project; its creator becomes an ADMIN member.

    Args:
        project_data: Project creation data.

    Returns:
        The created project.
    """
    project = await service.create_project(project_data)
    return ProjectResponse.model_validate(project)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: uuid.UUID,
    project_data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Rename a project.

    Raises:
        HTTPException: 404 if project not found.
    """
    try:
        project = await service.update_project_name(project_id, project_data.name)
    except ProjectNotFoundError:
        raise _not_found()
    return ProjectResponse.model_validate(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: uuid.UUID,
    service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project and its members.

    Raises:
        HTTPException: 404 if project not found.
    """
    try:
        await service.delete_project(project_id)
    except ProjectNotFoundError:
        raise _not_found()
