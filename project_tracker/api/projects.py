"""Project API endpoints.

Every route requires a bearer token, and the token's user id is the only
owner key handed to the service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from project_tracker.api.dependencies import get_current_claims, get_project_service
from project_tracker.models.project import Project
from project_tracker.schemas.common import ErrorResponse, MessageResponse
from project_tracker.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from project_tracker.services.projects import ProjectService
from project_tracker.services.tokens import TokenClaims

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
    },
)

Claims = Annotated[TokenClaims, Depends(get_current_claims)]
Service = Annotated[ProjectService, Depends(get_project_service)]
# Ids outside a 32-bit INTEGER column can never match a row
ProjectId = Annotated[int, Path(ge=1, le=2**31 - 1)]


def project_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")


def found_or_404(project: Project | None) -> Project:
    if project is None:
        raise project_not_found()
    return project


@router.get("", response_model=list[ProjectResponse])
async def get_projects(claims: Claims, service: Service):
    """Get all projects of the current user, newest first."""
    return service.list_by_owner(claims.user_id)


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_project(project_id: ProjectId, claims: Claims, service: Service):
    """Get a single project."""
    return found_or_404(service.get_by_owner(project_id, claims.user_id))


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(project_data: ProjectCreate, claims: Claims, service: Service):
    """Create a new project."""
    return service.create(claims.user_id, project_data.model_dump())


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def update_project(
    project_id: ProjectId, project_data: ProjectUpdate, claims: Claims, service: Service
):
    """Update the supplied fields of a project."""
    return found_or_404(
        service.update_by_owner(project_id, claims.user_id, project_data.changes())
    )


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_project(project_id: ProjectId, claims: Claims, service: Service):
    """Delete a project."""
    if not service.delete_by_owner(project_id, claims.user_id):
        raise project_not_found()
    return MessageResponse(message="Project deleted successfully")
