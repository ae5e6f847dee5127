"""Project persistence scoped to the owning user."""

import logging
from typing import Any

from sqlalchemy.orm import Query, Session

from project_tracker.models.mixins import utc_now
from project_tracker.models.project import Project

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "github_link", "tech_stack")


class ProjectService:
    """Service for project CRUD.

    Every record-level method filters on both the project id and the owner
    id in a single query, so a project owned by someone else is
    indistinguishable from one that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, project_id: int, owner_id: int) -> Query:
        return self.db.query(Project).filter(
            Project.id == project_id,
            Project.user_id == owner_id,
        )

    def create(self, owner_id: int, data: dict[str, Any]) -> Project:
        """Create a project owned by ``owner_id``."""
        project = Project(
            user_id=owner_id,
            title=data["title"],
            description=data["description"],
            github_link=data.get("github_link") or "",
            tech_stack=list(data["tech_stack"]),
        )
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        logger.info(f"Created project {project.id} for user {owner_id}")
        return project

    def list_by_owner(self, owner_id: int) -> list[Project]:
        """All projects of the owner, newest first."""
        return (
            self.db.query(Project)
            .filter(Project.user_id == owner_id)
            .order_by(Project.created_at.desc(), Project.id.desc())
            .all()
        )

    def get_by_owner(self, project_id: int, owner_id: int) -> Project | None:
        return self._owned(project_id, owner_id).first()

    def update_by_owner(
        self, project_id: int, owner_id: int, changes: dict[str, Any]
    ) -> Project | None:
        """Overwrite only the fields present in ``changes``.

        The owner is never reassigned and ``updated_at`` is always refreshed.
        """
        project = self.get_by_owner(project_id, owner_id)
        if project is None:
            return None

        for field in UPDATABLE_FIELDS:
            if field in changes:
                value = changes[field]
                setattr(project, field, list(value) if field == "tech_stack" else value)
        project.updated_at = utc_now()

        self.db.commit()
        self.db.refresh(project)
        logger.info(f"Updated project {project.id} fields: {sorted(changes)}")
        return project

    def delete_by_owner(self, project_id: int, owner_id: int) -> bool:
        """Delete the project if the owner has it. Returns whether anything was deleted."""
        deleted = self._owned(project_id, owner_id).delete(synchronize_session=False)
        self.db.commit()
        if deleted:
            logger.info(f"Deleted project {project_id} for user {owner_id}")
        return deleted > 0
