"""
services/project_service.py
---------------------------
Business logic for projects: thin wrapper over ProjectRepository that
surfaces missing projects as ProjectNotFoundError.
"""

from typing import Optional

from models.project import Project
from repositories.project_repo import ProjectRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectNotFoundError(LookupError):
    """Raised when a project ID does not match any stored project."""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project with project ID={project_id} does not exist.")


class ProjectService:
    """Entry point for callers working with projects."""

    def __init__(self, repository: Optional[ProjectRepository] = None):
        self.project_repo = repository or ProjectRepository()

    def add_project(self, project: Project) -> Project:
        """Persist a new project and return it with its ID."""
        return self.project_repo.insert(project)

    def fetch_all_projects(self) -> list[Project]:
        """All projects ordered by name, without their collections."""
        return self.project_repo.fetch_all()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """
        Fetch a fully populated project.

        Raises:
            ProjectNotFoundError: If no project has this ID.
        """
        project = self.project_repo.fetch_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def modify_project_details(self, project: Project) -> None:
        """
        Overwrite a project's name, hours, difficulty and notes.

        Raises:
            ProjectNotFoundError: If no project has this ID.
        """
        if not self.project_repo.update(project):
            logger.warning(f"Update skipped: project #{project.project_id} not found")
            raise ProjectNotFoundError(project.project_id)

    def delete_project(self, project_id: int) -> None:
        """
        Delete a project and everything it owns.

        Raises:
            ProjectNotFoundError: If no project has this ID.
        """
        if not self.project_repo.delete(project_id):
            logger.warning(f"Delete skipped: project #{project_id} not found")
            raise ProjectNotFoundError(project_id)
