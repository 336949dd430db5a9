"""
main.py
-------
Entry point for the projects database.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Print the current project listing.
    - Close the pool on the way out.
"""

from db.connection import init_pool, close_pool
from db.errors import DbError
from db.init_db import create_tables
from services.project_service import ProjectService
from utils.logger import get_logger

logger = get_logger(__name__)


def list_projects(service: ProjectService) -> None:
    """Print one line per project: its ID and name."""
    projects = service.fetch_all_projects()
    print("\nProjects:")
    for project in projects:
        print(f"   {project.project_id}: {project.project_name}")


def main() -> int:
    try:
        init_pool()
        create_tables()
        list_projects(ProjectService())
    except DbError as e:
        logger.error(f"Startup failed: {e}")
        return 1
    finally:
        close_pool()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
