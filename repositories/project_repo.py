"""
repositories/project_repo.py
-----------------------------
Data access layer for the project aggregate.
All SQL queries touching `project`, `material`, `step`, `category`
and `project_category` live here.

Every public method runs exactly one transaction on one pooled connection:
it commits on success, rolls back on any failure and re-raises the failure
as a :class:`DbError` chained to the original cause.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from psycopg2.extras import RealDictCursor

from db.connection import connection, rollback_quietly
from db.errors import DbError
from db.row_codec import RowCodec, SqlType
from models.category import Category
from models.material import Material
from models.project import Project
from models.step import Step
from utils.logger import get_logger

logger = get_logger(__name__)

CATEGORY_TABLE = "category"
MATERIAL_TABLE = "material"
PROJECT_TABLE = "project"
PROJECT_CATEGORY_TABLE = "project_category"
STEP_TABLE = "step"


class ProjectRepository:
    """Repository for CRUD operations on projects and their collections."""

    def __init__(self, connection_factory: Callable = connection, codec=None):
        """
        Args:
            connection_factory: Zero-argument callable returning a context
                manager that yields a DB-API connection and releases it on exit.
            codec: Object providing ``bind`` and ``extract`` (see ``db.row_codec``).
        """
        self._connection = connection_factory
        self._codec = codec or RowCodec()

    # ── CREATE ────────────────────────────────────────────

    def insert(self, project: Project) -> Project:
        """
        Insert a new project row.

        Args:
            project: Project without an ID. Only the scalar fields are stored.

        Returns:
            The same Project with `project_id` set. On failure the input is
            left untouched.
        """
        sql = f"""
            INSERT INTO {PROJECT_TABLE}
                (project_name, estimated_hours, actual_hours, difficulty, notes)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING project_id;
        """
        with self._transaction(f"insert project '{project.project_name}'") as conn:
            params = self._params(
                (project.project_name, SqlType.TEXT),
                (project.estimated_hours, SqlType.DECIMAL),
                (project.actual_hours, SqlType.DECIMAL),
                (project.difficulty, SqlType.INTEGER),
                (project.notes, SqlType.TEXT),
            )
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            if row is None:
                raise DbError("Insert returned no project_id")
            project_id = row["project_id"]

        project.project_id = project_id
        logger.info(f"Added project '{project.project_name}' #{project_id}")
        return project

    # ── READ ──────────────────────────────────────────────

    def fetch_all(self) -> list[Project]:
        """
        List every project ordered by name.

        Returns:
            Summary Project objects; materials, steps and categories are
            always empty here.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} ORDER BY project_name;"
        with self._transaction("fetch projects") as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql)
                rows = cur.fetchall()
            return [self._codec.extract(row, Project) for row in rows]

    def fetch_by_id(self, project_id: int) -> Optional[Project]:
        """
        Fetch one project together with its materials, steps and categories.

        All four queries share one transaction. The collections are attached
        only after every query has succeeded.

        Returns:
            The fully populated Project, or None if no such project exists.
        """
        sql = f"SELECT * FROM {PROJECT_TABLE} WHERE project_id = %s;"
        with self._transaction(f"fetch project #{project_id}") as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(sql, self._params((project_id, SqlType.INTEGER)))
                row = cur.fetchone()

            if row is None:
                logger.debug(f"Project #{project_id} not found")
                return None

            project = self._codec.extract(row, Project)
            materials = self._fetch_materials(conn, project_id)
            steps = self._fetch_steps(conn, project_id)
            categories = self._fetch_categories(conn, project_id)

            project.materials.extend(materials)
            project.steps.extend(steps)
            project.categories.extend(categories)
            return project

    # ── UPDATE ────────────────────────────────────────────

    def update(self, project: Project) -> bool:
        """
        Overwrite the scalar fields of an existing project.
        Materials, steps and categories are not touched.

        Args:
            project: Project with updated fields (must have project_id set).

        Returns:
            True if exactly one row was updated, False otherwise.
        """
        sql = f"""
            UPDATE {PROJECT_TABLE}
            SET project_name = %s, estimated_hours = %s, actual_hours = %s,
                difficulty = %s, notes = %s
            WHERE project_id = %s;
        """
        with self._transaction(f"update project #{project.project_id}") as conn:
            params = self._params(
                (project.project_name, SqlType.TEXT),
                (project.estimated_hours, SqlType.DECIMAL),
                (project.actual_hours, SqlType.DECIMAL),
                (project.difficulty, SqlType.INTEGER),
                (project.notes, SqlType.TEXT),
                (project.project_id, SqlType.INTEGER),
            )
            with conn.cursor() as cur:
                cur.execute(sql, params)
                updated = cur.rowcount == 1
        if updated:
            logger.info(f"Updated project #{project.project_id}")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, project_id: int) -> bool:
        """
        Delete a project by ID. Its materials, steps and category links are
        removed by the foreign-key cascade; categories themselves remain.

        Returns:
            True if exactly one row was deleted, False otherwise.
        """
        sql = f"DELETE FROM {PROJECT_TABLE} WHERE project_id = %s;"
        with self._transaction(f"delete project #{project_id}") as conn:
            with conn.cursor() as cur:
                cur.execute(sql, self._params((project_id, SqlType.INTEGER)))
                deleted = cur.rowcount == 1
        if deleted:
            logger.info(f"Deleted project #{project_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @contextmanager
    def _transaction(self, action: str) -> Iterator:
        """
        Yield a connection inside one transaction.

        Commits when the body completes, otherwise rolls back and raises
        DbError. The connection is released by the connection factory on
        every path.
        """
        with self._connection() as conn:
            try:
                yield conn
                conn.commit()
            except Exception as e:
                rollback_quietly(conn, action)
                logger.error(f"Failed to {action}: {e}")
                if isinstance(e, DbError):
                    raise
                raise DbError(f"Failed to {action}: {e}") from e

    def _params(self, *typed_values) -> tuple:
        """Bind (value, SqlType) pairs at positions 1..n."""
        params: list = []
        for position, (value, sql_type) in enumerate(typed_values, start=1):
            self._codec.bind(params, position, value, sql_type)
        return tuple(params)

    def _fetch_materials(self, conn, project_id: int) -> list[Material]:
        sql = f"SELECT * FROM {MATERIAL_TABLE} WHERE project_id = %s ORDER BY material_id;"
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql, self._params((project_id, SqlType.INTEGER)))
            return [self._codec.extract(row, Material) for row in cur.fetchall()]

    def _fetch_steps(self, conn, project_id: int) -> list[Step]:
        sql = f"SELECT * FROM {STEP_TABLE} WHERE project_id = %s ORDER BY step_order;"
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql, self._params((project_id, SqlType.INTEGER)))
            return [self._codec.extract(row, Step) for row in cur.fetchall()]

    def _fetch_categories(self, conn, project_id: int) -> list[Category]:
        sql = f"""
            SELECT c.* FROM {CATEGORY_TABLE} c
            JOIN {PROJECT_CATEGORY_TABLE} pc USING (category_id)
            WHERE pc.project_id = %s
            ORDER BY c.category_name;
        """
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(sql, self._params((project_id, SqlType.INTEGER)))
            return [self._codec.extract(row, Category) for row in cur.fetchall()]
