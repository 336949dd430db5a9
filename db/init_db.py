"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connection, rollback_quietly
from db.errors import DbError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Projects table: the aggregate root
CREATE TABLE IF NOT EXISTS project (
    project_id      SERIAL PRIMARY KEY,
    project_name    VARCHAR(128) NOT NULL,
    estimated_hours NUMERIC(7,2),
    actual_hours    NUMERIC(7,2),
    difficulty      INT,
    notes           TEXT
);

-- Materials table: owned by exactly one project
CREATE TABLE IF NOT EXISTS material (
    material_id     SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    material_name   VARCHAR(128) NOT NULL,
    num_required    INT,
    cost            NUMERIC(7,2)
);

-- Steps table: ordered instructions owned by exactly one project
CREATE TABLE IF NOT EXISTS step (
    step_id         SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    step_text       TEXT NOT NULL,
    step_order      INT NOT NULL
);

-- Categories table: shared across projects
CREATE TABLE IF NOT EXISTS category (
    category_id     SERIAL PRIMARY KEY,
    category_name   VARCHAR(128) NOT NULL UNIQUE
);

-- Association table: many-to-many link between projects and categories
CREATE TABLE IF NOT EXISTS project_category (
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    category_id     INT NOT NULL REFERENCES category(category_id) ON DELETE CASCADE,
    UNIQUE(project_id, category_id)
);

-- Indexes for the per-project collection lookups
CREATE INDEX IF NOT EXISTS idx_material_project ON material(project_id);
CREATE INDEX IF NOT EXISTS idx_step_project ON step(project_id, step_order);
"""

DROP_SQL = """
DROP TABLE IF EXISTS project_category;
DROP TABLE IF EXISTS category;
DROP TABLE IF EXISTS step;
DROP TABLE IF EXISTS material;
DROP TABLE IF EXISTS project;
"""


def _execute_script(sql: str, action: str, past: str) -> None:
    with connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
            conn.commit()
        except Exception as e:
            rollback_quietly(conn, f"{action} schema")
            logger.error(f"Failed to {action} schema: {e}")
            raise DbError(f"Failed to {action} schema: {e}") from e
    logger.info(f"Database schema {past} successfully.")


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _execute_script(SCHEMA_SQL, "initialize", "initialized")


def drop_tables() -> None:
    """Drop all project tables, children first."""
    _execute_script(DROP_SQL, "drop", "dropped")


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
