"""
db/init_db.py
-------------
Creates the database and the ``produto`` table if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from psycopg2 import errors, sql

from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS produto (
    "Id"        SERIAL PRIMARY KEY,
    "Nome"      VARCHAR(255) NOT NULL,
    "Descricao" VARCHAR(255) NOT NULL,
    "Preco"     NUMERIC(10,2) NOT NULL
);
"""


def create_database(database: Database) -> bool:
    """
    Create the configured database when it does not exist yet.

    The database name comes from trusted configuration only and is the one
    value composed into SQL text (quoted through ``sql.Identifier``).

    Returns:
        True if the database was created by this call.
    """
    name = database.settings.database
    with database.maintenance_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("SELECT 1 FROM pg_database WHERE datname = %s;", (name,))
            if cur.fetchone():
                return False
            try:
                cur.execute(sql.SQL("CREATE DATABASE {};").format(sql.Identifier(name)))
            except errors.DuplicateDatabase:
                # Created concurrently by another request.
                return False
    logger.info(f"Database '{name}' created.")
    return True


def create_tables(database: Database) -> None:
    """
    Execute the schema SQL to create the product table.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = database.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        database.release_connection(conn)


def initialize_schema(database: Database) -> None:
    """Create the database and the table; idempotent."""
    try:
        create_database(database)
    except Exception as e:
        logger.error(f"Failed to create database '{database.settings.database}': {e}")
        raise
    create_tables(database)


if __name__ == "__main__":
    from config import load_settings

    db = Database(load_settings())
    try:
        initialize_schema(db)
    finally:
        db.close_pool()
    print("Database schema created successfully.")
