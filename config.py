"""
config.py
---------
Central configuration module. Loads environment variables (and the
optional .env file) once at startup into an immutable ``Settings`` object
that is passed down explicitly to the database layer and the HTTP app.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        host: PostgreSQL host.
        user: PostgreSQL user.
        password: PostgreSQL password.
        database: Name of the database holding the ``produto`` table.
        port: PostgreSQL port.
        listen_port: Port the HTTP server listens on.
        maintenance_database: Existing database used to run CREATE DATABASE.
        pool_max: Maximum number of pooled connections.
        pool_timeout: Seconds a request waits for a free connection.
        connect_timeout: Seconds libpq waits when opening a new connection.
        statement_timeout_ms: Server-side limit for a single statement.
        log_level: Root logging level name.
    """
    host: str = "localhost"
    user: str = "postgres"
    password: str = ""
    database: str = "api_produto"
    port: int = 5432
    listen_port: int = 3000
    maintenance_database: str = "postgres"
    pool_max: int = 10
    pool_timeout: float = 5.0
    connect_timeout: int = 5
    statement_timeout_ms: int = 30000
    log_level: str = "INFO"

    def dsn(self, database: Optional[str] = None) -> dict:
        """Connection keyword arguments for psycopg2.connect()."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "dbname": database or self.database,
            "connect_timeout": self.connect_timeout,
            "options": f"-c statement_timeout={self.statement_timeout_ms}",
        }


def _get_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable '{key}' must be an integer, got {raw!r}.")


def _get_float(key: str, default: float) -> float:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable '{key}' must be a number, got {raw!r}.")


def load_settings() -> Settings:
    """
    Build the application settings from the environment.

    Returns:
        Settings: Validated settings.

    Raises:
        ConfigurationError: If a numeric variable is malformed or out of range.
    """
    load_dotenv()

    settings = Settings(
        # ── PostgreSQL ────────────────────────────────────────
        host=os.getenv("DB_HOST", "localhost"),
        user=os.getenv("DB_USER", "postgres"),
        password=os.getenv("DB_PASSWORD", ""),
        database=os.getenv("DB_NAME", "api_produto"),
        port=_get_int("DB_PORT", 5432),
        maintenance_database=os.getenv("DB_MAINTENANCE_NAME", "postgres"),
        # ── Pool / admission control ──────────────────────────
        pool_max=_get_int("DB_POOL_MAX", 10),
        pool_timeout=_get_float("DB_POOL_TIMEOUT", 5.0),
        connect_timeout=_get_int("DB_CONNECT_TIMEOUT", 5),
        statement_timeout_ms=_get_int("DB_STATEMENT_TIMEOUT_MS", 30000),
        # ── HTTP / logging ────────────────────────────────────
        listen_port=_get_int("PORT", 3000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

    if not settings.database:
        raise ConfigurationError("Environment variable 'DB_NAME' must not be empty.")
    if settings.pool_max < 1:
        raise ConfigurationError("Environment variable 'DB_POOL_MAX' must be at least 1.")
    if settings.pool_timeout <= 0:
        raise ConfigurationError("Environment variable 'DB_POOL_TIMEOUT' must be positive.")
    if settings.connect_timeout < 1:
        # libpq treats 0 as "wait forever".
        raise ConfigurationError("Environment variable 'DB_CONNECT_TIMEOUT' must be at least 1.")
    return settings
