"""Configuration loading from .env files."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    # Database
    db_name: str = "mavenmovies"
    db_host: str = "localhost"
    db_user: str = "postgres"
    db_password: str = "password"
    db_port: int = 5432
    db_schema: str = "public"

    # Connection pool
    pool_min_size: int = 1
    pool_max_size: int = 4

    # Concurrency
    worker_threads: int = 1

    # OpenTelemetry (optional)
    otel_endpoint: str = ""
    otel_headers: str = ""
    otel_service_name: str = "maven-reports"

    @property
    def otel_enabled(self) -> bool:
        """True when OTel tracing should be initialized."""
        return bool(self.otel_endpoint)

    def validate(self):
        """Raise ValueError if required config is missing or invalid."""
        if not self.db_schema.isidentifier():
            raise ValueError(f"DB_SCHEMA must be a plain identifier, got {self.db_schema!r}")
        if self.pool_min_size < 1:
            raise ValueError("POOL_MIN_SIZE must be >= 1")
        if self.pool_max_size < self.pool_min_size:
            raise ValueError("POOL_MAX_SIZE must be >= POOL_MIN_SIZE")
        if self.worker_threads < 1:
            raise ValueError("WORKER_THREADS must be >= 1")
        if self.worker_threads > self.pool_max_size:
            raise ValueError("WORKER_THREADS must be <= POOL_MAX_SIZE")


def load_config(env_file: str | None = None) -> Config:
    """Load configuration from environment variables and optional .env file.

    Args:
        env_file: Path to .env file. If None, searches for .env in the
                  project root.
    """
    if env_file:
        load_dotenv(env_file)
    else:
        project_root = Path(__file__).resolve().parent.parent.parent
        dotenv_path = project_root / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path)

    return Config(
        db_name=os.getenv("DB_NAME", "mavenmovies"),
        db_host=os.getenv("DB_HOST", "localhost"),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "password"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_schema=os.getenv("DB_SCHEMA", "public"),
        pool_min_size=int(os.getenv("POOL_MIN_SIZE", "1")),
        pool_max_size=int(os.getenv("POOL_MAX_SIZE", "4")),
        worker_threads=int(os.getenv("WORKER_THREADS", "1")),
        otel_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", ""),
        otel_headers=os.getenv("OTEL_EXPORTER_OTLP_HEADERS", ""),
        otel_service_name=os.getenv("OTEL_SERVICE_NAME", "maven-reports"),
    )
