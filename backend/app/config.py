"""
Zomato Backend — Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the database connector and the server entry point.
When:  Loaded once at module import time.

The only value the service originally carried was the hardcoded MongoDB
endpoint (mongodb://db:27017/zomato). It is now the default of MONGO_URL so
docker-compose deployments keep working without any environment at all.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults matching the docker-compose deployment
    (database reachable as host `db`, backend listening on port 5000).
    """

    # ── Database ──────────────────────────────────────────────────────────
    # What: MongoDB connection string; the path component names the database
    mongo_url: str = Field(
        default="mongodb://db:27017/zomato",
        description="MongoDB connection URL",
    )

    # What: Upper bound for the single startup connection attempt
    # Trade-off: Lower = faster "failed" log when the DB is absent, but may
    # give up on a slow-to-boot container
    mongo_connect_timeout_ms: int = Field(default=5000, ge=100, le=60_000)

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000, ge=0, le=65535)

    # What: Expose /docs, /redoc and /openapi.json
    # Off by default: the public surface is exactly GET / and GET /restaurants
    enable_docs: bool = Field(default=False)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGO_URL and mongo_url both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
