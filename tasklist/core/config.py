import os
from enum import Enum
from pathlib import Path
from typing import Dict, List

from dotenv import load_dotenv


# Application configuration
class Environment(str, Enum):
    """Deployment environments the service knows about."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


def get_environment() -> Environment:
    """Resolve the current environment from APP_ENV (defaults to development)."""
    match os.getenv("APP_ENV", "development").lower():
        case "production" | "prod":
            return Environment.PRODUCTION
        case "staging" | "stage":
            return Environment.STAGING
        case "test":
            return Environment.TEST
        case _:
            return Environment.DEVELOPMENT


def load_env_file() -> None:
    """
    Load the most specific .env file for the current environment.
    Variables already present in the process environment win.
    """
    env = get_environment()
    base_dir = Path(__file__).resolve().parents[2]

    for candidate in (f".env.{env.value}.local", f".env.{env.value}", ".env"):
        env_file = base_dir / candidate
        if env_file.is_file():
            load_dotenv(dotenv_path=env_file, override=False)
            break


load_env_file()


def parse_list_from_env(env_key: str, default: List[str] | None = None) -> List[str]:
    """Parse a comma separated environment variable into a list of strings."""
    value = os.getenv(env_key)
    if not value:
        return list(default or [])

    value = value.strip("\"'")
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_bool_from_env(env_key: str, default: bool = False) -> bool:
    value = os.getenv(env_key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Central settings object. Every tunable lives here so the rest of the
    code base never touches os.environ directly.
    """

    def __init__(self):
        self.ENVIRONMENT = get_environment()

        # Application
        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "Tasklist")
        self.VERSION = os.getenv("VERSION", "0.1.0")
        self.DESCRIPTION = os.getenv(
            "DESCRIPTION", "Minimal to-do list API with a task assistant"
        )
        self.API_V1_STR = os.getenv("API_V1_STR", "/api/v1")
        self.DEBUG = parse_bool_from_env("DEBUG", False)
        self.ALLOWED_ORIGINS = parse_list_from_env(
            "ALLOWED_ORIGINS", ["http://localhost:3000"]
        )

        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT = os.getenv(
            "LOG_FORMAT",
            "json" if self.ENVIRONMENT == Environment.PRODUCTION else "console",
        )

        # Database
        self.DATABASE_URL = os.getenv("DATABASE_URL", "")
        self.POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
        self.POSTGRES_PORT = int(os.getenv("POSTGRES_PORT", "5432"))
        self.POSTGRES_DB = os.getenv("POSTGRES_DB", "tasklist")
        self.POSTGRES_USER = os.getenv("POSTGRES_USER", "postgres")
        self.POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
        self.POSTGRES_POOL_SIZE = int(os.getenv("POSTGRES_POOL_SIZE", "20"))
        self.POSTGRES_MAX_OVERFLOW = int(os.getenv("POSTGRES_MAX_OVERFLOW", "10"))
        self.DB_INIT_RETRIES = int(os.getenv("DB_INIT_RETRIES", "5"))

        # JWT
        self.JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
        self.JWT_ACCESS_TOKEN_EXPIRE_DAYS = int(
            os.getenv("JWT_ACCESS_TOKEN_EXPIRE_DAYS", "30")
        )

        # Assistant providers, checked in this order at startup
        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
        self.OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
        self.ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-3-5-sonnet-20241022")

        # Rate limiting
        self.RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
        self.RATE_LIMIT_DEFAULT = parse_list_from_env(
            "RATE_LIMIT_DEFAULT", ["1000 per day", "200 per hour"]
        )
        self.RATE_LIMIT_AUTH = os.getenv("RATE_LIMIT_AUTH", "20 per minute")

        # Named per-user limits for mutations
        default_endpoints = {
            "create_task": "20 per minute",
            "update_task": "50 per minute",
            "delete_task": "30 per minute",
            "send_message": "10 per minute",
            "create_thread": "5 per minute",
            "update_thread": "50 per minute",
            "delete_thread": "30 per minute",
        }
        self.RATE_LIMIT_ENDPOINTS: Dict[str, str] = {
            name: os.getenv(f"RATE_LIMIT_{name.upper()}", limit)
            for name, limit in default_endpoints.items()
        }

        self.apply_environment_settings()

    def apply_environment_settings(self):
        """Loosen or tighten defaults depending on the environment."""
        if self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TEST):
            self.DEBUG = True if os.getenv("DEBUG") is None else self.DEBUG
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "DEBUG"
        elif self.ENVIRONMENT == Environment.PRODUCTION:
            self.DEBUG = False

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
