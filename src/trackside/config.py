import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("TRACKSIDE_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    environment: str
    database_url: str
    query_timeout: float
    seed_on_startup: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            database_url=os.environ.get(
                "DATABASE_URL", "postgresql://localhost:5432/trackside"
            ),
            query_timeout=float(os.environ.get("QUERY_TIMEOUT_SECONDS", "1.0")),
            seed_on_startup=_env_flag("SEED_ON_STARTUP", True),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = None) -> None:
    """Configure root logging once for CLI and server entry points."""
    logging.basicConfig(
        level=level or config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


config = Config.from_env()
