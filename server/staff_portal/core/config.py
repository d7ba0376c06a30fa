from pydantic import ValidationError
from pydantic_settings import BaseSettings

from staff_portal.core.errors import ConfigError


class Settings(BaseSettings):
    DATABASE_URL: str
    POOL_TIMEOUT_SECONDS: float = 1.0
    DEFAULT_STORE_ID: int = 1
    DEFAULT_ADDRESS_ID: int = 61
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


def load_settings(**overrides) -> Settings:
    """Build the process settings once, failing fast when the store URL is missing."""

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        missing = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        raise ConfigError(f"Invalid configuration: {', '.join(missing)}") from exc
