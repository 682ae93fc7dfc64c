"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}

REQUIRED_ENV_VARS = ("JWT_SECRET", "DATABASE_URL")


class ConfigurationError(RuntimeError):
    """Raised when required environment variables are missing."""

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )
        self.missing = missing


def _async_database_url(url: str) -> str:
    """Point plain postgres URLs at the asyncpg driver."""
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]
    if url.startswith("postgresql://"):
        return "postgresql+asyncpg://" + url[len("postgresql://") :]
    return url


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in TRUTHY
    PORT = int(os.getenv("PORT", "5000"))

    # Auth
    JWT_SECRET = os.getenv("JWT_SECRET", "")
    JWT_ALGORITHM = "HS256"
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

    # Database
    DATABASE_URL: str = _async_database_url(os.getenv("DATABASE_URL", ""))
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() in TRUTHY
    DB_AUTO_CREATE: bool = os.getenv("DB_AUTO_CREATE", "true").lower() in TRUTHY
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s - %(message)s",
    )

    # HTTP
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    @classmethod
    def is_production(cls) -> bool:
        return cls.APP_ENV == "production"

    @classmethod
    def validate(cls) -> None:
        """Refuse to run without a signing secret and a storage URL."""
        missing = [name for name in REQUIRED_ENV_VARS if not getattr(cls, name)]
        if missing:
            raise ConfigurationError(missing)


class DevelopmentConfig(Config):
    """Development configuration"""

    APP_ENV = "development"
    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    APP_ENV = "testing"


class ProductionConfig(Config):
    """Production configuration"""

    APP_ENV = "production"
    DEBUG = False


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
