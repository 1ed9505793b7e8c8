"""
Application configuration module.

This module defines configuration classes for the local Animals API
(development, testing, production) and for the Locust load test that
drives any Animals API. Values are loaded from environment variables
with sensible defaults.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent
PERFORMANCE_DIR = BASE_DIR / "tests" / "performance"


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Default database location
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL",
        f"sqlite:///{BASE_DIR / 'instance' / 'animals.db'}"
    )


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # In-memory database, recreated for each test session
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL",
        "sqlite:///:memory:"
    )

    SQLALCHEMY_ENGINE_OPTIONS: dict = {
        "pool_pre_ping": True,
    }


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


class LoadTestConfig:
    """
    Settings for the Locust load test.

    ``ANIMALS_BASE_URL`` points at the collection endpoint of the API under
    test. When Locust is started with ``--host`` that value wins.
    """

    ANIMALS_BASE_URL: str = os.environ.get(
        "ANIMALS_BASE_URL",
        "https://6820decb259dad2655adddab.mockapi.io/animals/animal"
    )
    ANIMALS_FIXTURE_PATH: Path = Path(
        os.environ.get("ANIMALS_FIXTURE_PATH", PERFORMANCE_DIR / "animals.json")
    )
    LOAD_PROFILE_PATH: Path = Path(
        os.environ.get("LOAD_PROFILE_PATH", PERFORMANCE_DIR / "load_profile.yml")
    )
    REPORT_PATH: Path = Path(os.environ.get("REPORT_PATH", "report/index.html"))
    PROBE_TIMEOUT_SECONDS: float = float(os.environ.get("PROBE_TIMEOUT_SECONDS", "10"))
    ITERATION_PAUSE_SECONDS: float = float(os.environ.get("ITERATION_PAUSE_SECONDS", "1"))


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
