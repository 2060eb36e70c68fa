"""Configuration management using environment variables.

This module provides centralized configuration management using python-decouple
to read from .env files and environment variables.
"""

from decouple import config


class Config:
    """Base configuration class."""

    # Remote roster API
    PUPPY_BOWL_API_URL: str = config('PUPPY_BOWL_API_URL', default='https://fsa-puppy-bowl.herokuapp.com/api')
    COHORT_NAME: str = config('COHORT_NAME', default='2410-ftb-et-web-am')
    REQUEST_TIMEOUT: float = config('REQUEST_TIMEOUT', default=10.0, cast=float)

    # Application
    SECRET_KEY: str = config('SECRET_KEY', default='dev-secret-key-change-in-production')

    # Environment
    DEBUG: bool = config('DEBUG', default=False, cast=bool)
    ENVIRONMENT: str = config('ENVIRONMENT', default='development')

    # Logging
    LOG_LEVEL: str = config('LOG_LEVEL', default='INFO')
    LOG_FILE: str = config('LOG_FILE', default='')

    # Rate limiting
    RATELIMIT_STORAGE_URL: str = config('RATELIMIT_STORAGE_URL', default='memory://')


class DevelopmentConfig(Config):
    """Development configuration. DEBUG comes from the environment."""


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = 'WARNING'


class TestingConfig(Config):
    """Testing configuration."""
    DEBUG = True
    RATELIMIT_STORAGE_URL = 'memory://'


def get_config() -> Config:
    """Get configuration based on environment."""
    env = config('ENVIRONMENT', default='development')

    if env == 'production':
        return ProductionConfig()
    elif env == 'testing':
        return TestingConfig()
    else:
        return DevelopmentConfig()


# Global config instance
settings = get_config()
