"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module, if present
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Storage Settings
    DATA_DIR = os.getenv('DATA_DIR', '.')
    USERNAMES_FILE = os.getenv('USERNAMES_FILE', 'users.txt')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'True').lower() == 'true'

    @classmethod
    def usernames_path(cls) -> str:
        """Full path of the username registry file."""
        return os.path.join(cls.DATA_DIR, cls.USERNAMES_FILE)


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    pass


class TestingConfig(Config):
    """Testing configuration."""
    LOG_TO_FILE = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Configuration class for name, or for the APP_ENV environment variable."""
    return config.get(name or os.getenv('APP_ENV', 'default'), config['default'])
