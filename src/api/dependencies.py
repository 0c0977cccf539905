"""FastAPI dependency injection helpers."""

from src.config import Settings, settings


def get_settings() -> Settings:
    """Return the process-wide settings; overridden in tests."""
    return settings
