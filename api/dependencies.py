"""
FastAPI dependency injection.

An endpoint declares `config: Settings = Depends(get_settings)` and FastAPI
calls get_settings() before the endpoint runs. Tests swap the settings via
app.dependency_overrides[get_settings] instead of touching env vars.
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    """Returns the process-wide settings singleton."""
    return settings
