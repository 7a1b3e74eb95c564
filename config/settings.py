"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., ROUND_ROBIN_TIME_QUANTUM env var → Settings.ROUND_ROBIN_TIME_QUANTUM)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "round_robin"
    ROUND_ROBIN_TIME_QUANTUM: int = 4      # CPU cycles per time slice

    # ── Simulation ──────────────────────────────────────────────
    MAX_SIMULATION_CYCLES: int = 100_000   # hard stop for a single run

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
