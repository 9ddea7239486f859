"""Application configuration via Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment variables and .env file.

    Every field can be overridden with a ``BETLYTICS_``-prefixed variable,
    e.g. ``BETLYTICS_KELLY_FRACTION=0.5``.
    """

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "BETLYTICS_",
    }

    # Staking policy
    kelly_fraction: float = 0.25  # quarter-Kelly
    kelly_warning_threshold: float = 10.0  # % of bankroll

    # Breakdowns
    rolling_roi_window: int = 30

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000


settings = Settings()
