"""Runtime configuration for fintrack.

Values are resolved in order: explicit overrides (e.g. CLI options), then
environment variables, then defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    api_url: str
    state_path: Optional[str]
    timeout: float
    log_level: str


def load_settings(
    api_url: Optional[str] = None,
    state_path: Optional[str] = None,
    timeout: Optional[float] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Build Settings from overrides and the environment.

    Args:
        api_url: Base URL of the transactions API (FINTRACK_API_URL)
        state_path: Path of the local state database (FINTRACK_STATE_PATH).
            None leaves the choice to the storage factory.
        timeout: Request timeout in seconds (FINTRACK_TIMEOUT)
        log_level: Logging level name (FINTRACK_LOG_LEVEL)

    Raises:
        ValueError: If FINTRACK_TIMEOUT is not a positive number
    """
    if api_url is None:
        api_url = os.environ.get("FINTRACK_API_URL", DEFAULT_API_URL)

    if state_path is None:
        state_path = os.environ.get("FINTRACK_STATE_PATH")

    if timeout is None:
        raw_timeout = os.environ.get("FINTRACK_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"Invalid FINTRACK_TIMEOUT '{raw_timeout}'") from None
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive, got {timeout}")

    if log_level is None:
        log_level = os.environ.get("FINTRACK_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    return Settings(
        api_url=api_url.rstrip("/"),
        state_path=state_path,
        timeout=timeout,
        log_level=log_level.upper(),
    )
