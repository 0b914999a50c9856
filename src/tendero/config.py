"""Configuration utilities for TENDERO.

Settings come from the environment:

- ``TENDERO_DB_URL``: SQLAlchemy URL of the snapshot database. Optional;
  without it the store runs in memory for the session only.
- ``TENDERO_LOW_STOCK_THRESHOLD``: stock level below which a product counts
  as running low (default 5).
- ``TENDERO_ADVISOR_TIMEOUT``: seconds to wait for the advisor (default 10).
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "TENDERO_DB_URL"  # pragma: no mutate
LOW_STOCK_THRESHOLD_ENV = "TENDERO_LOW_STOCK_THRESHOLD"  # pragma: no mutate
ADVISOR_TIMEOUT_ENV = "TENDERO_ADVISOR_TIMEOUT"  # pragma: no mutate

DEFAULT_LOW_STOCK_THRESHOLD = 5
DEFAULT_ADVISOR_TIMEOUT = 10.0

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class ConfigError(Exception):
    """Raised when a setting is present but unusable."""


class DatabaseUrlNotSetError(ConfigError):
    """Raised when TENDERO_DB_URL is required but not set."""


def get_db_url() -> str:
    """Return ``TENDERO_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If `TENDERO_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_low_stock_threshold() -> int:
    """Stock level below which a product counts as running low."""
    raw = os.environ.get(LOW_STOCK_THRESHOLD_ENV)
    if not raw:
        return DEFAULT_LOW_STOCK_THRESHOLD
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{LOW_STOCK_THRESHOLD_ENV} must be an integer") from e
    if value < 0:
        raise ConfigError(f"{LOW_STOCK_THRESHOLD_ENV} cannot be negative")
    return value


def get_advisor_timeout() -> float:
    """Seconds to wait for the advisor before giving up."""
    raw = os.environ.get(ADVISOR_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_ADVISOR_TIMEOUT
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{ADVISOR_TIMEOUT_ENV} must be a number") from e
    if value <= 0:
        raise ConfigError(f"{ADVISOR_TIMEOUT_ENV} must be positive")
    return value


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for TENDERO's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → TENDERO's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///tendero.db`). Can be
            `None` only where Alembic won't need to connect to the DB.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to TENDERO's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("tendero.adapters.db").joinpath("alembic")),
    )
    return cfg
