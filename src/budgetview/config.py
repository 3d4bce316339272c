"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_number(name: str, default: float, cast=float):
    """Read a numeric environment variable, rejecting junk loudly."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "BudgetView"

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("BUDGETVIEW_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.PAGE_SIZE = _env_number("BUDGETVIEW_PAGE_SIZE", 5, int)
        self.BUCKET_COUNT = _env_number("BUDGETVIEW_BUCKET_COUNT", 12, int)
        self.VARIANCE = _env_number("BUDGETVIEW_VARIANCE", 0.2)
        self.WEDGE_GAP = _env_number("BUDGETVIEW_WEDGE_GAP", 2.0)
        self.OUTER_RADIUS = _env_number("BUDGETVIEW_OUTER_RADIUS", 90.0)
        self.INNER_RADIUS = _env_number("BUDGETVIEW_INNER_RADIUS", 40.0)
        self.RANDOM_SEED = _env_number("BUDGETVIEW_RANDOM_SEED", None, int)
        self._validate()

    def _resolve_data_dir(self) -> Path:
        """Return the directory that holds the ``logs`` folder."""

        data_root = os.getenv("BUDGETVIEW_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()

    def _validate(self) -> None:
        if self.PAGE_SIZE < 1:
            raise ValueError("BUDGETVIEW_PAGE_SIZE must be at least 1.")
        if self.BUCKET_COUNT < 1:
            raise ValueError("BUDGETVIEW_BUCKET_COUNT must be at least 1.")
        if not 0 <= self.VARIANCE <= 1:
            raise ValueError("BUDGETVIEW_VARIANCE must be between 0 and 1.")
        if self.WEDGE_GAP < 0:
            raise ValueError("BUDGETVIEW_WEDGE_GAP cannot be negative.")
        if not 0 <= self.INNER_RADIUS < self.OUTER_RADIUS:
            raise ValueError(
                "BUDGETVIEW_INNER_RADIUS must be non-negative and smaller than BUDGETVIEW_OUTER_RADIUS."
            )


class DevConfig(BaseConfig):
    """Development configuration with verbose console output."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Deterministic configuration for the test suite."""

    __test__ = False  # not a pytest class
    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        if self.RANDOM_SEED is None:
            self.RANDOM_SEED = 1234


CONFIGS = {"base": BaseConfig, "dev": DevConfig, "test": TestConfig}


def get_config(name: str = "dev") -> BaseConfig:
    """Instantiate the configuration registered under ``name``."""

    try:
        return CONFIGS[name]()
    except KeyError as exc:
        raise ValueError(f"Unknown config '{name}'; expected one of {sorted(CONFIGS)}") from exc
