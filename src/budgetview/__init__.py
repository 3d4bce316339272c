"""BudgetView dashboard derivation package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, get_config

__all__ = ["BaseConfig", "DevConfig", "get_config"]
