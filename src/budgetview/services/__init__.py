"""Service module exports."""

from . import (
    aggregation,
    distribution,
    formatting,
    import_csv,
    progress,
    query_engine,
    radial,
    trend,
)

__all__ = [
    "aggregation",
    "distribution",
    "formatting",
    "import_csv",
    "progress",
    "query_engine",
    "radial",
    "trend",
]
