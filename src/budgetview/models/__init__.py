"""Value objects exchanged between the data source, the services and the renderer."""

from .budget import BudgetPlanSnapshot, BudgetSummary, ProgressInfo, ProgressState
from .category import CategoryRecord, CategoryShare, PieSegment, WedgeGeometry
from .query import FilterSpec, PageSpec, QueryResult, QuerySpec, SortSpec
from .transaction import TransactionRecord

__all__ = [
    "BudgetPlanSnapshot",
    "BudgetSummary",
    "CategoryRecord",
    "CategoryShare",
    "FilterSpec",
    "PageSpec",
    "PieSegment",
    "ProgressInfo",
    "ProgressState",
    "QueryResult",
    "QuerySpec",
    "SortSpec",
    "TransactionRecord",
    "WedgeGeometry",
]
