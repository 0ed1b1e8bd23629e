"""Request model and configuration."""

from .config import Settings
from .types import ExecutionContext, ItemUpdate, Many, OperationKind, OperationRequest, Single

__all__ = ["Settings", "ExecutionContext", "ItemUpdate", "Many", "OperationKind", "OperationRequest", "Single"]
