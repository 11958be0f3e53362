"""Operation result types and status enums."""

from glossa.operations.result import OperationResult
from glossa.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
