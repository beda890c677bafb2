"""Operation result types and status enums.

Standardized result types returned by the localization engine so callers
can branch on success or failure without catching exceptions.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
