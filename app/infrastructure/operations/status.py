"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of catalog
loads and language change requests.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (catalog fetch or parse failure)
        PERMANENT_ERROR: Non-retryable error (unsupported language)
        SUPERSEDED: Completed, but a newer request took precedence
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    SUPERSEDED = "superseded"
