"""Operation status enumeration.

Status codes used to classify the outcome of a resolution.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Non-retryable error (invalid input, broken source)
        NOT_FOUND: Requested translation or language not found
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
