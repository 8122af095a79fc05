from .errors import ValidationError, ValidationIssue
from .dataset_validation import validate_frame

__all__ = ["ValidationError", "ValidationIssue", "validate_frame"]
