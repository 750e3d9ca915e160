from rut_lib.core.services.batch_validation import (
    BatchReport,
    ValidationOutcome,
    validate_many,
    validate_one,
)

__all__ = [
    "BatchReport",
    "ValidationOutcome",
    "validate_many",
    "validate_one",
]
