from .pydantic import errors_from_pydantic, validate_model
from .result import ValidationResult

__all__ = ["ValidationResult", "errors_from_pydantic", "validate_model"]
