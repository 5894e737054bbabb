"""Error handling utilities for smart_speller."""

from smart_speller.error_handling.error_enums import ErrorCode
from smart_speller.error_handling.error_models import ErrorDetail
from smart_speller.error_handling.factories import (
    create_error_detail,
    raise_configuration_error,
    raise_initialization_failed,
    raise_parsing_error,
    raise_processing_error,
    raise_resource_not_found,
    raise_unknown_error,
    raise_validation_error,
)
from smart_speller.error_handling.speller_error import SpellerError

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "SpellerError",
    "create_error_detail",
    "raise_configuration_error",
    "raise_initialization_failed",
    "raise_parsing_error",
    "raise_processing_error",
    "raise_resource_not_found",
    "raise_unknown_error",
    "raise_validation_error",
]
