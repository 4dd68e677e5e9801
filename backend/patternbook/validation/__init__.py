"""
Validation module for catalog entries.
"""

from patternbook.validation.catalog_validator import (
    CatalogValidationResult,
    CatalogValidator,
    ValidationIssue,
    ValidationSeverity,
    raise_on_errors,
    validate_catalog,
)

__all__ = [
    "CatalogValidationResult",
    "CatalogValidator",
    "ValidationIssue",
    "ValidationSeverity",
    "raise_on_errors",
    "validate_catalog",
]
