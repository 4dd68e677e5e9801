"""
Catalog Validator - Checks the completeness and consistency of catalog entries.

Catches issues like:
- Empty catalog
- Duplicate pattern IDs
- Empty names
- Missing question prompts or rationale bullets
- Entries without a runnable demo
- Related-pattern references that point nowhere
- Categories with no entries
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from patternbook.patterns.registry import Pattern, PatternCategory


class ValidationSeverity(Enum):
    ERROR = "error"      # Entry cannot be served correctly
    WARNING = "warning"  # Entry works but is incomplete
    INFO = "info"        # Suggestions for improvement


@dataclass
class ValidationIssue:
    """A single validation issue found in the catalog"""
    severity: ValidationSeverity
    code: str           # Machine-readable issue code
    message: str        # Human-readable description
    pattern_id: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "pattern_id": self.pattern_id,
            "suggestion": self.suggestion,
        }


@dataclass
class CatalogValidationResult:
    """Result of catalog validation"""
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.INFO)

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        """Get human-readable summary"""
        status = "Valid" if self.is_valid else "Invalid"
        return (
            f"{status} | {self.stats.get('patterns', 0)} patterns | "
            f"Errors: {self.error_count}, Warnings: {self.warning_count}, Info: {self.info_count}"
        )


class CatalogValidator:
    """
    Validates a sequence of catalog entries.

    Usage:
        validator = CatalogValidator()
        result = validator.validate(registry.list_all())

        if not result.is_valid:
            for issue in result.issues:
                print(f"[{issue.severity.value}] {issue.message}")
    """

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def validate(self, patterns: Sequence[Pattern]) -> CatalogValidationResult:
        """Validate the entire catalog."""
        issues: List[ValidationIssue] = []

        if not patterns:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code="EMPTY_CATALOG",
                message="Catalog has no patterns",
                suggestion="Register the built-in catalog or load a YAML catalog file",
            ))
            return CatalogValidationResult(is_valid=False, issues=issues, stats={"patterns": 0})

        known_ids = {p.id for p in patterns}

        # Run all validation checks
        issues.extend(self._check_duplicate_ids(patterns))
        issues.extend(self._check_names(patterns))
        issues.extend(self._check_teaching_content(patterns))
        issues.extend(self._check_demos(patterns))
        issues.extend(self._check_related(patterns, known_ids))
        issues.extend(self._check_category_coverage(patterns))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)

        is_valid = not has_errors
        if self.strict_mode:
            is_valid = not has_errors and not has_warnings

        return CatalogValidationResult(
            is_valid=is_valid,
            issues=issues,
            stats=self._calculate_stats(patterns),
        )

    def _check_duplicate_ids(self, patterns: Sequence[Pattern]) -> List[ValidationIssue]:
        issues = []
        seen_ids: Dict[str, int] = defaultdict(int)
        for pattern in patterns:
            seen_ids[pattern.id] += 1
        for pattern_id, count in seen_ids.items():
            if count > 1:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="DUPLICATE_PATTERN_ID",
                    message=f"Duplicate pattern ID '{pattern_id}' appears {count} times",
                    pattern_id=pattern_id,
                    suggestion="Ensure each pattern has a unique ID",
                ))
        return issues

    def _check_names(self, patterns: Sequence[Pattern]) -> List[ValidationIssue]:
        issues = []
        for pattern in patterns:
            if not pattern.name or not pattern.name.strip():
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="EMPTY_NAME",
                    message=f"Pattern '{pattern.id}' has an empty name",
                    pattern_id=pattern.id,
                    suggestion="Give the pattern its catalog name",
                ))
        return issues

    def _check_teaching_content(self, patterns: Sequence[Pattern]) -> List[ValidationIssue]:
        issues = []
        for pattern in patterns:
            if not pattern.question or not pattern.question.strip():
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="MISSING_QUESTION",
                    message=f"Pattern '{pattern.id}' has no question prompt",
                    pattern_id=pattern.id,
                    suggestion="Describe the design problem the example answers",
                ))
            if not [r for r in pattern.rationale if r and r.strip()]:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="MISSING_RATIONALE",
                    message=f"Pattern '{pattern.id}' has no rationale bullets",
                    pattern_id=pattern.id,
                    suggestion="Explain why the example solves the problem",
                ))
        return issues

    def _check_demos(self, patterns: Sequence[Pattern]) -> List[ValidationIssue]:
        issues = []
        for pattern in patterns:
            if pattern.demo is None:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="MISSING_DEMO",
                    message=f"Pattern '{pattern.id}' has no runnable demo",
                    pattern_id=pattern.id,
                    suggestion="Point 'module' at an example module exposing demo()",
                ))
        return issues

    def _check_related(self, patterns: Sequence[Pattern], known_ids: set) -> List[ValidationIssue]:
        issues = []
        for pattern in patterns:
            for related_id in pattern.related:
                if related_id not in known_ids:
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        code="UNKNOWN_RELATED",
                        message=f"Pattern '{pattern.id}' references unknown related pattern '{related_id}'",
                        pattern_id=pattern.id,
                        suggestion=f"Add '{related_id}' to the catalog or drop the reference",
                    ))
        return issues

    def _check_category_coverage(self, patterns: Sequence[Pattern]) -> List[ValidationIssue]:
        issues = []
        present = {p.category for p in patterns}
        for category in PatternCategory:
            if category not in present:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.INFO,
                    code="SPARSE_CATEGORY",
                    message=f"Category '{category.value}' has no patterns",
                    suggestion=f"Consider adding {category.value} examples",
                ))
        return issues

    def _calculate_stats(self, patterns: Sequence[Pattern]) -> Dict[str, int]:
        counts: Dict[str, int] = defaultdict(int)
        for pattern in patterns:
            counts[pattern.category.value] += 1
        return {
            "patterns": len(patterns),
            "with_demo": sum(1 for p in patterns if p.demo is not None),
            **{category.value: counts.get(category.value, 0) for category in PatternCategory},
        }


def validate_catalog(patterns: Sequence[Pattern], strict: bool = False) -> CatalogValidationResult:
    """Convenience function to validate a catalog."""
    validator = CatalogValidator(strict_mode=strict)
    return validator.validate(patterns)


def raise_on_errors(patterns: Sequence[Pattern]) -> None:
    """Validate the catalog and raise if any errors were found."""
    result = validate_catalog(patterns)
    if not result.is_valid:
        error_messages = [
            f"[{i.code}] {i.message}"
            for i in result.issues
            if i.severity == ValidationSeverity.ERROR
        ]
        raise ValueError(
            f"Catalog validation failed with {result.error_count} errors:\n" +
            "\n".join(error_messages)
        )
