"""
Validation framework for maripat reference data.

Collects issues instead of raising so a whole catalog can be checked in one
pass and reported together.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from dataclasses import dataclass
from enum import Enum
import math


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass
class ValidationIssue:
    """Represents a single validation issue."""
    severity: ValidationSeverity
    message: str
    field: Optional[str] = None
    value: Optional[Any] = None
    suggestion: Optional[str] = None
    code: Optional[str] = None


@dataclass
class ValidationResult:
    """Comprehensive validation result."""
    is_valid: bool
    issues: List[ValidationIssue]
    warnings_count: int
    errors_count: int
    critical_count: int

    @property
    def has_warnings(self) -> bool:
        return self.warnings_count > 0

    @property
    def has_errors(self) -> bool:
        return self.errors_count > 0

    def get_issues_by_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        """Get all issues of a specific severity."""
        return [issue for issue in self.issues if issue.severity == severity]

    def get_summary(self) -> str:
        """Get a summary of validation results."""
        if self.is_valid and not self.warnings_count:
            return "✓ Validation passed"

        parts = []
        if self.critical_count > 0:
            parts.append(f"{self.critical_count} critical")
        if self.errors_count > 0:
            parts.append(f"{self.errors_count} errors")
        if self.warnings_count > 0:
            parts.append(f"{self.warnings_count} warnings")

        verdict = "✓ Validation passed with" if self.is_valid else "✗ Validation failed:"
        return f"{verdict} {', '.join(parts)}"


class BaseValidator(ABC):
    """Abstract base class for all validators."""

    def __init__(self, strict: bool = False):
        """
        Initialize validator.

        Args:
            strict: If True, warnings are treated as errors
        """
        self.strict = strict
        self.issues: List[ValidationIssue] = []

    def add_issue(
        self,
        severity: ValidationSeverity,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        suggestion: Optional[str] = None,
        code: Optional[str] = None
    ):
        """Add a validation issue."""
        self.issues.append(ValidationIssue(severity, message, field, value, suggestion, code))

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data and return comprehensive result.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with all issues found
        """
        self.issues = []
        self._validate_impl(data)
        return self._build_result()

    @abstractmethod
    def _validate_impl(self, data: Any):
        """Implement specific validation logic."""
        pass

    def _build_result(self) -> ValidationResult:
        warnings = sum(1 for issue in self.issues if issue.severity == ValidationSeverity.WARNING)
        errors = sum(1 for issue in self.issues if issue.severity == ValidationSeverity.ERROR)
        critical = sum(1 for issue in self.issues if issue.severity == ValidationSeverity.CRITICAL)

        # In strict mode, warnings become errors
        if self.strict:
            errors += warnings
            warnings = 0

        return ValidationResult(
            is_valid=errors == 0 and critical == 0,
            issues=list(self.issues),
            warnings_count=warnings,
            errors_count=errors,
            critical_count=critical
        )


class CoordinateValidator(BaseValidator):
    """Validator for (lat, lon) pairs in decimal degrees."""

    def _validate_impl(self, data: Any):
        try:
            lat, lon = data
        except (TypeError, ValueError):
            self.add_issue(
                ValidationSeverity.CRITICAL,
                f"Coordinate must be a (lat, lon) pair, got {data!r}",
                value=data,
                suggestion="Use [lat, lon] in decimal degrees"
            )
            return

        for value, name, limit in ((lat, 'lat', 90.0), (lon, 'lon', 180.0)):
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                self.add_issue(
                    ValidationSeverity.ERROR,
                    f"{name} must be a finite number, got {value!r}",
                    field=name,
                    value=value
                )
            elif abs(value) > limit:
                self.add_issue(
                    ValidationSeverity.ERROR,
                    f"{name} {value} outside [-{limit:g}, {limit:g}]",
                    field=name,
                    value=value
                )


class BaseRecordValidator(BaseValidator):
    """Validates a ``Base`` against the set of known patrol area ids."""

    def __init__(self, area_ids, strict: bool = False):
        super().__init__(strict)
        self.area_ids = set(area_ids)

    def _validate_impl(self, base):
        if base.region not in self.area_ids:
            self.add_issue(
                ValidationSeverity.ERROR,
                f"Base {base.id} declares unknown region '{base.region}'",
                field=f"{base.id}.region",
                value=base.region,
                suggestion=f"Use one of {sorted(self.area_ids)}",
                code="unknown-region"
            )
        for issue in CoordinateValidator().validate(tuple(base.coordinates)).issues:
            self.add_issue(issue.severity, issue.message, field=f"{base.id}.coordinates", value=issue.value)
        if not base.aircraft:
            self.add_issue(
                ValidationSeverity.INFO,
                f"Base {base.id} lists no aircraft; the default type will be used",
                field=f"{base.id}.aircraft",
                code="no-aircraft"
            )


class PatrolAreaValidator(BaseValidator):
    """Validates bounds ordering and that the centre lies inside the bounds."""

    def _validate_impl(self, area):
        if area.bounds.south >= area.bounds.north:
            self.add_issue(
                ValidationSeverity.ERROR,
                f"Area {area.id} has south >= north",
                field=f"{area.id}.bounds",
                value=(area.bounds.south, area.bounds.north)
            )
        if not area.bounds.contains(area.center):
            self.add_issue(
                ValidationSeverity.WARNING,
                f"Area {area.id} centre {tuple(area.center)} lies outside its bounds",
                field=f"{area.id}.center",
                value=tuple(area.center)
            )


class CatalogValidator(BaseValidator):
    """Runs every record validator over a ``ReferenceCatalog``."""

    def _validate_impl(self, catalog):
        area_validator = PatrolAreaValidator(self.strict)
        for area in catalog.patrol_areas.values():
            self.issues.extend(area_validator.validate(area).issues)

        base_validator = BaseRecordValidator(catalog.patrol_areas.keys(), self.strict)
        for base in catalog.bases.values():
            self.issues.extend(base_validator.validate(base).issues)

        for mission_type in catalog.mission_types.values():
            if not mission_type.preferred_aircraft:
                self.add_issue(
                    ValidationSeverity.WARNING,
                    f"Mission type {mission_type.id} has no aircraft preference list",
                    field=f"{mission_type.id}.preferred_aircraft"
                )
            if mission_type.min_duration_hours > mission_type.max_duration_hours:
                self.add_issue(
                    ValidationSeverity.ERROR,
                    f"Mission type {mission_type.id} has min duration above max",
                    field=f"{mission_type.id}.duration_hours"
                )


def summarize_issues(result: ValidationResult) -> Dict[str, int]:
    """Count issues per severity value, e.g. ``{'error': 0, 'warning': 2, ...}``."""
    return {severity.value: len(result.get_issues_by_severity(severity)) for severity in ValidationSeverity}
