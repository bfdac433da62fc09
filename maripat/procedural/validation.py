"""Validation and error handling for mission generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..resources.reference_data import ReferenceCatalog


class MissionGenerationError(Exception):
    """Base exception for mission generation failures."""
    pass


class InvalidParameters(MissionGenerationError):
    """Raised when a base id, mission type, patrol area or count cannot be resolved."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class NoActiveMission(MissionGenerationError):
    """Raised when a planning session is asked for a mission it does not hold."""
    pass


@dataclass(frozen=True)
class ReferenceDataGap:
    """
    A lookup miss that was covered by a documented default.

    Never raised; the generator records these so callers can see which parts
    of a mission were filled from fallbacks.
    """
    table: str
    key: str
    fallback: str


@dataclass
class ValidationResult:
    """Result of a validation check."""
    valid: bool
    message: str = ""
    field: Optional[str] = None
    value: Any = None

    def raise_if_invalid(self, error_class: type = InvalidParameters):
        """Raise an error if validation failed."""
        if self.valid:
            return
        if issubclass(error_class, InvalidParameters):
            raise error_class(self.message, field=self.field, value=self.value)
        raise error_class(self.message)


class RequestValidator:
    """Validates mission request parameters against the reference catalog."""

    def __init__(self, catalog: ReferenceCatalog):
        self.catalog = catalog

    def validate_base(self, base_id: str) -> ValidationResult:
        if not base_id or self.catalog.get_base(base_id) is None:
            return ValidationResult(
                valid=False,
                message=f"Unknown base id: {base_id!r}",
                field="base_id",
                value=base_id,
            )
        return ValidationResult(valid=True)

    def validate_mission_type(self, mission_type: str) -> ValidationResult:
        if not mission_type or self.catalog.get_mission_type(mission_type) is None:
            known = ", ".join(sorted(self.catalog.mission_types))
            return ValidationResult(
                valid=False,
                message=f"Unknown mission type: {mission_type!r} (expected one of {known})",
                field="mission_type",
                value=mission_type,
            )
        return ValidationResult(valid=True)

    def validate_patrol_area(self, area_id: Optional[str]) -> ValidationResult:
        """An omitted area is valid (it is resolved later); an explicit one must exist."""
        if area_id is None:
            return ValidationResult(valid=True)
        if self.catalog.get_patrol_area(area_id) is None:
            return ValidationResult(
                valid=False,
                message=f"Unknown patrol area: {area_id!r}",
                field="patrol_area_id",
                value=area_id,
            )
        return ValidationResult(valid=True)

    def validate_request(self, base_id: str, mission_type: str, area_id: Optional[str]) -> ValidationResult:
        """Return the first failing check, or a valid result."""
        for check in (
            self.validate_base(base_id),
            self.validate_mission_type(mission_type),
            self.validate_patrol_area(area_id),
        ):
            if not check.valid:
                return check
        return ValidationResult(valid=True)
