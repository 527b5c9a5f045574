"""
Engine Errors

Only malformed categorical input (an unknown class, tier or scheme id) is an
error. Absent or out-of-range numbers are corrected at the boundary instead.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError


class ReadinessError(Exception):
    """Base class for readiness engine errors."""


class InvalidInputError(ReadinessError):
    """Input record failed validation."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInputError":
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        fields = ", ".join(e["field"] or "<root>" for e in errors)
        return cls(f"Invalid readiness input: {fields}", errors)
