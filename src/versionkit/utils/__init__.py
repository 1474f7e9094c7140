"""Utility modules for the version value type."""

from .errors import FoundationError, InvalidVersionFormat, ProblemDetail
from .versioning import Version, int_value_for


__all__ = ["FoundationError", "InvalidVersionFormat", "ProblemDetail", "Version", "int_value_for"]
