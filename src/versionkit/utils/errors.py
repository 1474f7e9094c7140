"""Problem detail helpers and the exceptions raised by version parsing.

Key Responsibilities:
    - Provide an RFC 7807 shaped data structure describing failures
    - Supply a base exception that carries problem details
    - Define :class:`InvalidVersionFormat`, the only error raised while
      parsing version strings

Collaborators:
    - Upstream: :mod:`versionkit.utils.versioning` raises
      :class:`InvalidVersionFormat` for malformed input
    - Downstream: Callers may serialise :class:`ProblemDetail` instances when
      surfacing the failure

Side Effects:
    - None; helpers are pure data containers

Thread Safety:
    - Thread-safe; instances are not shared or mutated after creation
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from .strings import quote

# ==============================================================================
# TYPE DEFINITIONS
# ==============================================================================

__all__ = ["FoundationError", "InvalidVersionFormat", "ProblemDetail"]


@dataclass(slots=True)
class ProblemDetail:
    """Lightweight problem details object compliant with RFC 7807."""

    title: str
    status: int
    detail: str | None = None
    type: str = "about:blank"
    instance: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def model_dump(self) -> dict[str, Any]:
        """Return a dictionary representation with optional fields dropped."""
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        if not payload.get("extra"):
            payload.pop("extra", None)
        return payload


class FoundationError(RuntimeError):
    """Base exception that carries a :class:`ProblemDetail` instance."""

    def __init__(
        self,
        message: str,
        *,
        status: int = 500,
        detail: str | None = None,
        type: str = "about:blank",
        instance: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialise the exception with structured problem detail attributes.

        Args:
            message: Human readable error summary.
            status: Status code associated with the problem.
            detail: Optional detailed description of the failure.
            type: Problem type URI, defaults to ``about:blank``.
            instance: Optional URI reference identifying the specific occurrence.
            extra: Additional attributes included in the serialized payload.
        """
        super().__init__(message)
        self.problem = ProblemDetail(
            title=message,
            status=status,
            detail=detail,
            type=type,
            instance=instance,
            extra=extra or {},
        )


# ==============================================================================
# PARSING ERRORS
# ==============================================================================


class InvalidVersionFormat(FoundationError, ValueError):
    """Raised when a version string does not start with a number.

    Attributes:
        text: The trimmed input that was rejected.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"A version number string {quote(text)} must start with a number.",
            status=400,
            detail="Version strings must begin with a decimal major number",
            extra={"text": text},
        )

    def __reduce__(self) -> tuple[type[InvalidVersionFormat], tuple[str]]:
        return (type(self), (self.text,))
