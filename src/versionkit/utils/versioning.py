"""Version number value type able to parse loosely structured version strings.

Key Responsibilities:
    - Provide the immutable ``Version`` dataclass (major, minor, micro plus an
      optional qualifier and build metadata)
    - Parse version strings reported by third-party libraries, which often
      carry free-form suffixes such as ``-RC03`` or ``.nightly``
    - Expose a single integer encoding used for coarse version comparisons

Collaborators:
    - Upstream: Callers parse strings with :meth:`Version.parse` or build
      instances from explicit numbers
    - Downstream: :class:`~versionkit.utils.errors.InvalidVersionFormat` for
      rejected input

Side Effects:
    - Logs rejected inputs at debug level through stdlib logging, which
      emits nothing unless the application configures handlers; otherwise pure

Thread Safety:
    - Thread-safe; fields are write-once and the memoized rendering and hash
      are idempotent, so a race at worst computes them twice

Performance Characteristics:
    - Parsing is linear in the length of the input, everything else is O(1)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from functools import cached_property
from typing import Any

from .errors import InvalidVersionFormat
from .logging import get_logger

logger = get_logger(__name__)

__all__ = ["Version", "int_value_for"]

# ==============================================================================
# CONSTANTS
# ==============================================================================

MAJOR_FACTOR = 1_000_000
MINOR_FACTOR = 1_000
_QUALIFIER_SEPARATORS = frozenset(".-_")
_HASH_PRIME = 31
_MEMOIZED_ATTRIBUTES = ("_rendered", "_hash_value")


def int_value_for(major: int, minor: int, micro: int) -> int:
    """Return ``major * 1000000 + minor * 1000 + micro``."""
    return major * MAJOR_FACTOR + minor * MINOR_FACTOR + micro


# ==============================================================================
# DATA MODELS
# ==============================================================================


@dataclass(frozen=True, eq=False)
class Version:
    """Version number plus the qualifier and build information that came with it.

    Attributes:
        major: The 1st version number, like 1 in ``"1.2.3"``.
        minor: The 2nd version number, like 2 in ``"1.2.3"``.
        micro: The 3rd version number, like 3 in ``"1.2.3"``.
        extra_info: The text after the micro number without its leading dot,
            dash or underscore, like ``"RC03"`` in ``"2.4.0-RC03"``. Usually a
            qualifier (RC, SNAPSHOT, nightly, beta) and sometimes build info.
        gae_compliant: Google App Engine compliance, or ``None`` if unknown.
        build_date: The build date if known, or ``None``.
        int_value: ``major * 1000000 + minor * 1000 + micro``.
        original_text: The trimmed string this instance was parsed from, or
            ``None`` when built from explicit numbers.
    """

    major: int
    minor: int = 0
    micro: int = 0
    extra_info: str | None = None
    gae_compliant: bool | None = None
    build_date: datetime | None = None
    int_value: int = field(init=False, repr=False)
    original_text: str | None = field(default=None, init=False, repr=False)

    int_value_for = staticmethod(int_value_for)

    def __post_init__(self) -> None:
        object.__setattr__(self, "int_value", int_value_for(self.major, self.minor, self.micro))

    @classmethod
    def parse(
        cls,
        text: str,
        gae_compliant: bool | None = None,
        build_date: datetime | None = None,
    ) -> Version:
        """Parse a version string such as ``"2.3.20"`` or ``"2.4.0-RC03"``.

        Up to three dot separated numbers are read; missing ones default to 0.
        Whatever follows (a fourth dot, or any other non-digit character) is
        kept as ``extra_info`` after dropping one leading ``.``, ``-`` or ``_``.

        Args:
            text: Version string; surrounding whitespace is ignored.
            gae_compliant: Optional compliance flag stored as given.
            build_date: Optional build date stored as given.

        Returns:
            Parsed ``Version`` whose string form is the trimmed ``text``.

        Raises:
            InvalidVersionFormat: If ``text`` does not start with a number.
        """
        text = text.strip()

        parts = [0, 0, 0]
        part_index = 0
        has_digit = False
        tail: str | None = None
        for position, char in enumerate(text):
            if "0" <= char <= "9":
                parts[part_index] = parts[part_index] * 10 + (ord(char) - ord("0"))
                has_digit = True
            elif char == "." and part_index < 2:
                part_index += 1
            else:
                tail = text[position:]
                break

        if not has_digit:
            logger.debug("version.parse.rejected", text=text)
            raise InvalidVersionFormat(text)

        if tail is not None and tail[0] in _QUALIFIER_SEPARATORS:
            tail = tail[1:]

        version = cls(parts[0], parts[1], parts[2], tail, gae_compliant, build_date)
        object.__setattr__(version, "original_text", text)
        return version

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @cached_property
    def _rendered(self) -> str:
        rendered = f"{self.major}.{self.minor}.{self.micro}"
        if self.extra_info is not None:
            rendered += f"-{self.extra_info}"
        return rendered

    def __str__(self) -> str:
        """Return the parsed text verbatim, or the canonical ``major.minor.micro[-extra]``."""
        if self.original_text is not None:
            return self.original_text
        return self._rendered

    # ------------------------------------------------------------------
    # Equality and hashing
    # ------------------------------------------------------------------
    @cached_property
    def _hash_value(self) -> int:
        result = 1
        for part in (self.build_date, self.extra_info, self.gae_compliant, self.int_value):
            result = _HASH_PRIME * result + hash(part)
        return hash(result)

    def __hash__(self) -> int:
        return self._hash_value

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Version) or other.__class__ is not self.__class__:
            return NotImplemented
        if self.int_value != other.int_value:
            return False
        if hash(self) != hash(other):
            return False
        return (
            self.build_date == other.build_date
            and self.extra_info == other.extra_info
            and self.gae_compliant == other.gae_compliant
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def __getstate__(self) -> dict[str, Any]:
        # str hashes are salted per process, so memoized values are not shipped
        state = dict(self.__dict__)
        for name in _MEMOIZED_ATTRIBUTES:
            state.pop(name, None)
        return state
