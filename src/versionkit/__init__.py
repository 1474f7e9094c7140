"""versionkit - version number parsing and comparison.

Key Responsibilities:
    - Export the :class:`Version` value type and its parse error
    - Serve as the root package for all versionkit modules

Side Effects:
    - None: This module only re-exports names

Thread Safety:
    - Thread-safe: Exported types are immutable

Example:
    >>> from versionkit import Version
    >>> Version.parse("2.4.0-RC03").extra_info
    'RC03'
"""

from versionkit.utils.errors import InvalidVersionFormat
from versionkit.utils.versioning import Version, int_value_for

__all__ = ["InvalidVersionFormat", "Version", "int_value_for"]
