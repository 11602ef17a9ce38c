"""
Version parsing and comparison for selfupgrade.

Modules
-------
keys : module
    Lenient version parsing and the release ordering used for upgrades.

Public API
----------
Version : dataclass
    Parsed version: release tuple plus prerelease identifiers.
Numeric, Alpha : dataclasses
    The two kinds of prerelease identifier.
parse_version : function
    Parse a version string. Never raises.
compare_versions : function
    Compare two version strings, returning -1, 0, or 1.
is_newer : function
    Check if a candidate version is newer than the current version.
version_key : function
    Sort key consistent with compare_versions.

Examples
--------
    >>> from selfupgrade.versioning import compare_versions
    >>> compare_versions("1.10.0", "1.9.0")
    1
    >>> compare_versions("1.2.3-beta", "1.2.3")
    -1
    >>> compare_versions("1.2.3-1", "1.2.3-alpha")  # numbers sort before words
    -1

Notes
-----
- Unparsable release fields count as 0 ("1.x.3" == "1.0.3").
- Build metadata ("+...") never affects ordering.
"""

from .keys import (
    Alpha,
    Identifier,
    Numeric,
    Version,
    compare_identifiers,
    compare_parsed,
    compare_versions,
    is_newer,
    parse_version,
    version_key,
)

__all__ = [
    "Alpha",
    "Identifier",
    "Numeric",
    "Version",
    "compare_identifiers",
    "compare_parsed",
    "compare_versions",
    "is_newer",
    "parse_version",
    "version_key",
]
