# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Core version parsing and comparison for selfupgrade.

This module is pure: it does NOT download or read anything. It only parses
and orders version strings such as release tags.

Parsing is lenient. A release field that is not an integer counts as 0,
so every input string yields some Version and comparison never fails.
Integers are 64-bit: a release field beyond that range is clamped to the
bound, and a prerelease field beyond it is kept as a word.

Ordering rules, applied in turn until one decides:

1. Release fields, compared numerically ("1.10.0" > "1.9.0").
2. A longer release tuple wins when the shared fields are equal
   ("1.2.3.1" > "1.2.3").
3. A final release beats any prerelease of the same release tuple.
4. Prerelease identifiers, compared pairwise. Numbers compare as numbers,
   words compare as strings, and a number is ALWAYS older than a word
   ("1.2.3-1" < "1.2.3-alpha").
5. A longer prerelease wins when the shared identifiers are equal
   ("1.2.3-beta" < "1.2.3-beta.2").

Build metadata after "+" and a single leading "v"/"V" are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
import functools
import re
from typing import Callable, Union

from selfupgrade.logging import get_global_logger

# ----------------------------
# Identifiers
# ----------------------------


@dataclass(frozen=True)
class Numeric:
    """Prerelease identifier made only of digits (e.g., the 2 in "beta.2")."""

    value: int


@dataclass(frozen=True)
class Alpha:
    """Prerelease identifier that is not an integer (e.g., "beta")."""

    text: str


Identifier = Union[Numeric, Alpha]


@dataclass(frozen=True)
class Version:
    """Parsed version string.

    Attributes:
        release: Numeric release fields (major, minor, patch, ...). Never
            empty.
        prerelease: Prerelease identifiers. Empty for a final release.

    """

    release: tuple[int, ...]
    prerelease: tuple[Identifier, ...] = ()

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)


# ----------------------------
# Parsing
# ----------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def _parse_int(field: str) -> tuple[int, bool]:
    """Parse a strict decimal 64-bit integer.

    Returns (value, ok). Text that is not an integer gives (0, False).
    Out-of-range integers give the nearest 64-bit bound and ok=False.

    int() alone is too forgiving here: it accepts surrounding whitespace,
    underscores and non-ASCII digits.
    """
    if not _INT_RE.fullmatch(field):
        return 0, False
    n = int(field)
    if n > _INT64_MAX:
        return _INT64_MAX, False
    if n < _INT64_MIN:
        return _INT64_MIN, False
    return n, True


def parse_version(v: str) -> Version:
    """Split a version string into release fields and prerelease identifiers.

    Args:
        v: Version string, e.g. "v1.2.3-beta.2+build.5".

    Returns:
        The parsed version. For the example above:
        Version(release=(1, 2, 3), prerelease=(Alpha("beta"), Numeric(2))).

    Example:
        ```python
        parse_version("1.x.3")
        # Version(release=(1, 0, 3), prerelease=())
        ```

    """
    if v.startswith(("v", "V")):
        v = v[1:]
    v = v.split("+", 1)[0]
    core, sep, pre = v.partition("-")

    release = tuple(_parse_int(field)[0] for field in core.split("."))

    prerelease: tuple[Identifier, ...] = ()
    if sep:
        identifiers: list[Identifier] = []
        for field in pre.split("."):
            n, ok = _parse_int(field)
            identifiers.append(Numeric(n) if ok else Alpha(field))
        prerelease = tuple(identifiers)

    return Version(release=release, prerelease=prerelease)


# ----------------------------
# Comparison
# ----------------------------


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Compare two prerelease identifiers.

    A Numeric identifier is always older than an Alpha one, regardless of
    their contents.
    """
    if isinstance(a, Numeric):
        if isinstance(b, Numeric):
            return _cmp(a.value, b.value)
        return -1
    if isinstance(b, Numeric):
        return 1
    return _cmp(a.text, b.text)


def _compare_sequences(
    a: tuple, b: tuple, element_cmp: Callable[[object, object], int]
) -> int:
    """Compare pairwise up to the shorter length, then prefer the longer."""
    for x, y in zip(a, b):
        result = element_cmp(x, y)
        if result:
            return result
    return _cmp(len(a), len(b))


def compare_parsed(a: Version, b: Version) -> int:
    """Compare two parsed versions. Returns -1, 0 or 1."""
    result = _compare_sequences(a.release, b.release, _cmp)
    if result:
        return result

    # Final releases are newer than prereleases of the same release tuple
    if not a.prerelease or not b.prerelease:
        return _cmp(not a.prerelease, not b.prerelease)

    return _compare_sequences(a.prerelease, b.prerelease, compare_identifiers)


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings.

    Returns -1 if a < b, 0 if they are equal, 1 if a > b.

    Example:
        ```python
        compare_versions("1.2.3", "1.2.3-beta")     # 1
        compare_versions("1.2.3-1", "1.2.3-alpha")  # -1
        compare_versions("v1.2.3", "1.2.3+linux")   # 0
        ```

    """
    result = compare_parsed(parse_version(a), parse_version(b))

    logger = get_global_logger()
    if result < 0:
        logger.debug("VERSION", f"{a!r} is older than {b!r}")
    elif result > 0:
        logger.debug("VERSION", f"{a!r} is newer than {b!r}")
    else:
        logger.debug("VERSION", f"{a!r} is the same as {b!r}")
    return result


def is_newer(candidate: str, current: str | None) -> bool:
    """Decide whether 'candidate' should replace 'current'.

    Returns True iff candidate > current. When there is no current version,
    any candidate counts as newer.
    """
    if current is None:
        return True
    return compare_versions(candidate, current) > 0


_parsed_key = functools.cmp_to_key(compare_parsed)


def version_key(v: str):
    """Sort key ordering version strings like compare_versions.

    Example:
        ```python
        sorted(["1.2.3", "1.2.3-rc", "1.2.3-1"], key=version_key)
        # ['1.2.3-1', '1.2.3-rc', '1.2.3']
        ```

    """
    return _parsed_key(parse_version(v))
