# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this library; if not, see <http://www.gnu.org/licenses/>.

"""
preoccupied.upgrades.rangespec
Scheme-agnostic semantic version ranges, in the npm dialect.

This is the fallback engine consulted when a constraint is not expressed in
the active versioning scheme's own syntax. Ranges such as ``^1.2.0``,
``1.x``, ``>=1.0.0 <2.0.0`` and ``>1`` are parsed by
:class:`semantic_version.NpmSpec`.

Example:

```python
assert satisfies("1.4.0", "^1.2.0")
assert coerce("release-1.4") == Version("1.4.0")
assert min_version(">1") == Version("2.0.0")
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import re
from typing import Optional, Union

from semantic_version import NpmSpec, Version


__all__ = (
    "coerce",
    "min_version",
    "satisfies",
    "valid",
    "valid_range",
)


_LEADING = re.compile(r"^v")

_NUMERIC = re.compile(
    r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")

_TOKEN_SPLIT = re.compile(r"[\s,|]+")

_OPERATORS = re.compile(r"^[<>=^~v]+")


def valid(value: Optional[str]) -> Optional[Version]:
    """
    Parse `value` as a complete semantic version, tolerating a leading
    ``v``. Returns None when the value is not a version.
    """

    if not value:
        return None

    try:
        return Version(_LEADING.sub("", value.strip()))
    except ValueError:
        return None


def valid_range(value: Optional[str]) -> Optional[NpmSpec]:
    """
    Parse `value` as an npm range expression. Returns None when the value is
    blank or not a range.
    """

    if not value or not value.strip():
        return None

    try:
        return NpmSpec(value.strip())
    except ValueError:
        return None


def _coerce_numeric(value: str) -> Optional[Version]:
    found = _NUMERIC.search(value)
    if found is None:
        return None

    major, minor, patch = (int(part or 0) for part in found.groups())
    return Version(major=major, minor=minor, patch=patch)


def min_version(value: Optional[str]) -> Optional[Version]:
    """
    Return the lowest version satisfying the range `value`, or None if the
    value is not a range or nothing can satisfy it.

    The lower bound of a range is always one of its literal versions, the
    successor of one of them at patch, minor or major granularity, or
    ``0.0.0``. Those candidates are checked in ascending order.
    """

    spec = valid_range(value)
    if spec is None:
        return None

    candidates = {Version("0.0.0")}
    for token in _TOKEN_SPLIT.split(value):
        token = _OPERATORS.sub("", token)
        found = valid(token) or _coerce_numeric(token)
        if found is not None:
            candidates.update((found,
                               found.next_patch(),
                               found.next_minor(),
                               found.next_major()))

    for candidate in sorted(candidates):
        if spec.match(candidate):
            return candidate

    return None


def coerce(value: Optional[str]) -> Optional[Version]:
    """
    Coerce `value` to the nearest semantic version. A range expression
    coerces to the lowest version it admits; any other text coerces to the
    first ``major[.minor[.patch]]`` run of digits found in it, with
    prerelease and other noise discarded. Returns None when neither applies.
    """

    if not value:
        return None

    if valid_range(value) is not None:
        lowest = min_version(value)
        if lowest is not None:
            return lowest

    return _coerce_numeric(value)


def satisfies(
        version: Union[str, Version, None],
        value: Optional[str]) -> bool:
    """
    True if `version` is a valid semantic version within the range `value`.
    """

    if isinstance(version, str):
        version = valid(version)

    spec = valid_range(value)
    if version is None or spec is None:
        return False

    return spec.match(version)


# The end.
