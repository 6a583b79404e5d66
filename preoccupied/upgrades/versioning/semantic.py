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
preoccupied.upgrades.versioning.semantic
Strict Semantic Versioning 2.0, backed by the ``semver`` package.

Versions must be complete ``major.minor.patch`` strings, optionally carrying
prerelease and build parts and a leading ``v``. Constraints are either a
single version or comparator expressions such as ``>=1.2.0 <2.0.0``; npm
style ranges are not part of this scheme's syntax.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import re
from typing import Optional

from semver import Version


__all__ = (
    "SCHEME_ID",
    "SemverVersioning",
    "parse",
)


SCHEME_ID = "semver"


_LEADING = re.compile(r"^v")

_COMPARATOR_SPLIT = re.compile(r"[\s,]+")

matcher_like = re.compile(r"^(?:[<>]=?|[=!]=)\d").match


def parse(version: Optional[str]) -> Optional[Version]:
    """
    Parse `version`, returning None if it is not a semantic version.
    """

    if not version:
        return None

    try:
        return Version.parse(_LEADING.sub("", version.strip()))
    except (TypeError, ValueError):
        return None


class SemverVersioning:
    """
    Versioning scheme for strict semantic versions.
    """

    id = SCHEME_ID
    allow_unstable_major_upgrades = False


    def is_version(self, version: str) -> bool:
        return parse(version) is not None


    def is_valid(self, version: str) -> bool:
        return parse(version) is not None


    def is_stable(self, version: str) -> bool:
        parsed = parse(version)
        return parsed is not None and parsed.prerelease is None


    def is_greater_than(self, version: str, other: str) -> bool:
        left, right = parse(version), parse(other)
        return left is not None and right is not None and left > right


    def equals(self, version: str, other: str) -> bool:
        left, right = parse(version), parse(other)
        return left is not None and right is not None and left == right


    def get_major(self, version: str) -> Optional[int]:
        parsed = parse(version)
        return None if parsed is None else parsed.major


    def get_minor(self, version: str) -> Optional[int]:
        parsed = parse(version)
        return None if parsed is None else parsed.minor


    def get_patch(self, version: str) -> Optional[int]:
        parsed = parse(version)
        return None if parsed is None else parsed.patch


    def matches(self, version: str, constraint: str) -> bool:
        """
        True if `version` equals the version `constraint`, or satisfies
        every comparator in it. Comparators are separated by whitespace or
        commas, eg. ``>=1.0.0, <2.0.0``.
        """

        parsed = parse(version)
        if parsed is None or not constraint:
            return False

        exact = parse(constraint)
        if exact is not None:
            return parsed == exact

        matchers = _COMPARATOR_SPLIT.split(constraint.strip())
        if not all(matcher_like(matcher) for matcher in matchers):
            return False

        try:
            return all(parsed.match(matcher) for matcher in matchers)
        except ValueError:
            return False


# The end.
