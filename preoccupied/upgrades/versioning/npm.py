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
preoccupied.upgrades.versioning.npm
npm flavoured semantic versioning, backed by ``semantic_version``.

Versions are parsed as in :mod:`preoccupied.upgrades.versioning.semantic`,
and constraints are npm ranges such as ``^1.2.0``, ``~1.2``, ``1.x``,
``1.0.0 - 2.0.0`` or ``<1 || >=3``. Unstable releases may be followed
across minor and patch boundaries within their major.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Optional

from semantic_version import Version

from .. import rangespec


__all__ = (
    "SCHEME_ID",
    "NpmVersioning",
)


SCHEME_ID = "npm"


def _precedence(version: Version) -> Version:
    # build metadata does not participate in ordering
    return version.truncate("prerelease")


class NpmVersioning:
    """
    Versioning scheme for npm packages.
    """

    id = SCHEME_ID
    allow_unstable_major_upgrades = True


    def is_version(self, version: str) -> bool:
        return rangespec.valid(version) is not None


    def is_valid(self, version: str) -> bool:
        return (rangespec.valid(version) is not None or
                rangespec.valid_range(version) is not None)


    def is_stable(self, version: str) -> bool:
        parsed = rangespec.valid(version)
        return parsed is not None and not parsed.prerelease


    def is_greater_than(self, version: str, other: str) -> bool:
        left, right = rangespec.valid(version), rangespec.valid(other)
        if left is None or right is None:
            return False
        return _precedence(left) > _precedence(right)


    def equals(self, version: str, other: str) -> bool:
        left, right = rangespec.valid(version), rangespec.valid(other)
        if left is None or right is None:
            return False
        return _precedence(left) == _precedence(right)


    def get_major(self, version: str) -> Optional[int]:
        parsed = rangespec.valid(version)
        return None if parsed is None else parsed.major


    def get_minor(self, version: str) -> Optional[int]:
        parsed = rangespec.valid(version)
        return None if parsed is None else parsed.minor


    def get_patch(self, version: str) -> Optional[int]:
        parsed = rangespec.valid(version)
        return None if parsed is None else parsed.patch


    def matches(self, version: str, constraint: str) -> bool:
        candidate = rangespec.valid(version)
        if candidate is None:
            # a range stands in for the lowest version it admits
            candidate = rangespec.min_version(version)
        return candidate is not None and rangespec.satisfies(candidate, constraint)


# The end.
