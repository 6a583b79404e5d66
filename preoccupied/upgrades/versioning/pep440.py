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
preoccupied.upgrades.versioning.pep440
PEP 440 versions and specifiers, backed by ``packaging``.

The module level :func:`is_valid` and :func:`matches` are also used directly
as a fallback engine for constraints written for Python packaging tools.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Iterable, Optional

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


__all__ = (
    "SCHEME_ID",
    "Pep440Versioning",
    "is_valid",
    "matches",
    "min_version",
    "parse",
    "parse_specifier",
)


SCHEME_ID = "pep440"


def parse(version: Optional[str]) -> Optional[Version]:
    """
    Parse `version`, returning None if it is not a PEP 440 version.
    """

    if not version:
        return None

    try:
        return Version(version.strip())
    except InvalidVersion:
        return None


def parse_specifier(constraint: Optional[str]) -> Optional[SpecifierSet]:
    """
    Parse `constraint` as a comma-separated specifier set, returning None if
    it is blank or invalid.
    """

    if not constraint or not constraint.strip():
        return None

    try:
        return SpecifierSet(constraint)
    except InvalidSpecifier:
        return None


def min_version(specs: Iterable[SpecifierSet]) -> Optional[Version]:
    """
    Return the lowest version admitted by any of the specifier sets `specs`,
    or None if none of them can be satisfied.

    The lower bound of a specifier set is one of its literal versions, the
    successor of one of them at micro, minor or major granularity, or ``0``.
    Those candidates are checked in ascending order.
    """

    specs = list(specs)
    candidates = {Version("0")}
    for spec_set in specs:
        for spec in spec_set:
            found = parse(spec.version.rstrip(".*"))
            if found is None:
                continue
            major, minor, micro = (list(found.release) + [0, 0])[:3]
            candidates.update((found,
                               Version(f"{major}.{minor}.{micro + 1}"),
                               Version(f"{major}.{minor + 1}"),
                               Version(f"{major + 1}")))

    for candidate in sorted(candidates):
        if any(spec_set.contains(candidate, prereleases=True)
               for spec_set in specs):
            return candidate

    return None


def is_valid(constraint: Optional[str]) -> bool:
    """
    True if `constraint` is a version or a specifier set.
    """

    return parse(constraint) is not None or parse_specifier(constraint) is not None


def matches(version: Optional[str], constraint: Optional[str]) -> bool:
    """
    True if `version` satisfies `constraint`. A bare version as constraint
    demands equality. Prereleases are admitted by specifier sets; filtering
    unstable releases is left to the caller. A specifier set given as
    `version` stands in for the lowest version it admits.
    """

    parsed = parse(version)
    if parsed is None:
        spec = parse_specifier(version)
        parsed = None if spec is None else min_version([spec])
    if parsed is None:
        return False

    exact = parse(constraint)
    if exact is not None:
        return parsed == exact

    spec = parse_specifier(constraint)
    return spec is not None and spec.contains(parsed, prereleases=True)


class Pep440Versioning:
    """
    Versioning scheme for Python packages.
    """

    id = SCHEME_ID
    allow_unstable_major_upgrades = False


    def is_version(self, version: str) -> bool:
        return parse(version) is not None


    def is_valid(self, version: str) -> bool:
        return is_valid(version)


    def is_stable(self, version: str) -> bool:
        parsed = parse(version)
        return parsed is not None and not parsed.is_prerelease


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
        return None if parsed is None else parsed.micro


    def matches(self, version: str, constraint: str) -> bool:
        return matches(version, constraint)


# The end.
