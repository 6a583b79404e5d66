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
preoccupied.upgrades.versioning.poetry
Poetry dependency constraints over PEP 440 versions.

Constraints are translated into ``packaging`` specifier sets:

| constraint      | specifiers           |
|-----------------|----------------------|
| ``^1.2.3``      | ``>=1.2.3,<2``       |
| ``^0.2.3``      | ``>=0.2.3,<0.3``     |
| ``~1.2.3``      | ``>=1.2.3,<1.3``     |
| ``~1``          | ``>=1,<2``           |
| ``1.2.*``       | ``==1.2.*``          |
| ``1.2.3``       | ``==1.2.3``          |
| ``*``           | (anything)           |

Terms are joined by commas or whitespace, and alternatives by ``||``.
Arbitrary equality (``===``) is not Poetry syntax.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import re
from typing import List, Optional

from packaging.specifiers import InvalidSpecifier, SpecifierSet

from .pep440 import min_version, parse


__all__ = (
    "SCHEME_ID",
    "PoetryVersioning",
    "parse_constraint",
)


SCHEME_ID = "poetry"


_OPERATOR_GAP = re.compile(r"(===|==|!=|~=|<=|>=|<|>|=|\^|~)\s+")

_TERM_SPLIT = re.compile(r"\s*,\s*|\s+")

_PASSTHROUGH = ("~=", "==", "!=", "<=", ">=", "<", ">")


def _join(release) -> str:
    return ".".join(str(part) for part in release)


def _caret(text: str) -> Optional[List[str]]:
    base = parse(text)
    if base is None:
        return None

    # bump the left-most non-zero component, or the last one given when
    # they are all zero
    release = list(base.release)
    for index, part in enumerate(release):
        if part:
            break
    else:
        index = len(release) - 1

    upper = release[:index] + [release[index] + 1]
    return [f">={base}", f"<{_join(upper)}"]


def _tilde(text: str) -> Optional[List[str]]:
    base = parse(text)
    if base is None:
        return None

    release = base.release
    if len(release) == 1:
        upper = [release[0] + 1]
    else:
        upper = [release[0], release[1] + 1]

    return [f">={base}", f"<{_join(upper)}"]


def _translate(term: str) -> Optional[List[str]]:
    if term == "*":
        return []
    elif term.startswith("==="):
        return None
    elif term.startswith("^"):
        return _caret(term[1:])
    elif term.startswith(_PASSTHROUGH):
        return [term]
    elif term.startswith("~"):
        return _tilde(term[1:])

    if term.startswith("="):
        term = term[1:]

    if term.endswith(".*") or parse(term) is not None:
        return [f"=={term}"]

    return None


def parse_constraint(constraint: Optional[str]) -> Optional[List[SpecifierSet]]:
    """
    Translate a Poetry constraint into one specifier set per ``||``
    alternative. Returns None if any part of it is not Poetry syntax.
    """

    if not constraint or not constraint.strip():
        return None

    alternatives = []
    for alternative in constraint.split("||"):
        alternative = _OPERATOR_GAP.sub(r"\1", alternative.strip())
        if not alternative:
            return None

        specifiers = []
        for term in _TERM_SPLIT.split(alternative):
            translated = _translate(term)
            if translated is None:
                return None
            specifiers.extend(translated)

        try:
            alternatives.append(SpecifierSet(",".join(specifiers)))
        except InvalidSpecifier:
            return None

    return alternatives


class PoetryVersioning:
    """
    Versioning scheme for Poetry managed Python dependencies.
    """

    id = SCHEME_ID
    allow_unstable_major_upgrades = False


    def is_version(self, version: str) -> bool:
        return parse(version) is not None


    def is_valid(self, version: str) -> bool:
        return parse(version) is not None or parse_constraint(version) is not None


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
        parsed = parse(version)
        if parsed is None:
            # a constraint stands in for the lowest version it admits
            ranges = parse_constraint(version)
            parsed = None if ranges is None else min_version(ranges)
        if parsed is None:
            return False

        exact = parse(constraint)
        if exact is not None:
            return parsed == exact

        alternatives = parse_constraint(constraint)
        if alternatives is None:
            return False

        return any(spec.contains(parsed, prereleases=True)
                   for spec in alternatives)


# The end.
