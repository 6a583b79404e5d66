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
preoccupied.upgrades.versioning.api
The capability interface every versioning scheme provides.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Optional, Protocol


__all__ = (
    "VersioningApi",
)


class VersioningApi(Protocol):
    """
    Protocol describing how a versioning scheme classifies, orders and
    decomposes version strings, and how it tests them against constraints.

    Version strings handed to a scheme come from untrusted release feeds.
    Implementations answer False or None for input they cannot parse rather
    than raising.
    """

    id: str

    # whether an unstable release may be followed across minor and patch
    # boundaries within the same major
    allow_unstable_major_upgrades: bool


    def is_version(self, version: str) -> bool:
        """
        True if `version` is a single concrete version in this scheme.
        """

        ...


    def is_valid(self, version: str) -> bool:
        """
        True if `version` is either a version or a constraint expressed in
        this scheme's own syntax.
        """

        ...


    def is_stable(self, version: str) -> bool:
        ...


    def is_greater_than(self, version: str, other: str) -> bool:
        ...


    def equals(self, version: str, other: str) -> bool:
        ...


    def get_major(self, version: str) -> Optional[int]:
        ...


    def get_minor(self, version: str) -> Optional[int]:
        ...


    def get_patch(self, version: str) -> Optional[int]:
        ...


    def matches(self, version: str, constraint: str) -> bool:
        """
        True if `version` satisfies `constraint`, where the constraint is in
        this scheme's own syntax.
        """

        ...


# The end.
