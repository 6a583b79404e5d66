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
preoccupied.upgrades
Select the releases of a package that qualify as upgrade targets for an
installed version, under a configurable upgrade policy.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from .errors import CONFIG_VALIDATION, ConfigValidationError
from .filter import filter_versions, is_release_stable, is_version_in_range
from .log import configure_logging
from .models import FilterConfig, Release
from .string_match import get_regex_predicate
from .versioning import VersioningApi, get_versioning, list_versionings


__all__ = (
    "CONFIG_VALIDATION",
    "ConfigValidationError",

    "FilterConfig",
    "Release",

    "filter_versions",
    "is_release_stable",
    "is_version_in_range",

    "get_regex_predicate",

    "VersioningApi",
    "get_versioning",
    "list_versionings",

    "configure_logging",
)


# The end.
