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
preoccupied.upgrades.filter

Narrow the published releases of a package down to the ones that qualify as
upgrade targets for an installed version, under a :class:`FilterConfig`
policy.

The policy gates are applied in a fixed order, as their order changes the
outcome:

1. releases that are not versions, or not greater than the current one, go
2. deprecated releases go, unless the current release is itself deprecated
3. releases outside ``allowed_versions`` go
4. with ``follow_tag`` set, the remaining releases are returned here
5. releases ahead of the declared latest version go
6. unstable releases go, except those continuing the current unstable line

Release feeds are untrusted, so malformed entries are dropped silently. The
only failure is :class:`ConfigValidationError`, for an ``allowed_versions``
value that is neither a ``/pattern/`` nor a usable range.

Example:

```python
config = FilterConfig(ignore_unstable=True, allowed_versions="<3")
releases = [Release(version=v) for v in ("1.1.0", "2.0.0-rc.1", "3.0.0")]

result = filter_versions(config, "1.0.0", "3.0.0", releases,
                         get_versioning("semver"))
assert [r.version for r in result] == ["1.1.0"]
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import json
from typing import List, Optional, Sequence

import structlog

from . import rangespec
from .errors import ConfigValidationError
from .models import FilterConfig, Release
from .string_match import get_regex_predicate
from .versioning import VersioningApi, pep440, poetry


__all__ = (
    "filter_versions",
    "is_release_stable",
    "is_version_in_range",
)


logger = structlog.get_logger(__name__)


def is_release_stable(
        release: Release,
        versioning: VersioningApi) -> bool:
    """
    True if the scheme considers the release's version stable and the
    release has not been explicitly flagged as unstable. The flag can only
    demote a release, never promote one.
    """

    if not versioning.is_stable(release.version):
        return False

    if release.is_stable is False:
        return False

    return True


def is_version_in_range(
        version: str,
        constraint: str,
        versioning: VersioningApi) -> bool:
    """
    True if `version` satisfies `constraint`. The constraint is interpreted,
    in order, as the scheme's own syntax, as an npm style semantic version
    range, and, for the Poetry scheme only, as a PEP 440 specifier. A
    constraint none of those accept matches nothing.

    Called with the constraint as both arguments, this tells whether the
    constraint is usable at all.
    """

    if versioning.is_valid(constraint):
        return versioning.matches(version, constraint)

    elif rangespec.valid_range(constraint) is not None:
        candidate = rangespec.valid(version)
        if candidate is None:
            candidate = rangespec.coerce(version)
        return candidate is not None and rangespec.satisfies(candidate, constraint)

    elif versioning.id == poetry.SCHEME_ID and pep440.is_valid(constraint):
        return pep440.matches(version, constraint)

    else:
        return False


def _find_current_release(
        current_version: str,
        releases: Sequence[Release],
        versioning: VersioningApi) -> Optional[Release]:

    if not (versioning.is_valid(current_version) and
            versioning.is_version(current_version)):
        return None

    for release in releases:
        if (versioning.is_valid(release.version) and
                versioning.is_version(release.version) and
                versioning.equals(release.version, current_version)):
            return release

    return None


def _filter_allowed(
        allowed_versions: str,
        releases: List[Release],
        versioning: VersioningApi) -> List[Release]:

    is_allowed = get_regex_predicate(allowed_versions)
    if is_allowed is not None:
        return [r for r in releases if is_allowed(r.version)]

    if is_version_in_range(allowed_versions, allowed_versions, versioning):
        return [r for r in releases
                if is_version_in_range(r.version, allowed_versions, versioning)]

    raise ConfigValidationError(
        "Invalid `allowedVersions`",
        "The following allowedVersions does not parse as a valid version"
        f" or range: {json.dumps(allowed_versions)}")


def filter_versions(
        config: FilterConfig,
        current_version: str,
        latest_version: Optional[str],
        releases: Sequence[Release],
        versioning: VersioningApi) -> List[Release]:
    """
    Return the releases that are eligible upgrades from `current_version`,
    in their original order.

    :param config: the upgrade policy
    :param current_version: the installed version
    :param latest_version: the version the registry declares as latest, if
      any
    :param releases: every published release of the package
    :param versioning: the scheme used to interpret version strings
    :raises ConfigValidationError: if ``config.allowed_versions`` is neither
      a ``/pattern/`` nor a usable range
    """

    if not current_version:
        return []

    # leave only versions greater than current
    filtered = [r for r in releases
                if versioning.is_version(r.version) and
                versioning.is_greater_than(r.version, current_version)]

    current_release = _find_current_release(current_version, releases, versioning)

    # don't upgrade from non-deprecated to deprecated
    if (config.ignore_deprecated and current_release is not None and
            not current_release.is_deprecated):
        kept = []
        for release in filtered:
            if release.is_deprecated:
                logger.debug("deprecated_release_skipped",
                             dep_name=config.dep_name,
                             version=release.version)
            else:
                kept.append(release)
        filtered = kept

    if config.allowed_versions:
        filtered = _filter_allowed(config.allowed_versions, filtered, versioning)

    if config.follow_tag:
        return filtered

    if (config.respect_latest and latest_version and
            not versioning.is_greater_than(current_version, latest_version)):
        filtered = [r for r in filtered
                    if not versioning.is_greater_than(r.version, latest_version)]

    if not config.ignore_unstable:
        return filtered

    if current_release is not None and is_release_stable(current_release, versioning):
        return [r for r in filtered if is_release_stable(r, versioning)]

    # without a stable baseline, only unstable releases continuing the
    # current release line are kept
    current_major = versioning.get_major(current_version)
    current_minor = versioning.get_minor(current_version)
    current_patch = versioning.get_patch(current_version)

    def continues_current(release: Release) -> bool:
        if is_release_stable(release, versioning):
            return True

        if versioning.get_major(release.version) != current_major:
            return False

        if versioning.allow_unstable_major_upgrades:
            return True

        return (versioning.get_minor(release.version) == current_minor and
                versioning.get_patch(release.version) == current_patch)

    return [r for r in filtered if continues_current(r)]


# The end.
