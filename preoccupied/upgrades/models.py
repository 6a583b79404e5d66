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
preoccupied.upgrades.models
Pydantic models describing published releases and the upgrade policy applied
to them.

Both models accept the camelCase field names used by release feeds and
configuration files, as well as their snake_case attribute names.

Example:

```python
config = FilterConfig.model_validate({
    "ignoreUnstable": True,
    "allowedVersions": "<3",
})
release = Release.model_validate({"version": "2.1.0", "isDeprecated": False})
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


__all__ = (
    "FilterConfig",
    "Release",
)


class Release(BaseModel):
    """
    One published version of a package. The version string comes from an
    untrusted feed and is not guaranteed to parse under any versioning
    scheme. Additional feed fields are retained as extra attributes.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="allow",
    )

    version: str
    release_timestamp: Optional[datetime] = Field(
        default=None, alias="releaseTimestamp")
    is_deprecated: Optional[bool] = Field(
        default=None, alias="isDeprecated")
    is_stable: Optional[bool] = Field(
        default=None, alias="isStable")


class FilterConfig(BaseModel):
    """
    Upgrade policy settings consulted by
    :func:`preoccupied.upgrades.filter.filter_versions`.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    ignore_unstable: bool = Field(default=False, alias="ignoreUnstable")
    ignore_deprecated: bool = Field(default=False, alias="ignoreDeprecated")
    respect_latest: bool = Field(default=False, alias="respectLatest")
    allowed_versions: Optional[str] = Field(
        default=None, alias="allowedVersions")
    follow_tag: Optional[str] = Field(default=None, alias="followTag")
    dep_name: Optional[str] = Field(default=None, alias="depName")


# The end.
