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
preoccupied.upgrades.versioning
Pluggable versioning schemes and a registry to look them up by id.

Example:

```python
versioning = get_versioning("npm")
assert versioning.is_greater_than("1.10.0", "1.9.0")
assert versioning.matches("1.10.0", "^1.2.0")
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


from typing import Dict, List

from .api import VersioningApi
from .npm import NpmVersioning
from .pep440 import Pep440Versioning
from .poetry import PoetryVersioning
from .semantic import SemverVersioning


__all__ = (
    "VersioningApi",

    "NpmVersioning",
    "Pep440Versioning",
    "PoetryVersioning",
    "SemverVersioning",

    "get_versioning",
    "list_versionings",
)


_VERSIONINGS: Dict[str, VersioningApi] = {
    scheme.id: scheme for scheme in (
        SemverVersioning(),
        NpmVersioning(),
        Pep440Versioning(),
        PoetryVersioning(),
    )
}


def get_versioning(name: str) -> VersioningApi:
    """
    Return the versioning scheme registered under `name`.
    """

    versioning = _VERSIONINGS.get(name)
    if versioning is None:
        raise ValueError(f"Invalid versioning: {name}")
    return versioning


def list_versionings() -> List[str]:
    return sorted(_VERSIONINGS)


# The end.
