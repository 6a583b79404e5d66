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
preoccupied.upgrades.string_match
Recognise regular-expression constraints written as ``/pattern/``.

Supported forms are ``/pattern/``, ``/pattern/i`` for case-insensitive
matching, and a leading ``!`` to negate either of them. Patterns are searched
for anywhere in the tested string, so anchors must be explicit.

Example:

```python
is_allowed = get_regex_predicate("/^1\\./")
assert is_allowed("1.4.0")
assert not is_allowed("2.0.0")

assert get_regex_predicate("^1.0.0") is None
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import re
from typing import Callable, Optional


__all__ = (
    "StringPredicate",
    "get_regex_predicate",
    "is_regex_match",
)


StringPredicate = Callable[[str], bool]


regex_like = re.compile(r"^(?P<negated>!)?/(?P<pattern>.+)/(?P<flags>i?)$").match


def is_regex_match(value: Optional[str]) -> bool:
    """
    True if `value` is written in the ``/pattern/`` form.
    """

    return bool(value) and regex_like(value) is not None


def get_regex_predicate(value: Optional[str]) -> Optional[StringPredicate]:
    """
    Compile `value` into a predicate over strings, or return None if it is
    not written in the ``/pattern/`` form or does not compile.
    """

    found = regex_like(value) if value else None
    if found is None:
        return None

    flags = re.IGNORECASE if found.group("flags") else 0
    try:
        compiled = re.compile(found.group("pattern"), flags)
    except re.error:
        return None

    if found.group("negated"):
        return lambda text: compiled.search(text) is None
    else:
        return lambda text: compiled.search(text) is not None


# The end.
