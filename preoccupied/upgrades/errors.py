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
preoccupied.upgrades.errors
Failures surfaced to callers of the upgrade filter.

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


__all__ = (
    "CONFIG_VALIDATION",
    "ConfigValidationError",
)


CONFIG_VALIDATION = "config-validation"


class ConfigValidationError(ValueError):
    """
    Raised when a policy setting cannot be interpreted. This is an authoring
    mistake in the configuration rather than noise in release data, and so it
    is propagated to the caller instead of being filtered away.

    :param validation_error: short label naming the offending setting
    :param validation_message: human-readable description, quoting the
      offending value
    :param validation_source: where the setting came from
    """

    kind = CONFIG_VALIDATION


    def __init__(
            self,
            validation_error: str,
            validation_message: str,
            *,
            validation_source: str = "config") -> None:

        super().__init__(validation_message)
        self.validation_source = validation_source
        self.validation_error = validation_error
        self.validation_message = validation_message


# The end.
