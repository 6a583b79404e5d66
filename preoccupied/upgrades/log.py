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
preoccupied.upgrades.log
structlog configuration for applications embedding the upgrade filter.

The library itself only obtains loggers; applications call
:func:`configure_logging` once at startup to decide how events render.

Example:

```python
configure_logging(environment="development", level="DEBUG")
```

:author: Christopher O'Brien <obriencj@preoccupied.net>
:license: GNU General Public License v3
"""


import logging
import os
from typing import List, Optional

import structlog
from structlog.typing import Processor


__all__ = (
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "configure_logging",
)


LOG_LEVEL_ENV = "UPGRADES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level(level: Optional[str] = None) -> int:
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    found = logging.getLevelName(level_name)
    return found if isinstance(found, int) else logging.INFO


def configure_logging(
        environment: str = "production",
        level: Optional[str] = None) -> None:
    """
    Configure structlog output.

    :param environment: ``"production"`` renders JSON lines, anything else
      renders for a console
    :param level: minimum level name; defaults to the ``UPGRADES_LOG_LEVEL``
      environment variable, then ``INFO``
    """

    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


# The end.
