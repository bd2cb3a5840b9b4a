# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

logger = logging.getLogger(__name__)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")


def datetime_from_str_lenient(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse a date string, returning None instead of raising when the value is
    missing or cannot be read as a calendar instant.

    Date-only strings resolve to midnight UTC. Values that parse to something
    other than an instant (a bare duration such as "P1D") are rejected too.
    """
    if datetime is None or not str(datetime).strip():
        return None
    try:
        parsed = pendulum.parse(str(datetime))
    except (ValueError, TypeError) as e:
        logger.debug("skipping unparsable date %r: %s", datetime, e)
        return None
    if not isinstance(parsed, pendulum.DateTime):
        logger.debug("skipping non-instant date %r", datetime)
        return None
    return parsed