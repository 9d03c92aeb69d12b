"""January 1st gate for drawing fortunes."""

import datetime
from typing import Optional

from omikuji.errors import NotJanuaryFirstError


def is_january_first(
    today: Optional[datetime.date] = None, date_override: Optional[str] = None
) -> bool:
    """
    Check whether today (or the YYYY-MM-DD override) is January 1st.

    Only the month and day parts of the override are inspected; a malformed
    override is never January 1st.
    """
    if date_override is not None:
        parts = date_override.split("-", 1)
        if len(parts) == 2:
            month_day = parts[1].split("-", 1)
            if len(month_day) == 2:
                return month_day[0] == "01" and month_day[1] == "01"
        return False

    if today is None:
        today = datetime.date.today()
    return today.month == 1 and today.day == 1


def can_execute(
    force: bool,
    today: Optional[datetime.date] = None,
    date_override: Optional[str] = None,
) -> bool:
    """
    Decide whether a fortune may be drawn.

    Returns:
        True if a warning must be shown (forced outside January 1st),
        False if no warning is needed

    Raises:
        NotJanuaryFirstError: If it is not January 1st and force is not set
    """
    if is_january_first(today, date_override):
        return False
    if force:
        return True
    raise NotJanuaryFirstError()
