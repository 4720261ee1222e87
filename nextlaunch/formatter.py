import math
from datetime import datetime, timedelta, timezone
from typing import Optional

from nextlaunch.config import NO_DATE_PLACEHOLDER, NO_DETAILS_PLACEHOLDER
from nextlaunch.models import Coordinates, DisplayRecord, Launch, Launchpad
from nextlaunch.utils.utils import utc_now

ONE_DAY = timedelta(days=1)


def days_until(date: Optional[datetime], now: datetime) -> Optional[int]:
    if date is None:
        return None
    # Partial days count as a whole day
    return math.ceil((date - now) / ONE_DAY)


def format_launch_date(date: Optional[datetime]) -> str:
    """Long form date in UTC, e.g. 'Thursday, December 1, 2022 at 09:05 PM UTC'."""
    if date is None:
        return NO_DATE_PLACEHOLDER
    date = date.astimezone(timezone.utc)
    return f"{date:%A, %B} {date.day}, {date:%Y at %I:%M %p} UTC"


def format_launch_data(
    launch: Launch, launchpad: Launchpad, now: Optional[datetime] = None
) -> DisplayRecord:
    if now is None:
        now = utc_now()

    return DisplayRecord(
        mission_name=launch.name,
        launch_date=format_launch_date(launch.date),
        days_until_launch=days_until(launch.date, now),
        launch_site=launchpad.full_name,
        location=f"{launchpad.locality}, {launchpad.region}",
        coordinates=Coordinates(lat=launchpad.latitude, lng=launchpad.longitude),
        details=launch.details or NO_DETAILS_PLACEHOLDER,
        links=launch.links,
    )
