"""
Date / time stamps stored on game records.

Formats follow the US locale short forms (e.g. '7/4/2025' and '1:05:09 PM'), matching previously saved games.
"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


def format_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d}:{moment.second:02d} {suffix}"
