# bluetraffic/traffic/labels.py
from bluetraffic.traffic.time_filter import MINUTES_PER_DAY, NO_FILTER

ANY_TIME = "(any time)"


def format_time(minutes: int) -> str:
    """
    Minutes since midnight -> en-US short time, e.g. 0 -> "12:00 AM",
    765 -> "12:45 PM", 1439 -> "11:59 PM".
    """
    m = int(minutes) % MINUTES_PER_DAY
    hour, minute = divmod(m, 60)
    suffix = "AM" if hour < 12 else "PM"
    h12 = hour % 12 or 12
    return f"{h12}:{minute:02d} {suffix}"


def time_label(time_filter: int) -> str:
    if int(time_filter) == NO_FILTER:
        return ANY_TIME
    return format_time(time_filter)
