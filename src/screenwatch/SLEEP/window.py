"""Sleep window membership test."""


def is_outside_window(now: str, sleep_time: str, wake_time: str) -> bool:
    """
    True when `now` falls in the sleep window, i.e. outside healthy screen hours.

    All three values are compared as plain strings, so zero-padded HH:MM is
    assumed. The window is treated as wrapping past midnight (e.g. 23:00 -> 07:00).
    When sleep_time <= wake_time every time of day counts as outside.
    """
    return now >= sleep_time or now < wake_time
