# clock.py
from datetime import date, datetime


def today() -> date:
    return datetime.now().date()


def now_hhmm() -> str:
    """Current local time of day as HH:MM."""
    return datetime.now().strftime("%H:%M")
