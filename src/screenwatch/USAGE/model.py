# USAGE/model.py
from dataclasses import dataclass


@dataclass
class DailyUsage:
    date: str           # YYYY-MM-DD, one record per date
    total_minutes: int = 0

    def to_dict(self):
        return {
            "date": self.date,
            "total_minutes": self.total_minutes
        }

    @classmethod
    def from_dict(cls, data) -> "DailyUsage":
        if not isinstance(data, dict):
            raise ValueError(f"Usage record must be an object, got {type(data).__name__}")
        date = data.get("date")
        minutes = data.get("total_minutes")
        if not isinstance(date, str):
            raise ValueError("Usage record is missing a string 'date'")
        if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
            raise ValueError(f"Invalid total_minutes for {date}: {minutes!r}")
        return cls(date=date, total_minutes=minutes)
