# SLEEP/model.py
from dataclasses import dataclass


@dataclass
class Config:
    sleep_time: str  # HH:MM, kept verbatim
    wake_time: str

    def to_dict(self):
        return {
            "sleep_time": self.sleep_time,
            "wake_time": self.wake_time
        }
