# USAGE/store.py
import logging
from pathlib import Path
from typing import List, Optional

from screenwatch.io_utils import dump_json, load_json
from screenwatch.USAGE.model import DailyUsage

logger = logging.getLogger(__name__)

USAGE_FILE = "usage_log.json"


class UsageStore:
    """Per-date minute totals kept as a JSON array."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[DailyUsage]:
        """Return the stored records, or an empty list when the file is missing or unreadable."""
        if not self.path.exists():
            return []
        try:
            data = load_json(self.path)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            records = [DailyUsage.from_dict(item) for item in data]
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.debug("Ignoring unreadable usage log %s: %s", self.path, e)
            return []
        logger.debug("Loaded %d usage records from %s", len(records), self.path)
        return records

    def save(self, records: List[DailyUsage]) -> None:
        dump_json(self.path, [r.to_dict() for r in records])

    def entry_for(self, day: str) -> Optional[DailyUsage]:
        for record in self.load():
            if record.date == day:
                return record
        return None

    def log_minutes(self, minutes: int, day: str) -> DailyUsage:
        """Add minutes to the record for `day`, creating it if needed."""
        records = self.load()
        entry = next((r for r in records if r.date == day), None)
        if entry:
            entry.total_minutes += minutes
        else:
            entry = DailyUsage(date=day, total_minutes=minutes)
            records.append(entry)
        self.save(records)
        return entry
