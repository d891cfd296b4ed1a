from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from screenwatch.io_utils import StoreWriteError, dump_json
from screenwatch.USAGE.model import DailyUsage
from screenwatch.USAGE.store import UsageStore


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    assert UsageStore(tmp_path / "usage_log.json").load() == []


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "",
        '{"date": "2026-10-17", "total_minutes": 3}',
        '[{"date": "2026-10-17"}]',
        '[{"date": "2026-10-17", "total_minutes": -4}]',
        '[{"date": "2026-10-17", "total_minutes": "12"}]',
        '[{"date": "2026-10-17", "total_minutes": 5}, 7]',
    ],
)
def test_load_unparseable_file_is_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "usage_log.json"
    path.write_text(content, encoding="utf-8")
    assert UsageStore(path).load() == []


def test_load_unreadable_path_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "usage_log.json"
    path.mkdir()
    assert UsageStore(path).load() == []


def test_same_day_logs_accumulate(tmp_path: Path) -> None:
    store = UsageStore(tmp_path / "usage_log.json")
    for minutes in (30, 15, 0, 7):
        store.log_minutes(minutes, "2026-10-17")

    assert store.load() == [DailyUsage(date="2026-10-17", total_minutes=52)]


def test_new_day_does_not_touch_existing_days(tmp_path: Path) -> None:
    store = UsageStore(tmp_path / "usage_log.json")
    store.log_minutes(40, "2026-10-16")
    entry = store.log_minutes(10, "2026-10-17")

    assert entry == DailyUsage(date="2026-10-17", total_minutes=10)
    assert store.entry_for("2026-10-16").total_minutes == 40
    assert [r.date for r in store.load()] == ["2026-10-16", "2026-10-17"]


def test_log_zero_creates_record(tmp_path: Path) -> None:
    store = UsageStore(tmp_path / "usage_log.json")
    store.log_minutes(0, "2026-10-17")
    assert store.entry_for("2026-10-17") == DailyUsage(date="2026-10-17", total_minutes=0)


def test_entry_for_unknown_day(tmp_path: Path) -> None:
    store = UsageStore(tmp_path / "usage_log.json")
    store.log_minutes(5, "2026-10-17")
    assert store.entry_for("2026-10-18") is None


def test_saved_file_is_pretty_json_array(tmp_path: Path) -> None:
    path = tmp_path / "usage_log.json"
    UsageStore(path).log_minutes(25, "2026-10-17")

    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == [{"date": "2026-10-17", "total_minutes": 25}]
    assert "\n  " in text


def test_resaving_loaded_records_keeps_content(tmp_path: Path) -> None:
    path = tmp_path / "usage_log.json"
    store = UsageStore(path)
    store.log_minutes(3, "2026-10-18")
    store.log_minutes(9, "2026-10-01")
    store.log_minutes(1, "2026-10-18")
    before = path.read_text(encoding="utf-8")

    store.save(store.load())

    assert path.read_text(encoding="utf-8") == before


def test_save_failure_raises_and_leaves_no_temp_file(tmp_path: Path) -> None:
    path = tmp_path / "usage_log.json"
    path.mkdir()

    with pytest.raises(StoreWriteError):
        UsageStore(path).save([DailyUsage(date="2026-10-17", total_minutes=1)])

    assert list(tmp_path.glob("*.tmp")) == []


def test_concurrent_saves_never_expose_a_partial_file(tmp_path: Path) -> None:
    path = tmp_path / "usage_log.json"
    dump_json(path, [])
    errors = []
    bad_reads = []
    done = threading.Event()

    def writer(minutes: int) -> None:
        records = [{"date": f"2026-10-{d:02}", "total_minutes": minutes} for d in range(1, 29)]
        try:
            for _ in range(150):
                dump_json(path, records)
        except StoreWriteError as e:
            errors.append(e)

    def reader() -> None:
        while not done.is_set():
            try:
                json.loads(path.read_text(encoding="utf-8"))
            except ValueError as e:
                bad_reads.append(e)

    writers = [threading.Thread(target=writer, args=(m,)) for m in (10, 20)]
    watcher = threading.Thread(target=reader)
    watcher.start()
    for t in writers:
        t.start()
    for t in writers:
        t.join()
    done.set()
    watcher.join()

    assert errors == []
    assert bad_reads == []
    assert len(json.loads(path.read_text(encoding="utf-8"))) == 28
    assert list(tmp_path.glob("*.tmp")) == []
