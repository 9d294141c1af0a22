"""Capped, most-recent-first log of user actions."""
from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from typing import Any

from jobdash.log import get_logger
from jobdash.models import ACTIVITY_TYPES, Activity, parse_iso, utc_now_iso
from jobdash.storage import KeyValueStore

log = get_logger(__name__)

ACTIVITY_LOG_KEY = "job_activity_logs"
MAX_ACTIVITIES = 100


def _activity_id() -> str:
    return f"activity-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


class ActivityLog:
    def __init__(self, store: KeyValueStore, limit: int = MAX_ACTIVITIES) -> None:
        self.store = store
        self.limit = limit

    def record(self, type: str, details: dict[str, Any], description: str) -> Activity:
        activity = Activity(
            id=_activity_id(),
            type=type,
            timestamp=utc_now_iso(),
            details=details,
            description=description,
        )
        entries = [activity] + self.list()
        self.store.save(ACTIVITY_LOG_KEY, [a.to_dict() for a in entries[: self.limit]])
        log.info("[%s] %s", type, description)
        return activity

    def list(self, type: str | None = None) -> list[Activity]:
        raw = self.store.load(ACTIVITY_LOG_KEY)
        if not isinstance(raw, list):
            if raw is not None:
                log.warning("Activity log is not a list, treating as empty")
            return []
        try:
            entries = [Activity.from_dict(item) for item in raw]
        except (TypeError, KeyError, AttributeError, ValueError) as exc:
            log.warning("Activity log is corrupted, treating as empty: %s", exc)
            return []
        if type:
            entries = [a for a in entries if a.type == type]
        return entries

    def clear(self) -> None:
        self.store.remove(ACTIVITY_LOG_KEY)
        log.info("Activity log cleared")

    def counts(self) -> dict[str, int]:
        totals = {t: 0 for t in ACTIVITY_TYPES}
        for a in self.list():
            if a.type in totals:
                totals[a.type] += 1
        return totals


def format_activity_time(timestamp: str, now: datetime | None = None) -> str:
    """Relative label for recent entries, calendar date for older ones."""
    when = parse_iso(timestamp)
    now = now or datetime.now(timezone.utc)
    diff = (now - when).total_seconds()
    mins = int(diff // 60)
    hours = int(diff // 3600)
    days = int(diff // 86400)

    if mins < 1:
        return "Just now"
    if mins < 60:
        return f"{mins}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return f"{when.strftime('%b')} {when.day}, {when.strftime('%I:%M %p')}"
