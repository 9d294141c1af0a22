"""Application status per job, persisted as one map keyed by job id.

Callers read-modify-write the whole map; the last save wins.
"""
from __future__ import annotations

from jobdash.log import get_logger
from jobdash.models import Application
from jobdash.storage import KeyValueStore

log = get_logger(__name__)

APPLICATIONS_KEY = "job_applications"


class ApplicationStore:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def all(self) -> dict[str, Application]:
        raw = self.store.load(APPLICATIONS_KEY)
        if not isinstance(raw, dict):
            if raw is not None:
                log.warning("Applications map is not an object, treating as empty")
            return {}
        try:
            return {job_id: Application.from_dict(app) for job_id, app in raw.items()}
        except (TypeError, KeyError, AttributeError, ValueError) as exc:
            log.warning("Applications map is corrupted, treating as empty: %s", exc)
            return {}

    def save(self, applications: dict[str, Application]) -> None:
        self.store.save(APPLICATIONS_KEY, {job_id: app.to_dict() for job_id, app in applications.items()})

    def get(self, job_id: str) -> Application | None:
        return self.all().get(job_id)

    def upsert(self, application: Application) -> None:
        apps = self.all()
        apps[application.job_id] = application
        self.save(apps)
        log.debug("Application %s -> %s", application.job_id, application.status)

    def delete(self, job_id: str) -> bool:
        apps = self.all()
        if apps.pop(job_id, None) is None:
            return False
        self.save(apps)
        log.debug("Deleted application for %s", job_id)
        return True
