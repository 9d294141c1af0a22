"""Dashboard controller: fetches jobs, keeps the visible list filtered, and
records application status and activity for user actions.

State is plain attributes; the UI reads them after each call. There is no
request sequencing, so a slow older response can overwrite a newer one.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from jobdash.activity_log import ActivityLog
from jobdash.applications import ApplicationStore
from jobdash.client import JobSearchClient
from jobdash.errors import JobDashError
from jobdash.filters import FilterCriteria, filter_jobs
from jobdash.log import get_logger
from jobdash.models import Application, Job, to_iso
from jobdash.resumes import ResumeStore

log = get_logger(__name__)

LOADING = "loading"
READY = "ready"
ERROR = "error"

USER_ID = "current-user"

# criteria that change what the proxy is asked for, not just what is shown
_FETCH_FIELDS = ("role", "location", "job_type")


class DashboardController:
    def __init__(
        self,
        client: JobSearchClient,
        applications: ApplicationStore,
        activity: ActivityLog,
        resumes: ResumeStore | None = None,
    ) -> None:
        self.client = client
        self.applications_store = applications
        self.activity = activity
        self.resumes = resumes

        self.state: str = LOADING
        self.error: str | None = None
        self.jobs: list[Job] = []
        self.visible: list[Job] = []
        self.criteria = FilterCriteria()

    # ── Fetching and filtering ───────────────────────────────────────────

    def load(self, record: bool = False) -> None:
        """Fetch with the current role/location/type and replace the job list."""
        self.state = LOADING
        self.error = None
        c = self.criteria
        try:
            result = self.client.search(role=c.role, location=c.location, job_type=c.job_type)
        except JobDashError as exc:
            self.state = ERROR
            self.error = str(exc)
            log.error("Job search failed: %s", exc)
            return

        self.jobs = list(result.jobs)
        self.state = READY
        self.recompute()
        if record:
            self.activity.record(
                "search_performed",
                {"role": c.role, "location": c.location, "jobType": c.job_type, "results": len(self.jobs)},
                f"Searched for {c.role or self.client.default_role} jobs"
                f" in {c.location or self.client.default_location}",
            )

    def retry(self) -> None:
        self.load()

    def recompute(self) -> list[Job]:
        self.visible = filter_jobs(self.jobs, self.criteria)
        return self.visible

    def update_criteria(self, **changes: str) -> None:
        """Apply filter changes; role, location or job type trigger a new fetch."""
        previous = self.criteria
        self.criteria = replace(previous, **changes)
        refetch = any(getattr(previous, f) != getattr(self.criteria, f) for f in _FETCH_FIELDS)

        if refetch:
            self.load(record=True)
        else:
            self.recompute()

        if self.state == ERROR:
            return
        if self.criteria != previous and not self.criteria.is_empty():
            self.activity.record(
                "filter_applied",
                {
                    "search": self.criteria.search,
                    "role": self.criteria.role,
                    "location": self.criteria.location,
                    "jobType": self.criteria.job_type,
                    "workMode": self.criteria.work_mode,
                    "results": len(self.visible),
                },
                f"Applied {self.criteria.active_count()} filter(s), {len(self.visible)} job(s) shown",
            )

    def clear_filters(self) -> None:
        self.update_criteria(**{f: "" for f in ("search", "role", "location", "job_type", "work_mode")})

    # ── User actions ─────────────────────────────────────────────────────

    def find_job(self, job_id: str) -> Job | None:
        return next((j for j in self.jobs if j.id == job_id), None)

    def _track(self, job_id: str, status: str, activity_type: str, verb: str) -> Application:
        job = self.find_job(job_id)
        now = to_iso(datetime.now(timezone.utc))
        app = Application(
            id=f"app-{job_id}",
            job_id=job_id,
            user_id=USER_ID,
            status=status,
            created_at=now,
            updated_at=now,
        )
        if status == "Applied":
            app.applied_at = now
            primary = self.resumes.primary() if self.resumes else None
            if primary:
                app.resume_file_id = primary.id

        apps = self.applications_store.all()
        apps[job_id] = app
        self.applications_store.save(apps)

        details: dict[str, Any] = {"jobId": job_id}
        if job:
            details.update({"jobTitle": job.title, "company": job.company, "location": job.location})
            label = f"{job.title} at {job.company}"
        else:
            label = f"job {job_id}"
        self.activity.record(activity_type, details, f"{verb} {label}")
        return app

    def mark_reviewed(self, job_id: str) -> Application:
        return self._track(job_id, "Reviewed", "job_reviewed", "Reviewed")

    def apply(self, job_id: str) -> Application:
        return self._track(job_id, "Applied", "job_applied", "Applied to")

    def not_interested(self, job_id: str) -> Application:
        return self._track(job_id, "Not Interested", "job_not_interested", "Not interested in")

    # ── Applications view ────────────────────────────────────────────────

    def applications(self) -> dict[str, Application]:
        return self.applications_store.all()

    def application_for(self, job_id: str) -> Application | None:
        return self.applications_store.get(job_id)

    def delete_application(self, job_id: str) -> bool:
        return self.applications_store.delete(job_id)

    def applied_rows(self) -> list[dict[str, Any]]:
        """Applications joined with whatever we know about their jobs, newest first."""
        rows: list[dict[str, Any]] = []
        for job_id, app in self.applications().items():
            job = self.find_job(job_id)
            rows.append({
                "jobId": job_id,
                "title": job.title if job else job_id,
                "company": job.company if job else "",
                "location": job.location if job else "",
                "link": (job.apply_link or job.job_link) if job else "",
                "status": app.status,
                "appliedAt": app.applied_at or app.updated_at,
            })
        rows.sort(key=lambda r: r["appliedAt"], reverse=True)
        return rows
