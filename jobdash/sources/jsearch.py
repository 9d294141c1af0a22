"""JSearch API (RapidAPI): aggregated job listings mapped into our Job shape."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import requests

from jobdash.errors import UpstreamError
from jobdash.log import get_logger
from jobdash.models import Job, parse_iso, to_iso
from jobdash.sources.base import JobSearchBase

log = get_logger(__name__)

HOST = "jsearch.p.rapidapi.com"
BASE = f"https://{HOST}"
FALLBACK_JOB_LINK = BASE
UNKNOWN_LOCATION = "Location not specified"
DEFAULT_JOB_TYPE = "Full-time"


def _posted_time(raw: Any, now: datetime) -> str:
    if not raw:
        return to_iso(now)
    if not isinstance(raw, str):
        log.warning("Non-string posted time %r, using now", raw)
        return to_iso(now)
    try:
        return to_iso(parse_iso(raw))
    except ValueError:
        log.warning("Unparseable posted time %r, using now", raw)
        return to_iso(now)


def map_job(hit: dict[str, Any], now: datetime | None = None) -> Job:
    """Reshape one upstream record; JSearch has no work mode so it is always Remote."""
    now = now or datetime.now(timezone.utc)
    stamp = to_iso(now)
    apply_link = hit.get("job_apply_link") or None
    return Job(
        id=str(hit.get("job_id", "")),
        title=hit.get("job_title", ""),
        company=hit.get("employer_name", ""),
        location=hit.get("job_location") or UNKNOWN_LOCATION,
        job_type=hit.get("job_employment_type") or DEFAULT_JOB_TYPE,
        work_mode="Remote",
        posted_time=_posted_time(hit.get("job_posted_at_datetime_utc"), now),
        job_link=apply_link or FALLBACK_JOB_LINK,
        apply_link=apply_link,
        description=hit.get("job_description") or None,
        is_external=True,
        created_at=stamp,
        updated_at=stamp,
    )


class JSearchSource(JobSearchBase):
    def __init__(self, api_key: str, timeout: float = 15) -> None:
        self.api_key = api_key
        self.timeout = timeout

    def search(
        self,
        query: str,
        location: str = "",
        employment_type: str = "",
        page: int = 1,
    ) -> list[Job]:
        params: dict[str, str] = {"query": query, "page": str(page), "num_pages": "1"}
        if employment_type:
            params["employment_type"] = employment_type
        if location:
            params["location"] = location

        try:
            r = requests.get(
                f"{BASE}/search",
                params=params,
                headers={
                    "x-rapidapi-key": self.api_key,
                    "x-rapidapi-host": HOST,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            log.error("JSearch request failed: %s", exc)
            raise UpstreamError(f"JSearch request failed: {exc}") from exc

        if not r.ok:
            log.error("JSearch API error: status=%s reason=%s body=%s", r.status_code, r.reason, r.text[:500])
            raise UpstreamError(f"JSearch API error ({r.status_code}): {r.reason}", status=r.status_code)

        try:
            data = r.json()
        except ValueError as exc:
            raise UpstreamError(f"JSearch returned invalid JSON: {exc}", status=r.status_code) from exc
        now = datetime.now(timezone.utc)
        jobs = [map_job(hit, now) for hit in data.get("data") or []]
        log.debug("JSearch query=%r location=%r returned %d jobs", query, location, len(jobs))
        return jobs
