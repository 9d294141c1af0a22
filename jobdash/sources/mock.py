"""Demo job source for running the dashboard without a JSearch key."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jobdash.log import get_logger
from jobdash.models import Job, to_iso
from jobdash.sources.base import JobSearchBase

log = get_logger(__name__)

_SAMPLES: list[dict] = [
    {
        "id": "1",
        "title": "Senior React Developer",
        "company": "TechCorp",
        "location": "San Francisco, CA",
        "job_type": "Full-time",
        "work_mode": "Remote",
        "days_ago": 2,
        "job_link": "https://linkedin.com/jobs/1",
        "apply_link": "https://linkedin.com/jobs/1/apply",
        "description": "We are looking for a senior React developer with 5+ years of experience. "
                       "Strong knowledge of TypeScript, state management, and testing frameworks required.",
    },
    {
        "id": "2",
        "title": "DevOps Engineer",
        "company": "CloudInnovate",
        "location": "New York, NY",
        "job_type": "Full-time",
        "work_mode": "Hybrid",
        "days_ago": 1,
        "job_link": "https://linkedin.com/jobs/2",
        "apply_link": "https://linkedin.com/jobs/2/apply",
        "description": "Looking for experienced DevOps engineer to manage our cloud infrastructure. "
                       "Kubernetes, Docker, and CI/CD pipeline experience essential.",
    },
    {
        "id": "3",
        "title": "Full Stack Developer",
        "company": "StartupXYZ",
        "location": "Austin, TX",
        "job_type": "Full-time",
        "work_mode": "On-site",
        "days_ago": 3,
        "job_link": "https://linkedin.com/jobs/3",
        "description": "Seeking talented full-stack developer proficient in React, Node.js, and PostgreSQL. "
                       "Join our fast-growing startup.",
        "is_external": True,
    },
    {
        "id": "4",
        "title": "Frontend Developer",
        "company": "DesignStudio",
        "location": "Los Angeles, CA",
        "job_type": "Part-time",
        "work_mode": "Remote",
        "days_ago": 5,
        "job_link": "https://linkedin.com/jobs/4",
        "description": "Creative frontend developer needed for our design-focused projects. "
                       "Experience with CSS-in-JS and animation libraries preferred.",
    },
]


def sample_jobs(now: datetime | None = None) -> list[Job]:
    now = now or datetime.now(timezone.utc)
    stamp = to_iso(now)
    return [
        Job(
            id=s["id"],
            title=s["title"],
            company=s["company"],
            location=s["location"],
            job_type=s["job_type"],
            work_mode=s["work_mode"],
            posted_time=to_iso(now - timedelta(days=s["days_ago"])),
            job_link=s["job_link"],
            apply_link=s.get("apply_link"),
            description=s["description"],
            is_external=s.get("is_external"),
            created_at=stamp,
            updated_at=stamp,
        )
        for s in _SAMPLES
    ]


class MockSource(JobSearchBase):
    def search(
        self,
        query: str,
        location: str = "",
        employment_type: str = "",
        page: int = 1,
    ) -> list[Job]:
        log.info("MockSource serving sample jobs")
        jobs = sample_jobs()
        if employment_type:
            jobs = [j for j in jobs if j.job_type == employment_type]
        return jobs
