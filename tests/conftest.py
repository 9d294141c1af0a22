"""Shared fixtures: a throwaway data directory and a few fixed jobs."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from jobdash.activity_log import ActivityLog
from jobdash.applications import ApplicationStore
from jobdash.models import Job
from jobdash.resumes import ResumeStore
from jobdash.storage import KeyValueStore

STAMP = "2026-01-01T00:00:00.000Z"


def make_job(id: str, title: str, company: str, location: str,
             job_type: str = "Full-time", work_mode: str = "Remote") -> Job:
    return Job(
        id=id,
        title=title,
        company=company,
        location=location,
        job_type=job_type,
        work_mode=work_mode,
        posted_time=STAMP,
        job_link=f"https://example.com/jobs/{id}",
        created_at=STAMP,
        updated_at=STAMP,
    )


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(tmp_path / "data")


@pytest.fixture
def activity(store):
    return ActivityLog(store)


@pytest.fixture
def applications(store):
    return ApplicationStore(store)


@pytest.fixture
def resumes(store, tmp_path):
    return ResumeStore(store, tmp_path / "resumes")


@pytest.fixture
def jobs():
    return [
        make_job("1", "Senior React Developer", "TechCorp", "San Francisco, CA"),
        make_job("2", "DevOps Engineer", "CloudInnovate", "New York, NY", work_mode="Hybrid"),
        make_job("3", "Full Stack Developer", "StartupXYZ", "Austin, TX", work_mode="On-site"),
        make_job("4", "Frontend Developer", "DesignStudio", "Los Angeles, CA", job_type="Part-time"),
        make_job("5", "Data Engineer", "React Analytics", "Bangalore, India", job_type="Contract"),
    ]


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)
