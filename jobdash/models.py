"""Data models for jobs, applications, activities and resumes.

Every record round-trips through the camelCase JSON shape shared by the
search proxy, the dashboard and the local key/value store.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

JobType = Literal["Full-time", "Part-time", "Contract", "Temporary"]
WorkMode = Literal["Remote", "Hybrid", "On-site"]
ApplicationStatus = Literal["Applied", "Pending", "External", "Not Interested", "Reviewed"]
ActivityType = Literal[
    "job_applied",
    "job_reviewed",
    "job_not_interested",
    "search_performed",
    "filter_applied",
]

JOB_TYPES: tuple[str, ...] = ("Full-time", "Part-time", "Contract", "Temporary")
WORK_MODES: tuple[str, ...] = ("Remote", "Hybrid", "On-site")
APPLICATION_STATUSES: tuple[str, ...] = ("Applied", "Pending", "External", "Not Interested", "Reviewed")
ACTIVITY_TYPES: tuple[str, ...] = (
    "job_applied",
    "job_reviewed",
    "job_not_interested",
    "search_performed",
    "filter_applied",
)


def to_iso(dt: datetime) -> str:
    """UTC timestamp with millisecond precision and a trailing Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso(datetime.now(timezone.utc))


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class Job:
    id: str
    title: str
    company: str
    location: str
    job_type: str
    work_mode: str
    posted_time: str
    job_link: str
    created_at: str
    updated_at: str
    apply_link: str | None = None
    description: str | None = None
    is_external: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "jobType": self.job_type,
            "workMode": self.work_mode,
            "postedTime": self.posted_time,
            "jobLink": self.job_link,
            "applyLink": self.apply_link,
            "description": self.description,
            "isExternal": self.is_external,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Job:
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            company=data.get("company", ""),
            location=data.get("location", ""),
            job_type=data.get("jobType", "Full-time"),
            work_mode=data.get("workMode", "Remote"),
            posted_time=data.get("postedTime", ""),
            job_link=data.get("jobLink", ""),
            apply_link=data.get("applyLink"),
            description=data.get("description"),
            is_external=data.get("isExternal"),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class Application:
    id: str
    job_id: str
    user_id: str
    status: str
    created_at: str
    updated_at: str
    applied_at: str | None = None
    resume_file_id: str | None = None
    notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "id": self.id,
            "jobId": self.job_id,
            "userId": self.user_id,
            "status": self.status,
            "appliedAt": self.applied_at,
            "resumeFileId": self.resume_file_id,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Application:
        return cls(
            id=data["id"],
            job_id=data["jobId"],
            user_id=data.get("userId", ""),
            status=data["status"],
            applied_at=data.get("appliedAt"),
            resume_file_id=data.get("resumeFileId"),
            notes=data.get("notes"),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass(frozen=True)
class Activity:
    id: str
    type: str
    timestamp: str
    details: dict[str, Any] = field(default_factory=dict)
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "timestamp": self.timestamp,
            "details": self.details,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Activity:
        return cls(
            id=data["id"],
            type=data["type"],
            timestamp=data["timestamp"],
            details=dict(data.get("details") or {}),
            description=data.get("description", ""),
        )


@dataclass
class Resume:
    id: str
    user_id: str
    filename: str
    file_url: str
    uploaded_at: str
    is_primary: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "filename": self.filename,
            "fileUrl": self.file_url,
            "uploadedAt": self.uploaded_at,
            "isPrimary": self.is_primary,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Resume:
        return cls(
            id=data["id"],
            user_id=data.get("userId", ""),
            filename=data["filename"],
            file_url=data.get("fileUrl", ""),
            uploaded_at=data.get("uploadedAt", ""),
            is_primary=bool(data.get("isPrimary", False)),
        )


@dataclass
class JobsResponse:
    jobs: list[Job]
    total: int
    page: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobs": [j.to_dict() for j in self.jobs],
            "total": self.total,
            "page": self.page,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobsResponse:
        jobs = [Job.from_dict(j) for j in data["jobs"]]
        return cls(jobs=jobs, total=int(data.get("total", len(jobs))), page=int(data.get("page", 1)))
