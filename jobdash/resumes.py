"""Resume files: stored under the resume folder, indexed in the key/value store."""
from __future__ import annotations

import time
import uuid
from pathlib import Path

from jobdash.errors import InvalidResumeError
from jobdash.log import get_logger
from jobdash.models import Resume, utc_now_iso
from jobdash.storage import KeyValueStore

log = get_logger(__name__)

RESUMES_KEY = "job_resumes"
USER_ID = "current-user"


class ResumeStore:
    def __init__(self, store: KeyValueStore, directory: Path | str) -> None:
        self.store = store
        self.directory = Path(directory)

    def list(self) -> list[Resume]:
        raw = self.store.load(RESUMES_KEY)
        if not isinstance(raw, list):
            return []
        try:
            return [Resume.from_dict(r) for r in raw]
        except (TypeError, KeyError, AttributeError) as exc:
            log.warning("Resume index is corrupted, treating as empty: %s", exc)
            return []

    def _save(self, resumes: list[Resume]) -> None:
        self.store.save(RESUMES_KEY, [r.to_dict() for r in resumes])

    def add(self, filename: str, content: bytes) -> Resume:
        """Store a PDF; the first resume on file becomes the primary one."""
        name = Path(filename).name
        if not name.lower().endswith(".pdf"):
            raise InvalidResumeError("Please upload a PDF file")

        resumes = self.list()
        resume_id = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"
        self.directory.mkdir(parents=True, exist_ok=True)
        dest = self.directory / f"{resume_id}_{name}"
        dest.write_bytes(content)

        resume = Resume(
            id=resume_id,
            user_id=USER_ID,
            filename=name,
            file_url=str(dest),
            uploaded_at=utc_now_iso(),
            is_primary=not resumes,
        )
        self._save([resume] + resumes)
        log.info("Saved resume %s", name)
        return resume

    def set_primary(self, resume_id: str) -> None:
        resumes = self.list()
        for r in resumes:
            r.is_primary = r.id == resume_id
        self._save(resumes)

    def delete(self, resume_id: str) -> bool:
        resumes = self.list()
        kept = [r for r in resumes if r.id != resume_id]
        if len(kept) == len(resumes):
            return False
        for r in resumes:
            if r.id == resume_id and r.file_url:
                Path(r.file_url).unlink(missing_ok=True)
        self._save(kept)
        log.info("Deleted resume %s", resume_id)
        return True

    def primary(self) -> Resume | None:
        return next((r for r in self.list() if r.is_primary), None)
