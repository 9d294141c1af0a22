"""HTTP client for the search proxy's /api/jobs/search endpoint."""
from __future__ import annotations

import requests

from jobdash.errors import SearchError
from jobdash.log import get_logger
from jobdash.models import JobsResponse

log = get_logger(__name__)

DEFAULT_ROLE = "developer"
DEFAULT_LOCATION = "India"


class JobSearchClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 15,
        default_role: str = DEFAULT_ROLE,
        default_location: str = DEFAULT_LOCATION,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_role = default_role
        self.default_location = default_location

    def build_params(self, role: str = "", location: str = "", job_type: str = "", page: int = 1) -> dict[str, str]:
        """Query parameters for one search.

        The default location is folded into the query text instead of being
        sent as a location filter; JSearch ranks that free-text hint better.
        """
        role = role or self.default_role
        location = location or self.default_location

        if location == self.default_location:
            params = {"query": f"{role} {location}"}
        else:
            params = {"query": role, "location": location}
        if job_type:
            params["employment_type"] = job_type
        params["page"] = str(page)
        return params

    def search(self, role: str = "", location: str = "", job_type: str = "", page: int = 1) -> JobsResponse:
        params = self.build_params(role, location, job_type, page)
        try:
            r = requests.get(f"{self.base_url}/api/jobs/search", params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            log.error("Search request failed: %s", exc)
            raise SearchError(str(exc)) from exc

        if not r.ok:
            try:
                message = r.json().get("error")
            except (ValueError, AttributeError):
                message = None
            raise SearchError(message or f"Request failed with status {r.status_code}")

        try:
            result = JobsResponse.from_dict(r.json())
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            log.error("Unexpected search response from %s: %s", self.base_url, exc)
            raise SearchError("Received an invalid response from the job search service") from exc
        log.debug("Fetched %d jobs for %r", result.total, params["query"])
        return result
