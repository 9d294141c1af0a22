"""Flask search proxy: forwards job searches to JSearch and reshapes the results."""
from __future__ import annotations

from typing import Any, Callable

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from jobdash.config import get_env, load_settings
from jobdash.errors import JobDashError
from jobdash.log import get_logger
from jobdash.models import JobsResponse
from jobdash.sources import JobSearchBase, get_source

log = get_logger(__name__)

FETCH_FAILED = "Failed to fetch jobs"


def _page(raw: str | None) -> int:
    try:
        return int(raw or 1) or 1
    except ValueError:
        return 1


def create_app(
    settings: dict[str, Any] | None = None,
    source_factory: Callable[[], JobSearchBase] | None = None,
) -> Flask:
    settings = settings or load_settings()
    if source_factory is None:
        def source_factory() -> JobSearchBase:
            return get_source(get_env, timeout=settings["request_timeout"])

    app = Flask(__name__)

    @app.errorhandler(JobDashError)
    def _handle_error(exc: JobDashError):
        log.error("Jobs fetch error: %s", exc)
        return jsonify({"error": str(exc)}), 500

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Jobs fetch error: %s", exc)
        return jsonify({"error": FETCH_FAILED}), 500

    @app.get("/api/ping")
    def ping():
        return jsonify({"message": "pong"})

    @app.get("/api/jobs/search")
    def search_jobs():
        query = request.args.get("query") or settings["default_role"]
        location = request.args.get("location", settings["proxy_default_location"])
        employment_type = request.args.get("employment_type", "")
        page = _page(request.args.get("page"))

        source = source_factory()
        jobs = source.search(query, location=location, employment_type=employment_type, page=page)
        log.info("Search query=%r location=%r type=%r page=%d -> %d jobs",
                 query, location, employment_type, page, len(jobs))
        return jsonify(JobsResponse(jobs=jobs, total=len(jobs), page=page).to_dict())

    return app
