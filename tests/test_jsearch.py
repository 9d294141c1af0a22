from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from jobdash.errors import UpstreamError
from jobdash.sources.jsearch import FALLBACK_JOB_LINK, JSearchSource, map_job


def _response(status: int = 200, payload=None, reason: str = "OK", text: str = ""):
    r = MagicMock()
    r.status_code = status
    r.ok = 200 <= status < 300
    r.reason = reason
    r.text = text
    r.json.return_value = payload if payload is not None else {}
    return r


def test_map_job_fills_documented_fallbacks(fixed_now):
    job = map_job(
        {"job_id": "42", "job_title": "Engineer", "employer_name": "Acme", "job_employment_type": "Contract"},
        now=fixed_now,
    )
    assert job.id == "42"
    assert job.title == "Engineer"
    assert job.company == "Acme"
    assert job.location == "Location not specified"
    assert job.job_type == "Contract"
    assert job.work_mode == "Remote"
    assert job.job_link == FALLBACK_JOB_LINK == "https://jsearch.p.rapidapi.com"
    assert job.apply_link is None
    assert job.is_external is True
    assert job.posted_time == "2026-03-10T12:00:00.000Z"
    assert job.created_at == job.updated_at == "2026-03-10T12:00:00.000Z"


def test_map_job_copies_upstream_fields(fixed_now):
    job = map_job(
        {
            "job_id": "7",
            "job_title": "SRE",
            "employer_name": "Initech",
            "job_location": "Pune, India",
            "job_description": "On call.",
            "job_posted_at_datetime_utc": "2026-03-01T08:30:00.000Z",
            "job_apply_link": "https://initech.example/apply",
        },
        now=fixed_now,
    )
    assert job.location == "Pune, India"
    assert job.job_type == "Full-time"
    assert job.posted_time == "2026-03-01T08:30:00.000Z"
    assert job.job_link == job.apply_link == "https://initech.example/apply"
    assert job.description == "On call."


def test_map_job_bad_posted_time_falls_back_to_now(fixed_now):
    job = map_job({"job_id": "1", "job_posted_at_datetime_utc": "yesterday"}, now=fixed_now)
    assert job.posted_time == "2026-03-10T12:00:00.000Z"


def test_map_job_numeric_posted_time_falls_back_to_now(fixed_now):
    job = map_job({"job_id": "1", "job_posted_at_datetime_utc": 1700000000}, now=fixed_now)
    assert job.posted_time == "2026-03-10T12:00:00.000Z"


def test_wire_shape_is_camel_case_without_unset_fields(fixed_now):
    data = map_job({"job_id": "42", "job_title": "Engineer", "employer_name": "Acme"}, now=fixed_now).to_dict()
    assert data["jobType"] == "Full-time"
    assert data["workMode"] == "Remote"
    assert data["isExternal"] is True
    assert "applyLink" not in data
    assert "description" not in data


@patch("jobdash.sources.jsearch.requests.get")
def test_search_sends_params_and_headers(mock_get):
    mock_get.return_value = _response(payload={"data": [{"job_id": "1", "job_title": "Dev", "employer_name": "X"}]})
    jobs = JSearchSource("secret").search("developer", location="Berlin", employment_type="Contract", page=3)

    assert [j.id for j in jobs] == ["1"]
    _, kwargs = mock_get.call_args
    assert kwargs["params"] == {
        "query": "developer",
        "page": "3",
        "num_pages": "1",
        "employment_type": "Contract",
        "location": "Berlin",
    }
    assert kwargs["headers"]["x-rapidapi-key"] == "secret"
    assert kwargs["headers"]["x-rapidapi-host"] == "jsearch.p.rapidapi.com"


@patch("jobdash.sources.jsearch.requests.get")
def test_search_omits_empty_filters(mock_get):
    mock_get.return_value = _response(payload={"data": []})
    assert JSearchSource("secret").search("developer India") == []
    params = mock_get.call_args.kwargs["params"]
    assert "location" not in params
    assert "employment_type" not in params


@patch("jobdash.sources.jsearch.requests.get")
def test_upstream_error_status_is_reported(mock_get):
    mock_get.return_value = _response(status=429, reason="Too Many Requests", text="quota")
    with pytest.raises(UpstreamError) as excinfo:
        JSearchSource("secret").search("developer")
    assert str(excinfo.value) == "JSearch API error (429): Too Many Requests"
    assert excinfo.value.status == 429


@patch("jobdash.sources.jsearch.requests.get")
def test_network_failure_is_reported(mock_get):
    mock_get.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(UpstreamError, match="connection refused"):
        JSearchSource("secret").search("developer")
