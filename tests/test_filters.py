from __future__ import annotations

import pytest

from jobdash.filters import FilterCriteria, filter_jobs
from tests.conftest import make_job


def _ids(jobs):
    return [j.id for j in jobs]


def test_empty_criteria_is_identity(jobs):
    assert filter_jobs(jobs, FilterCriteria()) == jobs


def test_search_matches_title_or_company_case_insensitive(jobs):
    result = filter_jobs(jobs, FilterCriteria(search="REACT"))
    # title match (1) and company match (5)
    assert _ids(result) == ["1", "5"]


def test_role_matches_title_only(jobs):
    result = filter_jobs(jobs, FilterCriteria(role="react"))
    assert _ids(result) == ["1"]


def test_location_substring(jobs):
    assert _ids(filter_jobs(jobs, FilterCriteria(location=", ca"))) == ["1", "4"]


def test_job_type_is_exact_and_case_sensitive(jobs):
    assert _ids(filter_jobs(jobs, FilterCriteria(job_type="Part-time"))) == ["4"]
    assert filter_jobs(jobs, FilterCriteria(job_type="part-time")) == []


def test_work_mode_exact(jobs):
    assert _ids(filter_jobs(jobs, FilterCriteria(work_mode="Hybrid"))) == ["2"]
    assert filter_jobs(jobs, FilterCriteria(work_mode="remote")) == []


def test_criteria_are_anded(jobs):
    criteria = FilterCriteria(search="developer", work_mode="Remote", job_type="Full-time")
    assert _ids(filter_jobs(jobs, criteria)) == ["1"]


@pytest.mark.parametrize(
    "criteria",
    [
        FilterCriteria(search="dev"),
        FilterCriteria(location="a"),
        FilterCriteria(role="engineer", work_mode="Remote"),
        FilterCriteria(search="zzz"),
    ],
)
def test_result_is_ordered_subsequence_and_idempotent(jobs, criteria):
    once = filter_jobs(jobs, criteria)
    positions = [jobs.index(j) for j in once]
    assert positions == sorted(positions)
    assert filter_jobs(once, criteria) == once


def test_missing_fields_do_not_match_text_criteria():
    job = make_job("x", "Engineer", "", "")
    assert filter_jobs([job], FilterCriteria(location="remote")) == []
    assert filter_jobs([job], FilterCriteria(search="engineer")) == [job]


def test_active_count():
    c = FilterCriteria(search="a", job_type="Contract")
    assert c.active_count() == 2
    assert not c.is_empty()
    assert FilterCriteria().is_empty()
