"""Streamlit UI for the job search dashboard."""
from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobdash.activity_log import ActivityLog, format_activity_time
from jobdash.applications import ApplicationStore
from jobdash.client import JobSearchClient
from jobdash.config import data_dir, ensure_dirs, load_settings, resume_dir
from jobdash.dashboard import ERROR, LOADING, DashboardController
from jobdash.errors import InvalidResumeError
from jobdash.log import get_logger
from jobdash.models import JOB_TYPES, WORK_MODES, parse_iso
from jobdash.resumes import ResumeStore
from jobdash.storage import KeyValueStore

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

STATUS_BADGES: dict[str, str] = {
    "Applied": "✅ Applied",
    "Pending": "⏳ Pending",
    "External": "🔗 External Site",
    "Not Interested": "🚫 Not Interested",
    "Reviewed": "👁️ Reviewed",
}

ACTIVITY_ICONS: dict[str, str] = {
    "job_applied": "✅",
    "job_reviewed": "👁️",
    "job_not_interested": "🗑️",
    "search_performed": "🔍",
    "filter_applied": "⚡",
}

ACTIVITY_LABELS: dict[str, str] = {
    "job_applied": "Applied",
    "job_reviewed": "Reviewed",
    "job_not_interested": "Not Interested",
    "search_performed": "Searches",
    "filter_applied": "Filters",
}

_CARD_CSS = """
<style>
.job-meta { color: #666; font-size: 0.85rem; }
.status-pill {
    display: inline-block; padding: 0.1rem 0.6rem; border-radius: 999px;
    background: rgba(74,144,217,0.12); font-size: 0.8rem; font-weight: 600;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _controller() -> DashboardController:
    """One controller per browser session, built on the shared local stores."""
    if "controller" not in st.session_state:
        ensure_dirs()
        settings = load_settings()
        store = KeyValueStore(data_dir())
        client = JobSearchClient(
            settings["api_base_url"],
            timeout=settings["request_timeout"],
            default_role=settings["default_role"],
            default_location=settings["default_location"],
        )
        ctrl = DashboardController(
            client,
            ApplicationStore(store),
            ActivityLog(store, limit=settings["activity_limit"]),
            ResumeStore(store, resume_dir()),
        )
        ctrl.load()
        st.session_state["controller"] = ctrl
    return st.session_state["controller"]


def _time_ago(timestamp: str) -> str:
    try:
        days = (datetime.now(timezone.utc) - parse_iso(timestamp)).days
    except ValueError:
        return ""
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    return f"{days // 30} months ago"


def _format_date(timestamp: str) -> str:
    try:
        dt = parse_iso(timestamp)
    except ValueError:
        return timestamp
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


# ── Page: Browse Jobs ────────────────────────────────────────────────────


def _filter_bar(ctrl: DashboardController) -> None:
    c = ctrl.criteria
    search = st.text_input("Search jobs by title or company…", value=c.search, label_visibility="collapsed",
                           placeholder="Search jobs by title or company…")
    badge = f" ({c.active_count()})" if c.active_count() else ""
    with st.expander(f"Filters{badge}"):
        c1, c2, c3, c4 = st.columns(4)
        with c1:
            role = st.text_input("Job Title", value=c.role, placeholder="e.g., Senior Developer")
        with c2:
            location = st.text_input("Location", value=c.location, placeholder="e.g., New York")
        type_opts = [""] + list(JOB_TYPES)
        with c3:
            job_type = st.selectbox("Job Type", type_opts, index=type_opts.index(c.job_type),
                                    format_func=lambda v: v or "All Types")
        mode_opts = [""] + list(WORK_MODES)
        with c4:
            work_mode = st.selectbox("Work Mode", mode_opts, index=mode_opts.index(c.work_mode),
                                     format_func=lambda v: v or "All Modes")
        if not c.is_empty() and st.button("✖ Clear All"):
            ctrl.clear_filters()
            st.rerun()

    changes = {
        k: v for k, v in {
            "search": search, "role": role, "location": location,
            "job_type": job_type, "work_mode": work_mode,
        }.items()
        if getattr(c, k) != v
    }
    if changes:
        with st.spinner("Loading jobs…"):
            ctrl.update_criteria(**changes)
        st.rerun()


def _job_card(ctrl: DashboardController, job, app) -> None:
    with st.container(border=True):
        head, status = st.columns([4, 1])
        with head:
            st.markdown(f"### {job.title}")
            st.markdown(f"**{job.company}**")
            st.markdown(
                f'<span class="job-meta">📍 {job.location} · {job.job_type} · {job.work_mode}'
                f" · 🕒 {_time_ago(job.posted_time)}</span>",
                unsafe_allow_html=True,
            )
        with status:
            if app:
                st.markdown(f'<span class="status-pill">{STATUS_BADGES.get(app.status, app.status)}</span>',
                            unsafe_allow_html=True)
            elif job.is_external:
                st.markdown('<span class="status-pill">🔗 External</span>', unsafe_allow_html=True)

        if job.description:
            with st.expander("Description"):
                st.write(job.description)

        b1, b2, b3, b4 = st.columns(4)
        if b1.button("Mark Reviewed", key=f"rev-{job.id}", use_container_width=True):
            ctrl.mark_reviewed(job.id)
            st.rerun()
        if b2.button("Apply", key=f"apply-{job.id}", type="primary", use_container_width=True):
            ctrl.apply(job.id)
            st.rerun()
        if b3.button("Not Interested", key=f"ni-{job.id}", use_container_width=True):
            ctrl.not_interested(job.id)
            st.rerun()
        b4.link_button("View Posting", job.apply_link or job.job_link, use_container_width=True)


def page_browse() -> None:
    st.header("💼 Browse Jobs")
    st.caption("Discover and apply to jobs matching your profile")

    ctrl = _controller()
    _filter_bar(ctrl)

    if ctrl.state == LOADING:
        with st.spinner("Loading jobs…"):
            ctrl.load()

    if ctrl.state == ERROR:
        st.error(ctrl.error)
        if st.button("Retry", type="primary"):
            with st.spinner("Loading jobs…"):
                ctrl.retry()
            st.rerun()
        return

    if not ctrl.visible:
        st.info("**No jobs found** — try adjusting your search filters.")
        return

    apps = ctrl.applications()
    st.caption(f"{len(ctrl.visible)} of {len(ctrl.jobs)} jobs")
    for job in ctrl.visible:
        _job_card(ctrl, job, apps.get(job.id))


# ── Page: Applied ────────────────────────────────────────────────────────


def page_applied() -> None:
    st.header("✅ Applied Jobs")
    st.caption("Track your job applications and their status")

    ctrl = _controller()
    rows = ctrl.applied_rows()
    if not rows:
        st.info("**No applications yet** — browse jobs and apply to get started.")
        return

    for row in rows:
        with st.container(border=True):
            info, actions = st.columns([5, 1])
            with info:
                st.markdown(f"**{row['title']}**  {STATUS_BADGES.get(row['status'], row['status'])}")
                meta = " · ".join(p for p in (row["company"], row["location"]) if p)
                st.markdown(
                    f'<span class="job-meta">{meta} · {row["status"]} {_format_date(row["appliedAt"])}</span>',
                    unsafe_allow_html=True,
                )
            with actions:
                if row["link"]:
                    st.link_button("Open", row["link"], use_container_width=True)
                if st.button("🗑️ Delete", key=f"del-{row['jobId']}", use_container_width=True):
                    ctrl.delete_application(row["jobId"])
                    st.rerun()


# ── Page: Activity Log ───────────────────────────────────────────────────


def page_activity() -> None:
    st.header("⚡ Activity Log")
    st.caption("Complete history of all your job search activities")

    activity = _controller().activity
    entries = activity.list()
    if not entries:
        st.info("**No activities yet** — start browsing jobs to see your activity history.")
        return

    counts = activity.counts()
    cols = st.columns(len(counts))
    for col, (kind, n) in zip(cols, counts.items()):
        col.metric(ACTIVITY_LABELS[kind], n)

    options = [""] + list(counts)
    kind = st.radio(
        "Show",
        options,
        horizontal=True,
        format_func=lambda k: f"All ({len(entries)})" if not k else f"{ACTIVITY_LABELS[k]} ({counts[k]})",
    )
    shown = activity.list(type=kind or None)
    if not shown:
        st.caption("No activities for this filter")

    for a in shown:
        with st.container(border=True):
            st.markdown(f"{ACTIVITY_ICONS.get(a.type, '⚡')} **{a.description}**")
            title = a.details.get("jobTitle")
            company = a.details.get("company")
            loc = a.details.get("location")
            meta = []
            if title:
                meta.append(f"{title} at {company}" if company else title)
            meta.append(format_activity_time(a.timestamp))
            if loc:
                meta.append(f"📍 {loc}")
            st.markdown(f'<span class="job-meta">{" · ".join(meta)}</span>', unsafe_allow_html=True)

    st.divider()
    confirm = st.checkbox("I understand clearing the activity log cannot be undone")
    if st.button("Clear All", disabled=not confirm):
        activity.clear()
        st.success("Activity log cleared.")
        st.rerun()


# ── Page: Settings ───────────────────────────────────────────────────────


def page_settings() -> None:
    st.header("⚙️ Settings")
    st.caption("Manage your profile and resume")

    resumes = _controller().resumes
    st.subheader("Resume Management")

    uploaded = st.file_uploader("Drop your resume here (PDF)", type=None, key="resume_upload")
    if uploaded and st.button("Upload", type="primary"):
        try:
            resumes.add(uploaded.name, uploaded.getvalue())
            st.success(f"Saved **{uploaded.name}**")
        except InvalidResumeError as exc:
            st.error(str(exc))

    stored = resumes.list()
    if not stored:
        st.info("No resumes uploaded yet.")
        return

    for r in stored:
        with st.container(border=True):
            info, primary, delete = st.columns([4, 1, 1])
            with info:
                label = f"📄 **{r.filename}**"
                if r.is_primary:
                    label += "  ⭐ Primary"
                st.markdown(label)
                st.caption(f"Uploaded {_format_date(r.uploaded_at)}")
            if not r.is_primary and primary.button("Set Primary", key=f"primary-{r.id}"):
                resumes.set_primary(r.id)
                st.rerun()
            if delete.button("🗑️", key=f"rm-{r.id}"):
                resumes.delete(r.id)
                st.rerun()


# ── Main ─────────────────────────────────────────────────────────────────


def _inject_css() -> None:
    st.markdown(_CARD_CSS, unsafe_allow_html=True)


def _wrap(page):
    def run() -> None:
        _inject_css()
        page()

    run.__name__ = page.__name__
    return run


pages = [
    st.Page(_wrap(page_browse), title="Browse Jobs", icon="💼", url_path="dashboard", default=True),
    st.Page(_wrap(page_applied), title="Applied", icon="✅", url_path="applied"),
    st.Page(_wrap(page_activity), title="Activity Log", icon="⚡", url_path="activity"),
    st.Page(_wrap(page_settings), title="Settings", icon="⚙️", url_path="settings"),
]

nav = st.navigation(pages)
nav.run()
