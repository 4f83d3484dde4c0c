"""Streamlit UI for the job application tracker."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from job_tracker import ALL, FilterSpec, JobStatus, RecordStore, build_store, filter_records
from job_tracker.config import load_settings
from job_tracker.form import JobForm
from job_tracker.formatting import format_date, normalize_link, status_colors, summarize
from job_tracker.log import configure, get_logger

log = get_logger(__name__)

STATUSES: list[str] = [s.value for s in JobStatus]
_FORM_KEYS = ("form_company", "form_role", "form_status", "form_date", "form_link")

_CSS = """
<style>
[data-testid="stAppViewContainer"] { background: #f5f5f5; }
.status-chip {
    display: inline-block; padding: 0.15rem 0.75rem;
    border-radius: 999px; font-size: 0.85rem; font-weight: 500;
}
.job-role { color: #555; margin-top: -0.5rem; }
</style>
"""

# ── Session state ────────────────────────────────────────────────────────


def _store() -> RecordStore:
    if "store" not in st.session_state:
        settings = load_settings()
        configure(settings.log_level)
        store = build_store(settings)
        result = store.load()
        if not result.ok:
            st.session_state["_flash"] = f"Failed to fetch jobs: {result.error}"
        st.session_state["store"] = store
    return st.session_state["store"]


def _flash_error(message: str) -> None:
    st.session_state["_flash"] = message


def _show_flash() -> None:
    message = st.session_state.pop("_flash", None)
    if message:
        st.error(message)


# ── Callbacks ────────────────────────────────────────────────────────────


def _on_status_change(job_id: str) -> None:
    new_status = st.session_state[f"status_{job_id}"]
    result = _store().set_status(job_id, new_status)
    if not result.ok:
        _flash_error(f"Failed to update status: {result.error}")
        # drop the widget value so the select falls back to the stored status
        st.session_state.pop(f"status_{job_id}", None)


def _on_delete(job_id: str) -> None:
    result = _store().remove(job_id)
    if not result.ok:
        _flash_error(f"Failed to delete job: {result.error}")
        return
    st.session_state.pop(f"status_{job_id}", None)


def _on_refresh() -> None:
    result = _store().load()
    if not result.ok:
        _flash_error(f"Failed to fetch jobs: {result.error}")
        return
    for key in [k for k in st.session_state if str(k).startswith("status_")]:
        del st.session_state[key]


def _clear_date_filter() -> None:
    st.session_state["filter_date"] = None


# ── Sections ─────────────────────────────────────────────────────────────


def section_form(store: RecordStore) -> None:
    if st.session_state.pop("_clear_form", False):
        for key in _FORM_KEYS:
            st.session_state.pop(key, None)

    with st.form("add_job"):
        company = st.text_input("Company *", key="form_company")
        role = st.text_input("Role *", key="form_role")
        c1, c2 = st.columns(2)
        with c1:
            status = st.selectbox("Status", STATUSES, key="form_status")
        with c2:
            date = st.date_input("Date *", value=None, key="form_date")
        link = st.text_input("Job Link", key="form_link", placeholder="https://example.com/job-posting")
        submitted = st.form_submit_button("Add Job", type="primary", use_container_width=True)

    if not submitted:
        return

    form = JobForm(company=company, role=role, status=status, date=date, link=link)
    result = form.submit(store)
    if result.ok:
        st.session_state["_clear_form"] = True
        st.toast(f"Added {result.record.role} at {result.record.company}")
        st.rerun()
    else:
        st.error(f"Failed to add job: {result.error}")


def section_filters() -> FilterSpec:
    c1, c2, c3 = st.columns([3, 3, 1])
    with c1:
        status = st.selectbox(
            "Filter by Status",
            [ALL, *STATUSES],
            format_func=lambda s: "All Status" if s == ALL else s,
            key="filter_status",
        )
    with c2:
        day = st.date_input("Filter by Date", value=None, key="filter_date")
    with c3:
        st.write("")
        st.button("Clear", on_click=_clear_date_filter, use_container_width=True)
    return FilterSpec(status=status, date=day)


def _chip(status: str) -> str:
    fg, bg = status_colors(status)
    return f'<span class="status-chip" style="color:{fg};background:{bg}">{status}</span>'


def section_list(store: RecordStore, spec: FilterSpec) -> None:
    visible = filter_records(store.records, spec)
    st.caption(f"Showing {len(visible)} applications")

    for job in visible:
        with st.container(border=True):
            left, right = st.columns([5, 1])
            with left:
                st.markdown(f"#### {job.company}")
                st.markdown(f'<div class="job-role">{job.role}</div>', unsafe_allow_html=True)
                st.caption(f"📅 {format_date(job.date)}")
            with right:
                st.button(
                    "🗑️", key=f"del_{job.id}", help="Delete Application",
                    on_click=_on_delete, args=(job.id,),
                )

            c1, c2, c3 = st.columns([2, 1, 3])
            with c1:
                st.selectbox(
                    "Status", STATUSES,
                    index=STATUSES.index(job.status.value),
                    key=f"status_{job.id}",
                    label_visibility="collapsed",
                    on_change=_on_status_change, args=(job.id,),
                )
            with c2:
                st.markdown(_chip(job.status.value), unsafe_allow_html=True)
            with c3:
                url = normalize_link(job.link)
                if url:
                    st.link_button("View Job Posting", url)


# ── Main ─────────────────────────────────────────────────────────────────


def main() -> None:
    st.set_page_config(page_title="Student Job Tracker", page_icon="🏢")
    st.markdown(_CSS, unsafe_allow_html=True)
    st.title("🏢 Student Job Tracker")

    store = _store()
    _show_flash()

    section_form(store)
    st.divider()

    counts = summarize(store.records)
    cols = st.columns(len(counts) + 1)
    for col, (status, n) in zip(cols, counts.items()):
        col.metric(status.value, n)
    cols[-1].button("Refresh", on_click=_on_refresh, use_container_width=True)

    spec = section_filters()
    section_list(store, spec)


main()
