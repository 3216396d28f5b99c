"""Streamlit page for recording and reviewing job applications.

The page keeps a ``TrackerView`` in the session state. Widgets feed its form
and edit buffers, and every change to the entry list is written to the JSON
storage file before the page re-runs.
"""
from __future__ import annotations

import datetime as dt
import logging
import sys
from pathlib import Path
from typing import Optional

import streamlit as st

PACKAGE_DIR = Path(__file__).resolve().parent

if __package__ in {None, ""}:
    sys.path.append(str(PACKAGE_DIR.parent))
    from jobtracker.entries import ApplicationStatus, JobEntry  # type: ignore[attr-defined]
    from jobtracker.presentation import status_badge_html  # type: ignore[attr-defined]
    from jobtracker.settings import TrackerSettings, setup_logging  # type: ignore[attr-defined]
    from jobtracker.storage import EntryStorage, JsonFileStore, StorageError  # type: ignore[attr-defined]
    from jobtracker.tracker import TrackerView  # type: ignore[attr-defined]
else:
    from .entries import ApplicationStatus, JobEntry
    from .presentation import status_badge_html
    from .settings import TrackerSettings, setup_logging
    from .storage import EntryStorage, JsonFileStore, StorageError
    from .tracker import TrackerView

logger = logging.getLogger(__name__)

STATUS_OPTIONS = [status.value for status in ApplicationStatus]
FIELD_LABELS = {"company": "Company", "role": "Role", "date": "Date"}


def _load_tracker(path: Path, settings: TrackerSettings) -> TrackerView:
    storage = EntryStorage(JsonFileStore(path), key=settings.storage_key)
    return TrackerView(storage, editable=settings.allow_edit)


def _initialise_session_state() -> None:
    if "settings" not in st.session_state:
        st.session_state.settings = TrackerSettings.from_env()
        setup_logging(st.session_state.settings.log_level)
    if "storage_path" not in st.session_state:
        st.session_state.storage_path = str(st.session_state.settings.storage_path)
    if "loaded_storage_path" not in st.session_state:
        st.session_state.tracker = _load_tracker(
            Path(st.session_state.storage_path), st.session_state.settings
        )
        st.session_state.loaded_storage_path = st.session_state.storage_path
    if "entry_form_nonce" not in st.session_state:
        st.session_state.entry_form_nonce = 0


def _reload_state_if_needed(path_text: str) -> None:
    if path_text != st.session_state.get("loaded_storage_path"):
        logger.info("Switching storage file to %s", path_text)
        st.session_state.tracker = _load_tracker(Path(path_text), st.session_state.settings)
        st.session_state.loaded_storage_path = path_text


def _parse_date(value: str) -> Optional[dt.date]:
    try:
        return dt.date.fromisoformat(value) if value else None
    except ValueError:
        return None


def _render_entry_form() -> None:
    tracker: TrackerView = st.session_state.tracker
    nonce = st.session_state.entry_form_nonce
    error = st.session_state.pop("entry_form_error", None)
    if error:
        st.error(error)

    with st.form("entry_form", clear_on_submit=False):
        company = st.text_input("Company", placeholder="Company 🏢", key=f"new_company_{nonce}")
        role = st.text_input("Role", placeholder="Role 👨‍💻", key=f"new_role_{nonce}")
        status = st.selectbox("Status", STATUS_OPTIONS, index=0, key=f"new_status_{nonce}")
        applied_on = st.date_input("Date", value=None, key=f"new_date_{nonce}")
        notes = st.text_area("Notes", placeholder="Notes 🗒️", key=f"new_notes_{nonce}")
        submitted = st.form_submit_button("Add job")

    if not submitted:
        return

    tracker.update_field("company", company)
    tracker.update_field("role", role)
    tracker.update_field("status", status)
    tracker.update_field("date", applied_on)
    tracker.update_field("notes", notes)

    missing = tracker.missing_fields()
    if missing:
        st.warning("Please fill in: " + ", ".join(FIELD_LABELS[name] for name in missing))
        return

    try:
        tracker.submit()
    except StorageError as exc:
        # The entry is already in the list; clear the form so it is not added twice.
        st.session_state.entry_form_error = f"Saved in this session only: {exc}"
    st.session_state.entry_form_nonce = nonce + 1
    st.rerun()


def _render_edit_form(entry: JobEntry) -> None:
    tracker: TrackerView = st.session_state.tracker
    scratch = tracker.edit.scratch
    status_value = ApplicationStatus.parse(scratch.get("status", ApplicationStatus.APPLIED)).value

    with st.form(f"edit_form_{entry.id}"):
        company = st.text_input("Company", value=str(scratch.get("company", "")), key=f"edit_company_{entry.id}")
        role = st.text_input("Role", value=str(scratch.get("role", "")), key=f"edit_role_{entry.id}")
        status = st.selectbox(
            "Status",
            STATUS_OPTIONS,
            index=STATUS_OPTIONS.index(status_value),
            key=f"edit_status_{entry.id}",
        )
        applied_on = st.date_input(
            "Date",
            value=_parse_date(str(scratch.get("date", ""))),
            key=f"edit_date_{entry.id}",
        )
        notes = st.text_area("Notes", value=str(scratch.get("notes", "")), key=f"edit_notes_{entry.id}")
        col1, col2 = st.columns(2)
        save = col1.form_submit_button("💾 Save")
        cancel = col2.form_submit_button("✖ Cancel")

    if cancel:
        tracker.cancel_edit()
        st.rerun()
    if save:
        tracker.update_edit_field("company", company)
        tracker.update_edit_field("role", role)
        tracker.update_edit_field("status", status)
        tracker.update_edit_field("date", applied_on)
        tracker.update_edit_field("notes", notes)
        try:
            tracker.save_edit()
        except StorageError as exc:
            st.error(f"Saved in this session only: {exc}")
            return
        st.rerun()


def _render_entry_card(entry: JobEntry) -> None:
    tracker: TrackerView = st.session_state.tracker

    with st.container(border=True):
        if tracker.editable and tracker.edit.is_editing(entry.id):
            _render_edit_form(entry)
            return

        left, right = st.columns([3, 2])
        left.markdown(f"**{entry.company}**")
        left.write(entry.role)
        right.markdown(status_badge_html(entry.status), unsafe_allow_html=True)
        if tracker.editable and right.button("✏️ Edit", key=f"edit_{entry.id}"):
            tracker.begin_edit(entry.id)
            st.rerun()
        st.caption(entry.date)
        if entry.notes:
            st.write(entry.notes)


def main() -> None:
    st.set_page_config(page_title="Job Tracker", layout="centered")
    _initialise_session_state()

    st.sidebar.title("Settings")
    storage_path = st.sidebar.text_input("Storage file", value=st.session_state.storage_path)
    if storage_path != st.session_state.storage_path:
        st.session_state.storage_path = storage_path
    _reload_state_if_needed(storage_path)

    st.title("Job Tracker 📝")
    _render_entry_form()

    tracker: TrackerView = st.session_state.tracker
    if not len(tracker.entries):
        st.info("No applications recorded yet. Use the form above to add one.")
        return
    for entry in tracker.entries:
        _render_entry_card(entry)


if __name__ == "__main__":  # pragma: no cover - Streamlit entry point
    main()
