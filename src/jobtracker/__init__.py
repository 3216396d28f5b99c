"""Jobtracker – record job applications and follow their progress."""

from .entries import ApplicationStatus, EntryList, JobEntry
from .forms import EditSession, EditStateError, EntryForm
from .presentation import STATUS_STYLES, StatusStyle, status_badge_html
from .settings import TrackerSettings, setup_logging
from .storage import STORAGE_KEY, EntryStorage, InMemoryStore, JsonFileStore, KeyValueStore, StorageError
from .tracker import TrackerView

__all__ = [
    "ApplicationStatus",
    "JobEntry",
    "EntryList",
    "EntryForm",
    "EditSession",
    "EditStateError",
    "STATUS_STYLES",
    "StatusStyle",
    "status_badge_html",
    "TrackerSettings",
    "setup_logging",
    "STORAGE_KEY",
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    "EntryStorage",
    "StorageError",
    "TrackerView",
]
