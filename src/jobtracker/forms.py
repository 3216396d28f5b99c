"""Input buffers for creating and editing entries.

``EntryForm`` holds the fields of an entry that has not been created yet and
``EditSession`` holds the scratch copy of the one entry being edited. Neither
touches persistence; ``TrackerView`` wires them to the entry list.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional, Tuple

from .entries import DEFAULT_STATUS, MUTABLE_FIELDS, ApplicationStatus, JobEntry

REQUIRED_FIELDS = ("company", "role", "date")


class EditStateError(RuntimeError):
    """Raised when an edit operation is used without an entry being edited."""


def _coerce_field(name: str, value: object) -> object:
    if name not in MUTABLE_FIELDS:
        raise ValueError(f"Unknown entry field: {name!r}")
    if name == "status":
        return ApplicationStatus.parse(value)  # type: ignore[arg-type]
    if name == "date" and isinstance(value, dt.date):
        return value.isoformat()
    if value is None:
        return ""
    return str(value)


def _blank_fields() -> Dict[str, object]:
    return {
        "company": "",
        "role": "",
        "status": DEFAULT_STATUS,
        "date": "",
        "notes": "",
    }


class EntryForm:
    """Buffer for a not-yet-created entry."""

    def __init__(self) -> None:
        self.fields: Dict[str, object] = _blank_fields()

    def update_field(self, name: str, value: object) -> None:
        self.fields[name] = _coerce_field(name, value)

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if not str(self.fields[name]).strip()]

    def reset(self) -> None:
        self.fields = _blank_fields()

    def submit(self, entry_id: int) -> Optional[JobEntry]:
        """Build an entry from the buffer, or ``None`` if a required field is blank.

        A blocked submission leaves the buffer as it was so the user can fill in
        the gaps.
        """

        if self.missing_fields():
            return None
        entry = JobEntry(
            id=entry_id,
            company=str(self.fields["company"]),
            role=str(self.fields["role"]),
            status=ApplicationStatus.parse(self.fields["status"]),  # type: ignore[arg-type]
            date=str(self.fields["date"]),
            notes=str(self.fields["notes"]),
        )
        self.reset()
        return entry


class EditSession:
    """Scratch copy of the single entry currently being edited."""

    def __init__(self) -> None:
        self.editing_id: Optional[int] = None
        self._scratch: Dict[str, object] = {}

    @property
    def active(self) -> bool:
        return self.editing_id is not None

    @property
    def scratch(self) -> Dict[str, object]:
        return dict(self._scratch)

    def is_editing(self, entry_id: int) -> bool:
        return self.editing_id == entry_id

    def begin(self, entry: JobEntry) -> None:
        # Switching entries drops whatever was typed for the previous one.
        self.editing_id = entry.id
        self._scratch = {name: getattr(entry, name) for name in MUTABLE_FIELDS}

    def update_field(self, name: str, value: object) -> None:
        if not self.active:
            raise EditStateError("No entry is being edited")
        self._scratch[name] = _coerce_field(name, value)

    def finish(self) -> Tuple[int, Dict[str, object]]:
        if self.editing_id is None:
            raise EditStateError("No entry is being edited")
        result = (self.editing_id, dict(self._scratch))
        self.cancel()
        return result

    def cancel(self) -> None:
        self.editing_id = None
        self._scratch = {}
