"""Job application entries and the ordered list that owns them."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional


class ApplicationStatus(str, Enum):
    """Where an application currently stands."""

    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"

    @classmethod
    def parse(cls, value: "ApplicationStatus | str") -> "ApplicationStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown application status: {value!r}") from None


DEFAULT_STATUS = ApplicationStatus.APPLIED


def _text(value: object) -> str:
    return "" if value is None else str(value)


# Fields an edit may replace; ``id`` never changes.
MUTABLE_FIELDS = ("company", "role", "status", "date", "notes")


@dataclass(frozen=True)
class JobEntry:
    """One recorded job application."""

    id: int
    company: str
    role: str
    status: ApplicationStatus = DEFAULT_STATUS
    date: str = ""
    notes: str = ""

    def with_changes(self, patch: Mapping[str, object]) -> "JobEntry":
        """Return a copy with the patch's mutable fields applied on top."""

        changes: Dict[str, object] = {}
        for name in MUTABLE_FIELDS:
            if name not in patch:
                continue
            value = patch[name]
            if name == "status":
                value = ApplicationStatus.parse(value)  # type: ignore[arg-type]
            else:
                value = _text(value)
            changes[name] = value
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company": self.company,
            "role": self.role,
            "status": self.status.value,
            "date": self.date,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobEntry":
        entry_id = data["id"]
        if isinstance(entry_id, bool) or not isinstance(entry_id, int):
            raise ValueError(f"Entry id must be an integer, got {entry_id!r}")
        return cls(
            id=entry_id,
            company=_text(data.get("company")),
            role=_text(data.get("role")),
            status=ApplicationStatus.parse(data.get("status", DEFAULT_STATUS)),
            date=_text(data.get("date")),
            notes=_text(data.get("notes")),
        )


@dataclass
class EntryList:
    """Entries ordered newest first."""

    items: List[JobEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[JobEntry]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def ids(self) -> List[int]:
        return [entry.id for entry in self.items]

    def get(self, entry_id: int) -> Optional[JobEntry]:
        for entry in self.items:
            if entry.id == entry_id:
                return entry
        return None

    def next_id(self, now_ms: int) -> int:
        """Allocate an id from the creation time, unique within the list."""

        ids = self.ids()
        if ids and now_ms <= max(ids):
            return max(ids) + 1
        return now_ms

    def prepend(self, entry: JobEntry) -> None:
        if self.get(entry.id) is not None:
            raise ValueError(f"Duplicate entry id: {entry.id}")
        self.items.insert(0, entry)

    def replace_by_id(self, entry_id: int, patch: Mapping[str, object]) -> bool:
        """Merge ``patch`` into the matching entry.

        Returns ``False`` when no entry carries ``entry_id``; the list is left
        untouched in that case.
        """

        for index, entry in enumerate(self.items):
            if entry.id == entry_id:
                self.items[index] = entry.with_changes(patch)
                return True
        return False

    def to_snapshot(self) -> List[dict]:
        return [entry.to_dict() for entry in self.items]

    @classmethod
    def from_snapshot(cls, payload: Iterable[dict]) -> "EntryList":
        items: List[JobEntry] = []
        seen = set()
        for data in payload or []:
            if not isinstance(data, dict):
                raise ValueError(f"Entry must be an object, got {type(data).__name__}")
            entry = JobEntry.from_dict(data)
            if entry.id in seen:
                raise ValueError(f"Duplicate entry id: {entry.id}")
            seen.add(entry.id)
            items.append(entry)
        return cls(items=items)
