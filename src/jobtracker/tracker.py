"""The tracker view: one entry list plus the buffers that feed it."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from .entries import EntryList, JobEntry
from .forms import EditSession, EditStateError, EntryForm
from .storage import EntryStorage

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class TrackerView:
    """Own the entry list and keep its stored copy in step.

    Every mutation of the list is written to ``storage`` straight after it is
    applied. Loading does not write back, and edits that leave the list as it
    was do not write either.
    """

    def __init__(
        self,
        storage: EntryStorage,
        *,
        editable: bool = True,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.storage = storage
        self.editable = editable
        self.clock = clock or _now_ms
        self.entries: EntryList = storage.load()
        self.form = EntryForm()
        self.edit = EditSession()

    def update_field(self, name: str, value: object) -> None:
        self.form.update_field(name, value)

    def missing_fields(self) -> List[str]:
        return self.form.missing_fields()

    def submit(self) -> Optional[JobEntry]:
        entry = self.form.submit(self.entries.next_id(self.clock()))
        if entry is None:
            logger.debug("Submission blocked; missing %s", ", ".join(self.form.missing_fields()))
            return None
        self.entries.prepend(entry)
        self.storage.save(self.entries)
        logger.info("Recorded %s @ %s (%s)", entry.role, entry.company, entry.status.value)
        return entry

    def _require_editable(self) -> None:
        if not self.editable:
            raise EditStateError("Editing is disabled for this tracker")

    def begin_edit(self, entry_id: int) -> bool:
        self._require_editable()
        entry = self.entries.get(entry_id)
        if entry is None:
            return False
        self.edit.begin(entry)
        return True

    def update_edit_field(self, name: str, value: object) -> None:
        self._require_editable()
        self.edit.update_field(name, value)

    def save_edit(self) -> Optional[JobEntry]:
        self._require_editable()
        entry_id, patch = self.edit.finish()
        before = self.entries.get(entry_id)
        if not self.entries.replace_by_id(entry_id, patch):
            logger.info("Entry %s no longer exists; edit dropped", entry_id)
            return None
        updated = self.entries.get(entry_id)
        if updated != before:
            self.storage.save(self.entries)
            logger.info("Updated entry %s", entry_id)
        return updated

    def cancel_edit(self) -> None:
        self.edit.cancel()
