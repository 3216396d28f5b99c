"""
Unit tests for the creation form and edit session.
"""

import datetime as dt

import pytest

from jobtracker.entries import ApplicationStatus, JobEntry
from jobtracker.forms import EditSession, EditStateError, EntryForm


class TestEntryForm:
    """Tests for EntryForm."""

    def test_update_field_keeps_others(self):
        """Should only replace the named field."""
        form = EntryForm()
        form.update_field("company", "Acme")
        form.update_field("role", "Engineer")
        form.update_field("company", "Globex")

        assert form.fields["company"] == "Globex"
        assert form.fields["role"] == "Engineer"

    def test_update_unknown_field(self):
        """Should reject unknown names."""
        with pytest.raises(ValueError, match="Unknown entry field"):
            EntryForm().update_field("salary", "100k")

    def test_date_objects_become_iso_strings(self):
        """Should store dates in YYYY-MM-DD form."""
        form = EntryForm()
        form.update_field("date", dt.date(2024, 1, 10))

        assert form.fields["date"] == "2024-01-10"

    @pytest.mark.parametrize("blank", ["company", "role", "date"])
    def test_submit_blocked_on_missing_field(self, blank):
        """Should refuse to build an entry without required fields."""
        form = EntryForm()
        for name, value in {"company": "Acme", "role": "Engineer", "date": "2024-01-10"}.items():
            form.update_field(name, value)
        form.update_field(blank, "   ")

        assert form.submit(1) is None
        assert form.missing_fields() == [blank]
        assert form.fields["company"] == ("   " if blank == "company" else "Acme")

    def test_submit_builds_entry_and_resets(self):
        """Should build the entry then return to defaults."""
        form = EntryForm()
        form.update_field("company", "Acme")
        form.update_field("role", "Engineer")
        form.update_field("status", "Interview")
        form.update_field("date", "2024-01-10")

        entry = form.submit(7)

        assert entry == JobEntry(7, "Acme", "Engineer", ApplicationStatus.INTERVIEW, "2024-01-10", "")
        assert form.fields["company"] == ""
        assert form.fields["status"] is ApplicationStatus.APPLIED


class TestEditSession:
    """Tests for EditSession."""

    def entry(self, entry_id=1, company="Acme"):
        return JobEntry(entry_id, company, "Engineer", ApplicationStatus.APPLIED, "2024-01-10", "")

    def test_begin_copies_fields(self):
        """Should copy every mutable field into the scratch buffer."""
        session = EditSession()
        session.begin(self.entry())

        assert session.is_editing(1)
        assert session.scratch == {
            "company": "Acme",
            "role": "Engineer",
            "status": ApplicationStatus.APPLIED,
            "date": "2024-01-10",
            "notes": "",
        }

    def test_begin_other_entry_discards_scratch(self):
        """Should drop unsaved changes when switching entries."""
        session = EditSession()
        session.begin(self.entry(1))
        session.update_field("company", "Changed")
        session.begin(self.entry(2, "Globex"))

        assert session.editing_id == 2
        assert session.scratch["company"] == "Globex"

    def test_edit_allows_blank_values(self):
        """Should not enforce required fields while editing."""
        session = EditSession()
        session.begin(self.entry())
        session.update_field("company", "")
        session.update_field("date", None)

        entry_id, patch = session.finish()

        assert entry_id == 1
        assert patch["company"] == ""
        assert patch["date"] == ""
        assert not session.active

    def test_finish_without_edit(self):
        """Should raise when nothing is being edited."""
        with pytest.raises(EditStateError):
            EditSession().finish()

    def test_update_without_edit(self):
        """Should raise when nothing is being edited."""
        with pytest.raises(EditStateError):
            EditSession().update_field("company", "Acme")

    def test_cancel_clears(self):
        """Should clear marker and scratch."""
        session = EditSession()
        session.begin(self.entry())
        session.cancel()

        assert session.editing_id is None
        assert session.scratch == {}
