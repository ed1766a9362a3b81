"""
Notes API - Note Service Unit Tests
=====================================

What:  Tests for NoteService validation and business rules.
How:   Real NoteStore per test (no HTTP); a MagicMock store where we need
       to check delegation or inject failures.

What we test:
    ✅ Full and partial validation rules, all errors reported together
    ✅ create / update raise ValidationError with every message
    ✅ update / delete on unknown ids raise NotFoundError
    ✅ Unexpected store errors propagate unchanged
"""

from unittest.mock import MagicMock

import pytest

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.services.note_service import (
    CONTENT_ERROR,
    TAGS_ERROR,
    TITLE_ERROR,
    NoteService,
)
from notes_api.store import NoteStore


class TestNoteServiceValidate:
    """Tests for validate()."""

    def test_valid_full_payload(self, note_service, sample_payload):
        result = note_service.validate(sample_payload)
        assert result.valid is True
        assert result.errors == []

    def test_missing_title_and_content_reports_both(self, note_service):
        result = note_service.validate({})
        assert result.valid is False
        assert result.errors == [TITLE_ERROR, CONTENT_ERROR]

    @pytest.mark.parametrize("title", ["", "   ", "\t\n", None, 42, True, ["x"]])
    def test_invalid_title(self, note_service, title):
        result = note_service.validate({"title": title, "content": "body"})
        assert result.errors == [TITLE_ERROR]

    def test_all_three_errors_in_order(self, note_service):
        result = note_service.validate({"title": " ", "content": "", "tags": [1]})
        assert result.errors == [TITLE_ERROR, CONTENT_ERROR, TAGS_ERROR]

    @pytest.mark.parametrize("tags", ["a,b", None, {"a": 1}, ["a", 2], [None]])
    def test_invalid_tags(self, note_service, tags):
        result = note_service.validate({"title": "t", "content": "c", "tags": tags})
        assert result.errors == [TAGS_ERROR]

    def test_empty_tag_list_is_valid(self, note_service):
        assert note_service.validate({"title": "t", "content": "c", "tags": []}).valid

    def test_partial_allows_empty_payload(self, note_service):
        result = note_service.validate({}, partial=True)
        assert result.valid is True

    def test_partial_checks_only_present_fields(self, note_service):
        result = note_service.validate({"content": "  "}, partial=True)
        assert result.errors == [CONTENT_ERROR]

    def test_partial_rejects_explicit_null(self, note_service):
        result = note_service.validate({"title": None}, partial=True)
        assert result.errors == [TITLE_ERROR]

    def test_unknown_keys_are_ignored(self, note_service):
        result = note_service.validate({"title": "t", "content": "c", "pinned": True})
        assert result.valid is True


class TestNoteServiceCreate:
    """Tests for create()."""

    def test_create_success(self, note_service, sample_payload):
        note = note_service.create(sample_payload)

        assert note.id
        assert note.title == sample_payload["title"]
        assert note_service.get_by_id(note.id) == note

    def test_create_without_tags(self, note_service):
        note = note_service.create({"title": "A", "content": "B"})
        assert note.tags == []
        assert note.created_at == note.updated_at

    def test_create_invalid_raises_with_all_messages(self, note_service, note_store):
        with pytest.raises(ValidationError) as exc_info:
            note_service.create({"title": "", "content": "   "})

        assert exc_info.value.messages == [TITLE_ERROR, CONTENT_ERROR]
        assert exc_info.value.message == "Validation error"
        assert note_store.count() == 0


class TestNoteServiceRead:
    """Tests for list() and get_by_id()."""

    def test_list_delegates_to_store(self):
        store = MagicMock(spec=NoteStore)
        store.find_all.return_value = []
        service = NoteService(store)

        assert service.list() == []
        store.find_all.assert_called_once_with()

    def test_get_by_id_unknown_returns_none(self, note_service):
        assert note_service.get_by_id("missing") is None


class TestNoteServiceUpdate:
    """Tests for update()."""

    def test_update_partial(self, note_service):
        created = note_service.create({"title": "A", "content": "B"})

        updated = note_service.update(created.id, {"tags": ["x", "y"]})

        assert updated.title == "A"
        assert updated.content == "B"
        assert updated.tags == ["x", "y"]
        assert updated.updated_at > created.updated_at

    def test_update_unknown_raises_not_found(self, note_service):
        with pytest.raises(NotFoundError) as exc_info:
            note_service.update("missing", {"title": "x"})
        assert exc_info.value.resource_id == "missing"

    def test_update_validates_before_existence(self, note_service):
        with pytest.raises(ValidationError):
            note_service.update("missing", {"title": ""})

    def test_update_invalid_leaves_note_untouched(self, note_service):
        created = note_service.create({"title": "A", "content": "B"})

        with pytest.raises(ValidationError) as exc_info:
            note_service.update(created.id, {"title": "New", "tags": "oops"})

        assert exc_info.value.messages == [TAGS_ERROR]
        assert note_service.get_by_id(created.id) == created


class TestNoteServiceDelete:
    """Tests for delete()."""

    def test_delete_existing(self, note_service, sample_payload):
        created = note_service.create(sample_payload)

        assert note_service.delete(created.id) is True
        assert note_service.get_by_id(created.id) is None

    def test_delete_unknown_raises_not_found(self, note_service):
        with pytest.raises(NotFoundError):
            note_service.delete("missing")

    def test_store_errors_propagate(self):
        store = MagicMock(spec=NoteStore)
        store.find_by_id.side_effect = RuntimeError("boom")
        service = NoteService(store)

        with pytest.raises(RuntimeError, match="boom"):
            service.delete("any")
