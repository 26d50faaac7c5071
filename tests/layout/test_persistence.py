"""
Unit Tests for Document Persistence

Tests for document_to_dict(), document_from_dict() and the JSON file helpers.
"""

import json

import pytest

from mosaic_toolkit.core.schemas.validator import ValidationError
from mosaic_toolkit.layout.document import LayoutDocument
from mosaic_toolkit.layout.merge import merge_nodes_in_tree
from mosaic_toolkit.layout.persistence import (
    document_from_dict,
    document_to_dict,
    load_document_json,
    save_document_json,
)


class TestDocumentToDict:
    """Tests for document_to_dict()."""

    def test_to_dict_when_new_document_then_version_pages_and_counter(self):
        doc = LayoutDocument.new()
        data = document_to_dict(doc)
        assert data == {
            "version": 1,
            "pages": [{"id": "rect-1", "splitState": "unsplit"}],
            "currentPageIndex": 0,
            "currentId": 1,
            "focusedId": None,
        }

    def test_to_dict_when_ids_allocated_then_counter_tracks_last_id(self):
        doc = LayoutDocument.new()
        doc.add_page()
        doc.ids.allocate()
        assert document_to_dict(doc)["currentId"] == 3


class TestDocumentFromDict:
    """Tests for document_from_dict()."""

    def test_from_dict_when_loaded_then_allocator_resumes_after_highest_id(self):
        data = {
            "version": 1,
            "pages": [
                {
                    "id": "rect-3",
                    "splitState": "split",
                    "orientation": "vertical",
                    "children": [
                        {"id": "rect-7", "size": "30%"},
                        {"id": "rect-4", "size": "70%"},
                    ],
                },
                {"id": "rect-12"},
            ],
            "currentPageIndex": 1,
            "focusedId": "rect-12",
        }
        doc = document_from_dict(data)

        assert doc.page_count == 2
        assert doc.current_page_index == 1
        assert doc.focused_id == "rect-12"
        assert doc.ids.allocate() == "rect-13"

    def test_from_dict_when_counter_ahead_of_ids_then_allocator_uses_counter(self):
        """Ids freed by deletes are never handed out again after a reload."""
        data = {"version": 1, "pages": [{"id": "rect-2"}], "currentId": 40}
        doc = document_from_dict(data)
        assert doc.ids.allocate() == "rect-41"

    def test_from_dict_when_counter_behind_ids_then_highest_id_wins(self):
        data = {"version": 1, "pages": [{"id": "rect-9"}], "currentId": 3}
        doc = document_from_dict(data)
        assert doc.ids.allocate() == "rect-10"

    def test_from_dict_when_focus_unknown_or_index_bad_then_falls_back(self):
        data = {"version": 1, "pages": [{"id": "rect-1"}], "currentPageIndex": 5, "focusedId": "gone"}
        doc = document_from_dict(data, validate=False)
        assert doc.current_page_index == 0
        assert doc.focused_id is None

    def test_from_dict_when_wrong_version_then_raises_validation_error(self):
        with pytest.raises(ValidationError, match="Unsupported document version"):
            document_from_dict({"version": 99, "pages": [{"id": "rect-1"}]})

    def test_from_dict_when_empty_leaves_have_null_fields_then_no_content(self):
        """Null image and text pass strict validation and load as empty leaves."""
        # Arrange
        data = {
            "version": 1,
            "pages": [
                {
                    "id": "rect-1",
                    "splitState": "split",
                    "orientation": "vertical",
                    "image": None,
                    "text": None,
                    "children": [
                        {"id": "rect-2", "splitState": "unsplit", "image": None, "text": None, "size": "50%"},
                        {"id": "rect-3", "splitState": "unsplit", "image": None, "text": "kept", "textAlign": None, "size": "50%"},
                    ],
                }
            ],
            "currentPageIndex": 0,
            "currentId": 3,
        }

        # Act
        doc = document_from_dict(data)

        # Assert
        root = doc.current_page
        assert root.child_a.content is None
        assert root.child_b.content.body == "kept"

    def test_from_dict_when_null_leaf_merged_then_text_neighbour_wins(self):
        """A loaded empty leaf does not compete for content during a merge."""
        data = {
            "version": 1,
            "pages": [
                {
                    "id": "rect-1",
                    "splitState": "split",
                    "orientation": "horizontal",
                    "children": [
                        {"id": "rect-2", "image": None, "text": None, "size": "50%"},
                        {"id": "rect-3", "image": None, "text": "body", "size": "50%"},
                    ],
                }
            ],
        }
        doc = document_from_dict(data)

        merge_nodes_in_tree(doc.current_page, None, doc.ids)

        assert doc.current_page.is_leaf
        assert doc.current_page.content.body == "body"


class TestDocumentFiles:
    """Tests for save_document_json() and load_document_json()."""

    def test_save_and_load_when_json_file_then_equivalent_document(self, tmp_path, scenario_one):
        # Arrange
        doc = LayoutDocument(pages=[scenario_one])
        doc.focused_id = "B1"
        path = tmp_path / "nested" / "layout.json"

        # Act
        save_document_json(doc, path)
        loaded = load_document_json(path)

        # Assert
        written = json.loads(path.read_text(encoding="utf-8"))
        assert written["focusedId"] == "B1"
        assert written["currentId"] == doc.ids.current
        assert document_to_dict(loaded) == document_to_dict(doc)
