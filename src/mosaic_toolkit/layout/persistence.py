"""
Module: layout.persistence

Purpose:
    Save and load whole LayoutDocuments. Page trees go through the node
    converters in core.utils.serialization; this module adds the document
    envelope around them.

Key Functions:
    - document_to_dict(): LayoutDocument -> JSON-ready dict
    - document_from_dict(): dict -> LayoutDocument (validated by default)
    - save_document_json() / load_document_json(): File round trip

Document fields:
    version, pages, currentPageIndex,
    currentId (last allocated rect-N number), focusedId (region with focus)

Dependencies:
    - core.schemas.validator: validate_document
    - core.utils.serialization: node_to_dict, node_from_dict
    - layout.document: LayoutDocument

Used By:
    - Host save/open actions
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mosaic_toolkit.core.schemas.validator import DOCUMENT_SCHEMA_VERSION, validate_document
from mosaic_toolkit.core.utils.serialization import node_from_dict, node_to_dict

from .document import LayoutDocument

logger = logging.getLogger(__name__)


def document_to_dict(document: LayoutDocument) -> dict[str, Any]:
    """
    Serialize a LayoutDocument.

    The output can be written to JSON and will pass schema validation.
    """
    return {
        "version": DOCUMENT_SCHEMA_VERSION,
        "pages": [node_to_dict(page) for page in document.pages],
        "currentPageIndex": document.current_page_index,
        "currentId": document.ids.current,
        "focusedId": document.focused_id,
    }


def document_from_dict(data: dict[str, Any], *, validate: bool = True) -> LayoutDocument:
    """
    Deserialize a LayoutDocument.

    The id allocator resumes after the larger of ``currentId`` and the
    highest ``rect-N`` id found in the pages. An out-of-range page index
    falls back to the first page and a focus id not present in the pages
    is dropped.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_document(data)

    pages = [node_from_dict(page) for page in data["pages"]]
    index = data.get("currentPageIndex", 0)
    if not isinstance(index, int) or not 0 <= index < len(pages):
        logger.debug(f"Page index {index!r} out of range; using 0")
        index = 0

    document = LayoutDocument(pages=pages, current_page_index=index)

    counter = data.get("currentId")
    if isinstance(counter, int) and not isinstance(counter, bool) and counter > document.ids.current:
        document.ids.current = counter

    focused_id = data.get("focusedId")
    if focused_id and document.find_node(focused_id) is not None:
        document.focused_id = focused_id
    return document


def save_document_json(document: LayoutDocument, path: Path) -> None:
    """Write a LayoutDocument to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document_to_dict(document), f, indent=2)


def load_document_json(path: Path, *, validate: bool = True) -> LayoutDocument:
    """Read a LayoutDocument from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return document_from_dict(data, validate=validate)
