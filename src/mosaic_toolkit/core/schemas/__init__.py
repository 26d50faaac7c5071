"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_document,
    validate_node,
    ValidationError,
    DOCUMENT_SCHEMA_VERSION,
)

__all__ = [
    "validate_document",
    "validate_node",
    "ValidationError",
    "DOCUMENT_SCHEMA_VERSION",
]
