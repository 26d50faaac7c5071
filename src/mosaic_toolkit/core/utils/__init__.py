"""
Utils Package

Serialization of layout trees.
"""

from .serialization import (
    parse_percent,
    format_percent,
    node_to_dict,
    node_from_dict,
)

__all__ = [
    "parse_percent",
    "format_percent",
    "node_to_dict",
    "node_from_dict",
]
