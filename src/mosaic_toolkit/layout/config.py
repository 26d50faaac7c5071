"""
Module: layout.config

Purpose:
    Configuration for the interactive layout operations.
    Defines snap tables, thresholds, and the auto-collapse limit.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Key Functions:
    - load_layout_config(path): Read overrides from a JSON settings file

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - layout.resize: Snap candidates, drag sessions, keyboard nudges
    - layout.document: Edge-drag region size
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Tuple

logger = logging.getLogger(__name__)


# Fractions (percent) of the remaining gap offered as snap targets
DEFAULT_SNAP_FRACTIONS = (25.0, 33.3, 50.0, 66.7, 75.0)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for layout operations (immutable).

    Attributes:
        min_area_percent: A side at or below this percent of its parent is
            deleted when a resize commits
        snap_threshold_px: Max distance (page units) at which a drag snaps
        min_gap_for_recursion: Gap (percent) a side must exceed before its
            own fractions are offered as snap targets
        snap_fractions: Fractions (percent) of a gap used as snap targets
        boundary_snaps: Near-collapse / near-expand targets (percent)
        keyboard_min_step: Smallest move (percent) a keyboard nudge makes
        edge_region_percent: Starting size of a region dragged in from a page edge
        size_epsilon: Tolerance for the sibling-sum invariant

    Example:
        >>> config = LayoutConfig(min_area_percent=5)
        >>> config.boundary_snaps
        (1.0, 99.0)
    """

    # Auto-collapse
    min_area_percent: float = 2.0

    # Snapping
    snap_threshold_px: float = 12.0
    min_gap_for_recursion: float = 10.0
    snap_fractions: Tuple[float, ...] = DEFAULT_SNAP_FRACTIONS
    boundary_snaps: Tuple[float, ...] = (1.0, 99.0)

    # Keyboard
    keyboard_min_step: float = 1.2

    # Edge drag
    edge_region_percent: float = 2.0

    size_epsilon: float = 0.01

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not 0 <= self.min_area_percent < 50:
            raise ValueError(f"min_area_percent must be in [0, 50): {self.min_area_percent}")
        if self.snap_threshold_px < 0:
            raise ValueError(f"snap_threshold_px must be non-negative: {self.snap_threshold_px}")
        if not 0 <= self.min_gap_for_recursion <= 100:
            raise ValueError(
                f"min_gap_for_recursion must be in [0, 100]: {self.min_gap_for_recursion}"
            )
        for fraction in self.snap_fractions:
            if not 0 < fraction < 100:
                raise ValueError(f"snap_fractions entries must be in (0, 100): {fraction}")
        for snap in self.boundary_snaps:
            if not 0 < snap < 100:
                raise ValueError(f"boundary_snaps entries must be in (0, 100): {snap}")
        if self.keyboard_min_step <= 0:
            raise ValueError(f"keyboard_min_step must be positive: {self.keyboard_min_step}")
        if not 0 < self.edge_region_percent < 50:
            raise ValueError(f"edge_region_percent must be in (0, 50): {self.edge_region_percent}")
        if self.size_epsilon <= 0:
            raise ValueError(f"size_epsilon must be positive: {self.size_epsilon}")

    @property
    def min_boundary_snap(self) -> float:
        return min(self.boundary_snaps, default=1.0)

    @property
    def max_boundary_snap(self) -> float:
        return max(self.boundary_snaps, default=99.0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LayoutConfig:
        """
        Build a config from a settings mapping.

        Unknown keys are ignored; list values become tuples.

        Raises:
            ValueError: If a known value is out of range
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown layout setting {key!r}")
                continue
            kwargs[key] = tuple(value) if isinstance(value, list) else value
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            f.name: list(getattr(self, f.name))
            if isinstance(getattr(self, f.name), tuple)
            else getattr(self, f.name)
            for f in fields(self)
        }


def load_layout_config(path: Path) -> LayoutConfig:
    """
    Load layout settings from a JSON file.

    Any malformed data falls back to defaults with a warning; a bad
    settings file must never stop the editor from starting.

    Args:
        path: JSON file holding either the settings object or
            ``{"layout": {...}}``

    Returns:
        The loaded config, or LayoutConfig() on any problem
    """
    if not path.exists():
        return LayoutConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Layout settings at {path} could not be read, using defaults: {e}")
        return LayoutConfig()

    if isinstance(data, dict) and isinstance(data.get("layout"), dict):
        data = data["layout"]
    if not isinstance(data, dict):
        logger.warning(f"Layout settings at {path} are not an object, using defaults")
        return LayoutConfig()

    try:
        return LayoutConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning(f"Layout settings at {path} are invalid, using defaults: {e}")
        return LayoutConfig()
