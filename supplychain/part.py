"""Parts that suppliers produce and factories consume."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Part:
    """A single part, identified by an integer type."""

    part_type: int = 1