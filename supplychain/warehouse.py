"""Bounded storage of parts, grouped into one bin per part type."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from supplychain.part import Part

DEFAULT_CAPACITY = 5


class EmptyBinError(LookupError):
    """Raised when a part is requested that the warehouse does not hold."""

    def __init__(self, part_type: int) -> None:
        super().__init__(f"no part of type {part_type} in storage")
        self.part_type = part_type


@dataclass
class PartBin:
    """A stack of parts that all share one type."""

    part_type: int
    parts: list[Part] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.parts)


class Warehouse:
    """Stores parts of several types, each bin holding at most ``capacity`` parts."""

    def __init__(self, types: Iterable[int], capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._bins: list[PartBin] = []
        for part_type in types:
            self.add_part_type(part_type)

    @property
    def capacity(self) -> int:
        """Maximum number of parts of any one type."""
        return self._capacity

    def _find_bin(self, part_type: int) -> PartBin | None:
        return next((b for b in self._bins if b.part_type == part_type), None)

    def add_part_type(self, part_type: int) -> None:
        """Start storing a new part type; non-positive and duplicate types are ignored."""
        if part_type <= 0 or self._find_bin(part_type) is not None:
            return
        self._bins.append(PartBin(part_type))

    def part_type_count(self) -> int:
        """Number of part types this warehouse stores."""
        return len(self._bins)

    def add_part(self, part: Part) -> bool:
        """Store a part; return False if its type is unknown or its bin is full."""
        part_bin = self._find_bin(part.part_type)
        if part_bin is None or len(part_bin) >= self._capacity:
            return False
        part_bin.parts.append(part)
        return True

    def remove_part(self, part_type: int) -> Part:
        """Take the most recently stored part of the given type."""
        part_bin = self._find_bin(part_type)
        if part_bin is None or not part_bin.parts:
            raise EmptyBinError(part_type)
        part_bin.parts.pop()
        return Part(part_type)

    def count(self, part_type: int) -> int:
        """Number of stored parts of the given type (0 if the type is unknown)."""
        part_bin = self._find_bin(part_type)
        return len(part_bin) if part_bin is not None else 0

    def __iter__(self) -> Iterator[PartBin]:
        return iter(self._bins)

    def __str__(self) -> str:
        return "".join(f"{b.part_type} - #{len(b)}\n" for b in self._bins)