"""Suppliers that produce parts over time and hold them until a factory collects them."""

from __future__ import annotations

from collections.abc import Iterable

from supplychain.part import Part
from supplychain.warehouse import Warehouse


class Supplier:
    """Produces one part every ``production_rate`` time steps.

    Each new part is of the type the supplier currently holds fewest of; when
    every bin is full, production is skipped for that cycle.
    """

    def __init__(
        self,
        types: Iterable[int] = (),
        identification: str = "A",
        production_rate: int = 2,
    ) -> None:
        self._identification = identification
        self._production_rate = production_rate
        self._time_elapsed = 0
        self._storage = Warehouse(types)

    @property
    def identification(self) -> str:
        """Character that identifies this supplier."""
        return self._identification

    @property
    def production_rate(self) -> int:
        """Number of time steps needed to produce one part."""
        return self._production_rate

    def time_till_produce(self) -> int:
        """Time steps left until the next part is produced."""
        return self._production_rate - self._time_elapsed

    def _least_stocked_type(self) -> int | None:
        """Type of the emptiest bin that still has room, or None if all are full."""
        lowest_type: int | None = None
        lowest_count = self._storage.capacity
        for part_bin in self._storage:
            if not part_bin.parts:
                return part_bin.part_type
            if len(part_bin) < lowest_count:
                lowest_type = part_bin.part_type
                lowest_count = len(part_bin)
        return lowest_type

    def time_step(self) -> None:
        """Advance one time step, producing a part when one is due."""
        self._time_elapsed += 1
        if self.time_till_produce() != 0:
            return
        self._time_elapsed = 0
        if self.part_type_count() == 0:
            return
        part_type = self._least_stocked_type()
        if part_type is not None:
            self.add_part(Part(part_type))

    def add_part_type(self, part_type: int) -> None:
        """Start producing a new part type."""
        self._storage.add_part_type(part_type)

    def part_type_count(self) -> int:
        """Number of part types this supplier produces."""
        return self._storage.part_type_count()

    def add_part(self, part: Part) -> bool:
        """Store a part; return False if it could not be stored."""
        return self._storage.add_part(part)

    def remove_part(self, part_type: int) -> Part:
        """Hand over one stored part of the given type.

        Raises EmptyBinError if none is available.
        """
        return self._storage.remove_part(part_type)

    def count(self, part_type: int) -> int:
        """Number of stored parts of the given type."""
        return self._storage.count(part_type)

    def __str__(self) -> str:
        return f"Supplier {self._identification} contains {self._storage}"