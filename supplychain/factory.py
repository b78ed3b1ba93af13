"""A factory that gathers parts from suppliers and assembles products."""

from __future__ import annotations

from collections.abc import Iterable

from supplychain.part import Part
from supplychain.supplier import Supplier
from supplychain.warehouse import Warehouse

DEFAULT_FACTORY_CAPACITY = 20


class Factory:
    """Builds one product whenever it holds at least one part of every required type."""

    def __init__(self, types: Iterable[int], capacity: int = DEFAULT_FACTORY_CAPACITY) -> None:
        self._storage = Warehouse(types, capacity)
        self._suppliers: list[Supplier] = []
        self._products = 0

    @property
    def products(self) -> int:
        """Number of products built so far."""
        return self._products

    def time_step(self) -> None:
        """Advance suppliers, restock empty bins, and build a product if possible."""
        for supplier in self._suppliers:
            supplier.time_step()

        for part_bin in self._storage:
            if part_bin.parts:
                continue
            for supplier in self._suppliers:
                if supplier.count(part_bin.part_type):
                    self.add_part(supplier.remove_part(part_bin.part_type))

        if any(not part_bin.parts for part_bin in self._storage):
            return

        self._products += 1
        for part_bin in self._storage:
            self.remove_part(part_bin.part_type)

    def add_part_type(self, part_type: int) -> None:
        """Require a new part type for products."""
        self._storage.add_part_type(part_type)

    def part_type_count(self) -> int:
        """Number of part types a product needs."""
        return self._storage.part_type_count()

    def add_part(self, part: Part) -> bool:
        """Store a part; return False if it could not be stored."""
        return self._storage.add_part(part)

    def remove_part(self, part_type: int) -> Part:
        """Take one stored part of the given type.

        Raises EmptyBinError if none is available.
        """
        return self._storage.remove_part(part_type)

    def count(self, part_type: int) -> int:
        """Number of stored parts of the given type."""
        return self._storage.count(part_type)

    def add_supplier(self, supplier: Supplier) -> None:
        """Add a supplier this factory can order parts from."""
        self._suppliers.append(supplier)

    def supplier_count(self) -> int:
        """Number of suppliers attached to this factory."""
        return len(self._suppliers)

    def capacity(self) -> int:
        """Maximum number of parts of one type the factory can store."""
        return self._storage.capacity

    def __str__(self) -> str:
        lines = [
            f"Production Counter - {self._products}\n",
            "Current Suppliers\n",
            "-----------------\n",
        ]
        lines.extend(str(supplier) for supplier in self._suppliers)
        lines.append("\n")
        return "".join(lines)