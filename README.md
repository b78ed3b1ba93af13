# supplychain

A small, turn-based simulation of a supply chain. Suppliers produce parts at
their own rate and keep them in their own storage. A factory pulls the parts
it needs from its suppliers, and it builds one product each time it holds
every part type it needs.

## Installing

```
pip install .
```

## Running the demonstration

```
supplychain
```

This sets up a factory that needs part types 1, 2 and 3. It has three
suppliers, `A`, `B` and `C`. Each makes one of those types, and they take 1,
2 and 3 time steps per part respectively (see `supplychain.cli.build_factory`).

The program advances one time step and prints the production counter and
each supplier's stock. Then it asks `Press Enter to Continue:`.

- An empty line (just Enter) advances one more step.
- Any other input, or end of input, stops the program.

`supplychain --help` shows the usage. The command takes no other options.

## Using it as a library

```python
from supplychain.factory import Factory
from supplychain.part import Part
from supplychain.supplier import Supplier

factory = Factory([1, 2])
factory.add_supplier(Supplier([1], "A", 1))
factory.add_supplier(Supplier([2], "B", 2))

for _ in range(10):
    factory.time_step()

print(factory.products)
print(factory)
```

### `supplychain.part`

`Part(part_type=1)` is an immutable dataclass for one part of an integer type.

### `supplychain.warehouse`

`Warehouse(types, capacity=5)` stores parts in one `PartBin` per part type.
Each bin holds at most `capacity` parts.

- `add_part_type(part_type)` adds a bin. Types of zero or less, and types
  already present, are ignored.
- `part_type_count()` returns the number of bins.
- `add_part(part)` stores a part. It returns `False` if the part's type has no
  bin or the bin is full.
- `remove_part(part_type)` takes one part of that type. It raises
  `EmptyBinError` (a `LookupError`) if the bin is empty or unknown.
- `count(part_type)` returns the number of stored parts of that type, or 0
  for an unknown type.

Iterating over a warehouse yields its `PartBin`s in the order they were added.
`str()` gives one `"<type> - #<count>"` line per bin.

### `supplychain.supplier`

`Supplier(types=(), identification="A", production_rate=2)` has its own
warehouse with capacity 5.

Each `time_step()` advances its counter by one. When `time_till_produce()`
reaches zero, the counter resets and the supplier makes one part. The part is
of the first empty type, or else of the type it holds fewest of. If every bin
is full, no part is made that cycle.

It also offers `add_part_type`, `part_type_count`, `add_part`, `remove_part`
and `count`, which work as on a warehouse. It has read-only `identification`
and `production_rate` properties.

### `supplychain.factory`

`Factory(types, capacity=20)` holds a warehouse and a list of suppliers, added
with `add_supplier(supplier)`. Use `supplier_count()` to count them.

Each `time_step()` does three things in order:

1. It advances every supplier.
2. For each empty bin, it takes one matching part from each supplier that has
   one.
3. If every bin then holds a part, it removes one of each and increments
   `products`.

`capacity()` returns the storage capacity. `str()` shows the production
counter and each supplier's stock.

## What it does not do

- The `supplychain` command always runs the fixed three-supplier setup
  described above. It cannot be configured from the command line.
- Nothing is saved between runs.

## Running the tests

```
pip install .[test]
pytest
```