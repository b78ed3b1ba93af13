import pytest

from supplychain.part import Part
from supplychain.supplier import Supplier
from supplychain.warehouse import EmptyBinError


def test_constructor_defaults():
    sup = Supplier()
    assert sup.identification == "A"
    assert sup.production_rate == 2
    assert sup.part_type_count() == 0
    assert sup.count(0) == 0
    assert sup.time_till_produce() == sup.production_rate


def test_time_step():
    sup = Supplier([1])
    zero_sup = Supplier([0])
    for x in range(sup.production_rate):
        assert sup.time_till_produce() == sup.production_rate - x
        sup.time_step()
        zero_sup.time_step()

    assert sup.count(1) == 1
    assert sup.time_till_produce() == sup.production_rate

    assert zero_sup.count(0) == 0
    assert zero_sup.time_till_produce() == zero_sup.production_rate

    mult_sup = Supplier([1, 3])
    for _ in range(mult_sup.production_rate):
        mult_sup.time_step()
    assert mult_sup.count(1) == 1
    assert mult_sup.count(3) == 0

    for _ in range(mult_sup.production_rate):
        mult_sup.time_step()
    assert mult_sup.count(1) == 1
    assert mult_sup.count(3) == 1


def test_variable_constructor():
    big_sup = Supplier([1, 2, 3, 4, 5], "B", 3)
    assert big_sup.identification == "B"
    assert big_sup.production_rate == 3
    assert big_sup.part_type_count() == 5
    assert big_sup.time_till_produce() == big_sup.production_rate


def test_add_part_type():
    sup = Supplier()
    num = sup.part_type_count()
    assert num == 0

    sup.add_part_type(7)
    assert sup.part_type_count() == num + 1
    num = sup.part_type_count()

    sup.add_part_type(1)
    assert sup.part_type_count() == num + 1
    assert sup.time_till_produce() == sup.production_rate


def test_add_part():
    sup = Supplier([1])
    assert sup.add_part(Part()) is True
    assert sup.add_part(Part(3)) is False
    assert sup.time_till_produce() == sup.production_rate


def test_remove_part():
    sup = Supplier([1])
    sup.add_part(Part())
    assert sup.remove_part(1).part_type == 1

    sup2 = Supplier([1, 2])
    sup2.add_part(Part(2))
    assert sup2.remove_part(2).part_type == 2
    assert sup.time_till_produce() == sup.production_rate


def test_remove_part_from_empty_raises():
    sup = Supplier([1])
    with pytest.raises(EmptyBinError):
        sup.remove_part(1)


def test_identification():
    sup = Supplier()
    sup_s = Supplier(identification="S")
    assert sup.production_rate == sup_s.production_rate
    assert sup.identification == "A"
    assert sup_s.identification == "S"
    assert sup.time_till_produce() == sup.production_rate
    assert sup_s.time_till_produce() == sup_s.production_rate


def test_production_rate():
    sup = Supplier()
    sup3 = Supplier(identification="A", production_rate=3)
    assert sup.identification == sup3.identification
    assert sup.production_rate == 2
    assert sup3.production_rate == 3
    assert sup.time_till_produce() == sup.production_rate
    assert sup3.time_till_produce() == sup3.production_rate


def test_time_till_produced():
    sup = Supplier()
    assert sup.time_till_produce() == sup.production_rate
    for x in range(sup.production_rate):
        assert sup.time_till_produce() == sup.production_rate - x
        sup.time_step()
    assert sup.time_till_produce() == sup.production_rate


def test_full_storage_stops_production():
    sup = Supplier([1], "A", 1)
    for _ in range(5):
        sup.time_step()
    assert sup.count(1) == 5
    sup.time_step()
    assert sup.count(1) == 5
    assert sup.time_till_produce() == 1


def test_str():
    sup = Supplier([1])
    assert str(sup) == "Supplier A contains 1 - #0\n"