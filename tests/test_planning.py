import pytest

from fabrica.planning import (
    Catalog,
    Product,
    ProductNotFoundError,
    ResourceKind,
    Resources,
    meets_deadline,
    requirements_for,
)


def test_requirements_per_unit_match_table():
    assert requirements_for(1, 1) == Resources(4, 1, 2, 3)
    assert requirements_for(3, 1) == Resources(5, 4, 3, 6)
    assert requirements_for(5, 1) == Resources(2, 5, 3, 5)


@pytest.mark.parametrize("number", [1, 2, 3, 4, 5])
def test_requirements_scale_with_demand(number):
    single = requirements_for(number, 1)
    triple = requirements_for(number, 3)
    assert triple.chips == 3 * single.chips
    assert triple.speakers == 3 * single.speakers


@pytest.mark.parametrize("number", [0, 6, -1])
def test_requirements_reject_unknown_product(number):
    with pytest.raises(ValueError):
        requirements_for(number, 2)


def test_meets_deadline():
    assert meets_deadline(10, 10) is True
    assert meets_deadline(11, 10) is False
    assert meets_deadline(0, 1) is True


def test_meets_deadline_rejects_non_positive():
    with pytest.raises(ValueError):
        meets_deadline(5, 0)


def test_satisfied_count_and_covers():
    stock = Resources(10, 10, 10, 10)
    assert stock.satisfied_count(Resources(10, 11, 1, 20)) == 2
    assert stock.covers(Resources(10, 10, 10, 10)) is True
    assert stock.covers(Resources(10, 10, 10, 11)) is False


def test_subtract_then_covers_zero():
    stock = Resources(10, 8, 6, 4)
    needed = requirements_for(2, 2)
    stock.subtract(needed)
    assert stock == Resources(10 - needed.chips, 8 - needed.screens,
                              6 - needed.microphones, 4 - needed.speakers)


def test_add_by_kind_and_number():
    stock = Resources()
    stock.add(ResourceKind.SCREENS, 7)
    stock.add(4, 2)
    assert stock == Resources(0, 7, 0, 2)


def test_add_rejects_bad_amount_and_kind():
    stock = Resources()
    with pytest.raises(ValueError):
        stock.add(ResourceKind.CHIPS, 0)
    with pytest.raises(ValueError):
        stock.add(9, 1)
    assert stock == Resources()


def _catalog():
    catalog = Catalog()
    catalog.products = [Product(name, 3, 2) for name in "abcde"]
    return catalog


def test_index_of_and_missing():
    catalog = _catalog()
    assert catalog.index_of("c") == 2
    with pytest.raises(ProductNotFoundError):
        catalog.index_of("z")


def test_edit_updates_slot():
    catalog = _catalog()
    catalog.edit("b", "phone", 4, 9)
    assert catalog.products[1] == Product("phone", 9, 4)
    with pytest.raises(ProductNotFoundError):
        catalog.index_of("b")


def test_edit_validates():
    catalog = _catalog()
    with pytest.raises(ValueError):
        catalog.edit("a", "x", 0, 1)
    with pytest.raises(ValueError):
        catalog.edit("a", "x", 1, -2)
    with pytest.raises(ProductNotFoundError):
        catalog.edit("nope", "x", 1, 1)


def test_remove_clears_slot():
    catalog = _catalog()
    catalog.remove("d")
    assert catalog.products[3] == Product()
    with pytest.raises(ProductNotFoundError):
        catalog.remove("d")


def test_production_time_and_requirements():
    catalog = _catalog()
    catalog.products[0] = Product("a", 7, 5)
    assert catalog.production_time(1) == 35
    assert catalog.requirements(1) == requirements_for(1, 5)
    with pytest.raises(ValueError):
        catalog.production_time(6)