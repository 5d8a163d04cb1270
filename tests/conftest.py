import pytest

from warehouse import Item, Warehouse


def make_door(**overrides) -> Item:
    values = dict(
        identifier="DumbleDoor", brand="Skeidar", color="grey",
        description="Magical door", weight=95, length=150.0,
        height=200.0, price=15000, amount=3, category=3,
    )
    values.update(overrides)
    return Item(**values)


@pytest.fixture
def door() -> Item:
    return make_door()


@pytest.fixture
def warehouse(door) -> Warehouse:
    wh = Warehouse()
    assert wh.add_item(door)
    return wh
