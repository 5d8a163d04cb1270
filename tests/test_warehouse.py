import logging

import pytest

from warehouse import InvalidField, Warehouse, sample_items

from conftest import make_door


def test_new_warehouse_is_empty() -> None:
    wh = Warehouse()
    assert wh.get_all_items() == []
    assert len(wh) == 0


def test_added_item_found_by_both_keys(warehouse, door) -> None:
    assert warehouse.search("DumbleDoor") is door
    assert warehouse.search("Magical door") is door


def test_search_is_case_insensitive(warehouse, door) -> None:
    assert warehouse.search("dumbledoor") is door
    assert warehouse.search("  MAGICAL DOOR ") is door


def test_one_item_is_listed_once(warehouse, door) -> None:
    assert warehouse.get_all_items() == [door]
    assert door in warehouse


def test_duplicate_keys_are_rejected(warehouse, door) -> None:
    assert not warehouse.add_item(door)
    assert not warehouse.add_item(make_door(description="Another door"))
    assert not warehouse.add_item(make_door(identifier="Other", description="MAGICAL DOOR"))
    # a new item's identifier may not equal an existing description either
    assert not warehouse.add_item(make_door(identifier="magical door", description="Fresh"))
    assert len(warehouse.get_all_items()) == 1


def test_identifier_equal_to_description_is_rejected() -> None:
    wh = Warehouse()
    assert not wh.add_item(make_door(identifier="Same", description="same"))
    assert len(wh) == 0


def test_rejection_is_logged(warehouse, door, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="warehouse"):
        warehouse.add_item(door)
    assert "already registered" in caplog.text


def test_search_unknown_key(warehouse) -> None:
    assert warehouse.search("other number") is None
    assert warehouse.search("other description") is None


def test_two_key_search_in_either_order(warehouse, door) -> None:
    assert warehouse.search("DumbleDoor", "Magical door") is door
    assert warehouse.search("Magical door", "DumbleDoor") is door


def test_two_key_search_needs_the_same_item(warehouse, door) -> None:
    other = make_door(identifier="Seamless", description="Simplistic window")
    warehouse.add_item(other)
    assert warehouse.search("DumbleDoor", "Simplistic window") is None
    assert warehouse.search("Magical door", "test") is None
    assert warehouse.search("test", "DumbleDoor") is None


def test_delete_with_own_keys(warehouse, door) -> None:
    assert warehouse.delete_current_item(door, "DumbleDoor", "Magical door")
    assert warehouse.search("DumbleDoor") is None
    assert warehouse.search("Magical door") is None
    assert warehouse.get_all_items() == []


def test_delete_without_keys_uses_the_items_own(warehouse, door) -> None:
    assert warehouse.delete_current_item(door)
    assert len(warehouse) == 0


def test_delete_with_mismatched_keys_removes_nothing(warehouse, door) -> None:
    assert not warehouse.delete_current_item(door, "other number", "other description")
    assert len(warehouse) == 1
    assert warehouse.search("DumbleDoor") is door


def test_delete_none_or_unregistered_is_noop(warehouse) -> None:
    assert not warehouse.delete_current_item(None, "DumbleDoor", "Magical door")
    assert not warehouse.delete_current_item(make_door())
    assert len(warehouse) == 1


def test_alter_amount_and_price(warehouse, door) -> None:
    warehouse.alter_amount(door, 5)
    warehouse.alter_price(door, 12000)
    assert door.amount == 5
    assert door.price == 12000


def test_alter_with_invalid_value_changes_nothing(warehouse, door) -> None:
    with pytest.raises(InvalidField):
        warehouse.alter_amount(door, -1)
    with pytest.raises(InvalidField):
        warehouse.alter_price(door, -100)
    assert door.amount == 3
    assert door.price == 15000


def test_alter_on_none_is_noop(warehouse) -> None:
    warehouse.alter_amount(None, 5)
    warehouse.alter_price(None, 5)
    assert not warehouse.alter_description(None, "Anything")


def test_alter_description_rekeys(warehouse, door) -> None:
    assert warehouse.alter_description(door, "Enchanted door")
    assert door.description == "Enchanted door"
    assert warehouse.search("enchanted door") is door
    assert warehouse.search("Magical door") is None
    assert warehouse.search("DumbleDoor") is door
    assert warehouse.get_all_items() == [door]


def test_alter_description_case_only(warehouse, door) -> None:
    assert warehouse.alter_description(door, "MAGICAL DOOR")
    assert door.description == "MAGICAL DOOR"
    assert warehouse.search("magical door") is door


def test_alter_description_to_taken_key_is_rejected(warehouse, door) -> None:
    other = make_door(identifier="Seamless", description="Simplistic window")
    warehouse.add_item(other)
    assert not warehouse.alter_description(door, "simplistic WINDOW")
    assert not warehouse.alter_description(door, "dumbledoor")
    assert door.description == "Magical door"
    assert warehouse.search("Simplistic window") is other
    assert warehouse.search("Magical door") is door


def test_alter_description_blank_raises(warehouse, door) -> None:
    with pytest.raises(InvalidField):
        warehouse.alter_description(door, "   ")
    assert warehouse.search("Magical door") is door


def test_increase_and_decrease(warehouse, door) -> None:
    warehouse.increase_amount(door, 7)
    assert door.amount == 10
    warehouse.decrease_amount(door, 10)
    assert door.amount == 0
    with pytest.raises(InvalidField):
        warehouse.decrease_amount(door, 1)
    with pytest.raises(InvalidField):
        warehouse.increase_amount(door, -1)
    assert door.amount == 0


def test_discount(warehouse, door) -> None:
    assert warehouse.apply_discount(door, 10) == 13500
    assert warehouse.apply_discount(door, 0) == 13500
    with pytest.raises(InvalidField):
        warehouse.apply_discount(door, 101)
    assert door.price == 13500
    assert warehouse.apply_discount(door, 100) == 0
    assert warehouse.apply_discount(None, 50) is None


def test_fill_sample() -> None:
    wh = Warehouse()
    assert wh.fill_sample() == 4
    assert [item.identifier for item in wh.get_all_items()] == [
        "Floor 2.0", "DumbleDoor", "Seamless", "To-tom-fir-tom",
    ]
    # a second fill collides on every key
    assert wh.fill_sample() == 0
    assert len(wh) == 4


def test_sample_items_are_fresh_instances() -> None:
    assert sample_items()[0] is not sample_items()[0]


def test_report(warehouse, door) -> None:
    wh = Warehouse()
    wh.fill_sample()
    assert wh.total_inventory_value() == 100 * 25 + 15000 * 3 + 2350 * 12 + 80 * 100
    assert [item.identifier for item in wh.low_stock_items()] == ["DumbleDoor"]
    report = wh.generate_report()
    assert "TOTAL INVENTORY VALUE: 83,700" in report
    assert "DumbleDoor: Magical door (Amount: 3)" in report


def test_report_without_low_stock() -> None:
    wh = Warehouse()
    wh.add_item(make_door(amount=50))
    assert "All items have sufficient stock." in wh.generate_report()


def test_dumbledoor_scenario() -> None:
    wh = Warehouse()
    a = make_door()
    assert wh.add_item(a)
    wh.alter_amount(a, 5)
    assert a.amount == 5
    assert wh.search("dumbledoor") is a
    wh.delete_current_item(a, "DumbleDoor", "Magical door")
    assert wh.get_all_items() == []


def test_delete_after_direct_description_change_spares_other_items(warehouse, door) -> None:
    window = make_door(identifier="Seamless", description="Simplistic window")
    warehouse.add_item(window)
    # bypasses the registry, so the keys on record are still the old ones
    door.description = "Simplistic window"
    assert warehouse.delete_current_item(door)
    assert warehouse.search("Simplistic window") is window
    assert warehouse.search("Seamless") is window
    assert warehouse.search("Magical door") is None
    assert warehouse.search("DumbleDoor") is None
    assert warehouse.get_all_items() == [window]


def test_alter_description_after_direct_change_rekeys_recorded_key(warehouse, door) -> None:
    door.description = "Renamed door"
    assert warehouse.alter_description(door, "Enchanted door")
    assert warehouse.search("Magical door") is None
    assert warehouse.search("Enchanted door") is door
    assert warehouse.delete_current_item(door)
    assert warehouse.search("Enchanted door") is None
    assert len(warehouse) == 0


def test_delete_with_only_one_key_removes_nothing(warehouse, door) -> None:
    assert not warehouse.delete_current_item(door, "DumbleDoor", None)
    assert not warehouse.delete_current_item(door, None, "Magical door")
    assert warehouse.search("DumbleDoor") is door
    assert len(warehouse) == 1


def test_increase_and_decrease_on_none_are_noops(warehouse, door) -> None:
    warehouse.increase_amount(None, 5)
    warehouse.decrease_amount(None, 5)
    assert door.amount == 3
