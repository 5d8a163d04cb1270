#!/usr/bin/env python3
# warehouse.py

"""
The in-memory item registry behind the warehouse manager.

Features
--------
* Items that validate every field on construction and on every later change
* A registry where each item is reachable by its identifier *and* its description
* Search by one key, or by two keys that must point at the same item
* Amount / price / description changes, discounts and deletion
* Simple report (total value, low‑stock alerts)
"""

import logging
from dataclasses import InitVar, dataclass, field
from typing import Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 5  # items at or below this amount will be flagged
CATEGORY_NAMES = ("floor laminate", "window", "door", "lumber")

TEXT_FIELDS = ("identifier", "brand", "color", "description")
REAL_FIELDS = ("weight", "length", "height")
INT_FIELDS = ("price", "amount")


class InvalidField(ValueError):
    """Raised when a value breaks the rule of the Item field it is meant for."""

    def __init__(self, field_name: str, reason: str) -> None:
        super().__init__(f"Invalid input for {field_name}: {reason}")
        self.field = field_name
        self.reason = reason


def field_error(name: str, value) -> Optional[str]:
    """
    Check `value` against the rule for the Item field `name`.

    Returns a short description of the problem, or None if the value is fine.
    `category_code` is the 0‑based internal code; use `category_error` for the
    1‑based number an operator types.
    """
    if name in TEXT_FIELDS:
        if not isinstance(value, str):
            return "must be text"
        if not value.strip():
            return "cannot be blank"
    elif name in REAL_FIELDS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return "must be a number"
        # `not >=` also catches NaN
        if not value >= 0:
            return "cannot be negative"
    elif name in INT_FIELDS:
        if isinstance(value, bool) or not isinstance(value, int):
            return "must be a whole number"
        if value < 0:
            return "cannot be negative"
    elif name == "category_code":
        if isinstance(value, bool) or not isinstance(value, int):
            return "must be a whole number"
        if not 0 <= value < len(CATEGORY_NAMES):
            return f"must be between 1 and {len(CATEGORY_NAMES)}"
    else:
        return "unknown field"
    return None


def category_error(number) -> Optional[str]:
    """Validate a category as the operator sees it (1‑4)."""
    if isinstance(number, bool) or not isinstance(number, int):
        return "must be a whole number"
    return field_error("category_code", number - 1)


def fold_key(key: str) -> str:
    """Canonical form of a lookup key: trimmed and case‑folded."""
    return key.strip().casefold()


# --------------------------------------------------------------------- #
#   Item
# --------------------------------------------------------------------- #
@dataclass(eq=False)
class Item:
    """
    A single catalog entry.

    Every attribute assignment goes through `__setattr__`, so an Item can
    never hold a value that breaks its field rule: a bad value raises
    InvalidField and the previous value stays in place. Equality and hashing
    are by identity.
    """
    identifier: str        # Unique catalog number – first lookup key
    brand: str
    color: str
    description: str       # Short label – second lookup key
    weight: float          # Kilograms
    length: float          # Meters
    height: float          # Meters
    price: int
    amount: int            # Units in storage
    category: InitVar[int]  # 1‑4 as supplied by the caller
    category_code: int = field(init=False)  # 0‑3 as stored

    def __post_init__(self, category: int) -> None:
        self.set_category(category)

    def __setattr__(self, name: str, value) -> None:
        if name == "category":
            self.set_category(value)
            return
        error = field_error(name, value)
        if error:
            raise InvalidField(name, error)
        if name in REAL_FIELDS:
            value = float(value)
        super().__setattr__(name, value)

    def set_category(self, number: int) -> None:
        """Set the category from its 1‑based number."""
        error = category_error(number)
        if error:
            raise InvalidField("category", error)
        self.category_code = number - 1

    @property
    def category_name(self) -> str:
        return CATEGORY_NAMES[self.category_code]

    @property
    def value(self) -> int:
        """Stock value: price × amount."""
        return self.price * self.amount

    def all_fields(self) -> List[str]:
        """
        Every field as text, in display order:
        identifier, brand, color, description, weight, length, height,
        price, amount, category name.
        """
        return [
            self.identifier, self.brand,
            self.color, self.description,
            str(self.weight), str(self.length),
            str(self.height), str(self.price),
            str(self.amount), self.category_name,
        ]

    def __repr__(self) -> str:
        return (
            f"Item(identifier={self.identifier!r}, brand={self.brand!r}, "
            f"price={self.price}, amount={self.amount}, "
            f"category={self.category_name!r})"
        )


# --------------------------------------------------------------------- #
#   Warehouse registry
# --------------------------------------------------------------------- #
class Warehouse:
    """
    Registry of Items, each reachable under two folded keys: its identifier
    and its description.

    `_keys` maps a folded key to its Item; `_items` keeps every distinct Item
    once, in the order it was added, with the two keys it was registered under.
    """

    def __init__(self) -> None:
        self._keys: Dict[str, Item] = {}
        self._items: Dict[Item, Tuple[str, str]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    # --------------------------------------------------------------------- #
    #  Registration and lookup
    # --------------------------------------------------------------------- #
    def add_item(self, item: Item) -> bool:
        """
        Register `item` under its identifier and its description.

        Returns False, leaving the registry untouched, if either key is
        already taken or if both fold to the same key.
        """
        number = fold_key(item.identifier)
        description = fold_key(item.description)

        if number == description:
            logger.warning("Rejected %r: identifier and description are the same key", item.identifier)
            return False
        if number in self._keys or description in self._keys:
            logger.warning("Rejected %r: key already registered", item.identifier)
            return False

        self._keys[number] = item
        self._keys[description] = item
        self._items[item] = (number, description)
        logger.info("Added item %r (%r)", item.identifier, item.description)
        return True

    def search(self, key: str, other_key: Optional[str] = None) -> Optional[Item]:
        """
        Look up an Item by identifier or description.

        With one key, return whatever Item that key belongs to. With two keys,
        both must belong to the same Item (in either order), otherwise None.
        """
        found = self._keys.get(fold_key(key))
        if other_key is None or found is None:
            return found
        second = self._keys.get(fold_key(other_key))
        return found if second is found else None

    def get_all_items(self) -> List[Item]:
        """Every registered Item exactly once, in insertion order."""
        return list(self._items)

    def fill_sample(self) -> int:
        """Register the demonstration items. Returns how many were accepted."""
        added = sum(1 for item in sample_items() if self.add_item(item))
        logger.info("Sample fill added %d of %d items", added, len(SAMPLE_ITEMS))
        return added

    # --------------------------------------------------------------------- #
    #  Removal and mutation
    # --------------------------------------------------------------------- #
    def delete_current_item(
        self, item: Optional[Item], key1: Optional[str] = None, key2: Optional[str] = None
    ) -> bool:
        """
        Remove `item` and both of its keys.

        The keys removed are the ones the Item was registered under. If
        `key1`/`key2` are given they must identify `item` (as a two‑key search
        would), otherwise nothing is removed. Returns True if the Item was removed.
        """
        if item is None or item not in self._items:
            return False
        if key1 is not None or key2 is not None:
            if key1 is None or key2 is None or self.search(key1, key2) is not item:
                logger.warning("Refused to delete %r: keys do not identify it", item.identifier)
                return False

        for key in self._items.pop(item):
            if self._keys.get(key) is item:
                del self._keys[key]
        logger.info("Deleted item %r", item.identifier)
        return True

    def alter_amount(self, item: Optional[Item], amount: int) -> None:
        if item is not None:
            item.amount = amount

    def alter_price(self, item: Optional[Item], price: int) -> None:
        if item is not None:
            item.price = price

    def alter_description(self, item: Optional[Item], description: str) -> bool:
        """
        Change the description of `item` and re‑key it.

        The identifier key is untouched. A description whose key already
        belongs to something else is rejected and nothing changes.
        """
        if item is None:
            return False
        error = field_error("description", description)
        if error:
            raise InvalidField("description", error)

        if item not in self._items:
            item.description = description
            return True

        number, old_key = self._items[item]
        new_key = fold_key(description)
        if new_key != old_key and new_key in self._keys:
            logger.warning("Rejected description %r: key already registered", description)
            return False

        item.description = description
        if self._keys.get(old_key) is item:
            del self._keys[old_key]
        self._keys[new_key] = item
        self._items[item] = (number, new_key)
        logger.info("Item %r re‑keyed under %r", item.identifier, description)
        return True

    def increase_amount(self, item: Optional[Item], by: int) -> None:
        if item is None:
            return
        if isinstance(by, bool) or not isinstance(by, int) or by < 0:
            raise InvalidField("amount", "increase must be a non‑negative whole number")
        item.amount = item.amount + by

    def decrease_amount(self, item: Optional[Item], by: int) -> None:
        """Take `by` units out of stock; never below zero."""
        if item is None:
            return
        if isinstance(by, bool) or not isinstance(by, int) or not 0 <= by <= item.amount:
            raise InvalidField("amount", f"decrease must be between 0 and {item.amount}")
        item.amount = item.amount - by

    def apply_discount(self, item: Optional[Item], percent: int) -> Optional[int]:
        """
        Reduce the price of `item` by `percent` (0‑100), rounding down.

        Returns the new price, or None if there is no item.
        """
        if item is None:
            return None
        if isinstance(percent, bool) or not isinstance(percent, int) or not 0 <= percent <= 100:
            raise InvalidField("price", "discount must be between 0 and 100")
        item.price = item.price * (100 - percent) // 100
        return item.price

    # --------------------------------------------------------------------- #
    #  Reporting
    # --------------------------------------------------------------------- #
    def total_inventory_value(self) -> int:
        """Sum of price × amount across all items."""
        return sum(item.value for item in self._items)

    def low_stock_items(self, threshold: int = LOW_STOCK_THRESHOLD) -> List[Item]:
        """Return items whose amount is ≤ `threshold`."""
        return [item for item in self._items if item.amount <= threshold]

    def generate_report(self, threshold: int = LOW_STOCK_THRESHOLD) -> str:
        """
        Produce a multi‑line string showing a table of items,
        the total inventory value, and low‑stock warnings.
        """
        lines = []
        header = f"{'Item number':<16} {'Description':<30} {'Category':<15} {'Amount':>6} {'Price':>8} {'Value':>10}"
        lines.append(header)
        lines.append("-" * len(header))

        for item in self._items:
            lines.append(
                f"{item.identifier[:16]:<16} {item.description[:30]:<30} {item.category_name:<15} "
                f"{item.amount:>6} {item.price:>8} {item.value:>10}"
            )

        lines.append("-" * len(header))
        lines.append(f"TOTAL INVENTORY VALUE: {self.total_inventory_value():,}")

        low_stock = self.low_stock_items(threshold)
        if low_stock:
            lines.append(f"\n⚠️  Low‑stock items (≤ {threshold} units):")
            for item in low_stock:
                lines.append(f"   - {item.identifier}: {item.description} (Amount: {item.amount})")
        else:
            lines.append("\nAll items have sufficient stock.")

        return "\n".join(lines)


# --------------------------------------------------------------------- #
#   Demonstration data
# --------------------------------------------------------------------- #
SAMPLE_ITEMS = (
    ("Floor 2.0", "Jysk", "brown", "Futuristic floor", 3, 188.0, 2.0, 100, 25, 1),
    ("DumbleDoor", "Skeidar", "grey", "Magical door", 95, 150.0, 200.0, 15000, 3, 3),
    ("Seamless", "Home Decor", "transparent", "Simplistic window", 20, 100.0, 100.0, 2350, 12, 2),
    ("To-tom-fir-tom", "Monter", "white", "Classic Norwegian go-to lumber", 12, 200.0, 5.08, 80, 100, 4),
)


def sample_items() -> List[Item]:
    """Fresh Item instances for the demonstration data."""
    return [Item(*values) for values in SAMPLE_ITEMS]
