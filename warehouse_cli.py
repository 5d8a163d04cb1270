#!/usr/bin/env python3
# warehouse_cli.py

"""
Interactive text menu for the warehouse manager.

All state lives in a `Session` that is passed to every handler, so several
sessions can run side by side (handy for tests).
"""

import argparse
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from warehouse import (
    CATEGORY_NAMES,
    InvalidField,
    Item,
    Warehouse,
    category_error,
    field_error,
    fold_key,
)
from warehouse_charts import CHART_FILE, render_category_chart


logger = logging.getLogger(__name__)

INIT_MENU = "init"
HOME_MENU = "home"
ITEM_MENU = "item"

OPTION_EXIT = "0"

FIELD_LABELS = (
    "- Item number:   |  ",
    "- Brand:         |  ",
    "- Color:         |  ",
    "- Description:   |  ",
    "- Weight:        |  ",
    "- Length:        |  ",
    "- Height:        |  ",
    "- Price:         |  ",
    "- Amount:        |  ",
    "- Category:      |  ",
)


@dataclass
class Session:
    """One operator's run: the registry, the item being inspected and the next menu."""
    warehouse: Warehouse = field(default_factory=Warehouse)
    current_item: Optional[Item] = None
    next_menu: str = INIT_MENU
    chart_file: str = CHART_FILE
    input_func: Optional[Callable[[str], str]] = None  # defaults to input()

    def ask(self, prompt: str) -> str:
        reader = self.input_func or input
        try:
            return reader(prompt).strip()
        except EOFError:
            print()
            exit_app(self)


# ------------------------------------------------------------------------- #
#  Prompt helpers
# ------------------------------------------------------------------------- #
def prompt_int(
    session: Session, prompt: str, min_val: Optional[int] = None, max_val: Optional[int] = None
) -> int:
    while True:
        try:
            val = int(session.ask(prompt))
        except ValueError:
            print("❌ Invalid integer. Please try again.")
            continue
        if min_val is not None and val < min_val:
            print(f"❌ Value must be ≥ {min_val}. Try again.")
        elif max_val is not None and val > max_val:
            print(f"❌ Value must be ≤ {max_val}. Try again.")
        else:
            return val


def prompt_float(session: Session, prompt: str, min_val: Optional[float] = None) -> float:
    while True:
        try:
            val = float(session.ask(prompt))
        except ValueError:
            print("❌ Invalid number. Please try again.")
            continue
        if min_val is not None and not val >= min_val:
            print(f"❌ Value must be ≥ {min_val}. Try again.")
        else:
            return val


def prompt_text(session: Session, prompt: str, field_name: str) -> str:
    """Ask until the answer passes the rule for `field_name`."""
    while True:
        val = session.ask(prompt)
        error = field_error(field_name, val)
        if error is None:
            return val
        print(f"❌ {field_name.capitalize()} {error}. Try again.")


def prompt_category(session: Session) -> int:
    choices = ", ".join(f"{number}= {name}" for number, name in enumerate(CATEGORY_NAMES, start=1))
    while True:
        number = prompt_int(session, f"(1 <= int <= {len(CATEGORY_NAMES)}) Item category ({choices}): ")
        error = category_error(number)
        if error is None:
            return number
        print(f"❌ Category {error}. Try again.")


def prompt_yes_no(session: Session, prompt: str) -> bool:
    while True:
        answer = session.ask(prompt).lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        print("Input not recognized. Please enter 'y' for yes or 'n' for no.")


# ------------------------------------------------------------------------- #
#  Printing
# ------------------------------------------------------------------------- #
def _print_welcome() -> None:
    print("\n       Welcome to the Warehouse Management System")
    print("--------------------------------------------------------\n")
    print("Let's start with adding an item to your inventory:\n")


def _print_init_menu() -> None:
    print("   1. Add a new item to your inventory.")
    print("   2. Fill inventory with default items.")
    print("   0. Exit.\n")


def _print_home_menu() -> None:
    menu = """
What would you like to do?
   1. Add a new item to your inventory.
   2. Search for item (number or description).
   3. Search for item (number and description).
   4. Show all items in the inventory.
   5. Show inventory report.
   6. Save stock chart.
   0. Exit.
"""
    print(menu)


def _print_item_menu() -> None:
    menu = """
What would you like to do?
   1. Increase amount.
   2. Decrease amount.
   3. Change pricing.
   4. Add discount.
   5. Change description.
   6. Remove item.
   7. Return.
   0. Exit.
"""
    print(menu)


def print_current_item(item: Item) -> None:
    print("\n------------------------------------------")
    print("             CURRENT ITEM:")
    print("------------------------------------------")
    print(f"- Item number: {item.identifier}")
    print(f"- Description: {item.description}")
    print(f"- Amount: {item.amount}")
    print(f"- Price: {item.price}")
    print(f"- Category: {item.category_name}")
    print("------------------------------------------")


def format_item(item: Item) -> List[str]:
    return [label + value for label, value in zip(FIELD_LABELS, item.all_fields())]


# ------------------------------------------------------------------------- #
#  Commands
# ------------------------------------------------------------------------- #
def exit_app(session: Session) -> None:
    print("\n--------------------------------------------------")
    print(" Thank you for using Warehouse Management System")
    logger.debug("Session ended with %d items", len(session.warehouse))
    raise SystemExit(0)


def add_item(session: Session) -> None:
    print("\n--- Add a New Item ---")
    number = prompt_text(session, "(String) Item number: ", "identifier")
    brand = prompt_text(session, "(String) Item brand: ", "brand")
    color = prompt_text(session, "(String) Item color: ", "color")
    while True:
        description = prompt_text(session, "(String) Short description: ", "description")
        if fold_key(description) != fold_key(number):
            break
        print("❌ Item number and description cannot be the same. Try again.")
    weight = prompt_float(session, "(double >= 0) Weight in kilograms: ", min_val=0.0)
    length = prompt_float(session, "(double >= 0) Length in meters: ", min_val=0.0)
    height = prompt_float(session, "(double >= 0) Height in meters: ", min_val=0.0)
    price = prompt_int(session, "(int >= 0) Price in NOK: ", min_val=0)
    amount = prompt_int(session, "(int >= 0) Amount of items: ", min_val=0)
    category = prompt_category(session)

    try:
        item = Item(number, brand, color, description, weight, length, height, price, amount, category)
    except InvalidField as err:
        print(f"❌ Error: {err}")
        session.next_menu = HOME_MENU
        return

    if session.warehouse.add_item(item):
        print("\n✅ New item was created.")
        session.current_item = item
    else:
        print("\n⚠️  Item already exists.")
        session.current_item = session.warehouse.search(number)
    session.next_menu = ITEM_MENU if session.current_item is not None else HOME_MENU


def fill_inventory(session: Session) -> None:
    added = session.warehouse.fill_sample()
    print(f"\n\nA total of {added} default items has been added:")
    print("-----------------------------------------------")
    for item in session.warehouse.get_all_items():
        print(f"Item number:   |  {item.identifier}")
        print(f"Description:   |  {item.description}")
        print("-----------------------------------------------")
    session.next_menu = HOME_MENU


def _show_search_result(session: Session, item: Optional[Item]) -> None:
    session.current_item = item
    if item is None:
        print("Did not find this item.")
        session.next_menu = HOME_MENU
    else:
        print("Item found.")
        session.next_menu = ITEM_MENU


def search_one(session: Session) -> None:
    search = session.ask("\nPlease enter a search string: ")
    _show_search_result(session, session.warehouse.search(search))


def search_two(session: Session) -> None:
    search1 = session.ask("\nPlease enter a search string nr 1: ")
    search2 = session.ask("Please enter a search string nr 2: ")
    _show_search_result(session, session.warehouse.search(search1, search2))


def show_all(session: Session) -> None:
    items = session.warehouse.get_all_items()
    print("\n\n              ITEMS IN WAREHOUSE:")
    print("--------------------------------------------------")
    if not items:
        print("📦 Inventory is empty.")
    for item in items:
        for line in format_item(item):
            print(line)
        print("--------------------------------------------------")
    print()


def show_report(session: Session) -> None:
    print("\n--- Inventory Report ---")
    print(session.warehouse.generate_report())
    print()


def save_chart(session: Session) -> None:
    try:
        path = render_category_chart(session.warehouse.get_all_items(), session.chart_file)
    except OSError as err:
        logger.error("Could not write chart to %s: %s", session.chart_file, err)
        print(f"❌ Could not save chart: {err}")
        return
    print(f"✅ Stock chart saved to '{path}'")


def increase(session: Session) -> None:
    number = prompt_int(session, "\nHow much to increase by: ", min_val=0)
    session.warehouse.increase_amount(session.current_item, number)
    print(f"\nItem amount increased by {number}.")


def decrease(session: Session) -> None:
    item = session.current_item
    number = prompt_int(session, "\nHow much to decrease by: ", min_val=0, max_val=item.amount)
    session.warehouse.decrease_amount(item, number)
    print(f"\nItem amount decreased by {number}.")


def change_price(session: Session) -> None:
    number = prompt_int(session, "\nNew price: ", min_val=0)
    session.warehouse.alter_price(session.current_item, number)
    print(f"\nPrice set to {number}.")


def add_discount(session: Session) -> None:
    number = prompt_int(session, "\nDiscount for item. Must be between 0 and 100: ", min_val=0, max_val=100)
    price = session.warehouse.apply_discount(session.current_item, number)
    print(f"\nDesired discount of {number}% sets price to {price}.")


def change_description(session: Session) -> None:
    description = prompt_text(session, "\nNew description: ", "description")
    if session.warehouse.alter_description(session.current_item, description):
        print(f"\nDescription set to '{description}'.")
    else:
        print(f"\n⚠️  '{description}' is already used by an item.")


def remove_item(session: Session) -> None:
    item = session.current_item
    if prompt_yes_no(session, "Are you sure you want to remove the item? (y/n): "):
        session.warehouse.delete_current_item(item, item.identifier, item.description)
        print("Item has been removed.")
        session.current_item = None
        session.next_menu = HOME_MENU
    else:
        print("Item will not be removed.")


# ------------------------------------------------------------------------- #
#  Menus
# ------------------------------------------------------------------------- #
INIT_COMMANDS = {
    "1": add_item,
    "2": fill_inventory,
}

HOME_COMMANDS = {
    "1": add_item,
    "2": search_one,
    "3": search_two,
    "4": show_all,
    "5": show_report,
    "6": save_chart,
}

ITEM_COMMANDS = {
    "1": increase,
    "2": decrease,
    "3": change_price,
    "4": add_discount,
    "5": change_description,
    "6": remove_item,
}
ITEM_OPTION_RETURN = "7"


def init_menu(session: Session) -> None:
    _print_welcome()
    while True:
        _print_init_menu()
        choice = session.ask("Enter the number of desired operation: ")
        if choice == OPTION_EXIT:
            exit_app(session)
        command = INIT_COMMANDS.get(choice)
        if command is not None:
            command(session)
            return
        print("The input was not valid. Please try again.\n")


def home_menu(session: Session) -> None:
    _print_home_menu()
    while True:
        choice = session.ask("Your option: ")
        if choice == OPTION_EXIT:
            exit_app(session)
        command = HOME_COMMANDS.get(choice)
        if command is not None:
            command(session)
            return
        print(f'\nOption "{choice}" is not available.\nPlease try again.')


def item_menu(session: Session) -> None:
    if session.current_item is None:
        session.next_menu = HOME_MENU
        return

    print_current_item(session.current_item)
    _print_item_menu()
    while True:
        choice = session.ask("Your option: ")
        if choice == OPTION_EXIT:
            exit_app(session)
        if choice == ITEM_OPTION_RETURN:
            session.next_menu = HOME_MENU
            return
        command = ITEM_COMMANDS.get(choice)
        if command is None:
            print(f'\nOption "{choice}" is not available.\nPlease try again.')
            continue
        try:
            command(session)
        except InvalidField as err:
            print(f"❌ Error: {err}")
        return


MENUS = {
    INIT_MENU: init_menu,
    HOME_MENU: home_menu,
    ITEM_MENU: item_menu,
}


def run(session: Session) -> None:
    """Show menus until the operator exits (raises SystemExit)."""
    while True:
        MENUS[session.next_menu](session)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive warehouse inventory manager.")
    parser.add_argument(
        "--sample", action="store_true",
        help="start with the default demonstration items and skip the start menu",
    )
    parser.add_argument(
        "--chart-file", default=CHART_FILE,
        help=f"where the stock chart is saved (default: {CHART_FILE})",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level for diagnostics (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = Session(chart_file=args.chart_file)
    if args.sample:
        fill_inventory(session)

    try:
        run(session)
    except KeyboardInterrupt:
        print("\n\n👋 Bye!")


if __name__ == "__main__":
    # Entry point when running `python warehouse_cli.py`
    main()
