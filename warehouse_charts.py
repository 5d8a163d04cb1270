# warehouse_charts.py

"""Stock charts for the warehouse, written to image files."""

import logging
from pathlib import Path
from typing import Dict, Iterable, Union

import matplotlib
from matplotlib.figure import Figure

from warehouse import CATEGORY_NAMES, Item


logger = logging.getLogger(__name__)

CHART_FILE = "warehouse_stock.png"


def category_totals(items: Iterable[Item]) -> Dict[str, Dict[str, int]]:
    """Units and value per category name, for categories that have items."""
    categories: Dict[str, Dict[str, int]] = {}
    for item in items:
        totals = categories.setdefault(item.category_name, {"amount": 0, "value": 0})
        totals["amount"] += item.amount
        totals["value"] += item.value
    # keep the catalog order rather than insertion order
    return {name: categories[name] for name in CATEGORY_NAMES if name in categories}


def render_category_chart(items: Iterable[Item], path: Union[str, Path] = CHART_FILE) -> Path:
    """
    Save two pie charts (units and value by category) to `path`.

    Draws on a standalone Figure, so pyplot state and the active backend
    are left alone.
    """
    path = Path(path)
    categories = category_totals(items)

    fig = Figure(figsize=(12, 6))
    ax1, ax2 = fig.subplots(1, 2)

    labels = list(categories)
    amounts = [categories[name]["amount"] for name in labels]
    values = [categories[name]["value"] for name in labels]

    if sum(amounts) and sum(values):
        colors = matplotlib.colormaps["Set3"](range(len(labels)))

        ax1.pie(amounts, labels=labels, autopct="%1.1f%%", colors=colors)
        ax1.set_title("Inventory by Amount")

        ax2.pie(values, labels=labels, autopct="%1.1f%%", colors=colors)
        ax2.set_title("Inventory by Value")
    else:
        for ax in (ax1, ax2):
            ax.text(0.5, 0.5, "No data available", ha="center", va="center", transform=ax.transAxes)
            ax.set_axis_off()

    fig.tight_layout()
    fig.savefig(path)

    logger.info("Stock chart written to %s (%d categories)", path, len(categories))
    return path
