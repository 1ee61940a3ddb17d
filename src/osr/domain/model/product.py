"""Product catalog entry.

Products live independently of orders.  The reporting engine only
needs the product's base unit, which decides how sold quantities are
labelled in the daily product summary.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_UNIT = "units"

# Base units that are shown differently in reports.
_DISPLAY_UNITS = {
    "piece": "pcs",
    "ml": "",
}


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    unit: str = DEFAULT_UNIT


def display_unit(base_unit: str) -> str:
    """Map a catalog base unit to its report label.

    ``piece`` reads as ``pcs`` and ``ml`` quantities are shown bare;
    every other unit is displayed as-is.
    """
    return _DISPLAY_UNITS.get(base_unit, base_unit)
