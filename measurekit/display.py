"""Terminal rendering of quantity kinds and their units.

Builds rich tables that list, for one quantity kind, every valid unit with
its factor to the base unit and its abbreviations in a culture, plus an
overview of every registered kind.

Example:
    >>> from measurekit.display import print_unit_table
    >>> from measurekit.quantities import Length
    >>> print_unit_table(Length, culture="ru-RU")
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import Culture, get_culture
from .text.abbreviations import UnitAbbreviationsCache
from .unit.quantity import Quantity
from .unit.unit_base import registered_kinds

CONSOLE = Console()


def unit_table(
    quantity_type: type[Quantity],
    culture: str | Culture | None = None,
    cache: UnitAbbreviationsCache | None = None,
) -> Panel:
    """Build a panel listing every unit of a quantity kind.

    Args:
        quantity_type: Quantity subclass whose kind is listed.
        culture: Culture for abbreviations; None for the process default.
        cache: Abbreviation registry to read; the shared cache when None.

    Returns:
        Panel: Table of unit name, factor to base and abbreviations.
    """
    kind = quantity_type.KIND
    resolved = get_culture(culture)
    if cache is None:
        cache = UnitAbbreviationsCache.default()

    t = Table(show_header=True, header_style="bold")
    t.add_column("Unit")
    t.add_column("Factor to base", justify="right")
    t.add_column("Abbreviations")
    for unit in kind.units:
        name = f"[b]{unit.name}[/b]" if unit is kind.base_unit else unit.name
        abbreviations = cache.get_all_abbreviations(kind.unit_type, unit, resolved)
        t.add_row(name, f"{kind.conversions.factor(unit):.10g}", ", ".join(abbreviations) or "-")

    return Panel(t, title=f"{kind.name} ({kind.dimensions}), {resolved.name}", padding=(0, 1))


def kinds_table() -> Table:
    """Build a table summarising every registered quantity kind."""
    t = Table(show_header=True, header_style="bold")
    t.add_column("Kind")
    t.add_column("Dimensions")
    t.add_column("Base unit")
    t.add_column("Units", justify="right")
    for kind in registered_kinds():
        t.add_row(kind.name, str(kind.dimensions), kind.base_unit.name, str(len(kind.units)))
    return t


def print_unit_table(
    quantity_type: type[Quantity],
    culture: str | Culture | None = None,
    console: Console | None = None,
) -> None:
    """Print the unit table of a quantity kind to the console."""
    (console or CONSOLE).print(unit_table(quantity_type, culture))


def print_kinds(console: Console | None = None) -> None:
    (console or CONSOLE).print(kinds_table())
