"""Packaging resolver: turns a required quantity into whole store packages."""
import logging
import math
from typing import Iterable, Optional

from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.domain.PackagingResult import PackagingResult
from mealcart.logic.shopping.catalog_matcher import find_catalog_entry
from mealcart.utilities.constants import FALLBACK_PACKAGE_COST

logger = logging.getLogger(__name__)

VOLUME_UNITS = ('cup', 'cups')


def format_quantity(quantity: float) -> str:
    """Render 2.0 as "2" and 0.5 as "0.5"."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)


def packages_needed(quantity: float, unit: str, entry: CatalogEntry) -> int:
    '''
    Number of packages of `entry` that cover `quantity` `unit`.
    Only weight in lb (against an lb-priced item) and oz (against an oz-sized
    package) are converted; every other unit combination buys one package.
    '''
    requested = (unit or '').strip().lower()
    size = entry.package_size
    count = 1
    if requested == 'lb' and entry.unit == 'lb' and size > 0:
        count = math.ceil(quantity / size)
    elif requested == 'oz' and entry.package_size_unit == 'oz' and size > 0:
        count = math.ceil(quantity / size)
    elif requested in VOLUME_UNITS:
        count = 1  # no volume to package conversion
    return max(1, int(count))


def resolve_packaging(ingredient_name: str, quantity: float, unit: str,
                      catalog: Optional[Iterable[CatalogEntry]] = None) -> PackagingResult:
    """Price `quantity` `unit` of an ingredient in real-world packages.

    Falls back to a single package at FALLBACK_PACKAGE_COST when the catalog has
    no matching item; a catalog miss is never an error.
    """
    entry = find_catalog_entry(ingredient_name, catalog)
    if entry is None:
        logger.debug("No catalog match for %r, using fallback packaging", ingredient_name)
        return PackagingResult(
            package_description=f"{format_quantity(quantity)} {unit}",
            estimated_cost=FALLBACK_PACKAGE_COST,
            packages_needed=1,
        )

    count = packages_needed(quantity, unit, entry)
    return PackagingResult(
        package_description=f"{count} × {entry.package_description}",
        estimated_cost=entry.unit_price * count,
        packages_needed=count,
        catalog_entry=entry,
    )


__all__ = ['resolve_packaging', 'packages_needed', 'format_quantity']
