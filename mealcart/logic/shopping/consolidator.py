"""Ingredient consolidation: merge usages sharing a (name, unit) pair."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.domain.ConsolidatedIngredient import ConsolidatedIngredient
from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.errors import InvalidIngredientUsageError
from mealcart.logic.shopping.packaging import resolve_packaging
from mealcart.utilities.constants import (
    PACKAGING_BASES, PACKAGING_BASIS_FIRST_USAGE, PACKAGING_BASIS_TOTAL
)

logger = logging.getLogger(__name__)


def _as_usage(item, index: int) -> IngredientUsage:
    if isinstance(item, IngredientUsage):
        return item
    try:
        return IngredientUsage.from_dict(item)
    except InvalidIngredientUsageError as e:
        raise e.with_index(index) from e


def consolidate_ingredients(usages: Iterable, *, basis: str = PACKAGING_BASIS_TOTAL,
                            resolve: bool = True,
                            catalog: Optional[Iterable[CatalogEntry]] = None) -> List[ConsolidatedIngredient]:
    """Merge ingredient usages into one record per (lowercased name, lowercased unit).

    Args:
        usages: IngredientUsage objects or dicts, in meal order.
        basis: "total" resolves packaging from the merged quantity once all usages
            are in; "first_usage" resolves it from the quantity of the usage that
            opened the bucket and never revisits it.
        resolve: False skips packaging altogether.
        catalog: catalog entries to price against (defaults to the bundled catalog).

    Returns:
        Consolidated ingredients in order of first occurrence.

    Raises:
        InvalidIngredientUsageError: a usage is malformed; `index` is its position.
        ValueError: unknown basis.
    """
    if basis not in PACKAGING_BASES:
        raise ValueError(f"Unknown packaging basis: {basis!r} (expected one of {', '.join(PACKAGING_BASES)})")
    if catalog is not None:
        catalog = tuple(catalog)

    buckets: Dict[Tuple[str, str], ConsolidatedIngredient] = {}
    for index, item in enumerate(usages):
        usage = _as_usage(item, index)
        key = usage.merge_key()
        existing = buckets.get(key)
        if existing is None:
            consolidated = ConsolidatedIngredient.seed(usage)
            if resolve and basis == PACKAGING_BASIS_FIRST_USAGE:
                consolidated.packaging = resolve_packaging(usage.name, usage.quantity, usage.unit, catalog)
            buckets[key] = consolidated
        else:
            existing.absorb(usage)

    result = list(buckets.values())
    if resolve and basis == PACKAGING_BASIS_TOTAL:
        for consolidated in result:
            consolidated.packaging = resolve_packaging(
                consolidated.name, consolidated.total_quantity, consolidated.unit, catalog
            )
    return result


__all__ = ['consolidate_ingredients']
