"""Catalog lookup for free-text ingredient names.

Matching is a case-insensitive substring test in both directions, scanned in
catalog order; the first entry that satisfies either direction wins. There is
no scoring, so "garlic powder" matches a "garlic" entry.
"""
from typing import Iterable, Optional

from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.infra.Catalog_Repository import load_catalog


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def find_catalog_entry(ingredient_name: str, catalog: Optional[Iterable[CatalogEntry]] = None) -> Optional[CatalogEntry]:
    """Return the first catalog entry matching `ingredient_name`, or None."""
    needle = _normalize(ingredient_name)
    if not needle:
        return None
    entries = load_catalog() if catalog is None else catalog
    for entry in entries:
        candidate = _normalize(entry.name)
        if not candidate:
            continue
        if candidate in needle or needle in candidate:
            return entry
    return None


__all__ = ['find_catalog_entry']
