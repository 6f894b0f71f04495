"""PackagingResult: how many store packages cover a required quantity, and their cost."""
from typing import Optional

from mealcart.domain.CatalogEntry import CatalogEntry


class PackagingResult:
    def __init__(self, package_description: str, estimated_cost: float, packages_needed: int,
                 catalog_entry: Optional[CatalogEntry] = None):
        self.package_description = package_description
        self.estimated_cost = estimated_cost
        self.packages_needed = packages_needed
        self.catalog_entry = catalog_entry

    @property
    def is_fallback(self) -> bool:
        return self.catalog_entry is None

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackagingResult):
            return NotImplemented
        return (self.package_description == other.package_description
                and self.estimated_cost == other.estimated_cost
                and self.packages_needed == other.packages_needed
                and self.catalog_entry == other.catalog_entry)

    def __str__(self) -> str:
        return f"{self.package_description} - ${self.estimated_cost:.2f}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "package_description": self.package_description,
            "estimated_cost": round(self.estimated_cost, 2),
            "packages_needed": self.packages_needed,
            "catalog_item": self.catalog_entry.name if self.catalog_entry else None,
        }
