"""ConsolidatedIngredient: all usages of one (name, unit) pair merged into a single record."""
from typing import Optional

from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.PackagingResult import PackagingResult


class ConsolidatedIngredient:
    def __init__(self, name: str, total_quantity: float, unit: str, category: str,
                 estimated_cost: float, packaging: Optional[PackagingResult] = None, usage_count: int = 1):
        self.name = name
        self.total_quantity = total_quantity
        self.unit = unit
        self.category = category
        self.estimated_cost = estimated_cost
        self.packaging = packaging
        self.usage_count = usage_count

    @classmethod
    def seed(cls, usage: IngredientUsage) -> "ConsolidatedIngredient":
        return cls(usage.name, usage.quantity, usage.unit, usage.category, usage.estimated_cost)

    def absorb(self, usage: IngredientUsage):
        '''Adds another usage of the same ingredient. Name, unit and category keep their first-seen values.'''
        self.total_quantity += usage.quantity
        self.estimated_cost += usage.estimated_cost
        self.usage_count += 1

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.total_quantity} {self.unit}", f"${self.estimated_cost:.2f}"]
        if self.packaging:
            parts.append(str(self.packaging))
        return " - ".join(parts)

    __repr__ = __str__

    def to_dict(self):
        return {
            "name": self.name,
            "total_quantity": self.total_quantity,
            "unit": self.unit,
            "category": self.category,
            "estimated_cost": round(self.estimated_cost, 2),
            "usage_count": self.usage_count,
            "packaging": self.packaging.to_dict() if self.packaging else None,
        }
