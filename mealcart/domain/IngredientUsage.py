"""IngredientUsage domain entity: one ingredient as consumed by one meal."""
import math
from typing import Any

from mealcart.domain.errors import InvalidIngredientUsageError
from mealcart.utilities.constants import DEFAULT_CATEGORY, DEFAULT_UNIT


def _to_number(value: Any, field: str, name: str) -> float:
    if value is None or value == "":
        raise InvalidIngredientUsageError(field, value, name=name, reason="is missing")
    if isinstance(value, bool):
        raise InvalidIngredientUsageError(field, value, name=name, reason="is not a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidIngredientUsageError(field, value, name=name, reason="is not a number")
    if math.isnan(number) or math.isinf(number):
        raise InvalidIngredientUsageError(field, value, name=name, reason="is not a finite number")
    if number < 0:
        raise InvalidIngredientUsageError(field, value, name=name, reason="cannot be negative")
    return number


class IngredientUsage:
    __slots__ = ("name", "quantity", "unit", "category", "estimated_cost")

    def __init__(self, name: str, quantity: float, unit: str = DEFAULT_UNIT,
                 category: str = DEFAULT_CATEGORY, estimated_cost: float = 0.0):
        if not isinstance(name, str) or not name.strip():
            raise InvalidIngredientUsageError("name", name, reason="cannot be empty")
        name = name.strip()
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "quantity", _to_number(quantity, "quantity", name))
        object.__setattr__(self, "unit", str(unit or DEFAULT_UNIT).strip() or DEFAULT_UNIT)
        object.__setattr__(self, "category", str(category or DEFAULT_CATEGORY).strip() or DEFAULT_CATEGORY)
        object.__setattr__(self, "estimated_cost", _to_number(estimated_cost, "estimated_cost", name))

    def __setattr__(self, key, value):
        raise AttributeError(f"IngredientUsage is immutable (cannot set {key!r})")

    def merge_key(self) -> tuple:
        '''Normalized (name, unit) pair used to detect duplicate ingredients.'''
        return (self.name.lower(), self.unit.lower())

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientUsage):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.name, self.quantity, self.unit, self.category, self.estimated_cost))

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} ({self.category}) - ${self.estimated_cost:.2f}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''
        Creates an IngredientUsage from a dictionary. Accepts the AI payload keys
        (name, estimatedCost) as well as the stored ones (ingredient_name, estimated_cost).
        A missing quantity is rejected, the other optional fields fall back to defaults.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        name = d.get("name", d.get("ingredient_name"))
        cost = d.get("estimated_cost", d.get("estimatedCost"))
        return IngredientUsage(
            name=name,
            quantity=d.get("quantity"),
            unit=d.get("unit") or DEFAULT_UNIT,
            category=d.get("category") or DEFAULT_CATEGORY,
            estimated_cost=0.0 if cost is None else cost,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "estimated_cost": self.estimated_cost,
        }
