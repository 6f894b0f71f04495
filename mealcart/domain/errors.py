"""Typed failures raised by shopping list generation."""
from typing import Any, Optional


class ShoppingListError(ValueError):
    """Base class for failures reported to the caller of a shopping list build."""

    def to_dict(self):
        return {"error": str(self)}


class NoPurchasableItemsError(ShoppingListError):
    def __init__(self, message: str = "no purchasable items"):
        super().__init__(message)


class InvalidIngredientUsageError(ShoppingListError):
    '''
    Raised when an ingredient usage cannot be priced or merged.
    field: the offending attribute ("name", "quantity", "estimated_cost").
    index: position of the usage in the flattened sequence, when known.
    '''

    def __init__(self, field: str, value: Any = None, *, index: Optional[int] = None,
                 name: str = "", reason: str = ""):
        self.field = field
        self.value = value
        self.index = index
        self.name = name
        self.reason = reason or "invalid value"
        where = f" at position {index}" if index is not None else ""
        label = f" ({name!r})" if name else ""
        super().__init__(f"invalid ingredient usage{where}{label}: {field} {self.reason} (got {value!r})")

    def with_index(self, index: int) -> "InvalidIngredientUsageError":
        return InvalidIngredientUsageError(self.field, self.value, index=index,
                                           name=self.name, reason=self.reason)

    def to_dict(self):
        return {
            "error": str(self),
            "field": self.field,
            "index": self.index,
            "name": self.name,
        }


class CatalogError(RuntimeError):
    """The grocery catalog file is missing or malformed."""
