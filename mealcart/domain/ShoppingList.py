"""ShoppingList aggregate: purchasable line items plus their estimated grand total."""
from datetime import datetime
from typing import List, Optional


class ShoppingListItem:
    def __init__(self, ingredient_name: str = "", quantity: float = 0, unit: str = "",
                 category: str = "", estimated_cost: float = 0.0, is_purchased: bool = False,
                 notes: str = "", id: Optional[str] = None):
        self.id = id
        self.ingredient_name = ingredient_name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.estimated_cost = estimated_cost
        self.is_purchased = is_purchased
        self.notes = notes

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        mark = "x" if self.is_purchased else " "
        note = f" ({self.notes})" if self.notes else ""
        return f"[{mark}] {self.ingredient_name} - {self.quantity} {self.unit} - ${self.estimated_cost:.2f}{note}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "ingredient_name", "quantity", "unit", "category",
                   "estimated_cost", "is_purchased", "notes"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["is_purchased"] = bool(filtered.get("is_purchased") or False)
        filtered["estimated_cost"] = filtered.get("estimated_cost") or 0.0
        filtered["notes"] = filtered.get("notes") or ""
        return ShoppingListItem(**filtered)

    def to_dict(self):
        return {
            "id": self.id,
            "ingredient_name": self.ingredient_name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "estimated_cost": round(self.estimated_cost, 2),
            "is_purchased": self.is_purchased,
            "notes": self.notes,
        }


class ShoppingList:
    def __init__(self, name: str = "Shopping List", items: Optional[List[ShoppingListItem]] = None,
                 meal_plan_id: Optional[str] = None, status: str = "active",
                 created_at: Optional[str] = None, id: Optional[str] = None):
        self.id = id
        self.name = name
        self.items: List[ShoppingListItem] = items[:] if items else []
        self.meal_plan_id = meal_plan_id
        self.status = status
        self.created_at = created_at or datetime.now().isoformat(timespec="seconds")

    @classmethod
    def create_empty(cls, name: str) -> "ShoppingList":
        '''A manually started list; only lists generated from meals must contain items.'''
        return cls(name=name.strip() or "Shopping List")

    def add_item(self, item: ShoppingListItem):
        self.items.append(item)

    def remove_item(self, item: ShoppingListItem):
        self.items.remove(item)

    def get_items(self):
        return self.items

    def find_item(self, item_id: str) -> Optional[ShoppingListItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def toggle_item(self, item_id: str, is_purchased: bool) -> ShoppingListItem:
        '''
        Marks an item as purchased or not purchased.
        Raises KeyError if the list has no item with that id.
        '''
        item = self.find_item(item_id)
        if item is None:
            raise KeyError(item_id)
        item.is_purchased = bool(is_purchased)
        return item

    @property
    def total_estimated_cost(self) -> float:
        return sum(item.estimated_cost for item in self.items)

    def progress(self):
        total = len(self.items)
        purchased = sum(1 for item in self.items if item.is_purchased)
        remaining_cost = sum(item.estimated_cost for item in self.items if not item.is_purchased)
        return {
            "purchased": purchased,
            "total": total,
            "percentage": round(purchased / total * 100) if total else 0,
            "total_cost": round(self.total_estimated_cost, 2),
            "remaining_cost": round(remaining_cost, 2),
        }

    def items_by_category(self):
        '''Groups items by category, keeping the order in which categories first appear.'''
        groups = {}
        for item in self.items:
            groups.setdefault(item.category or "Other", []).append(item)
        return groups

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List '{self.name}' (${self.total_estimated_cost:.2f}):\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return ShoppingList(
            id=d.get("id"),
            name=d.get("name", "Shopping List"),
            items=[ShoppingListItem.from_dict(i) for i in d.get("items", [])],
            meal_plan_id=d.get("meal_plan_id"),
            status=d.get("status", "active"),
            created_at=d.get("created_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "meal_plan_id": self.meal_plan_id,
            "status": self.status,
            "created_at": self.created_at,
            "total_estimated_cost": round(self.total_estimated_cost, 2),
            "items": [item.to_dict() for item in self.items],
        }
