import logging
from pathlib import Path
from threading import Lock
from typing import List, Optional, Tuple
from uuid import uuid4

from mealcart.domain.ShoppingList import ShoppingList, ShoppingListItem
from mealcart.infra import paths
from mealcart.infra.json_store import atomic_write, safe_load

logger = logging.getLogger(__name__)

_write_lock = Lock()


class ShoppingListRepository:
    """Stores shopping lists in a JSON file keyed by list id."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.SHOPPING_LISTS_FILE

    def _load_store(self) -> dict:
        store = safe_load(self.path, {})
        return store if isinstance(store, dict) else {}

    def save(self, shopping_list: ShoppingList) -> ShoppingList:
        '''Persists a list, assigning ids to the list and to any item without one.'''
        if not shopping_list.id:
            shopping_list.id = uuid4().hex
        for item in shopping_list.items:
            if not item.id:
                item.id = uuid4().hex
        with _write_lock:
            store = self._load_store()
            store[shopping_list.id] = shopping_list.to_dict()
            atomic_write(self.path, store)
        logger.info("Saved shopping list %s (%d items, $%.2f)", shopping_list.id,
                    len(shopping_list.items), shopping_list.total_estimated_cost)
        return shopping_list

    update = save

    def toggle_item(self, list_id: str, item_id: str, is_purchased: bool) -> Optional[Tuple[ShoppingList, ShoppingListItem]]:
        '''
        Marks one item purchased or not, reading and writing the store under the lock.
        Returns (list, item), or None when the list does not exist.
        Raises KeyError if the list has no item with that id.
        '''
        with _write_lock:
            store = self._load_store()
            data = store.get(list_id)
            if data is None:
                return None
            shopping_list = ShoppingList.from_dict(data)
            item = shopping_list.toggle_item(item_id, is_purchased)
            store[list_id] = shopping_list.to_dict()
            atomic_write(self.path, store)
        return shopping_list, item

    def get(self, list_id: str) -> Optional[ShoppingList]:
        data = self._load_store().get(list_id)
        if data is None:
            return None
        return ShoppingList.from_dict(data)

    def list_all(self) -> List[ShoppingList]:
        lists = [ShoppingList.from_dict(d) for d in self._load_store().values()]
        lists.sort(key=lambda s: s.created_at or "", reverse=True)
        return lists

    def delete(self, list_id: str) -> bool:
        with _write_lock:
            store = self._load_store()
            if list_id not in store:
                return False
            del store[list_id]
            atomic_write(self.path, store)
        logger.info("Deleted shopping list %s", list_id)
        return True
