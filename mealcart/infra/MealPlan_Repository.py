import logging
from pathlib import Path
from threading import Lock
from typing import List, Optional
from uuid import uuid4

from mealcart.domain.MealPlan import MealPlan
from mealcart.infra import paths
from mealcart.infra.json_store import atomic_write, safe_load

logger = logging.getLogger(__name__)

_write_lock = Lock()


class MealPlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.MEAL_PLANS_FILE

    def _load_store(self) -> dict:
        store = safe_load(self.path, {})
        return store if isinstance(store, dict) else {}

    def save(self, plan: MealPlan) -> MealPlan:
        if not plan.id:
            plan.id = uuid4().hex
        with _write_lock:
            store = self._load_store()
            store[plan.id] = plan.to_dict()
            atomic_write(self.path, store)
        logger.info("Saved meal plan %s with %d meals", plan.id, len(plan.meals))
        return plan

    def get(self, plan_id: str) -> Optional[MealPlan]:
        data = self._load_store().get(plan_id)
        if data is None:
            return None
        return MealPlan.from_dict(data)

    def list_all(self) -> List[MealPlan]:
        return [MealPlan.from_dict(d) for d in self._load_store().values()]
