"""MealPlan domain entity: a named, multi-day list of meals."""
from datetime import date, timedelta
from typing import List, Optional

from mealcart.domain.Meal import Meal


class MealPlan:
    def __init__(self, name: str = "", meals: Optional[List[Meal]] = None, description: str = "",
                 start_date: Optional[str] = None, end_date: Optional[str] = None,
                 id: Optional[str] = None):
        self.id = id
        self.name = name
        self.meals = meals[:] if meals else []
        self.description = description
        self.start_date = start_date
        self.end_date = end_date

    @property
    def days(self) -> List[int]:
        return sorted({m.day_of_week for m in self.meals})

    def meals_for_day(self, day_of_week: int) -> List[Meal]:
        return [m for m in self.meals if m.day_of_week == day_of_week]

    def ingredient_count(self) -> int:
        return sum(len(m.ingredients) for m in self.meals)

    def __str__(self) -> str:
        return f"Meal Plan '{self.name}' - {len(self.meals)} meals over {len(self.days)} days"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return MealPlan(
            id=d.get("id"),
            name=d.get("name", ""),
            meals=[m if isinstance(m, Meal) else Meal.from_dict(m) for m in d.get("meals", [])],
            description=d.get("description", ""),
            start_date=d.get("start_date"),
            end_date=d.get("end_date"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "meals": [m.to_dict() for m in self.meals],
        }

    @staticmethod
    def date_range(duration: int, start: Optional[date] = None):
        '''Returns ISO (start, end) strings for a plan lasting `duration` days.'''
        start = start or date.today()
        end = start + timedelta(days=max(duration, 1) - 1)
        return start.isoformat(), end.isoformat()
