"""Dietary profile and meal plan request details."""
from typing import List, Optional


class UserProfile:
    def __init__(self, age: int, weight: float, height: float, goal: str = "maintain",
                 activity_level: str = "moderate", dietary_restrictions: Optional[List[str]] = None,
                 allergies: str = "", budget_range: str = "50-100"):
        # weight in lbs, height in inches
        self.age = age
        self.weight = weight
        self.height = height
        self.goal = goal
        self.activity_level = activity_level
        self.dietary_restrictions = dietary_restrictions[:] if dietary_restrictions else []
        self.allergies = allergies
        self.budget_range = budget_range

    def __str__(self) -> str:
        return f"{self.age}y, {self.weight} lbs, {self.height} in - goal: {self.goal}, activity: {self.activity_level}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return UserProfile(
            age=d["age"],
            weight=d["weight"],
            height=d["height"],
            goal=d.get("goal") or "maintain",
            activity_level=d.get("activity_level", d.get("activityLevel")) or "moderate",
            dietary_restrictions=d.get("dietary_restrictions", d.get("dietaryRestrictions")) or [],
            allergies=d.get("allergies") or "",
            budget_range=d.get("budget_range", d.get("budgetRange")) or "50-100",
        )

    def to_dict(self):
        return {
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "goal": self.goal,
            "activity_level": self.activity_level,
            "dietary_restrictions": self.dietary_restrictions,
            "allergies": self.allergies,
            "budget_range": self.budget_range,
        }


class PlanDetails:
    def __init__(self, duration: int = 3, plan_name: str = "", target_calories: Optional[int] = None,
                 additional_notes: str = "", cultural_cuisines: Optional[List[str]] = None,
                 max_cooking_time: Optional[str] = None):
        self.duration = duration
        self.plan_name = plan_name
        self.target_calories = target_calories
        self.additional_notes = additional_notes
        self.cultural_cuisines = cultural_cuisines[:] if cultural_cuisines else []
        self.max_cooking_time = max_cooking_time

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return PlanDetails(
            duration=int(d.get("duration") or 3),
            plan_name=d.get("plan_name", d.get("planName")) or "",
            target_calories=d.get("target_calories", d.get("targetCalories")),
            additional_notes=d.get("additional_notes", d.get("additionalNotes")) or "",
            cultural_cuisines=d.get("cultural_cuisines", d.get("culturalCuisines")) or [],
            max_cooking_time=d.get("max_cooking_time", d.get("maxCookingTime")),
        )

    def to_dict(self):
        return {
            "duration": self.duration,
            "plan_name": self.plan_name,
            "target_calories": self.target_calories,
            "additional_notes": self.additional_notes,
            "cultural_cuisines": self.cultural_cuisines,
            "max_cooking_time": self.max_cooking_time,
        }
