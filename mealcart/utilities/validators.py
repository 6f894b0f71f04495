"""
Input validation schemas using Pydantic for request bodies.

Semantic checks on ingredient usages (empty name, negative quantity) are left
to the domain layer so that the API reports the same typed failure as library
callers.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from mealcart.utilities.constants import PACKAGING_BASES


class IngredientUsageInput(BaseModel):
    """Schema for one ingredient of a meal."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    estimated_cost: Optional[float] = Field(None, alias='estimatedCost')

    @field_validator('name', 'unit', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class MealInput(BaseModel):
    """Schema for a meal with its ingredients."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    type: str = Field('dinner', pattern=r'^(breakfast|lunch|dinner|snack)$')
    day_of_week: int = Field(0, ge=0, le=6, alias='dayOfWeek')
    instructions: str = ''
    prep_time: int = Field(0, ge=0, alias='prepTime')
    cook_time: int = Field(0, ge=0, alias='cookTime')
    servings: int = Field(1, ge=1, le=50)
    calories: int = Field(0, ge=0)
    ingredients: List[IngredientUsageInput] = Field(default_factory=list)

    @field_validator('type', mode='before')
    @classmethod
    def lower_type(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


def check_basis(v):
    if v is None:
        return v
    v = v.strip().lower()
    if v not in PACKAGING_BASES:
        raise ValueError(f"basis must be one of {', '.join(PACKAGING_BASES)}")
    return v


class ShoppingListPreviewInput(BaseModel):
    """Schema for computing a shopping list without saving it."""
    meals: List[MealInput] = Field(default_factory=list)
    basis: Optional[str] = None
    apply_packaging: bool = True

    @field_validator('basis')
    @classmethod
    def validate_basis(cls, v):
        return check_basis(v)


class ShoppingListCreateInput(BaseModel):
    """Schema for creating a shopping list: from meals, from a stored plan, or empty."""
    name: str = Field(..., min_length=1, max_length=200)
    meals: Optional[List[MealInput]] = None
    meal_plan_id: Optional[str] = None
    basis: Optional[str] = None
    apply_packaging: bool = True

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Shopping list name cannot be empty')
        return v.strip()

    @field_validator('basis')
    @classmethod
    def validate_basis(cls, v):
        return check_basis(v)


class ItemToggleInput(BaseModel):
    is_purchased: bool


class MealPlanInput(BaseModel):
    """Schema for a manually entered meal plan."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ''
    meals: List[MealInput]

    @field_validator('meals')
    @classmethod
    def validate_meals(cls, v):
        """Ensure the plan has at least one meal."""
        if not v:
            raise ValueError('Meal plan must have at least one meal')
        return v


class UserProfileInput(BaseModel):
    """Schema for a dietary profile (weight in lbs, height in inches)."""
    model_config = ConfigDict(populate_by_name=True)

    age: int = Field(..., ge=13, le=120)
    weight: float = Field(..., gt=0, le=1000)
    height: float = Field(..., gt=0, le=120)
    goal: str = 'maintain'
    activity_level: str = Field('moderate', alias='activityLevel')
    dietary_restrictions: List[str] = Field(default_factory=list, alias='dietaryRestrictions')
    allergies: str = ''
    budget_range: str = Field('50-100', alias='budgetRange')

    @field_validator('dietary_restrictions')
    @classmethod
    def validate_restrictions(cls, v):
        """Drop empty entries."""
        return [r.strip() for r in v if r and r.strip()]


class PlanDetailsInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    duration: int = Field(3, ge=1, le=14)
    plan_name: str = Field('', alias='planName')
    target_calories: Optional[int] = Field(None, ge=1000, le=5000, alias='targetCalories')
    additional_notes: str = Field('', alias='additionalNotes')
    cultural_cuisines: List[str] = Field(default_factory=list, alias='culturalCuisines')
    max_cooking_time: Optional[str] = Field(None, alias='maxCookingTime')


class MealPlanGenerationInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profile: UserProfileInput
    plan_details: PlanDetailsInput = Field(default_factory=PlanDetailsInput, alias='planDetails')


class NutritionTargetsInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profile: UserProfileInput
    target_calories: Optional[int] = Field(None, ge=1000, le=5000, alias='targetCalories')
