import os
import re
import json
import logging
from json import JSONDecodeError
from typing import Optional, Tuple
from openai import OpenAI
from fastapi import APIRouter, HTTPException

from mealcart.domain.Meal import Meal
from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.UserProfile import PlanDetails, UserProfile
from mealcart.domain.errors import InvalidIngredientUsageError
from mealcart.events.event_helpers import publish_meal_plan_saved
from mealcart.infra import paths
from mealcart.infra.MealPlan_Repository import MealPlanRepository
from mealcart.logic.planning.fallback import generate_fallback_meal_plan
from mealcart.logic.planning.validator import validate_meal_plan
from mealcart.logic.reporting.nutrition import macro_strategy, nutrition_targets
from mealcart.utilities import config
from mealcart.utilities.constants import MEAL_PLAN_JSON_FORMAT, PROMPT_TEMPLATE
from mealcart.utilities.validators import MealPlanGenerationInput

logger = logging.getLogger(__name__)


# === Helper: Get OpenAI Client ===
def _get_openai_client():
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    api_key = os.environ.get("OPENAI_API_KEY") or config.OPENAI_API_KEY
    if not api_key:
        return None
    return OpenAI(api_key=api_key)


def build_prompt(profile: UserProfile, details: PlanDetails, daily_calories: int) -> str:
    macros = macro_strategy(profile.goal)
    lines = [
        f"Create a {details.duration}-day meal plan with breakfast, lunch and dinner for each day.",
        f"Profile: {profile}.",
        f"Daily calorie target: {daily_calories}.",
        f"Macros: protein {macros['protein']}%, carbs {macros['carbs']}%, fat {macros['fat']}%.",
        f"Dietary restrictions: {', '.join(profile.dietary_restrictions) or 'None'}.",
        f"Allergies: {profile.allergies or 'None'}.",
        f"Weekly budget: ${profile.budget_range}.",
    ]
    if details.cultural_cuisines:
        lines.append(f"Preferred cuisines: {', '.join(details.cultural_cuisines)}.")
    if details.max_cooking_time:
        lines.append(f"Maximum cooking time: {details.max_cooking_time}.")
    if details.additional_notes:
        lines.append(f"Notes: {details.additional_notes}.")
    lines.append("No meal should repeat. Use ingredients commonly sold in large grocery stores, with realistic estimated costs.")
    return "\n".join(lines)


# === Meal Plan Generation ===
def create_meal_plan_from_ai(profile: UserProfile, details: PlanDetails) -> Tuple[MealPlan, str]:
    """Ask the model for a meal plan; fall back to the built-in plan when that fails.

    Returns (plan, source) where source is "ai" or "fallback".
    """
    plan_name = details.plan_name or f"{details.duration}-Day Personalized Plan"
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set, using fallback meal plan.")
        return generate_fallback_meal_plan(details.duration, plan_name), "fallback"

    daily = nutrition_targets(profile, details.target_calories)['daily_calories']
    try:
        response = client.responses.create(
            model=config.OPENAI_MODEL,
            input=build_prompt(profile, details, daily) + PROMPT_TEMPLATE + MEAL_PLAN_JSON_FORMAT,
        )
    except Exception:
        logger.exception("OpenAI request failed")
        return generate_fallback_meal_plan(details.duration, plan_name), "fallback"

    raw = (response.output_text or "").strip()
    plan = parse_meal_plan_text(raw)
    if plan is None:
        _save_raw_output(raw)
        logger.error("AI output could not be turned into a meal plan, using fallback")
        return generate_fallback_meal_plan(details.duration, plan_name), "fallback"

    plan.name = plan_name
    return plan, "ai"


def parse_meal_plan_text(text: str) -> Optional[MealPlan]:
    """Turn model output into a MealPlan, tolerating code fences and trailing commas.

    Meals whose ingredients are malformed are dropped; None when nothing usable remains.
    """
    if not text:
        logger.warning("AI returned empty meal plan data")
        return None

    parsed = None
    try:
        parsed = json.loads(text)
    except JSONDecodeError:
        cleaned = _remove_trailing_commas(_strip_code_fences(text))
        candidate = _extract_json_by_balancing(cleaned)
        if candidate:
            try:
                parsed = json.loads(_remove_trailing_commas(candidate))
            except JSONDecodeError:
                logger.exception("Failed to decode extracted JSON from AI output")

    if not isinstance(parsed, dict) or not isinstance(parsed.get("meals"), list):
        logger.error("Invalid meal plan structure: missing meals array")
        return None

    meals = []
    for raw_meal in parsed["meals"]:
        try:
            meal = Meal.from_dict(raw_meal)
        except InvalidIngredientUsageError as e:
            logger.warning("Dropping AI meal %r: %s", (raw_meal or {}).get("name") if isinstance(raw_meal, dict) else raw_meal, e)
            continue
        if meal.name:
            meals.append(meal)
    if not meals:
        return None
    logger.info("Parsed meal plan with %d meals", len(meals))
    return MealPlan(meals=meals)


def _save_raw_output(text: str):
    try:
        os.makedirs(paths.DATA_DIR, exist_ok=True)
        with open(paths.AI_LAST_RAW_FILE, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError:
        logger.exception("Failed to write %s", paths.AI_LAST_RAW_FILE)


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    """Remove common trailing commas in JSON-like text to help json.loads succeed."""
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if ch == '"' and not escape:
            in_string = not in_string
        if in_string and ch == "\\" and not escape:
            escape = True
            continue
        else:
            escape = False

        if not in_string:
            if ch in "{[":
                if start is None:
                    start = i
                stack.append(ch)
            elif ch in "}]":
                if not stack:
                    continue
                opening = stack.pop()
                if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                    return None
                if not stack and start is not None:
                    return text[start:i + 1]
    return None


# === FastAPI Endpoint ===
router = APIRouter()


@router.post("/generate-meal-plan-ai")
def generate_meal_plan_ai(payload: MealPlanGenerationInput):
    profile = UserProfile.from_dict(payload.profile.model_dump())
    details = PlanDetails.from_dict(payload.plan_details.model_dump())

    plan, source = create_meal_plan_from_ai(profile, details)
    if not plan.meals:
        raise HTTPException(status_code=500, detail="AI did not return a valid meal plan")

    targets = nutrition_targets(profile, details.target_calories)
    plan.start_date, plan.end_date = MealPlan.date_range(details.duration)
    plan.description = f"AI-generated meal plan tailored for {profile.goal} ({targets['daily_calories']} cal/day)"
    MealPlanRepository().save(plan)
    publish_meal_plan_saved(plan, source)

    return {
        "source": source,
        "meal_plan": plan.to_dict(),
        "validation": validate_meal_plan(plan),
        "nutrition": targets,
    }
