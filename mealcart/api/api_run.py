from fastapi import (
    FastAPI,
    Query,
    HTTPException,
    Request,
    Response,
)
from fastapi.responses import JSONResponse

from typing import Optional
import logging

from mealcart.domain.Meal import Meal
from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.ShoppingList import ShoppingList
from mealcart.domain.UserProfile import UserProfile
from mealcart.domain.errors import CatalogError, ShoppingListError
from mealcart.infra.Catalog_Repository import catalog_version, load_catalog
from mealcart.infra.MealPlan_Repository import MealPlanRepository
from mealcart.infra.ShoppingList_Repository import ShoppingListRepository
from mealcart.infra.pdf_utils import generate_pdf_for_shopping_list
from mealcart.logic.planning.validator import validate_meal_plan
from mealcart.logic.reporting.nutrition import compute_plan_nutrition, nutrition_targets
from mealcart.logic.shopping.list_builder import assemble_shopping_list, build_shopping_list_for_plan
from mealcart.utilities import config
from mealcart.utilities.constants import PACKAGING_BASES, PACKAGING_BASIS_TOTAL
from mealcart.utilities.validators import (
    ItemToggleInput,
    MealPlanInput,
    NutritionTargetsInput,
    ShoppingListCreateInput,
    ShoppingListPreviewInput,
    check_basis,
)
from mealcart.events.event_helpers import (
    publish_item_toggled,
    publish_meal_plan_saved,
    publish_shopping_list_created,
)
from mealcart.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from mealcart.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("mealcart_app")

# Initialize FastAPI app
app = FastAPI(title="MealCart Meal Plan & Shopping List API")

# Include routers
app.include_router(ai_router)


@app.on_event("startup")
def _startup():
    """Register event bus subscribers and warm the catalog when the app starts."""
    start_event_observers()
    logger.info("Web observers for shopping events started")
    try:
        entries = load_catalog()
        logger.info("Catalog ready with %d entries", len(entries))
    except CatalogError as e:
        logger.error("Catalog could not be loaded at startup: %s", e)


@app.exception_handler(ShoppingListError)
def _shopping_list_error(request: Request, exc: ShoppingListError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


@app.exception_handler(CatalogError)
def _catalog_error(request: Request, exc: CatalogError):
    logger.error("Catalog unavailable for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": {"error": str(exc)}})


# -------------------- Helpers --------------------
def _default_basis(basis: Optional[str]) -> str:
    if basis:
        return basis
    if config.PACKAGING_BASIS in PACKAGING_BASES:
        return config.PACKAGING_BASIS
    logger.warning("Unknown PACKAGING_BASIS %r in configuration, using %r", config.PACKAGING_BASIS, PACKAGING_BASIS_TOTAL)
    return PACKAGING_BASIS_TOTAL


def _get_list_or_404(list_id: str) -> ShoppingList:
    shopping_list = ShoppingListRepository().get(list_id)
    if shopping_list is None:
        raise HTTPException(status_code=404, detail="Shopping list not found")
    return shopping_list


def _get_plan_or_404(plan_id: str) -> MealPlan:
    plan = MealPlanRepository().get(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return plan


def _list_payload(shopping_list: ShoppingList):
    data = shopping_list.to_dict()
    data["progress"] = shopping_list.progress()
    return data


# -------------------- Catalog --------------------
@app.get("/api/catalog")
def api_catalog():
    entries = load_catalog()
    return {
        "version": catalog_version(),
        "count": len(entries),
        "items": [e.to_dict() for e in entries],
    }


# -------------------- Shopping lists --------------------
@app.post("/api/shopping-list/preview")
def api_shopping_list_preview(payload: ShoppingListPreviewInput):
    """Compute items and total for a set of meals without saving anything."""
    shopping_list = assemble_shopping_list(
        [m.model_dump() for m in payload.meals],
        basis=_default_basis(payload.basis),
        apply_packaging=payload.apply_packaging,
    )
    items = [item.to_dict() for item in shopping_list.items]
    return {
        "items": items,
        "count": len(items),
        "total_estimated_cost": round(shopping_list.total_estimated_cost, 2),
    }


@app.post("/api/shopping-lists", status_code=201)
def api_create_shopping_list(payload: ShoppingListCreateInput):
    basis = _default_basis(payload.basis)
    if payload.meal_plan_id:
        plan = _get_plan_or_404(payload.meal_plan_id)
        shopping_list = build_shopping_list_for_plan(
            plan, name=payload.name, basis=basis, apply_packaging=payload.apply_packaging
        )
    elif payload.meals is not None:
        shopping_list = assemble_shopping_list(
            [m.model_dump() for m in payload.meals],
            name=payload.name, basis=basis, apply_packaging=payload.apply_packaging,
        )
    else:
        shopping_list = ShoppingList.create_empty(payload.name)

    ShoppingListRepository().save(shopping_list)
    publish_shopping_list_created(shopping_list)
    return _list_payload(shopping_list)


@app.get("/api/shopping-lists")
def api_list_shopping_lists():
    lists = ShoppingListRepository().list_all()
    return {
        "count": len(lists),
        "lists": [
            {
                "id": s.id,
                "name": s.name,
                "meal_plan_id": s.meal_plan_id,
                "status": s.status,
                "created_at": s.created_at,
                "progress": s.progress(),
            }
            for s in lists
        ],
    }


@app.get("/api/shopping-lists/{list_id}")
def api_get_shopping_list(list_id: str):
    return _list_payload(_get_list_or_404(list_id))


@app.delete("/api/shopping-lists/{list_id}", status_code=204)
def api_delete_shopping_list(list_id: str):
    if not ShoppingListRepository().delete(list_id):
        raise HTTPException(status_code=404, detail="Shopping list not found")
    return Response(status_code=204)


@app.post("/api/shopping-lists/{list_id}/items/{item_id}/toggle")
def api_toggle_item(list_id: str, item_id: str, payload: ItemToggleInput):
    try:
        result = ShoppingListRepository().toggle_item(list_id, item_id, payload.is_purchased)
    except KeyError:
        raise HTTPException(status_code=404, detail="Item not found")
    if result is None:
        raise HTTPException(status_code=404, detail="Shopping list not found")
    shopping_list, item = result
    progress = shopping_list.progress()
    logger.info("Item %s in list %s marked purchased=%s (%d%%)", item_id, list_id,
                item.is_purchased, progress["percentage"])
    publish_item_toggled(list_id, item, progress)
    return {"item": item.to_dict(), "progress": progress}


@app.get("/api/shopping-lists/{list_id}/pdf")
def api_shopping_list_pdf(list_id: str):
    shopping_list = _get_list_or_404(list_id)
    pdf_bytes = generate_pdf_for_shopping_list(shopping_list)
    filename = f"shopping_list_{list_id}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# -------------------- Meal plans --------------------
@app.post("/api/meal-plans", status_code=201)
def api_create_meal_plan(payload: MealPlanInput):
    meals = [Meal.from_dict(m.model_dump()) for m in payload.meals]
    plan = MealPlan(name=payload.name, description=payload.description, meals=meals)
    plan.start_date, plan.end_date = MealPlan.date_range(len(plan.days))
    MealPlanRepository().save(plan)
    publish_meal_plan_saved(plan, "manual")
    return {"meal_plan": plan.to_dict(), "validation": validate_meal_plan(plan)}


@app.get("/api/meal-plans/{plan_id}")
def api_get_meal_plan(plan_id: str):
    plan = _get_plan_or_404(plan_id)
    return {"meal_plan": plan.to_dict(), "nutrition": compute_plan_nutrition(plan)}


@app.post("/api/meal-plans/{plan_id}/shopping-list", status_code=201)
def api_meal_plan_shopping_list(plan_id: str, basis: Optional[str] = Query(default=None),
                                name: Optional[str] = Query(default=None)):
    try:
        basis = check_basis(basis)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    plan = _get_plan_or_404(plan_id)
    shopping_list = build_shopping_list_for_plan(plan, name=name, basis=_default_basis(basis))
    ShoppingListRepository().save(shopping_list)
    publish_shopping_list_created(shopping_list)
    return _list_payload(shopping_list)


# -------------------- Nutrition --------------------
@app.post("/api/nutrition/targets")
def api_nutrition_targets(payload: NutritionTargetsInput):
    profile = UserProfile.from_dict(payload.profile.model_dump())
    return nutrition_targets(profile, payload.target_calories)


# -------------------- Events --------------------
@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)
