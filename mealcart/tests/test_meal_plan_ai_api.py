import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from mealcart.api.api_run import app
from mealcart.infra import paths
from mealcart.utilities import config


@pytest.fixture
def data_dir():
    with tempfile.TemporaryDirectory() as tmp:
        d = Path(tmp)
        with patch.object(paths, "DATA_DIR", d), \
                patch.object(paths, "MEAL_PLANS_FILE", d / "meal_plans.json"), \
                patch.object(paths, "SHOPPING_LISTS_FILE", d / "shopping_lists.json"), \
                patch.object(paths, "AI_LAST_RAW_FILE", d / "ai_last_raw.txt"):
            yield d


@pytest.mark.asyncio
async def test_generate_plan_without_key_then_shop_for_it(data_dir):
    body = {
        "profile": {"age": 28, "weight": 150, "height": 66, "goal": "maintain"},
        "planDetails": {"duration": 2, "planName": "Starter"},
    }
    with patch.dict(os.environ, {"OPENAI_API_KEY": ""}), patch.object(config, "OPENAI_API_KEY", ""):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.post("/generate-meal-plan-ai", json=body)
            assert r.status_code == 200
            data = r.json()
            assert data["source"] == "fallback"
            assert data["meal_plan"]["name"] == "Starter"
            assert len(data["meal_plan"]["meals"]) == 6
            assert data["validation"]["unique_meals"] == 6

            plan_id = data["meal_plan"]["id"]
            r = await client.post(f"/api/meal-plans/{plan_id}/shopping-list")
            assert r.status_code == 201
            shopping_list = r.json()
            assert shopping_list["name"] == "Starter - Shopping List"
            assert shopping_list["total_estimated_cost"] > 0
            assert all(item["unit"] == "package" for item in shopping_list["items"])
