import unittest
from mealcart.domain.Meal import Meal
from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.UserProfile import UserProfile
from mealcart.logic.reporting.nutrition import (
    calculate_bmi, calculate_bmr, calculate_daily_calories, calculate_personalized_calories,
    compute_plan_nutrition, macro_strategy, nutrition_targets,
)


class TestNutrition(unittest.TestCase):

    def setUp(self):
        self.profile = UserProfile(age=30, weight=180, height=70, goal="maintain", activity_level="moderate")

    def test_bmr(self):
        # 180 lbs = 81.65 kg, 70 in = 177.8 cm
        self.assertAlmostEqual(calculate_bmr(30, 180, 70), 1865.1, delta=1)

    def test_daily_calories_by_goal(self):
        bmr = 1800
        maintain = calculate_daily_calories(bmr, "moderate", "maintain")
        self.assertEqual(maintain, round(1800 * 1.55))
        self.assertEqual(calculate_daily_calories(bmr, "moderate", "lose-weight"), maintain - 500)
        self.assertEqual(calculate_daily_calories(bmr, "moderate", "build-muscle"), maintain + 300)

    def test_unknown_activity_counts_as_sedentary(self):
        self.assertEqual(calculate_daily_calories(1800, "couch", "maintain"),
                         calculate_daily_calories(1800, "sedentary", "maintain"))

    def test_personalized_calories_scale_with_goal(self):
        maintain = calculate_personalized_calories(self.profile)
        self.profile.goal = "lose-weight"
        self.assertLess(calculate_personalized_calories(self.profile), maintain)

    def test_bmi(self):
        self.assertAlmostEqual(calculate_bmi(180, 70), 25.8, delta=0.1)
        self.assertEqual(calculate_bmi(180, 0), 0.0)

    def test_macros_sum_to_100(self):
        for goal in ("lose-weight", "build-muscle", "maintain"):
            m = macro_strategy(goal)
            self.assertEqual(m["protein"] + m["carbs"] + m["fat"], 100)

    def test_targets_honor_explicit_calories(self):
        targets = nutrition_targets(self.profile, 2000)
        self.assertEqual(targets["daily_calories"], 2000)
        self.assertEqual(targets["meal_split"], {"breakfast": 500, "lunch": 700, "dinner": 800})

    def test_plan_nutrition(self):
        plan = MealPlan(meals=[
            Meal(name="Oats", type="breakfast", day_of_week=0, calories=300),
            Meal(name="Salad", type="lunch", day_of_week=0, calories=500, servings=2),
            Meal(name="Fish", type="dinner", day_of_week=1, calories=600),
        ])
        result = compute_plan_nutrition(plan)
        self.assertEqual(list(result["days"]), [0, 1])
        self.assertEqual(result["days"][0]["calories"], 800)
        self.assertEqual(result["plan_totals"], {"calories": 1400, "average_daily_calories": 700})

    def test_empty_plan(self):
        self.assertEqual(compute_plan_nutrition(MealPlan())["plan_totals"]["calories"], 0)
