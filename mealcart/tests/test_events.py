import unittest

from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.ShoppingList import ShoppingList, ShoppingListItem
from mealcart.events import web_observers
from mealcart.events.Event_Bus import EventBus, SHOPPING_LIST_CREATED
from mealcart.events.event_helpers import (
    publish_item_toggled, publish_meal_plan_saved, publish_shopping_list_created
)


class TestEventBus(unittest.TestCase):

    def test_publish_reaches_subscribers(self):
        bus = EventBus()
        received = []
        bus.subscribe(SHOPPING_LIST_CREATED, lambda name, payload: received.append((name, payload)))
        bus.publish(SHOPPING_LIST_CREATED, {"x": 1})
        self.assertEqual(received, [(SHOPPING_LIST_CREATED, {"x": 1})])

    def test_failing_subscriber_does_not_block_others(self):
        bus = EventBus()
        received = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe("evt", broken)
        bus.subscribe("evt", lambda name, payload: received.append(payload))
        with self.assertLogs("mealcart.events.Event_Bus", level="ERROR"):
            bus.publish("evt", 42)
        self.assertEqual(received, [42])

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        callback = lambda name, payload: received.append(payload)
        bus.subscribe("evt", callback)
        bus.unsubscribe("evt", callback)
        bus.unsubscribe("evt", callback)
        bus.publish("evt", 1)
        self.assertEqual(received, [])


class TestWebObservers(unittest.TestCase):

    def setUp(self):
        web_observers.start()
        self.cursor = web_observers.get_events()["next_cursor"]

    def test_shopping_events_are_recorded(self):
        shopping_list = ShoppingList(name="Weekly", id="list-1",
                                     items=[ShoppingListItem("rice", 1, "package", "Pantry", 2.49, id="i1")])
        publish_shopping_list_created(shopping_list)
        item = shopping_list.toggle_item("i1", True)
        publish_item_toggled("list-1", item, shopping_list.progress())
        publish_meal_plan_saved(MealPlan(name="Week", id="plan-1"), "manual")

        result = web_observers.get_events(since=self.cursor)
        events = result["events"]
        self.assertEqual([e["type"] for e in events],
                         ["shopping_list.created", "shopping_list.item_toggled", "meal_plan.saved"])
        self.assertEqual(events[0]["total"], 2.49)
        self.assertEqual(events[1]["percentage"], 100)
        self.assertTrue(events[1]["is_purchased"])
        self.assertEqual(events[2]["source"], "manual")
        self.assertEqual(result["next_cursor"], events[-1]["id"])

    def test_start_is_idempotent(self):
        web_observers.start()
        publish_meal_plan_saved(MealPlan(name="Once", id="p"), "manual")
        self.assertEqual(len(web_observers.get_events(since=self.cursor)["events"]), 1)
