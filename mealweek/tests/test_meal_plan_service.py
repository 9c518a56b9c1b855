import unittest

from mealweek.domain.Errors import EmptyPoolError, InvalidSlotError, ItemNotFoundError, PlanConflictError, PlanNotFoundError
from mealweek.events.Event_Bus import EventBus, MEAL_PLAN_GENERATED, MEAL_PLAN_REROLLED, SHOPPING_ITEM_TOGGLED
from mealweek.infra.Store import InMemoryStore
from mealweek.logic.planning.service import MealPlanService
from mealweek.tests.fakes import SequenceRandomSource, recipe_document
from mealweek.utilities.constants import MEAL_PLAN_KEY


def _seed_store():
    return InMemoryStore({
        "recipe:1": recipe_document("1", title="Omelette", main="Egg",
                                    other=[{"name": "Egg", "quantity": 3, "unit": ""},
                                           {"name": "Cheese", "quantity": 50, "unit": "g"}]),
        "recipe:2": recipe_document("2", title="Pancakes", main="Flour",
                                    other=[{"name": "Flour", "quantity": 200, "unit": "g"},
                                           {"name": "egg", "quantity": "2", "unit": ""}]),
        "recipe:3": recipe_document("3", title="Hidden", excludeFromMealPlan=True),
    })


class TestMealPlanService(unittest.TestCase):
    def setUp(self):
        self.store = _seed_store()
        self.events = []
        bus = EventBus()
        for name in (MEAL_PLAN_GENERATED, MEAL_PLAN_REROLLED, SHOPPING_ITEM_TOGGLED):
            bus.subscribe(name, lambda event, payload: self.events.append((event, payload)))
        self.random_source = SequenceRandomSource([0])
        self.service = MealPlanService(self.store, self.random_source, bus)

    def test_generate_persists_and_publishes(self):
        plan = self.service.generate()
        self.assertEqual(plan.version, 1)
        stored = self.store.get(MEAL_PLAN_KEY)
        self.assertEqual(stored, plan.to_dict())
        self.assertEqual(len(stored["recipes"]), 7)
        self.assertNotIn("3", {r["id"] for r in stored["recipes"]})
        self.assertEqual(self.events[0][0], MEAL_PLAN_GENERATED)
        self.assertEqual(self.events[0][1]["version"], 1)

    def test_generate_overwrites_previous_plan_and_resets_flags(self):
        self.service.generate()
        self.service.toggle_item("egg", True)
        plan = self.service.generate()
        self.assertFalse(any(i.acquired for i in plan.shopping_list))
        self.assertEqual(plan.version, 3)

    def test_generate_without_recipes(self):
        service = MealPlanService(InMemoryStore(), self.random_source, EventBus())
        with self.assertRaises(EmptyPoolError):
            service.generate()
        self.assertIsNone(service.get_current())

    def test_reroll_swaps_one_slot_and_keeps_shared_flags(self):
        self.service.generate()  # all omelette
        self.service.toggle_item("egg", True)
        self.service.toggle_item("cheese", True)
        plan = self.service.reroll(4)
        self.assertEqual([r.id for r in plan.recipes], ["1", "1", "1", "1", "2", "1", "1"])
        items = {i.name: i for i in plan.shopping_list}
        self.assertTrue(items["egg"].acquired)
        self.assertEqual(int(items["egg"].quantity), 7)
        self.assertTrue(items["cheese"].acquired)
        self.assertFalse(items["flour"].acquired)
        self.assertEqual(self.events[-1][1], {"version": 4, "slot": 4, "old_recipe_id": "1", "new_recipe_id": "2"})

    def test_reroll_with_stale_version(self):
        self.service.generate()
        self.service.toggle_item("egg", True)  # version 2
        before = self.store.get(MEAL_PLAN_KEY)
        with self.assertRaises(PlanConflictError):
            self.service.reroll(0, expected_version=1)
        self.assertEqual(self.store.get(MEAL_PLAN_KEY), before)

    def test_reroll_invalid_slot_writes_nothing(self):
        self.service.generate()
        before = self.store.get(MEAL_PLAN_KEY)
        with self.assertRaises(InvalidSlotError):
            self.service.reroll(7)
        self.assertEqual(self.store.get(MEAL_PLAN_KEY), before)

    def test_operations_need_a_plan(self):
        with self.assertRaises(PlanNotFoundError):
            self.service.reroll(0)
        with self.assertRaises(PlanNotFoundError):
            self.service.toggle_item("egg", True)

    def test_toggle_unknown_item_leaves_store_unmodified(self):
        self.service.generate()
        before = self.store.get(MEAL_PLAN_KEY)
        with self.assertRaises(ItemNotFoundError):
            self.service.toggle_item("nonexistent-item", True)
        self.assertEqual(self.store.get(MEAL_PLAN_KEY), before)

    def test_toggle_returns_item_and_publishes(self):
        self.service.generate()
        item = self.service.toggle_item("cheese", True)
        self.assertEqual(item.to_dict(), {"name": "cheese", "quantity": 7, "unit": "g", "acquired": True})
        self.assertEqual(self.events[-1], (SHOPPING_ITEM_TOGGLED, {"version": 2, "name": "cheese", "acquired": True}))
