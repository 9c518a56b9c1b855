import unittest

from mealweek.domain.Errors import EmptyPoolError, InvalidSlotError, ItemNotFoundError
from mealweek.domain.MealPlan import MealPlan
from mealweek.logic.planning.meal_plan import generate_meal_plan, reroll_meal_plan, toggle_shopping_item
from mealweek.logic.planning.randomness import SystemRandomSource
from mealweek.tests.fakes import SequenceRandomSource, make_recipe


class TestGenerateMealPlan(unittest.TestCase):
    def setUp(self):
        self.pool = [
            make_recipe("1", [("Pasta", "g"), ("Tomato", "")]),
            make_recipe("2", [("Rice", "cup"), ("Tomato", "")]),
            make_recipe("3", [("Chicken", "lb")]),
        ]

    def test_draws_seven_with_replacement(self):
        rs = SequenceRandomSource([0, 1, 2, 0, 0, 1, 2])
        plan = generate_meal_plan(self.pool, rs)
        self.assertEqual(len(plan.recipes), 7)
        self.assertEqual([r.id for r in plan.recipes], ["1", "2", "3", "1", "1", "2", "3"])
        self.assertEqual(rs.calls, [3] * 7)

    def test_fresh_plan_has_nothing_acquired(self):
        plan = generate_meal_plan(self.pool, SequenceRandomSource([0, 1]))
        items = {i.name: int(i.quantity) for i in plan.shopping_list}
        self.assertEqual(items, {"pasta": 4, "tomato": 7, "rice": 3})
        self.assertFalse(any(i.acquired for i in plan.shopping_list))

    def test_single_recipe_pool_fills_all_days(self):
        plan = generate_meal_plan(self.pool[:1], SystemRandomSource(seed=7))
        self.assertEqual({r.id for r in plan.recipes}, {"1"})

    def test_empty_pool(self):
        with self.assertRaises(EmptyPoolError):
            generate_meal_plan([], SequenceRandomSource([0]))

    def test_meal_plan_requires_seven_recipes(self):
        with self.assertRaises(ValueError):
            MealPlan(self.pool)


class TestRerollMealPlan(unittest.TestCase):
    def setUp(self):
        self.a = make_recipe("a", [("Egg", "pc"), ("Milk", "ml")])
        self.b = make_recipe("b", [("Flour", "g"), ("Milk", "ml")])
        self.c = make_recipe("c", [("Beef", "lb")])
        self.pool = [self.a, self.b, self.c]
        self.plan = generate_meal_plan(self.pool, SequenceRandomSource([0, 0, 0, 0, 0, 0, 1]))

    def test_only_the_chosen_slot_changes(self):
        updated = reroll_meal_plan(self.plan, 3, self.pool, SequenceRandomSource([1]))
        self.assertEqual(len(updated.recipes), 7)
        self.assertEqual(updated.recipes[3].id, "c")
        for i in range(7):
            if i != 3:
                self.assertIs(updated.recipes[i], self.plan.recipes[i])

    def test_replacement_never_repeats_the_excluded_recipe(self):
        for index in range(5):
            updated = reroll_meal_plan(self.plan, 0, self.pool, SequenceRandomSource([index]))
            self.assertNotEqual(updated.recipes[0].id, "a")

    def test_acquired_flags_survive_for_remaining_ingredients(self):
        self.plan = toggle_shopping_item(self.plan, "milk", True)
        self.plan = toggle_shopping_item(self.plan, "egg", True)
        self.plan = toggle_shopping_item(self.plan, "flour", True)
        # slot 6 holds b (flour); candidates without b are [a, c], index 1 -> c
        updated = reroll_meal_plan(self.plan, 6, self.pool, SequenceRandomSource([1]))
        items = {i.name: i for i in updated.shopping_list}
        self.assertTrue(items["milk"].acquired)
        self.assertTrue(items["egg"].acquired)
        self.assertNotIn("flour", items)
        self.assertFalse(items["beef"].acquired)

    def test_single_recipe_pool_falls_back_and_keeps_plan(self):
        pool = [self.a]
        plan = generate_meal_plan(pool, SequenceRandomSource([0]))
        updated = reroll_meal_plan(plan, 3, pool, SequenceRandomSource([0]))
        self.assertEqual(updated.to_dict(), plan.to_dict())

    def test_invalid_slots(self):
        for slot in (-1, 7, 10, 2.5, "3", True, None):
            with self.assertRaises(InvalidSlotError, msg=repr(slot)):
                reroll_meal_plan(self.plan, slot, self.pool, SequenceRandomSource([0]))

    def test_empty_pool(self):
        with self.assertRaises(EmptyPoolError):
            reroll_meal_plan(self.plan, 0, [], SequenceRandomSource([0]))

    def test_input_plan_left_untouched(self):
        before = self.plan.to_dict()
        reroll_meal_plan(self.plan, 2, self.pool, SequenceRandomSource([1]))
        self.assertEqual(self.plan.to_dict(), before)


class TestToggleShoppingItem(unittest.TestCase):
    def setUp(self):
        pool = [make_recipe("a", [("Egg", "pc"), ("Milk", "ml")])]
        self.plan = generate_meal_plan(pool, SequenceRandomSource([0]))

    def test_sets_flag_without_reaggregating(self):
        updated = toggle_shopping_item(self.plan, "egg", True)
        items = {i.name: i for i in updated.shopping_list}
        self.assertTrue(items["egg"].acquired)
        self.assertFalse(items["milk"].acquired)
        self.assertEqual(int(items["egg"].quantity), 7)

    def test_idempotent(self):
        once = toggle_shopping_item(self.plan, "egg", True)
        twice = toggle_shopping_item(once, "egg", True)
        self.assertEqual(once.to_dict(), twice.to_dict())

    def test_match_is_case_sensitive(self):
        with self.assertRaises(ItemNotFoundError):
            toggle_shopping_item(self.plan, "Egg", True)

    def test_unknown_item(self):
        with self.assertRaises(ItemNotFoundError):
            toggle_shopping_item(self.plan, "nonexistent-item", True)
