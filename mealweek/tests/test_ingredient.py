import unittest
from mealweek.domain.Ingredient import Ingredient, parse_quantity


class TestIngredient(unittest.TestCase):

    def test_parse_quantity_numbers_and_legacy_strings(self):
        self.assertEqual(parse_quantity(2), 2.0)
        self.assertEqual(parse_quantity(0.5), 0.5)
        self.assertEqual(parse_quantity("3"), 3.0)
        self.assertEqual(parse_quantity(" 1.5 "), 1.5)
        self.assertEqual(parse_quantity("1/2"), 0.5)
        self.assertEqual(parse_quantity("1 1/2"), 1.5)

    def test_parse_quantity_falls_back_to_one(self):
        for value in ("to taste", "", None, True, "1/0", ["2"]):
            self.assertEqual(parse_quantity(value), 1.0, value)

    def test_from_dict_normalizes_quantity_and_unit(self):
        ing = Ingredient.from_dict({"name": " Eggs ", "quantity": "4", "extra": "ignored"})
        self.assertEqual(ing.name, "Eggs")
        self.assertEqual(ing.quantity, 4.0)
        self.assertEqual(ing.unit, "")
        self.assertEqual(ing.to_dict(), {"name": "Eggs", "quantity": 4.0, "unit": ""})
