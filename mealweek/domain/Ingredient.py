"""Ingredient domain entity: name, numeric quantity, unit."""
from fractions import Fraction


DEFAULT_QUANTITY = 1.0


def parse_quantity(value) -> float:
    """Normalize a stored quantity into a float.

    Older recipes keep quantities as strings ("2", "1.5", "1/2", "1 1/2").
    Anything that cannot be read as a number (e.g. "to taste") becomes 1.0.
    """
    if isinstance(value, bool):
        return DEFAULT_QUANTITY
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return DEFAULT_QUANTITY
    text = value.strip()
    if not text:
        return DEFAULT_QUANTITY
    try:
        return float(text)
    except ValueError:
        pass
    try:
        # mixed numbers: "1 1/2"
        return float(sum(Fraction(part) for part in text.split()))
    except (ValueError, ZeroDivisionError):
        return DEFAULT_QUANTITY


class Ingredient:
    def __init__(self, name: str = "", quantity: float = DEFAULT_QUANTITY, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity:g} {self.unit}".rstrip()

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a stored dict, normalizing legacy quantities. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=str(d.get("name") or "").strip(),
            quantity=parse_quantity(d.get("quantity")),
            unit=str(d.get("unit") or ""),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
