"""Shopping list entries produced from a meal plan."""


class OccurrenceCount(int):
    """How many times an ingredient shows up across the plan's recipes.

    This is a tally of recipe references, not an amount: 2 cups of flour on
    Monday and 200 g of flour on Friday count as 2.
    """

    def increment(self) -> "OccurrenceCount":
        return OccurrenceCount(self + 1)

    def __repr__(self) -> str:
        return f"OccurrenceCount({int(self)})"


class ShoppingListItem:
    def __init__(self, name: str, quantity: OccurrenceCount = OccurrenceCount(1),
                 unit: str = "", acquired: bool = False):
        self.name = name
        self.quantity = OccurrenceCount(quantity)
        self.unit = unit
        self.acquired = acquired

    def __str__(self) -> str:
        mark = "x" if self.acquired else " "
        return f"[{mark}] {self.name} x{int(self.quantity)} {self.unit}".rstrip()

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShoppingListItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy(self) -> "ShoppingListItem":
        return ShoppingListItem(self.name, self.quantity, self.unit, self.acquired)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        try:
            count = OccurrenceCount(int(d.get("quantity", 1)))
        except (TypeError, ValueError):
            count = OccurrenceCount(1)
        return ShoppingListItem(
            name=str(d.get("name", "")),
            quantity=count,
            unit=str(d.get("unit") or ""),
            acquired=bool(d.get("acquired", False)),
        )

    def to_dict(self):
        # 'quantity' on the wire, an OccurrenceCount in code
        return {
            "name": self.name,
            "quantity": int(self.quantity),
            "unit": self.unit,
            "acquired": self.acquired,
        }
