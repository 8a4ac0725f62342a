"""Fruit basket: an owned, ordered collection of fruit."""

from .fruits import Fruit, Processable
from .notices import LoggingNotices, NoticeSink


class FruitBasket:
    """Ordered collection of fruit belonging to one owner.

    Fruit are matched by identity, so the same object may sit in the basket
    more than once. The basket has no locking of its own.
    """

    def __init__(self, owner: str, notices: NoticeSink | None = None):
        self._owner = owner
        self._fruits: list[Fruit] = []
        self.notices = notices if notices is not None else LoggingNotices()

    @property
    def owner(self) -> str:
        return self._owner

    def add(self, fruit: Fruit) -> None:
        self._fruits.append(fruit)
        self.notices.record(f"Added {fruit.name} to {self.owner}'s basket")

    def remove(self, fruit: Fruit) -> bool:
        """Remove the first reference to a fruit.

        Args:
            fruit: Fruit to remove

        Returns:
            True if it was in the basket, False otherwise
        """
        for index, held in enumerate(self._fruits):
            if held is fruit:
                del self._fruits[index]
                self.notices.record(f"Removed {fruit.name} from basket")
                return True
        return False

    def remove_all(self, fruit: Fruit) -> int:
        """Remove every reference to a fruit and return how many were dropped."""
        removed = 0
        while self.remove(fruit):
            removed += 1
        return removed

    def ripen_all(self) -> None:
        """Ripen every fruit that is not ripe yet, in insertion order."""
        self.notices.record("Ripening all fruits in the basket...")
        for fruit in self._fruits:
            if not fruit.is_ripe:
                fruit.ripen()

    def consume_all_ripe(self) -> None:
        """Eat every ripe fruit, in insertion order."""
        self.notices.record("Eating all ripe fruits...")
        for fruit in self._fruits:
            if fruit.is_ripe:
                fruit.consume()

    def snapshot(self) -> list[Fruit]:
        """Return a shallow copy of the fruit list."""
        return list(self._fruits)

    def processing_options(self) -> list[tuple[Fruit, str]]:
        """Pair every processable fruit with what it can be made into."""
        return [
            (fruit, fruit.process())
            for fruit in self._fruits
            if isinstance(fruit, Processable)
        ]

    def describe(self) -> list[str]:
        """Render the basket as display lines."""
        lines = [f"{self.owner}'s Fruit Basket:", "=" * 24]
        lines.extend(f"- {fruit}" for fruit in self._fruits)
        return lines

    def __len__(self) -> int:
        return len(self._fruits)
