"""Fruit entities: a shared base and three concrete kinds."""

from abc import ABC, abstractmethod

from . import ripeness as policy
from .notices import LoggingNotices, NoticeSink


class Edible(ABC):
    """Something that can be eaten once it is ripe."""

    @abstractmethod
    def consume(self) -> None:
        ...

    @property
    @abstractmethod
    def is_ripe(self) -> bool:
        ...


class Processable(ABC):
    """Something that can be turned into other products."""

    @abstractmethod
    def process(self) -> str:
        ...


class Fruit(Edible):
    """Base fruit record with a one-way ripe flag.

    Subclasses supply ``taste`` and ``seed_count``. Every notice (ripening,
    eating) goes to the injected sink, or to the ``orchard`` logger when none
    is given.
    """

    def __init__(
        self,
        name: str,
        color: str,
        weight: float,
        origin: str,
        notices: NoticeSink | None = None,
    ):
        self._name = name
        self._color = color
        self._weight = weight
        self._origin = origin
        self._ripe = False
        self.notices = notices if notices is not None else LoggingNotices()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._color = value

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        # Not validated; callers are trusted
        self._weight = value

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def is_ripe(self) -> bool:
        return self._ripe

    def ripen(self) -> None:
        """Mark the fruit ripe. Once ripe it stays ripe."""
        self._ripe = True
        self.notices.record(f"{self.name} is now ripe!")

    def consume(self) -> None:
        """Eat the fruit, or complain that it is not ready yet."""
        if self.is_ripe:
            self.notices.record(f"Eating delicious {self.name}! It tastes {self.taste}")
        else:
            self.notices.record(f"{self.name} is not ripe yet. It might be sour.")

    @property
    @abstractmethod
    def taste(self) -> str:
        ...

    @property
    @abstractmethod
    def seed_count(self) -> int:
        ...

    def __str__(self) -> str:
        state = "ripe" if self.is_ripe else "not ripe"
        return f"{self.name}: {self.color}, {self.weight:.1f}g, from {self.origin}, {state}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class Apple(Fruit, Processable):
    """Apple whose taste depends on its variety."""

    SEED_COUNT = 5

    def __init__(
        self,
        variety: str,
        color: str,
        weight: float,
        origin: str,
        notices: NoticeSink | None = None,
    ):
        super().__init__("Apple", color, weight, origin, notices)
        self._variety = variety

    @property
    def variety(self) -> str:
        return self._variety

    @property
    def taste(self) -> str:
        return "tart and crisp" if "granny" in self.variety.lower() else "sweet and crisp"

    @property
    def seed_count(self) -> int:
        return self.SEED_COUNT

    def process(self) -> str:
        return "Apple juice, apple pie, or apple sauce"

    def __str__(self) -> str:
        return f"{self.variety} {super().__str__()}"


class Orange(Fruit, Processable):
    """Orange that may or may not have seeds, and needs peeling."""

    def __init__(
        self,
        color: str,
        weight: float,
        origin: str,
        has_seeds: bool,
        notices: NoticeSink | None = None,
    ):
        super().__init__("Orange", color, weight, origin, notices)
        self._has_seeds = has_seeds

    @property
    def has_seeds(self) -> bool:
        return self._has_seeds

    @property
    def taste(self) -> str:
        return "citrusy and sweet"

    @property
    def seed_count(self) -> int:
        return 10 if self.has_seeds else 0

    def process(self) -> str:
        return "Orange juice or marmalade"

    def consume(self) -> None:
        super().consume()
        if self.is_ripe:
            self.notices.record("Don't forget to peel the orange first!")


class Banana(Fruit):
    """Banana that ripens through a counter instead of a flag.

    The counter starts at 1 and only ever goes up. Ripe means the counter is in
    the 3-5 band; past that the banana is overripe and no longer ripe. Bananas
    cannot be processed.
    """

    def __init__(self, weight: float, origin: str, notices: NoticeSink | None = None):
        super().__init__("Banana", policy.INITIAL_COLOR, weight, origin, notices)
        self._ripeness = policy.INITIAL_RIPENESS

    @property
    def ripeness(self) -> int:
        return self._ripeness

    @property
    def band(self) -> policy.RipenessBand:
        return policy.band_for(self._ripeness)

    def age_one_day(self) -> None:
        """Advance the ripeness counter by one day."""
        before = self._ripeness
        self._ripeness += 1

        if policy.crossed_into(before, self._ripeness, policy.RipenessBand.RIPE):
            self.color = policy.RIPE_COLOR
            super().ripen()
        if policy.crossed_into(before, self._ripeness, policy.RipenessBand.OVERRIPE):
            self.color = policy.OVERRIPE_COLOR
            self.notices.record(f"{self.name} is overripe!")

    def ripen(self) -> None:
        """Force the banana to the start of the ripe band.

        Does nothing to the counter if it is already ripe or overripe, but the
        ripen notice is recorded on every call.
        """
        if self._ripeness < policy.RIPE_THRESHOLD:
            self._ripeness = policy.RIPE_THRESHOLD
            self.color = policy.RIPE_COLOR
        super().ripen()

    @property
    def is_ripe(self) -> bool:
        return policy.is_ripe(self._ripeness)

    @property
    def taste(self) -> str:
        return policy.taste_for(self._ripeness)

    @property
    def seed_count(self) -> int:
        return 0


FRUIT_KINDS = ("apple", "orange", "banana")


def make_fruit(
    kind: str,
    *,
    weight: float,
    origin: str,
    color: str | None = None,
    variety: str | None = None,
    has_seeds: bool = False,
    notices: NoticeSink | None = None,
) -> Fruit:
    """Build a fruit from a kind name and loose fields.

    Args:
        kind: One of 'apple', 'orange' or 'banana' (case-insensitive)
        weight: Weight in grams
        origin: Where the fruit comes from
        color: Skin color; ignored for bananas, which always start yellow
        variety: Apple variety
        has_seeds: Whether an orange has seeds
        notices: Sink for the fruit's notices

    Returns:
        The new fruit

    Raises:
        ValueError: If the kind is not known
    """
    kind = kind.lower()
    if kind == "apple":
        return Apple(variety or "Unknown", color or "red", weight, origin, notices)
    if kind == "orange":
        return Orange(color or "orange", weight, origin, has_seeds, notices)
    if kind == "banana":
        return Banana(weight, origin, notices)
    raise ValueError(f"Unknown fruit kind: {kind}")
