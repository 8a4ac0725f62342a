"""FastAPI web application for Orchard."""

import threading
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from orchard.basket import FruitBasket
from orchard.fruits import Banana, Fruit, Processable, make_fruit
from orchard.notices import NoticeLog

app = FastAPI(
    title="Orchard",
    description="Keep baskets of fruit and watch them ripen",
    version="0.1.0",
)


class CreateBasketRequest(BaseModel):
    """Request model for creating a basket."""
    owner: str


class AddFruitRequest(BaseModel):
    """Request model for adding a fruit to a basket."""
    kind: str
    weight: float
    origin: str
    color: Optional[str] = None
    variety: Optional[str] = None
    has_seeds: bool = False


class FruitView(BaseModel):
    """Response model for one fruit."""
    index: int
    kind: str
    name: str
    color: str
    weight: float
    origin: str
    ripe: bool
    taste: str
    seed_count: int
    process: Optional[str] = None
    ripeness: Optional[int] = None
    description: str


class BasketView(BaseModel):
    """Response model for a basket and the notices the last call produced."""
    owner: str
    fruits: list[FruitView]
    notices: list[str]


@dataclass
class BasketEntry:
    """A basket with its notice log and the lock that guards both."""

    basket: FruitBasket
    log: NoticeLog
    lock: threading.Lock = field(default_factory=threading.Lock)


class BasketRegistry:
    """In-memory baskets keyed by owner."""

    def __init__(self):
        self._entries: dict[str, BasketEntry] = {}
        self._lock = threading.Lock()

    def create(self, owner: str) -> BasketEntry | None:
        """Create a basket, or return None if the owner already has one."""
        with self._lock:
            if owner in self._entries:
                return None
            log = NoticeLog()
            entry = BasketEntry(basket=FruitBasket(owner, log), log=log)
            self._entries[owner] = entry
            return entry

    def get(self, owner: str) -> BasketEntry | None:
        with self._lock:
            return self._entries.get(owner)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


registry = BasketRegistry()


@app.post("/api/baskets", response_model=BasketView, status_code=201)
def create_basket(request: CreateBasketRequest):
    """Create an empty basket for an owner."""
    owner = request.owner.strip()
    if not owner:
        raise HTTPException(status_code=400, detail="Owner is required")

    entry = registry.create(owner)
    if entry is None:
        raise HTTPException(status_code=409, detail=f"Basket for {owner} already exists")

    with entry.lock:
        return _basket_view(entry)


@app.get("/api/baskets/{owner}", response_model=BasketView)
def get_basket(owner: str):
    """Show a basket and its fruit."""
    entry = _require_basket(owner)
    with entry.lock:
        return _basket_view(entry)


@app.post("/api/baskets/{owner}/fruits", response_model=BasketView, status_code=201)
def add_fruit(owner: str, request: AddFruitRequest):
    """Add a new fruit to a basket."""
    entry = _require_basket(owner)
    try:
        with entry.lock:
            fruit = make_fruit(
                request.kind,
                weight=request.weight,
                origin=request.origin,
                color=request.color,
                variety=request.variety,
                has_seeds=request.has_seeds,
                notices=entry.log,
            )
            entry.basket.add(fruit)
            return _basket_view(entry)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error adding fruit: {str(e)}")


@app.delete("/api/baskets/{owner}/fruits/{index}", response_model=BasketView)
def remove_fruit(owner: str, index: int):
    """Remove the fruit at a position in the basket."""
    entry = _require_basket(owner)
    with entry.lock:
        fruit = _require_fruit(entry, index)
        entry.basket.remove(fruit)
        return _basket_view(entry)


@app.post("/api/baskets/{owner}/fruits/{index}/age", response_model=BasketView)
def age_fruit(owner: str, index: int, days: int = 1):
    """Age a banana by one or more days."""
    entry = _require_basket(owner)
    if days < 1:
        raise HTTPException(status_code=400, detail="Days must be at least 1")

    with entry.lock:
        fruit = _require_fruit(entry, index)
        if not isinstance(fruit, Banana):
            raise HTTPException(status_code=400, detail=f"{fruit.name} does not age day by day")
        for _ in range(days):
            fruit.age_one_day()
        return _basket_view(entry)


@app.post("/api/baskets/{owner}/ripen", response_model=BasketView)
def ripen_basket(owner: str):
    """Ripen every fruit in a basket that is not ripe yet."""
    entry = _require_basket(owner)
    with entry.lock:
        entry.basket.ripen_all()
        return _basket_view(entry)


@app.post("/api/baskets/{owner}/eat", response_model=BasketView)
def eat_basket(owner: str):
    """Eat every ripe fruit in a basket."""
    entry = _require_basket(owner)
    with entry.lock:
        entry.basket.consume_all_ripe()
        return _basket_view(entry)


def _require_basket(owner: str) -> BasketEntry:
    entry = registry.get(owner)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"No basket for {owner}")
    return entry


def _require_fruit(entry: BasketEntry, index: int) -> Fruit:
    fruits = entry.basket.snapshot()
    if not 0 <= index < len(fruits):
        raise HTTPException(status_code=404, detail=f"No fruit at position {index}")
    return fruits[index]


def _fruit_view(index: int, fruit: Fruit) -> FruitView:
    """Convert a fruit into its response model."""
    return FruitView(
        index=index,
        kind=type(fruit).__name__.lower(),
        name=fruit.name,
        color=fruit.color,
        weight=fruit.weight,
        origin=fruit.origin,
        ripe=fruit.is_ripe,
        taste=fruit.taste,
        seed_count=fruit.seed_count,
        process=fruit.process() if isinstance(fruit, Processable) else None,
        ripeness=fruit.ripeness if isinstance(fruit, Banana) else None,
        description=str(fruit),
    )


def _basket_view(entry: BasketEntry) -> BasketView:
    """Build the response for a basket, draining its pending notices."""
    return BasketView(
        owner=entry.basket.owner,
        fruits=[_fruit_view(i, fruit) for i, fruit in enumerate(entry.basket.snapshot())],
        notices=entry.log.drain(),
    )
