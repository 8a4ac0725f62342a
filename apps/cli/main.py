"""CLI application for Orchard."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from orchard.basket import FruitBasket
from orchard.fruits import Apple, Banana, Fruit, Orange
from orchard.notices import LoggingNotices, NoticeSink

console = Console()


class ConsoleNotices:
    """Notice sink that prints straight to the rich console."""

    def __init__(self, out: Console):
        self.out = out

    def record(self, message: str) -> None:
        self.out.print(message)


def configure_logging(verbose: bool) -> NoticeSink:
    """Pick the notice sink for this run.

    With --verbose, notices go through the logging module with a rich handler
    so each one carries a timestamp and level. Otherwise they are printed as
    plain narration.
    """
    if not verbose:
        return ConsoleNotices(console)

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    return LoggingNotices()


def format_fruit_facts(fruit: Fruit) -> str:
    """One line with the seed count and taste of a fruit."""
    return f"{fruit.name} has {fruit.seed_count} seeds and tastes {fruit.taste}"


def format_banana_day(day: int, banana: Banana) -> str:
    return f"Day {day}: ripeness {banana.ripeness}, color {banana.color}, tastes {banana.taste}"


def print_basket(basket: FruitBasket) -> None:
    console.print()
    for line in basket.describe():
        console.print(line, highlight=False)


app = typer.Typer(
    name="orchard",
    help="Orchard - fruit, baskets and bananas that ripen day by day",
    add_completion=False,
)


@app.command()
def demo(
    owner: str = typer.Option("Alice", "--owner", help="Who owns the basket"),
    days: int = typer.Option(4, "--days", "-d", min=0, help="Days to age the banana"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log notices with timestamps"),
) -> None:
    """Walk through a basket of apples, oranges and a banana."""

    try:
        notices = configure_logging(verbose)
        console.print("=== Orchard demo ===", style="bold")

        basket = FruitBasket(owner, notices)
        granny_smith = Apple("Granny Smith", "green", 150.0, "Washington", notices)
        red_delicious = Apple("Red Delicious", "red", 180.0, "New York", notices)
        navel = Orange("orange", 200.0, "California", False, notices)
        valencia = Orange("orange", 220.0, "Florida", True, notices)
        banana = Banana(120.0, "Ecuador", notices)

        for fruit in (granny_smith, red_delicious, navel, valencia, banana):
            basket.add(fruit)
        print_basket(basket)

        console.print("\n[bold]Processing[/bold]")
        for fruit, product in basket.processing_options():
            console.print(f"{fruit.name} can be made into: {product}")

        console.print("\n[bold]Aging the banana[/bold]")
        for day in range(1, days + 1):
            banana.age_one_day()
            console.print(format_banana_day(day, banana), highlight=False)

        console.print()
        basket.ripen_all()
        print_basket(basket)
        console.print()
        basket.consume_all_ripe()

        console.print("\n[bold]Fruit details[/bold]")
        console.print(f"Apple variety: {granny_smith.variety}")
        console.print(f"Orange has seeds: {valencia.has_seeds}")
        for fruit in basket.snapshot():
            console.print(format_fruit_facts(fruit), highlight=False)

        console.print("\nDemo complete!", style="green")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)


@app.command("age-banana")
def age_banana(
    days: int = typer.Option(5, "--days", "-d", min=0, help="Days to age the banana"),
    weight: float = typer.Option(120.0, "--weight", help="Banana weight in grams"),
    origin: str = typer.Option("Ecuador", "--origin", help="Where the banana comes from"),
    force_ripen: bool = typer.Option(False, "--force-ripen", help="Force-ripen before aging"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log notices with timestamps"),
) -> None:
    """Age a single banana and report its ripeness every day."""

    try:
        notices = configure_logging(verbose)
        banana = Banana(weight, origin, notices)
        console.print(format_banana_day(0, banana), highlight=False)

        if force_ripen:
            banana.ripen()
            console.print(format_banana_day(0, banana), highlight=False)

        for day in range(1, days + 1):
            banana.age_one_day()
            console.print(format_banana_day(day, banana), highlight=False)

        console.print(f"Final state: {banana.band.value}")

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
