"""Builder Design Pattern.

Intent: Lets you construct complex objects step by step. The pattern allows
you to produce different types and representations of an object using the
same construction code.

Restaurants are the builders, burgers the products and the fast food worker
the director that knows a couple of fixed recipes.
"""
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Burger(BaseModel):
    """A burger as an ordered list of ingredient labels."""

    brand: ClassVar[str] = "Generic"

    ingredients: List[str] = Field(default_factory=list)

    def describe(self) -> str:
        return f"{self.brand} burger ingredients: {', '.join(self.ingredients)}"

    def list_parts(self, output: Optional[OutputPort] = None) -> None:
        """Write the ingredient list followed by a blank line."""
        output = resolve_output(output)
        output.write(self.describe())
        output.write("")


class McDonaldsBurger(Burger):
    brand: ClassVar[str] = "McDonalds"


class KFCBurger(Burger):
    brand: ClassVar[str] = "KFC"


B = TypeVar("B", bound=Burger)


class BurgerBuilder(ABC):
    """Steps every restaurant knows how to perform."""

    @abstractmethod
    def add_bun(self) -> None:
        """Add a bun."""

    @abstractmethod
    def add_burger(self) -> None:
        """Add the patty."""

    @abstractmethod
    def add_cheese(self) -> None:
        """Add cheese."""


class _Restaurant(BurgerBuilder, Generic[B]):
    """
    Builder accumulating ingredient labels into one product.

    Subclasses choose the product type and the label prefix. get_burger()
    hands over the product built so far and starts a new one, so the same
    restaurant can build any number of burgers.
    """

    burger_class: Type[B]
    label: str

    def __init__(self, burger: Optional[B] = None):
        self.burger: B = burger if burger is not None else self.burger_class()

    def reset(self) -> None:
        self.burger = self.burger_class()

    def _add(self, ingredient: str) -> None:
        self.burger.ingredients.append(f"{self.label} {ingredient}")
        logger.debug("Added ingredient", restaurant=type(self).__name__, ingredient=ingredient)

    def add_bun(self) -> None:
        self._add("Bun added🥖")

    def add_burger(self) -> None:
        self._add("burger added🥩")

    def add_cheese(self) -> None:
        self._add("cheese added🧀")

    def get_burger(self) -> B:
        result = self.burger
        self.reset()
        return result


class McDonaldsRestaurant(_Restaurant[McDonaldsBurger]):
    burger_class = McDonaldsBurger
    label = "Mcdonalds"


class KFCRestaurant(_Restaurant[KFCBurger]):
    burger_class = KFCBurger
    label = "KFC"


class FastFoodWorker:
    """Director: runs fixed recipes against whichever restaurant it works at."""

    def __init__(self, fast_food_restaurant: BurgerBuilder):
        self.fast_food_restaurant = fast_food_restaurant

    def change_restaurant(self, fast_food_restaurant: BurgerBuilder) -> None:
        self.fast_food_restaurant = fast_food_restaurant

    def build_minimal_burger(self) -> None:
        self.fast_food_restaurant.add_bun()

    def build_full_burger(self) -> None:
        self.fast_food_restaurant.add_bun()
        self.fast_food_restaurant.add_burger()
        self.fast_food_restaurant.add_cheese()
