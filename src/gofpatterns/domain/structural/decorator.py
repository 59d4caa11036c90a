"""Decorator Design Pattern.

Intent: Lets you attach new behaviors to objects by placing these objects
inside special wrapper objects that contain the behaviors.

Every decorator holds the Clothes it wraps. Putting on a decorated outfit
first puts on whatever is underneath, then the decorator's own garment, so
wrappers can be stacked in any order.
"""
from abc import ABC, abstractmethod
from typing import Optional

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort


class Clothes(ABC):
    @abstractmethod
    def put_on(self) -> None:
        """Get dressed in this outfit."""


class Human(Clothes):
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = resolve_output(output)

    def put_on(self) -> None:
        self.output.write("I am naked 👀 Woohoo!")


class ClothesDecorator(Clothes):
    """Wraps an outfit and adds one garment on top of it."""

    garment: str = ""

    def __init__(self, clothes: Clothes, output: Optional[OutputPort] = None):
        self.clothes = clothes
        # Share the wrapped outfit's sink unless told otherwise
        self.output = resolve_output(output if output is not None else getattr(clothes, "output", None))

    def put_on(self) -> None:
        self.clothes.put_on()
        if self.garment:
            self.output.write(f"Putting {self.garment} on")


class ShortsDecorator(ClothesDecorator):
    garment = "shorts"


class TrousersDecorator(ClothesDecorator):
    garment = "trousers"


class ShirtDecorator(ClothesDecorator):
    garment = "shirt"


class SocksDecorator(ClothesDecorator):
    garment = "socks"
