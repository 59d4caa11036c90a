"""Factory Method Design Pattern.

Intent: Provides an interface for creating objects in a superclass, but
allows subclasses to alter the type of objects that will be created.
"""
from abc import ABC, abstractmethod
from typing import Optional

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort


class Toy(ABC):
    """The Toy interface declares the operations that all concrete toys must implement."""

    @abstractmethod
    def operate(self) -> str:
        """Describe the toy at work."""


class Doll(Toy):
    def operate(self) -> str:
        return "{Doll is operating}"


class Car(Toy):
    def operate(self) -> str:
        return "{Car is operating}"


class ToyFactory(ABC):
    """
    Declares the factory method that returns a Toy.

    Despite its name, the factory's primary responsibility is not creating
    toys: some_operation() holds the logic that works with whatever toy the
    factory method returns. Subclasses change that logic indirectly by
    returning a different kind of toy.
    """

    @abstractmethod
    def factory_method(self) -> Toy:
        """Create the toy this factory works with."""

    def some_operation(self) -> str:
        toy = self.factory_method()
        return f"ToyFactory: The same toyFactory's code has just worked with {toy.operate()}"


class KafiToys(ToyFactory):
    def factory_method(self) -> Toy:
        return Doll()


class SimbaSmobyToys(ToyFactory):
    def factory_method(self) -> Toy:
        return Car()


def client_code(toy_factory: ToyFactory, output: Optional[OutputPort] = None) -> str:
    """
    Work with any factory through the base interface.

    Args:
        toy_factory: Any ToyFactory subclass instance
        output: Where to write the narration

    Returns:
        The result of the factory's operation
    """
    output = resolve_output(output)
    output.write("Client: I'm not aware of the toyFactory's class, but it still works.")
    result = toy_factory.some_operation()
    output.write(result)
    return result
