"""Adapter Design Pattern.

Intent: Provides a unified interface that allows objects with incompatible
interfaces to collaborate.

A UK socket only accepts something that behaves like a UK plug, and an EU
socket only something that behaves like an EU plug. One-way adapters wrap a
plug of one kind and present it as the other; the two-way adapter wraps one
of each and answers to both interfaces.
"""
from abc import ABC, abstractmethod
from typing import Optional

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class UKPlugInterface(ABC):
    """Capability of fitting a UK socket."""

    @abstractmethod
    def get_uk_plug(self) -> None:
        """Plug into a UK socket."""


class EUPlugInterface(ABC):
    """Capability of fitting an EU socket."""

    @abstractmethod
    def get_eu_plug(self) -> None:
        """Plug into an EU socket."""


class UKPlug(UKPlugInterface):
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = resolve_output(output)

    def get_uk_plug(self) -> None:
        self.output.write("🔌I am a UK plug🔌")


class EUPlug(EUPlugInterface):
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = resolve_output(output)

    def get_eu_plug(self) -> None:
        self.output.write("🔌I am an EU plug🔌")


class UKEUOneWayPlugAdapter(EUPlugInterface):
    """Presents a wrapped EU plug to EU sockets from the UK side."""

    def __init__(self, adaptee: EUPlugInterface, output: Optional[OutputPort] = None):
        self.adaptee = adaptee
        self.output = resolve_output(output)

    def get_eu_plug(self) -> None:
        self.output.write("I am in UKEUOneWayPlugAdapter concrete implementation")
        logger.debug("Delegating to adaptee", adapter=type(self).__name__, adaptee=type(self.adaptee).__name__)
        self.adaptee.get_eu_plug()


class EUUKOneWayPlugAdapter(UKPlugInterface):
    """Presents a wrapped UK plug to UK sockets from the EU side."""

    def __init__(self, adaptee: UKPlugInterface, output: Optional[OutputPort] = None):
        self.adaptee = adaptee
        self.output = resolve_output(output)

    def get_uk_plug(self) -> None:
        self.output.write("I am in EUUKOneWayPlugAdapter concrete implementation")
        logger.debug("Delegating to adaptee", adapter=type(self).__name__, adaptee=type(self.adaptee).__name__)
        self.adaptee.get_uk_plug()


class UKEUTwoWayPlugAdapter(UKPlugInterface, EUPlugInterface):
    """Answers to both plug interfaces, routing each call to the matching adaptee."""

    def __init__(
        self,
        uk_adaptee: UKPlugInterface,
        eu_adaptee: EUPlugInterface,
        output: Optional[OutputPort] = None,
    ):
        self.uk_adaptee = uk_adaptee
        self.eu_adaptee = eu_adaptee
        self.output = resolve_output(output)

    def get_uk_plug(self) -> None:
        self.output.write("I am in UK concrete implementation of UKEUTwoWayPlugAdapter")
        self.uk_adaptee.get_uk_plug()

    def get_eu_plug(self) -> None:
        self.output.write("I am in EU concrete implementation of UKEUTwoWayPlugAdapter")
        self.eu_adaptee.get_eu_plug()
