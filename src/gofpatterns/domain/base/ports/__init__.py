"""Domain ports - interfaces the demos depend on."""

from .output_port import OutputPort

__all__ = ["OutputPort"]
