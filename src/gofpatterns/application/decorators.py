"""
Demo registration decorator.

Driving scripts register themselves with ``@demo``; the DemoService looks them
up by name. Registration happens at import time of
``gofpatterns.application.demos``.

Usage:
    @demo("strategy", PatternCategory.BEHAVIOURAL, "Swap extraction algorithms")
    def run_strategy_demo(output: OutputPort, config: DemoConfig) -> None:
        ...
"""
from typing import Callable, Dict, List, Optional, Tuple

from gofpatterns.application.dto import DemoInfo, PatternCategory
from gofpatterns.config.schemas.demo_schema import DemoConfig
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.domain.core.exceptions import ValidationError

DemoFunction = Callable[[OutputPort, DemoConfig], None]

_demo_registry: Dict[str, Tuple[DemoInfo, DemoFunction]] = {}


def demo(name: str, category: PatternCategory, description: str):
    """
    Mark a function as the driving script of a pattern demo.

    The first paragraph of the function's docstring becomes the demo intent.

    Args:
        name: Unique demo name used on the command line
        category: Pattern category
        description: One-line summary

    Returns:
        Decorated function, unchanged

    Raises:
        ValidationError: If the name is already taken by another function
    """
    def decorator(func: DemoFunction) -> DemoFunction:
        existing = _demo_registry.get(name)
        if existing is not None and existing[1] is not func:
            raise ValidationError(f"Demo '{name}' is already registered", details=existing[0])

        intent = (func.__doc__ or "").strip().split("\n\n")[0]
        info = DemoInfo(
            name=name,
            category=category,
            description=description,
            intent=" ".join(intent.split()),
        )
        _demo_registry[name] = (info, func)

        func._demo_info = info
        return func

    return decorator


def get_registered_demos() -> Dict[str, Tuple[DemoInfo, DemoFunction]]:
    """Get a copy of the demo registry."""
    return dict(_demo_registry)


def get_demo_names(category: Optional[PatternCategory] = None) -> List[str]:
    """Registered demo names, sorted, optionally filtered by category."""
    return sorted(
        name
        for name, (info, _) in _demo_registry.items()
        if category is None or info.category == category
    )
