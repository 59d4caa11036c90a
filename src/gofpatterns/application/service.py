"""Demo application service - lists and runs the registered demos."""
from typing import List, Optional, Tuple

from gofpatterns.application import demos as _demos  # noqa: F401  registers the demos
from gofpatterns.application.decorators import DemoFunction, get_demo_names, get_registered_demos
from gofpatterns.application.dto import DemoInfo, DemoResult, PatternCategory
from gofpatterns.config.schemas.demo_schema import DemoConfig
from gofpatterns.domain.base.output import RecordingOutput
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.domain.core.exceptions import DemoNotFoundError
from gofpatterns.infrastructure.logging.logger import get_logger


class DemoService:
    """Application service for the pattern demos."""

    def __init__(self, config: Optional[DemoConfig] = None):
        """
        Initialize the service.

        Args:
            config: Demo inputs; read from the process-wide configuration when omitted
        """
        if config is None:
            from gofpatterns.config.manager import get_config_manager

            config = get_config_manager().get_config().demos
        self.config = config
        self.logger = get_logger(__name__)

    def list_demos(self, category: Optional[PatternCategory] = None) -> List[DemoInfo]:
        """Registered demos sorted by name, optionally filtered by category."""
        registry = get_registered_demos()
        return [registry[name][0] for name in get_demo_names(category)]

    def get_demo(self, name: str) -> DemoInfo:
        """
        Get a demo's metadata.

        Raises:
            DemoNotFoundError: If no demo has that name
        """
        return self._lookup(name)[0]

    def run(self, name: str, output: Optional[OutputPort] = None) -> DemoResult:
        """
        Run one demo.

        Lines are always captured in the returned result. When an output
        port is given they are also forwarded to it as they are written.

        Raises:
            DemoNotFoundError: If no demo has that name
        """
        info, func = self._lookup(name)
        recorder = _TeeOutput(output)

        self.logger.info("Running demo", demo=name, category=info.category.value)
        func(recorder, self.config)
        self.logger.debug("Demo finished", demo=name, lines=len(recorder.lines))

        return DemoResult(name=info.name, category=info.category, lines=recorder.lines)

    def run_all(
        self,
        category: Optional[PatternCategory] = None,
        output: Optional[OutputPort] = None,
    ) -> List[DemoResult]:
        """Run every registered demo in name order."""
        return [self.run(info.name, output) for info in self.list_demos(category)]

    def _lookup(self, name: str) -> Tuple[DemoInfo, DemoFunction]:
        registry = get_registered_demos()
        entry = registry.get(name)
        if entry is None:
            raise DemoNotFoundError(name, list(registry))
        return entry


class _TeeOutput(RecordingOutput):
    """Records lines and forwards them to another port."""

    def __init__(self, forward: Optional[OutputPort] = None):
        super().__init__()
        self._forward = forward

    def write(self, line: str) -> None:
        super().write(line)
        if self._forward is not None:
            self._forward.write(line)
