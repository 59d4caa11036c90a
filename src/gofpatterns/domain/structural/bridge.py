"""Bridge Design Pattern.

Intent: Lets you split a large class or a set of closely related classes into
two separate hierarchies - abstraction and implementation - which can be
developed independently of each other.

Here the abstraction is the remote control and the implementation is the
device it drives. Any remote works with any device through the Device
interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from gofpatterns.domain.base.output import resolve_output
from gofpatterns.domain.base.ports.output_port import OutputPort
from gofpatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

MIN_LEVEL = 0
MAX_LEVEL = 100


class RemoteInterface(ABC):
    """Controls a device."""

    @abstractmethod
    def toggle_power(self) -> None:
        """Switch the device off if it is on, on if it is off."""

    @abstractmethod
    def volume_down(self) -> None:
        """Lower the volume by one step."""

    @abstractmethod
    def volume_up(self) -> None:
        """Raise the volume by one step."""

    @abstractmethod
    def channel_down(self) -> None:
        """Go to the previous channel."""

    @abstractmethod
    def channel_up(self) -> None:
        """Go to the next channel."""

    @abstractmethod
    def mute(self) -> None:
        """Drop the volume to the lowest level."""


class Device(ABC):
    """Something a remote can drive."""

    @abstractmethod
    def is_enabled(self) -> bool:
        """Whether the device is switched on."""

    @abstractmethod
    def enable(self) -> None:
        """Switch the device on."""

    @abstractmethod
    def disable(self) -> None:
        """Switch the device off."""

    @abstractmethod
    def get_volume(self) -> int:
        """Current volume."""

    @abstractmethod
    def set_volume(self, volume: int) -> None:
        """Store a new volume as given."""

    @abstractmethod
    def get_channel(self) -> int:
        """Current channel."""

    @abstractmethod
    def set_channel(self, channel: int) -> None:
        """Store a new channel as given."""


class _SimpleDevice(Device):
    """Plain in-memory device state shared by the concrete devices."""

    def __init__(self) -> None:
        self._enabled = False
        self._volume = 0
        self._channel = 0

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        if not self.is_enabled():
            self._enabled = True

    def disable(self) -> None:
        if self.is_enabled():
            self._enabled = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int) -> None:
        self._volume = volume

    def get_channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int) -> None:
        self._channel = channel

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(enabled={self._enabled}, "
            f"volume={self._volume}, channel={self._channel})"
        )


class Radio(_SimpleDevice):
    pass


class TV(_SimpleDevice):
    pass


class Remote(RemoteInterface):
    """
    Remote control bridging to any Device.

    Volume and channel changes stay within [min_level, max_level]. A step
    from a level outside the range lands on the nearest bound; a step that
    would not change the level is ignored and nothing is reported.
    """

    def __init__(
        self,
        device: Device,
        output: Optional[OutputPort] = None,
        min_level: int = MIN_LEVEL,
        max_level: int = MAX_LEVEL,
    ):
        self.device = device
        self.output = resolve_output(output)
        self.min_level = min_level
        self.max_level = max_level

    def toggle_power(self) -> None:
        device_status = "on" if self.device.is_enabled() else "off"
        self.output.write(f"🎛 Remote has checked the device and it is {device_status}")

        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

        device_status = "on" if self.device.is_enabled() else "off"
        self.output.write(f"🎛 Remote turned the device {device_status}")
        logger.debug("Toggled power", device=repr(self.device))

    def _clamp(self, level: int) -> int:
        return max(self.min_level, min(level, self.max_level))

    def volume_down(self) -> None:
        self._step_volume(-1, "down")

    def volume_up(self) -> None:
        self._step_volume(1, "up")

    def channel_down(self) -> None:
        self._step_channel(-1, "down")

    def channel_up(self) -> None:
        self._step_channel(1, "up")

    def _step_volume(self, delta: int, direction: str) -> None:
        current_volume = self.device.get_volume()
        target = self._clamp(current_volume + delta)
        if target != current_volume:
            self.device.set_volume(target)
            self.output.write(f"🎛 Remote turned the volume {direction} to {self.device.get_volume()}")

    def _step_channel(self, delta: int, direction: str) -> None:
        current_channel = self.device.get_channel()
        target = self._clamp(current_channel + delta)
        if target != current_channel:
            self.device.set_channel(target)
            self.output.write(f"🎛 Remote turned the channel {direction} to {self.device.get_channel()}")

    def mute(self) -> None:
        self.output.write(f"🎛 Remote set the volume to {self.min_level} (mute)")
        self.device.set_volume(self.min_level)
