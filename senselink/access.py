"""
Boundary to the sensor hardware layer.

Hardware access itself lives elsewhere; this module only fixes the contract
a platform sensor implements and a manager that looks sensors up by type.
A sensor type with no implementation on the current platform is reported
explicitly: ``get`` returns ``None`` and the commands raise
:class:`SensorUnavailable`, so the side producing messages can decide
whether to go ahead with a partial configuration.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional, Tuple

from .sensors import SensingConfiguration, SensorData, SensorType

logger = logging.getLogger(__name__)

EventHandler = Callable[[SensorData], None]


class SensorUnavailable(LookupError):
    def __init__(self, sensor: SensorType):
        self.sensor = sensor
        super().__init__(f"no {sensor.name.lower()} sensor on this platform")


class Sensor(ABC):

    @abstractmethod
    def is_available(self) -> bool: ...

    @abstractmethod
    def is_registered(self) -> bool: ...

    @abstractmethod
    def is_sensing(self) -> bool: ...

    @abstractmethod
    def start_sensing(self) -> None: ...

    @abstractmethod
    def stop_sensing(self) -> None: ...

    @abstractmethod
    def register(self, handler: EventHandler) -> None: ...

    @abstractmethod
    def deregister(self, handler: EventHandler) -> None: ...


class SensorManager:

    def __init__(self, sensors: Optional[Mapping[SensorType, Sensor]] = None):
        self._sensors: Dict[SensorType, Sensor] = dict(sensors or {})

    def get(self, sensor: SensorType) -> Optional[Sensor]:
        return self._sensors.get(SensorType(sensor))

    def _require(self, sensor: SensorType) -> Sensor:
        found = self.get(sensor)
        if found is None:
            logger.warning("sensor %s is not available on this platform", SensorType(sensor).name)
            raise SensorUnavailable(SensorType(sensor))
        return found

    def is_sensor_available(self, sensor: SensorType) -> bool:
        found = self.get(sensor)
        return found is not None and found.is_available()

    def is_sensor_registered(self, sensor: SensorType) -> bool:
        found = self.get(sensor)
        return found is not None and found.is_registered()

    def is_sensor_sensing(self, sensor: SensorType) -> bool:
        found = self.get(sensor)
        return found is not None and found.is_sensing()

    def start_sensing(self, sensor: SensorType) -> None:
        self._require(sensor).start_sensing()

    def stop_sensing(self, sensor: SensorType) -> None:
        self._require(sensor).stop_sensing()

    def register(self, handler: EventHandler, sensor: SensorType) -> None:
        self._require(sensor).register(handler)

    def deregister(self, handler: EventHandler, sensor: SensorType) -> None:
        self._require(sensor).deregister(handler)

    def available(self, configuration: SensingConfiguration) -> Tuple[SensorType, ...]:
        """Sensors of ``configuration`` usable here, in configuration order."""
        return tuple(s for s in configuration if self.is_sensor_available(s))
