from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum, StrEnum
from typing import Any, Iterable, Iterator, List, Mapping, Tuple

from .errors import MalformedField
from .payload import Record, check_time, read_float_list, read_int, read_time

# Wire ints for sensor types; renumbering breaks the protocol like MessageKind
class SensorType(IntEnum):
    ACCELEROMETER = 0
    DEVICE_MOTION = 1
    MAGNETOMETER  = 2
    GYROSCOPE     = 3
    HEART_RATE    = 4

    @classmethod
    def from_wire(cls, value: int, key: str) -> "SensorType":
        try:
            return cls(value)
        except ValueError:
            raise MalformedField(key, f"unknown sensor type {value!r}") from None

    @classmethod
    def coerce(cls, value: Any) -> "SensorType":
        # same rule as the decode path: bool is not a sensor id
        if isinstance(value, bool):
            raise TypeError(f"sensor type must be an int, got {value!r}")
        return cls(value)


class TransmissionMode(StrEnum):
    BATCH     = "batch"
    STREAMING = "streaming"

    @classmethod
    def from_wire(cls, value: str, key: str) -> "TransmissionMode":
        try:
            return cls(value)
        except ValueError:
            raise MalformedField(key, f"unknown transmission mode {value!r}") from None


@dataclass(frozen=True, init=False)
class SensingConfiguration:
    """
    Ordered, duplicate-free, non-empty set of enabled sensors.
    Iteration order is the order in which the sensors were enabled.
    """
    sensors: Tuple[SensorType, ...]

    def __init__(self, sensors: Iterable[SensorType]):
        ordered = tuple(SensorType.coerce(s) for s in sensors)
        if not ordered:
            raise ValueError("a sensing configuration needs at least one sensor")
        if len(set(ordered)) != len(ordered):
            raise ValueError(f"duplicate sensors in configuration: {ordered}")
        object.__setattr__(self, "sensors", ordered)

    def __iter__(self) -> Iterator[SensorType]:
        return iter(self.sensors)

    def __len__(self) -> int:
        return len(self.sensors)

    def __contains__(self, sensor: Any) -> bool:
        return sensor in self.sensors

    def to_wire(self) -> List[int]:
        return [int(s) for s in self.sensors]


@dataclass(frozen=True)
class SensorData:
    """One reading, already tagged with its sensor and capture time."""
    sensor: SensorType
    values: Tuple[float, ...]      # x/y/z for motion sensors, one value for heart rate
    time: datetime                 # capture time

    def __post_init__(self):
        object.__setattr__(self, "sensor", SensorType.coerce(self.sensor))
        values = tuple(float(v) for v in self.values)
        if not values:
            raise ValueError("a reading needs at least one value")
        object.__setattr__(self, "values", values)
        check_time(self.time, "time")

    def to_record(self) -> Record:
        return {
            "sensor": int(self.sensor),
            "values": list(self.values),
            "ts":     self.time,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "SensorData":
        sensor = SensorType.from_wire(read_int(record, "sensor"), "sensor")
        values = read_float_list(record, "values")
        if not values:
            raise MalformedField("values", "empty")
        return cls(sensor=sensor, values=tuple(values), time=read_time(record, "ts"))
