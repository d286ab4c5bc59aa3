"""
Message variants.

Each variant is a frozen dataclass whose ``kind`` is fixed on the class, so
an instance can never report a tag that disagrees with its own
encode/decode logic. ``encode`` writes the reserved ``type``/``ts`` entries
and then overlays the variant's keys; ``decode`` checks the tag, reads
``ts`` and then the variant's keys, and either returns a complete message or
raises :class:`~senselink.errors.DecodeError`.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, Iterable, Mapping, Tuple

from .errors import MalformedField
from .kinds import TIMESTAMP_KEY, TYPE_KEY, MessageKind
from .payload import Payload, check_time, now, read_int, read_int_list, read_records, read_str, read_time
from .sensors import SensingConfiguration, SensorData, SensorType, TransmissionMode


@dataclass(frozen=True)
class Message:
    kind: ClassVar[MessageKind] = MessageKind.UNKNOWN

    timestamp: datetime = field(default_factory=now, kw_only=True)

    def __post_init__(self):
        if type(self).kind is MessageKind.UNKNOWN:
            raise TypeError(f"{type(self).__name__} has no message kind")
        check_time(self.timestamp, "timestamp")

    def encode(self) -> Payload:
        payload: Payload = {
            TYPE_KEY:      int(self.kind),
            TIMESTAMP_KEY: self.timestamp,
        }
        payload.update(self._encode_fields())
        return payload

    @classmethod
    def decode(cls, payload: Mapping[str, Any]) -> "Message":
        tag = read_int(payload, TYPE_KEY)
        if tag != cls.kind:
            raise MalformedField(TYPE_KEY, f"expected tag {int(cls.kind)} for {cls.__name__}, got {tag}")
        timestamp = read_time(payload, TIMESTAMP_KEY)
        return cls(timestamp=timestamp, **cls._decode_fields(payload))

    # Variant hooks
    def _encode_fields(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def _decode_fields(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return {}


@dataclass(frozen=True)
class StartSensing(Message):
    kind: ClassVar[MessageKind] = MessageKind.START_SENSING

    CONFIG_KEY:       ClassVar[str] = "config"
    TRANSMISSION_KEY: ClassVar[str] = "transmission"

    configuration: SensingConfiguration
    transmission_mode: TransmissionMode = TransmissionMode.BATCH

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.configuration, SensingConfiguration):
            object.__setattr__(self, "configuration", SensingConfiguration(self.configuration))
        object.__setattr__(self, "transmission_mode", TransmissionMode(self.transmission_mode))

    def _encode_fields(self) -> Dict[str, Any]:
        return {
            self.CONFIG_KEY:       self.configuration.to_wire(),
            self.TRANSMISSION_KEY: str(self.transmission_mode),
        }

    @classmethod
    def _decode_fields(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        tags = read_int_list(payload, cls.CONFIG_KEY)
        sensors = [SensorType.from_wire(t, f"{cls.CONFIG_KEY}[{i}]") for i, t in enumerate(tags)]
        try:
            configuration = SensingConfiguration(sensors)
        except ValueError as e:
            raise MalformedField(cls.CONFIG_KEY, str(e)) from None
        mode = TransmissionMode.from_wire(read_str(payload, cls.TRANSMISSION_KEY), cls.TRANSMISSION_KEY)
        return {"configuration": configuration, "transmission_mode": mode}


@dataclass(frozen=True)
class StopSensing(Message):
    kind: ClassVar[MessageKind] = MessageKind.STOP_SENSING


@dataclass(frozen=True)
class SensingData(Message):
    kind: ClassVar[MessageKind] = MessageKind.SENSING_DATA

    DATA_KEY: ClassVar[str] = "data"

    readings: Tuple[SensorData, ...] = ()

    def __post_init__(self):
        super().__post_init__()
        readings = tuple(self.readings)
        for reading in readings:
            if not isinstance(reading, SensorData):
                raise TypeError(f"readings must be SensorData, got {type(reading).__name__}")
        object.__setattr__(self, "readings", readings)

    def _encode_fields(self) -> Dict[str, Any]:
        return {self.DATA_KEY: [r.to_record() for r in self.readings]}

    @classmethod
    def _decode_fields(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        readings = []
        for i, record in enumerate(read_records(payload, cls.DATA_KEY)):
            try:
                readings.append(SensorData.from_record(record))
            except MalformedField as e:
                raise MalformedField(f"{cls.DATA_KEY}[{i}].{e.key}", e.reason) from None
        return {"readings": tuple(readings)}

    @classmethod
    def of(cls, readings: Iterable[SensorData], **kwargs) -> "SensingData":
        return cls(readings=tuple(readings), **kwargs)


@dataclass(frozen=True)
class StartedSensing(Message):
    kind: ClassVar[MessageKind] = MessageKind.STARTED_SENSING

    START_TIME_KEY: ClassVar[str] = "startTime"

    start_time: datetime

    def __post_init__(self):
        super().__post_init__()
        check_time(self.start_time, "start_time")

    def _encode_fields(self) -> Dict[str, Any]:
        return {self.START_TIME_KEY: self.start_time}

    @classmethod
    def _decode_fields(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return {"start_time": read_time(payload, cls.START_TIME_KEY)}


@dataclass(frozen=True)
class StoppedSensing(Message):
    kind: ClassVar[MessageKind] = MessageKind.STOPPED_SENSING

    STOP_TIME_KEY: ClassVar[str] = "endTime"

    stop_time: datetime

    def __post_init__(self):
        super().__post_init__()
        check_time(self.stop_time, "stop_time")

    def _encode_fields(self) -> Dict[str, Any]:
        return {self.STOP_TIME_KEY: self.stop_time}

    @classmethod
    def _decode_fields(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return {"stop_time": read_time(payload, cls.STOP_TIME_KEY)}
