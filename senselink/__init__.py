"""
Public API:
- Message variants: StartSensing, StopSensing, SensingData, StartedSensing, StoppedSensing
- MessageKind: wire tags (plus UNKNOWN for tags this build does not know)
- MessageParser, parse_message: rebuild a typed message from a payload
- DecodeError, UnrecognizedMessageType, MalformedField: decode failures
- SensorType, SensorData, SensingConfiguration, TransmissionMode: message field types
- Transport, Endpoint, Senselink: send/receive messages over a transport collaborator
- Codecs: payload <-> bytes (json, msgpack) for byte-moving transports
- ReadingCollector: sensor events -> SensingData, batched or streamed
- SensorManager, Sensor, SensorUnavailable: sensor hardware boundary
"""

# Message model
from .kinds import MessageKind, TYPE_KEY, TIMESTAMP_KEY
from .messages import (
    Message,
    StartSensing,
    StopSensing,
    SensingData,
    StartedSensing,
    StoppedSensing,
)
from .parser import MessageParser, parse_message
from .errors import DecodeError, UnrecognizedMessageType, MalformedField
from .sensors import SensorType, SensorData, SensingConfiguration, TransmissionMode

# Transport contract & runtime
from .transport import Transport
from .endpoint import Endpoint
from .factory import Senselink
from .codecs import Codecs

# Sensor side
from .collector import ReadingCollector
from .access import Sensor, SensorManager, SensorUnavailable

__all__ = [
    "MessageKind",
    "TYPE_KEY",
    "TIMESTAMP_KEY",
    "Message",
    "StartSensing",
    "StopSensing",
    "SensingData",
    "StartedSensing",
    "StoppedSensing",
    "MessageParser",
    "parse_message",
    "DecodeError",
    "UnrecognizedMessageType",
    "MalformedField",
    "SensorType",
    "SensorData",
    "SensingConfiguration",
    "TransmissionMode",
    "Transport",
    "Endpoint",
    "Senselink",
    "Codecs",
    "ReadingCollector",
    "Sensor",
    "SensorManager",
    "SensorUnavailable",
]

__version__ = "0.1.0"
