from __future__ import annotations
import logging
import threading
from typing import Any, Callable, List

from .messages import Message, SensingData, StartSensing
from .sensors import SensorData, TransmissionMode

logger = logging.getLogger(__name__)

Send = Callable[[Message], Any]

class ReadingCollector:
    """Sensor event handler that turns readings into SensingData messages.

    STREAMING sends every reading on its own as it arrives. BATCH holds
    readings back until ``batch_size`` of them are buffered, or until
    ``flush()`` is called (e.g. when sensing stops).
    """

    def __init__(self, send: Send, mode: TransmissionMode = TransmissionMode.BATCH, batch_size: int = 50):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.send = send
        self.mode = TransmissionMode(mode)
        self.batch_size = batch_size
        self._buffer: List[SensorData] = []
        self._lock = threading.Lock()

    @classmethod
    def for_message(cls, message: StartSensing, send: Send, batch_size: int = 50) -> "ReadingCollector":
        return cls(send, mode=message.transmission_mode, batch_size=batch_size)

    def __call__(self, reading: SensorData) -> None:
        if self.mode is TransmissionMode.STREAMING:
            self.send(SensingData.of([reading]))
            return
        with self._lock:
            self._buffer.append(reading)
            if len(self._buffer) < self.batch_size:
                return
            batch, self._buffer = self._buffer, []
        self._emit(batch)

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._buffer)

    def flush(self) -> None:
        with self._lock:
            batch, self._buffer = self._buffer, []
        if batch:
            self._emit(batch)

    def _emit(self, batch: List[SensorData]) -> None:
        logger.debug("flushing %d readings", len(batch))
        self.send(SensingData.of(batch))
