from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable

from .payload import Payload

Receiver = Callable[[Payload], None]

class Transport(ABC):
    """
    Moves already-encoded payloads between the two paired endpoints.
    Framing, delivery and connection lifecycle all live behind this class.
    """

    @abstractmethod
    def start(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def send(self, payload: Payload) -> None:
        """Send one payload to the paired endpoint."""
        raise NotImplementedError

    @abstractmethod
    def on_receive(self, cb: Receiver) -> None:
        """Register a callback for every payload received from the peer."""
        raise NotImplementedError
