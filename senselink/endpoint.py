from __future__ import annotations
import logging
import threading
from typing import Any, Callable, Dict, Optional

from .errors import DecodeError
from .kinds import MessageKind
from .messages import Message
from .parser import MessageParser
from .payload import Payload
from .transport import Transport

logger = logging.getLogger(__name__)

Handler = Callable[[Message], Any]
ErrorHandler = Callable[[DecodeError, Payload], Any]

class Endpoint:
    """One side of the pairing (watch or host) bound to a transport.

    Outgoing messages are encoded and handed to the transport. Incoming
    payloads are parsed and dispatched to the handler registered for their
    kind. A payload that fails to decode is logged, reported to ``on_error``
    if set, and dropped; it is never raised into the transport's thread.
    """

    def __init__(self, transport: Transport, name: Optional[str] = None, *,
                 on_error: Optional[ErrorHandler] = None):
        self.transport = transport
        self.name = name or getattr(transport, "peer_id", "") or "endpoint"
        self.handlers: Dict[MessageKind, Handler] = {}
        self.on_error = on_error
        self.dropped = 0
        self._lock = threading.Lock()
        self.transport.on_receive(self._on_payload)

    def on(self, kind: MessageKind, handler: Handler) -> None:
        # validates the kind; UNKNOWN has no variant and is refused
        MessageParser.variant_for(kind)
        with self._lock:
            self.handlers[MessageKind(kind)] = handler

    def start(self) -> None:
        self.transport.start()

    def stop(self) -> None:
        self.transport.stop()

    def send(self, message: Message) -> None:
        logger.debug("%s: sending %s", self.name, message.kind.name)
        self.transport.send(message.encode())

    def _on_payload(self, payload: Payload) -> None:
        try:
            message = MessageParser.parse(payload)
        except DecodeError as e:
            with self._lock:
                self.dropped += 1
            logger.warning("%s: dropping payload: %s", self.name, e)
            if self.on_error is not None:
                self.on_error(e, payload)
            return

        with self._lock:
            handler = self.handlers.get(message.kind)
        if handler is None:
            logger.debug("%s: no handler for %s", self.name, message.kind.name)
            return
        logger.debug("%s: dispatching %s", self.name, message.kind.name)
        handler(message)
