from __future__ import annotations
import logging
import threading
from queue import Queue
from typing import List, Optional, Union

from ..codecs import Codec, Codecs
from ..payload import Payload
from ..transport import Receiver, Transport

logger = logging.getLogger(__name__)

_STOP = object()

class LoopbackTransport(Transport):
    """In-process transport between two paired endpoints.

    Every payload goes through the codec (dumps on the sending side, loads on
    the receiving side) so it crosses the same bytes boundary a real link
    would. Delivery happens on the receiver's own thread, in send order.

        watch = LoopbackTransport("watch")
        host = LoopbackTransport("host")
        watch.connect(host)
    """

    def __init__(self, peer_id: str = "", *, codec: Union[str, Codec] = "json"):
        self.peer_id = peer_id
        self.codec = Codecs.get(codec) if isinstance(codec, str) else codec
        self._peer: Optional["LoopbackTransport"] = None
        self._receivers: List[Receiver] = []
        self._inbox: Queue = Queue()
        self._running = False
        self._rx_thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._running

    def connect(self, other: "LoopbackTransport") -> None:
        self._peer = other
        other._peer = self

    def on_receive(self, cb: Receiver) -> None:
        self._receivers.append(cb)

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._rx_thread = threading.Thread(target=self._rx_loop, name=f"loopback-{self.peer_id}", daemon=True)
        self._rx_thread.start()

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._inbox.put(_STOP)
        if self._rx_thread:
            self._rx_thread.join(timeout=1)
            self._rx_thread = None

    def send(self, payload: Payload) -> None:
        if not self._running:
            raise RuntimeError(f"transport {self.peer_id!r} is not running")
        peer = self._peer
        if peer is None:
            raise RuntimeError(f"transport {self.peer_id!r} is not connected")
        peer._inbox.put(self.codec.dumps(payload))

    def join(self) -> None:
        """Block until every frame received so far has been delivered."""
        self._inbox.join()

    def _rx_loop(self):
        while True:
            frame = self._inbox.get()
            try:
                if frame is _STOP:
                    return
                try:
                    payload = self.codec.loads(frame)
                except Exception:
                    logger.warning("%s: dropping undecodable frame (%d bytes)", self.peer_id, len(frame), exc_info=True)
                    continue
                for cb in list(self._receivers):
                    try:
                        cb(payload)
                    except Exception:
                        logger.exception("%s: receive callback failed", self.peer_id)
            finally:
                self._inbox.task_done()
