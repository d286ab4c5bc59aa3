from __future__ import annotations
from typing import Any, Mapping, Optional, Union

from .codecs import Codec, Codecs
from .endpoint import Endpoint, Handler
from .kinds import MessageKind
from .transport import Transport

def _transport(name: str, transport: Union[str, Transport], codec: Codec, **kwargs) -> Transport:
    if not isinstance(transport, str):
        return transport
    if transport.lower() == "loopback":
        from .transports.loopback import LoopbackTransport
        return LoopbackTransport(peer_id=name, codec=codec, **kwargs)
    raise ValueError(f"Unknown transport label: {transport}")

def Senselink(name: str,
              *,
              transport: Union[str, Transport] = "loopback",
              codec: Union[str, Codec] = "json",
              handlers: Optional[Mapping[MessageKind, Handler]] = None,
              auto_start: bool = True,
              **transport_kwargs: Any) -> Endpoint:
    """Build an endpoint named ``name`` in one call.

    ``transport`` is a label ("loopback") or a ready Transport; ``codec``
    ("json", "msgpack" or a Codec) only applies when the transport is built
    from a label. ``handlers`` maps message kinds to callbacks. Extra
    keyword arguments go to the transport constructor.

        watch = Senselink("watch", codec="msgpack",
                          handlers={MessageKind.START_SENSING: on_start})
        host = Senselink("host")
        watch.transport.connect(host.transport)
    """
    codec_obj = Codecs.get(codec) if isinstance(codec, str) else codec
    endpoint = Endpoint(_transport(name, transport, codec_obj, **transport_kwargs), name=name)

    for kind, handler in (handlers or {}).items():
        endpoint.on(kind, handler)

    if auto_start:
        endpoint.start()
    return endpoint
