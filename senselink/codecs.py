from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, Protocol as TypingProtocol

import json

import msgpack

from .payload import Payload

# Payload <-> bytes for transports that move bytes. Framing is theirs.

class Codec(TypingProtocol):
    name: str
    def dumps(self, obj: Payload) -> bytes: ...
    def loads(self, data: bytes) -> Payload: ...

_TS = "$ts"

def _json_default(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return {_TS: obj.isoformat()}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

def _json_object_hook(obj: Dict[str, Any]) -> Any:
    if len(obj) == 1 and _TS in obj:
        return datetime.fromisoformat(obj[_TS])
    return obj

class JSONCodec:
    name = "json"
    def dumps(self, obj: Payload) -> bytes:
        return json.dumps(obj, separators=(",", ":"), default=_json_default).encode("utf-8")
    def loads(self, data: bytes) -> Payload:
        return json.loads(data.decode("utf-8"), object_hook=_json_object_hook)

class MsgPackCodec:
    # datetimes travel as the msgpack timestamp extension and come back in UTC
    name = "msgpack"
    def dumps(self, obj: Payload) -> bytes:
        return msgpack.packb(obj, use_bin_type=True, datetime=True)
    def loads(self, data: bytes) -> Payload:
        return msgpack.unpackb(data, raw=False, timestamp=3)

class Codecs:
    _registry: Dict[str, Codec] = {
        "json":    JSONCodec(),
        "msgpack": MsgPackCodec(),
    }

    @classmethod
    def get(cls, name: str) -> Codec:
        if name not in cls._registry:
            raise ValueError(f"Unknown codec: {name}")
        return cls._registry[name]
