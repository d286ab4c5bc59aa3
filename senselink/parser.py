from __future__ import annotations
from typing import Any, Dict, Mapping, Type

from .errors import UnrecognizedMessageType
from .kinds import TYPE_KEY, MessageKind
from .messages import Message, SensingData, StartedSensing, StartSensing, StopSensing, StoppedSensing


_VARIANTS: Dict[MessageKind, Type[Message]] = {
    cls.kind: cls
    for cls in (StartSensing, StopSensing, SensingData, StartedSensing, StoppedSensing)
}

# Every kind except UNKNOWN must have exactly one variant
_missing = set(MessageKind) - {MessageKind.UNKNOWN} - set(_VARIANTS)
if _missing:
    raise RuntimeError(f"no message variant for kinds: {sorted(_missing)}")


class MessageParser:
    """
    Rebuild a typed message from a received payload.

    Dispatch looks only at the discriminator. A missing, non-integer or
    unknown tag raises :class:`UnrecognizedMessageType` before any variant
    decoder runs; a variant's own :class:`MalformedField` propagates as is.
    """

    @staticmethod
    def kind_of(payload: Mapping[str, Any]) -> MessageKind:
        if not isinstance(payload, Mapping):
            raise UnrecognizedMessageType(None)
        tag = payload.get(TYPE_KEY)
        if isinstance(tag, bool) or not isinstance(tag, int):
            raise UnrecognizedMessageType(tag)
        kind = MessageKind.from_tag(tag)
        if kind is MessageKind.UNKNOWN:
            raise UnrecognizedMessageType(tag)
        return kind

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> Message:
        kind = cls.kind_of(payload)
        return _VARIANTS[kind].decode(payload)

    @staticmethod
    def variant_for(kind: MessageKind) -> Type[Message]:
        try:
            return _VARIANTS[MessageKind(kind)]
        except (KeyError, ValueError):
            raise UnrecognizedMessageType(kind) from None


def parse_message(payload: Mapping[str, Any]) -> Message:
    return MessageParser.parse(payload)
