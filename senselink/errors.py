from __future__ import annotations
from typing import Any


class DecodeError(ValueError):
    """A payload could not be turned back into a message."""


class UnrecognizedMessageType(DecodeError):
    def __init__(self, tag: Any):
        self.tag = tag
        super().__init__(f"unrecognized message type: {tag!r}")


class MalformedField(DecodeError):
    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"malformed field {key!r}: {reason}")
