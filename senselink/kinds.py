from __future__ import annotations
from enum import IntEnum

# Reserved payload keys shared by every message
TYPE_KEY      = "type"
TIMESTAMP_KEY = "ts"

# Wire tags. Renumbering any of these is a protocol version bump.
class MessageKind(IntEnum):
    START_SENSING   = 0
    STOP_SENSING    = 1
    SENSING_DATA    = 2
    STARTED_SENSING = 3
    STOPPED_SENSING = 4
    UNKNOWN         = 5    # tags this build does not recognize

    @classmethod
    def from_tag(cls, tag: int) -> "MessageKind":
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN
