"""Reply messages sent by the scanner on the control channel."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class ReplyType(enum.IntEnum):
    """Possible types of a reply message."""

    unknown = 0
    start = 0x35
    stop = 0x36


class OperationResult(enum.IntEnum):
    """Operation result reported by the scanner."""

    accepted = 0x00
    refused = 0xEB
    unknown = 0xFF


def convert_to_reply_type(value: int) -> ReplyType:
    """Map a raw type code to a reply type; anything else than start/stop is unknown."""
    if value in (ReplyType.start, ReplyType.stop):
        return ReplyType(value)
    return ReplyType.unknown


def convert_to_operation_result(value: int) -> OperationResult:
    """Map a raw result code; anything else than accepted/refused is unknown."""
    if value in (OperationResult.accepted, OperationResult.refused):
        return OperationResult(value)
    return OperationResult.unknown


@dataclass(frozen=True)
class Message:
    """A reply message from the scanner."""

    SIZE: ClassVar[int] = 16

    type: ReplyType
    result: OperationResult