import dataclasses

import pytest

from psen_scan.scanner_reply import (
    Message,
    OperationResult,
    ReplyType,
    convert_to_operation_result,
    convert_to_reply_type,
)


@pytest.mark.parametrize(
    "raw, expected",
    [(0x35, ReplyType.start), (0x36, ReplyType.stop), (0x00, ReplyType.unknown), (0x01, ReplyType.unknown)],
)
def test_convert_to_reply_type(raw, expected):
    assert convert_to_reply_type(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0x00, OperationResult.accepted),
        (0xEB, OperationResult.refused),
        (0xFF, OperationResult.unknown),
        (0x01, OperationResult.unknown),
    ],
)
def test_convert_to_operation_result(raw, expected):
    assert convert_to_operation_result(raw) is expected


def test_message_holds_type_and_result():
    msg = Message(convert_to_reply_type(0x35), convert_to_operation_result(0xEB))
    assert msg.type is ReplyType.start
    assert msg.result is OperationResult.refused
    assert Message.SIZE == 16


def test_message_equality():
    assert Message(ReplyType.stop, OperationResult.accepted) == Message(
        ReplyType.stop, OperationResult.accepted
    )
    assert not Message(ReplyType.stop, OperationResult.accepted) == Message(
        ReplyType.start, OperationResult.accepted
    )


def test_message_is_immutable():
    msg = Message(ReplyType.start, OperationResult.accepted)
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.type = ReplyType.stop
    assert msg.type is ReplyType.start
    assert msg.result is OperationResult.accepted