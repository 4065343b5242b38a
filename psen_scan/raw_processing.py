"""Reading and writing fixed-size binary values from and to byte streams."""

from __future__ import annotations

import struct
from typing import Any, BinaryIO, Callable, Iterable, List

_BYTE_ORDER_CHARS = "@=<>!"


class StringStreamFailure(RuntimeError):
    """Raised if raw data from the scanner cannot be processed."""

    def __init__(self, msg: str = "Error in raw data processing") -> None:
        super().__init__(msg)


def _struct_for(fmt: str) -> struct.Struct:
    if not fmt or fmt[0] not in _BYTE_ORDER_CHARS:
        fmt = "<" + fmt
    return struct.Struct(fmt)


def read(stream: BinaryIO, fmt: str) -> Any:
    """Read one value described by a struct format (little-endian unless stated).

    Formats with several fields return a tuple.
    """
    packer = _struct_for(fmt)
    data = stream.read(packer.size)
    if len(data) < packer.size:
        raise StringStreamFailure(
            f"Failure reading {packer.size} characters from input stream, "
            f"could only read {len(data)}."
        )
    values = packer.unpack(data)
    return values[0] if len(values) == 1 else values


def read_array(
    stream: BinaryIO, fmt: str, count: int, conversion: Callable[[Any], Any]
) -> List[Any]:
    """Read ``count`` values and convert each one."""
    return [conversion(read(stream, fmt)) for _ in range(count)]


def write(stream: BinaryIO, fmt: str, value: Any) -> None:
    """Write one value described by a struct format (little-endian unless stated)."""
    packer = _struct_for(fmt)
    if isinstance(value, tuple):
        stream.write(packer.pack(*value))
    else:
        stream.write(packer.pack(value))


def write_array(
    stream: BinaryIO, fmt: str, values: Iterable[Any], conversion: Callable[[Any], Any]
) -> None:
    """Convert every element and write it."""
    for value in values:
        write(stream, fmt, conversion(value))