"""Wire format shared by the client and the server.

Every frame is an operation code and a payload size, both 32-bit signed
little-endian integers, followed by the payload. A packet payload is a run
of values, each a 32-bit size followed by that many bytes.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

WORD = struct.Struct("<i")
HEADER = struct.Struct("<ii")


class OpCode(IntEnum):
    """Operation codes understood by the server."""

    MESSAGE = 0
    PACKET = 1


class ProtocolError(ValueError):
    """Raised when a payload does not follow the wire format."""


def _as_bytes(value: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(value, str):
        # Text travels NUL-terminated.
        return value.encode("utf-8") + b"\0"
    return bytes(value)


@dataclass
class Packet:
    """A frame under construction: an operation code and its payload."""

    opcode: OpCode = OpCode.PACKET
    payload: bytearray = field(default_factory=bytearray)

    def add(self, value: str | bytes) -> None:
        """Append one size-prefixed value; text is sent NUL-terminated."""
        data = _as_bytes(value)
        self.payload += WORD.pack(len(data)) + data

    def serialize(self) -> bytes:
        """Return the whole frame as it goes on the wire."""
        return HEADER.pack(int(self.opcode), len(self.payload)) + bytes(self.payload)


def encode_message(message: str | bytes) -> bytes:
    """Return the frame that carries a single message."""
    return Packet(OpCode.MESSAGE, bytearray(_as_bytes(message))).serialize()


def decode_values(payload: bytes | bytearray | memoryview) -> list[bytes]:
    """Split a packet payload into its size-prefixed values."""
    view = memoryview(bytes(payload))
    values: list[bytes] = []
    offset = 0
    while offset < len(view):
        if len(view) - offset < WORD.size:
            raise ProtocolError(f"truncated value size at offset {offset}")
        (size,) = WORD.unpack_from(view, offset)
        offset += WORD.size
        if size < 0:
            raise ProtocolError(f"negative value size {size} at offset {offset}")
        if offset + size > len(view):
            raise ProtocolError(f"value of {size} bytes runs past the payload end")
        values.append(bytes(view[offset:offset + size]))
        offset += size
    return values


def decode_text(data: bytes | bytearray | memoryview) -> str:
    """Decode a NUL-terminated string; bytes after the first NUL are ignored."""
    raw = bytes(data).split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace")