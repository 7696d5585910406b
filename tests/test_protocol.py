import struct

import pytest

from tp0net.protocol import (
    OpCode,
    Packet,
    ProtocolError,
    decode_text,
    decode_values,
    encode_message,
)


def test_encode_message_wire_bytes():
    assert encode_message("hi") == b"\x00\x00\x00\x00\x03\x00\x00\x00hi\x00"


def test_encode_message_header_matches_payload():
    frame = encode_message("hola")
    opcode, size = struct.unpack("<ii", frame[:8])
    assert opcode == OpCode.MESSAGE
    assert size == len(frame) - 8
    assert decode_text(frame[8:]) == "hola"


def test_empty_packet_serializes_header_only():
    frame = Packet().serialize()
    assert frame == struct.pack("<ii", OpCode.PACKET, 0)


def test_packet_values_round_trip():
    packet = Packet()
    for value in ["a", "bc", "ñandú"]:
        packet.add(value)
    frame = packet.serialize()
    opcode, size = struct.unpack("<ii", frame[:8])
    assert opcode == OpCode.PACKET
    assert size == len(frame) - 8
    values = decode_values(frame[8:])
    assert [decode_text(v) for v in values] == ["a", "bc", "ñandú"]
    assert all(v.endswith(b"\0") for v in values)


def test_packet_add_bytes_kept_verbatim():
    packet = Packet()
    packet.add(b"\x01\x02")
    packet.add(b"")
    assert decode_values(packet.payload) == [b"\x01\x02", b""]


def test_serialized_length_invariant():
    packet = Packet()
    items = [b"x" * n for n in range(5)]
    for item in items:
        packet.add(item)
    assert len(packet.serialize()) == 8 + sum(4 + len(i) for i in items)


def test_decode_values_empty_payload():
    assert decode_values(b"") == []


def test_decode_values_truncated_size():
    with pytest.raises(ProtocolError):
        decode_values(b"\x01\x00")


def test_decode_values_value_past_end():
    with pytest.raises(ProtocolError):
        decode_values(struct.pack("<i", 10) + b"abc")


def test_decode_values_negative_size():
    with pytest.raises(ProtocolError):
        decode_values(struct.pack("<i", -1))


def test_decode_text_stops_at_nul():
    assert decode_text(b"abc\0def") == "abc"
    assert decode_text(b"plain") == "plain"