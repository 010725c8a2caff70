import struct

import pytest

from xutils.marshalling import Marshal, MarshalT


def test_single_field_wire_bytes():
    m = Marshal("I")
    assert m.size() == 4
    assert m.serialize(1) == b"\x01\x00\x00\x00"


def test_explicit_byte_order_is_kept():
    m = Marshal(">H")
    assert m.serialize(1) == b"\x00\x01"
    assert m.deserialize(b"\x00\x01") == 1


def test_tuple_round_trip():
    m = Marshal("Iqd")
    value = (7, -3, 2.5)
    assert m.deserialize(m.serialize(value)) == value


def test_deserialize_too_short_raises():
    m = Marshal("Q")
    with pytest.raises(ValueError):
        m.deserialize(b"\x00" * (m.size() - 1))


def test_deserialize_opt():
    m = Marshal("Q")
    assert m.deserialize_opt(b"\x00" * 3) is None
    assert m.deserialize_opt(m.serialize(99)) == 99


def test_deserialize_ignores_trailing_bytes():
    m = Marshal("H")
    assert m.deserialize(m.serialize(513) + b"junk") == 513


def test_serialize_into_returns_next_offset():
    m = Marshal("I")
    buf = bytearray(12)
    end = m.serialize_into(5, buf, 4)
    assert end == 4 + m.size()
    assert bytes(buf[4:end]) == m.serialize(5)
    assert bytes(buf[:4]) == b"\x00" * 4


def test_serialize_into_too_small_raises():
    m = Marshal("Q")
    with pytest.raises(ValueError):
        m.serialize_into(1, bytearray(m.size()), 1)


def test_extract_with_inc_walks_buffer():
    m = Marshal("i")
    buf = b"".join(m.serialize(v) for v in (10, -20, 30))
    offset = 0
    seen = []
    while offset < len(buf):
        value, offset = m.extract_with_inc(buf, offset)
        seen.append(value)
    assert seen == [10, -20, 30]
    assert offset == len(buf)


def test_extract_with_inc_past_end_raises():
    m = Marshal("i")
    with pytest.raises(ValueError):
        m.extract_with_inc(m.serialize(1), 1)


def test_empty_format_rejected():
    with pytest.raises(ValueError):
        Marshal("")


def test_marshalt_header_holds_payload_size():
    mt = MarshalT("Iq")
    payload_size = Marshal("Iq").size()
    data = mt.serialize((1, 2))
    assert len(data) == 8 + payload_size
    assert struct.unpack_from("<Q", data)[0] == payload_size


def test_marshalt_round_trip():
    mt = MarshalT("q")
    assert mt.deserialize(mt.serialize(-12345)) == -12345


def test_marshalt_accepts_memoryview():
    mt = MarshalT("HH")
    data = memoryview(mt.serialize((3, 4)))
    assert mt.deserialize(data) == (3, 4)


def test_marshalt_too_short_is_none():
    mt = MarshalT("Q")
    data = mt.serialize(1)
    assert mt.deserialize(data[:-1]) is None
    assert mt.deserialize(b"") is None