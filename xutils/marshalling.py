"""Fixed-layout binary encoding of values, optionally with a size header."""

import struct

_BYTE_ORDER_CHARS = "@=<>!"
_HEADER = struct.Struct("<Q")


class Marshal:
    """Convert values to and from bytes using a ``struct`` format.

    A format without an explicit byte order is packed little-endian with no
    padding. A format holding one field encodes a plain value; a format with
    several fields encodes a tuple.
    """

    def __init__(self, fmt):
        if not fmt or fmt[0] not in _BYTE_ORDER_CHARS:
            fmt = "<" + fmt
        self._struct = struct.Struct(fmt)
        self._fields = len(self._struct.unpack(bytes(self._struct.size)))
        if self._fields == 0:
            raise ValueError(f"format holds no fields: {fmt!r}")

    def __repr__(self):
        return f"Marshal({self._struct.format!r})"

    @property
    def format(self):
        """The ``struct`` format used for packing."""
        return self._struct.format

    def size(self):
        """Return the encoded size in bytes."""
        return self._struct.size

    def _pack_args(self, value):
        return (value,) if self._fields == 1 else tuple(value)

    def _unwrap(self, fields):
        return fields[0] if self._fields == 1 else fields

    def serialize(self, value):
        """Encode ``value`` to a new bytes object."""
        return self._struct.pack(*self._pack_args(value))

    def serialize_into(self, value, buf, offset=0):
        """Encode ``value`` into ``buf`` at ``offset``; returns the offset past it."""
        if len(buf) - offset < self._struct.size:
            raise ValueError(
                f"buffer of {len(buf)} bytes too small at offset {offset} "
                f"for {self._struct.size} bytes"
            )
        self._struct.pack_into(buf, offset, *self._pack_args(value))
        return offset + self._struct.size

    def deserialize(self, buf):
        """Decode a value from the start of ``buf``; raises if it is too short."""
        if len(buf) < self._struct.size:
            raise ValueError(
                f"buffer of {len(buf)} bytes too short for {self._struct.size} bytes"
            )
        return self._unwrap(self._struct.unpack_from(buf, 0))

    def deserialize_opt(self, buf):
        """Decode a value from ``buf``, or return None if it is too short."""
        if len(buf) < self._struct.size:
            return None
        return self._unwrap(self._struct.unpack_from(buf, 0))

    def extract_with_inc(self, buf, offset=0):
        """Decode at ``offset``; returns the value and the offset past it."""
        if len(buf) - offset < self._struct.size:
            raise ValueError(
                f"buffer of {len(buf)} bytes too short at offset {offset}"
            )
        value = self._unwrap(self._struct.unpack_from(buf, offset))
        return value, offset + self._struct.size


class MarshalT:
    """Encode a value behind an 8-byte little-endian header holding its size.

    Layout: ``| payload size (u64) | payload |``.
    """

    def __init__(self, fmt):
        self._payload = Marshal(fmt)

    def __repr__(self):
        return f"MarshalT({self._payload.format!r})"

    def serialize(self, value):
        """Encode ``value`` with its size header."""
        return _HEADER.pack(self._payload.size()) + self._payload.serialize(value)

    def deserialize(self, data):
        """Decode the payload, or return None if ``data`` is too short."""
        if len(data) < _HEADER.size + self._payload.size():
            return None
        return self._payload.deserialize(memoryview(data)[_HEADER.size:])