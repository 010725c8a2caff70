# xutils

Small helpers for concurrent code and for handling fixed-layout binary data.

## Modules

- `xutils.atomic`
  - `AtomicInt(value=0, bits=64)`: an unsigned integer of 8, 16, 32 or 64
    bits. `inc`, `dec`, `add`, `and_`, `or_`, `xchg`, `cmpxchg` and
    `fetch_and_add` are atomic and wrap around modulo `2 ** bits`.
    `cmpxchg(old, new)` and `xchg(val)` return the value held before the
    call; `value()` reads the current value. Any other width raises
    `ValueError`.
  - `AtomicPair(first=0, second=0, bits=64)`: two 32- or 64-bit words that
    `cmpxchg(old0, old1, new0, new1)` replaces together, returning `True`
    when the swap happened. `value()` returns both words as a tuple.
- `xutils.spin_lock`
  - `SpinLock`: a busy-waiting lock built on a 16-bit `AtomicInt`. `lock()`,
    `unlock()`, `try_lock()` (returns the previous state, `0` meaning the lock
    was taken) and `is_locked()` (`0` free, `1` held). It is also a context
    manager.
  - `cpu_relax()`: yields the processor briefly while spinning.
- `xutils.barrier`
  - `PBarrier(num)`: a thread barrier for `num` parties that counts
    arrivals. `wait()` records arrival and blocks until all have arrived;
    `done()` records arrival without blocking; `wait_num()` returns how many
    have not yet arrived and `ready()` is `True` when that is zero. A
    non-positive `num` raises `ValueError`.
- `xutils.marshalling`
  - `Marshal(fmt)`: packs and unpacks values with a `struct` format. A format
    with no byte-order character is packed little-endian with no padding. A
    one-field format encodes a plain value, a multi-field format a tuple.
    Methods: `size()`, `serialize(value)`, `serialize_into(value, buf,
    offset=0)` (returns the offset past the written data),
    `deserialize(buf)` (raises `ValueError` when too short),
    `deserialize_opt(buf)` (returns `None` when too short) and
    `extract_with_inc(buf, offset=0)` (returns the value and the next offset).
  - `MarshalT(fmt)`: the same payload behind an 8-byte little-endian header
    holding the payload size. `deserialize` returns `None` for data that is
    too short.
- `xutils.file_loader`
  - `FileLoader(name)`: reads a text file one line at a time.
    `next_key(converter=None)` returns the converted next line, or `None` at
    end of file. The default converter, `FileLoader.default_converter`,
    parses the first whitespace-separated token as an `int`. Usable as a
    context manager; `close()` closes the file.
- `xutils.memory_region`
  - `MemoryRegion(sz, buf=None)`: a buffer of `sz` bytes; `valid()` is
    `True` when it holds a buffer, `size()` returns `sz`.
  - `DRAMRegion(sz)` / `DRAMRegion.create(sz)`: a zero-filled `bytearray`.
  - `HugeRegion(sz, align_sz=2 MiB)`: an anonymous private `mmap` requested
    with huge pages. The size is padded by one alignment unit and rounded up
    to a multiple of `align_sz` (`HugeRegion.align_to_sz`). When the mapping
    fails, a warning is logged and the region is invalid;
    `HugeRegion.create` then returns `None`.
- `xutils.printing`
  - `vec_slice_to_str(v, begin, end)`: renders `v[begin:end]`, clipped to the
    sequence length, as `[a,b,c,]`.

## Install

```
pip install .
```

## Examples

```python
from xutils.atomic import AtomicInt
from xutils.spin_lock import SpinLock

counter = AtomicInt(0, 16)
old = counter.fetch_and_add(5)   # returns 0, counter is now 5

lock = SpinLock()
with lock:
    counter.inc()                # counter is now 6
```

```python
from xutils.marshalling import Marshal, MarshalT

codec = MarshalT("Q")
blob = codec.serialize(42)       # 8-byte size header + 8-byte payload
assert codec.deserialize(blob) == 42
assert codec.deserialize(blob[:4]) is None

pair = Marshal("IH")
assert pair.deserialize(pair.serialize((1, 2))) == (1, 2)
```

## What this package does not do

There is no statistics or reporting support: no running averages, no
percentile or CDF dumps and no x/y plotting output. There is no hardware
transactional memory; critical sections are guarded by `SpinLock` alone.
There is no hook for reporting uncaught exceptions, and no command-line
program.

## Tests

```
pip install .[test]
pytest
```