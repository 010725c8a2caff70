"""Owned memory regions: ordinary heap buffers and huge-page mappings."""

import logging
import mmap

_log = logging.getLogger(__name__)

_DEFAULT_HUGE_ALIGN = 2 << 20
# Linux value of MAP_HUGETLB, used when the mmap module does not expose it.
_LINUX_MAP_HUGETLB = 0x40000


class MemoryRegion:
    """A buffer of ``sz`` bytes; invalid when no buffer could be obtained."""

    def __init__(self, sz, buf=None):
        self.sz = sz
        self.buf = buf

    def __repr__(self):
        return f"{type(self).__name__}(sz={self.sz}, valid={self.valid()})"

    def size(self):
        """Return the region size in bytes."""
        return self.sz

    def valid(self):
        """Return True when the region holds a buffer."""
        return self.buf is not None


class DRAMRegion(MemoryRegion):
    """A zero-filled region in ordinary memory."""

    def __init__(self, sz):
        super().__init__(sz, bytearray(sz))

    @staticmethod
    def create(sz):
        """Allocate a region of ``sz`` bytes."""
        return DRAMRegion(sz)


class HugeRegion(MemoryRegion):
    """An anonymous mapping backed by huge pages.

    The size is padded by one alignment unit and rounded up to a multiple of
    it. When the mapping cannot be made, the region is invalid.
    """

    def __init__(self, sz, align_sz=_DEFAULT_HUGE_ALIGN):
        if align_sz <= 0:
            raise ValueError(f"alignment must be positive: {align_sz}")
        total = HugeRegion.align_to_sz(sz + align_sz, align_sz)
        super().__init__(total, None)
        try:
            flags = (
                mmap.MAP_PRIVATE
                | mmap.MAP_ANONYMOUS
                | getattr(mmap, "MAP_POPULATE", 0)
                | getattr(mmap, "MAP_HUGETLB", _LINUX_MAP_HUGETLB)
            )
            self.buf = mmap.mmap(
                -1, total, flags=flags, prot=mmap.PROT_READ | mmap.PROT_WRITE
            )
        except (OSError, AttributeError, ValueError, TypeError) as err:
            _log.warning(
                "error allocating huge page with sz: %d aligned with: %d; "
                "with error: %s",
                total,
                align_sz,
                err,
            )

    @staticmethod
    def create(sz, align_sz=_DEFAULT_HUGE_ALIGN):
        """Return a mapped region, or None if the mapping failed."""
        region = HugeRegion(sz, align_sz)
        return region if region.valid() else None

    @staticmethod
    def align_to_sz(x, align_sz):
        """Round ``x`` up to a multiple of ``align_sz``."""
        return (x + align_sz - 1) // align_sz * align_sz