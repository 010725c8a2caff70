"""Rendering of sequence slices."""


def _fmt(v):
    if isinstance(v, float):
        return format(v, "g")
    return str(v)


def vec_slice_to_str(v, begin, end):
    """Render ``v[begin:end]`` as ``[a,b,c,]``, clipped to the sequence length."""
    if begin < 0:
        raise ValueError(f"negative begin: {begin}")
    stop = min(len(v), end)
    return "[" + "".join(f"{_fmt(x)}," for x in v[begin:stop]) + "]"