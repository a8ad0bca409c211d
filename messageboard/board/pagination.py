def clamp_offset(requested: int, length: int) -> int:
    """Clamp a requested starting offset so it never points past the end of the log.

    An offset beyond the end degrades to ``length``, which selects an empty slice.
    """
    if requested < 0 or length < 0:
        raise ValueError(f"offset and length must be non-negative (got {requested}, {length})")
    return min(requested, length)
