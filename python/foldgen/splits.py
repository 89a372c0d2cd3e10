from typing import Iterator, List, Tuple

class NegativeSizeError(ValueError):
    pass

def check_natural(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"size must be an int, got {type(n).__name__}")
    if n < 0:
        raise NegativeSizeError(f"size must be a natural number, got {n}")
    return n

def splits(n: int) -> List[Tuple[int, int]]:
    """All (m, p) with m + p == n, ascending in m."""
    check_natural(n)
    return [(m, n - m) for m in range(n + 1)]

# splits generalised to n-ary branching; compositions(n, 2) matches splits(n)
def compositions(n: int, parts: int) -> Iterator[Tuple[int, ...]]:
    check_natural(n)
    if isinstance(parts, bool) or not isinstance(parts, int):
        raise TypeError(f"parts must be an int, got {type(parts).__name__}")
    if parts < 1:
        raise ValueError(f"parts must be at least 1, got {parts}")
    return _compositions(n, parts)

def _compositions(n: int, parts: int) -> Iterator[Tuple[int, ...]]:
    if parts == 1:
        yield (n,)
        return
    for m, rest in splits(n):
        for tail in _compositions(rest, parts - 1):
            yield (m,) + tail
