"""Knuth-Morris-Pratt substring search over UTF-8 bytes."""


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def precompute_table(pattern: str | bytes) -> list[int]:
    """Build the prefix table for ``pattern``, one entry per byte."""
    p = _as_bytes(pattern)
    pi = [0] * len(p)
    k = 0
    for q in range(1, len(p)):
        while k > 0 and p[k] != p[q]:
            k = pi[k]
        if p[k] == p[q]:
            k += 1
        pi[q] = k
    return pi


def knuth_morris_pratt(text: str | bytes, pattern: str | bytes) -> list[int]:
    """Return the byte offsets of every (possibly overlapping) match of ``pattern``.

    An empty text or pattern yields no matches.
    """
    t = _as_bytes(text)
    p = _as_bytes(pattern)
    if not t or not p:
        return []

    pi = precompute_table(p)
    matches: list[int] = []
    q = 0
    for i, byte in enumerate(t, start=1):
        while q > 0 and p[q] != byte:
            q = pi[q - 1]
        if p[q] == byte:
            q += 1
        if q == len(p):
            matches.append(i - len(p))
            q = pi[q - 1]
    return matches