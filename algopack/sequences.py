"""Edit distance and longest common subsequence of two strings."""


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def edit_distance(str_a: str | bytes, str_b: str | bytes) -> int:
    """Return the Levenshtein distance between two strings.

    Each insertion, deletion or substitution costs one point. Strings are
    compared byte by byte in UTF-8, so a single non-ASCII character may
    count as several edits. Uses a full table: O(nm) time and space.
    """
    a = _as_bytes(str_a)
    b = _as_bytes(str_b)

    # distances[i][j] is the distance between a[:i] and b[:j]
    distances = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    distances[0] = list(range(len(b) + 1))
    for i, row in enumerate(distances):
        row[0] = i

    for i, char_a in enumerate(a, start=1):
        above, current = distances[i - 1], distances[i]
        for j, char_b in enumerate(b, start=1):
            substitution = above[j - 1] + (0 if char_a == char_b else 1)
            current[j] = min(above[j] + 1, current[j - 1] + 1, substitution)

    return distances[len(a)][len(b)]


def edit_distance_se(str_a: str | bytes, str_b: str | bytes) -> int:
    """Return the same distance as :func:`edit_distance` keeping a single row.

    O(nm) time and O(n) space, where n is the length of ``str_b``.
    """
    a = _as_bytes(str_a)
    b = _as_bytes(str_b)

    row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        diagonal = i - 1  # value of the previous row, previous column
        left = i  # value of this row, previous column
        for j, char_b in enumerate(b, start=1):
            left = min(
                diagonal + (0 if char_a == char_b else 1),
                left + 1,
                row[j] + 1,
            )
            diagonal = row[j]
            row[j] = left

    return row[len(b)]


def longest_common_subsequence(a: str, b: str) -> str:
    """Return a longest common subsequence of ``a`` and ``b``, by character."""
    # solutions[i][j] is the LCS length of a[:i] and b[:j]
    solutions = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]

    for i, ci in enumerate(a):
        for j, cj in enumerate(b):
            if ci == cj:
                solutions[i + 1][j + 1] = solutions[i][j] + 1
            else:
                solutions[i + 1][j + 1] = max(solutions[i][j + 1], solutions[i + 1][j])

    result: list[str] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif solutions[i - 1][j] > solutions[i][j - 1]:
            i -= 1
        else:
            j -= 1

    return "".join(reversed(result))