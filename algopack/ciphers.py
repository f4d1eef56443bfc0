"""Classical ciphers: Caesar, ROT13 and columnar transposition."""


def caesar(cipher: str, shift: int) -> str:
    """Rotate each ASCII letter right by ``shift`` places, keeping its case.

    Other characters, including non-ASCII letters, pass through unchanged.
    ``shift`` must be in the range 0..255.
    """
    if not 0 <= shift <= 255:
        raise ValueError(f"shift {shift} is outside 0..255")

    def rotate(c: str) -> str:
        if c.isascii() and c.isalpha():
            first = ord("a") if c.islower() else ord("A")
            return chr(first + (ord(c) + shift - first) % 26)
        return c

    return "".join(rotate(c) for c in cipher)


def rot13(text: str) -> str:
    """Upper-case ``text`` and rotate each letter A-Z by 13 places."""

    def rotate(c: str) -> str:
        if "A" <= c <= "M":
            return chr(ord(c) + 13)
        if "N" <= c <= "Z":
            return chr(ord(c) - 13)
        return c

    return "".join(rotate(c) for c in text.upper())


def transposition(key: str, text: str) -> str:
    """Encrypt ``text`` with a columnar transposition keyed by ``key``.

    Both strings are upper-cased. The text is written row by row under the
    key, padded with 'X', and the columns are read out in the sorted order of
    their key characters. When a key character repeats, the later column
    replaces the earlier one.
    """
    keyword = key.upper()
    to_enc = text.upper()
    width = len(keyword)
    if width == 0:
        raise ValueError("the key must not be empty")

    missing = -len(to_enc) % width
    padded = to_enc + "X" * missing

    columns: dict[str, str] = {}
    for index, letter in enumerate(keyword):
        columns[letter] = padded[index::width]

    return "".join(columns[letter] for letter in sorted(columns))