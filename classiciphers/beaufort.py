"""Beaufort cipher; the same operation encrypts and decrypts."""


def _key_shift(ch: str) -> int:
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    return ord(ch) - ord("a")


def _reflect(ch: str, key_ch: str) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr((_key_shift(key_ch) - (ord(ch) - base)) % 26 + base)


def beaufort(text: str, key: str) -> str:
    """Map each letter p to (k - p) mod 26 with the key repeated; case is kept."""
    if not key:
        raise ValueError("beaufort needs a non-empty key")
    key_len = len(key)
    return "".join(_reflect(ch, key[i % key_len]) for i, ch in enumerate(text))