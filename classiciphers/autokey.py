"""Autokey cipher: the key is followed by the plaintext itself."""

from collections import deque


def _key_shift(ch: str) -> int:
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    return ord(ch) - ord("a")


def _shift_letter(ch: str, shift: int) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr((ord(ch) - base + shift) % 26 + base)


def _check_key(key: str) -> None:
    if not key:
        raise ValueError("autokey needs a non-empty key")


def encrypt(text: str, key: str) -> str:
    """Encrypt with the key stream ``key + text``."""
    _check_key(key)
    stream = key + text
    return "".join(_shift_letter(ch, _key_shift(k)) for ch, k in zip(text, stream))


def decrypt(text: str, key: str) -> str:
    """Decrypt, extending the key stream with each recovered character."""
    _check_key(key)
    stream = deque(key)
    plain = []
    for ch in text:
        recovered = _shift_letter(ch, -_key_shift(stream.popleft()))
        plain.append(recovered)
        stream.append(recovered)
    return "".join(plain)