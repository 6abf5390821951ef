"""Gronsfeld cipher: a Vigenère variant keyed by decimal digits."""

import string


def _shifts(key: str) -> list[int]:
    if not key:
        raise ValueError("gronsfeld needs a non-empty key")
    if any(ch not in string.digits for ch in key):
        raise ValueError(f"gronsfeld key must be digits only: {key!r}")
    return [int(ch) for ch in key]


def _shift_letter(ch: str, shift: int) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr((ord(ch) - base + shift) % 26 + base)


def encrypt(text: str, key: str) -> str:
    """Shift each letter forward by the matching digit of the repeated key."""
    shifts = _shifts(key)
    return "".join(
        _shift_letter(ch, shifts[i % len(shifts)]) for i, ch in enumerate(text)
    )


def decrypt(text: str, key: str) -> str:
    """Undo :func:`encrypt` with the same digit key."""
    shifts = _shifts(key)
    return "".join(
        _shift_letter(ch, -shifts[i % len(shifts)]) for i, ch in enumerate(text)
    )