"""Vigenère cipher with a repeated keyword."""


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


def extend_key(text: str, keyword: str) -> str:
    """Repeat ``keyword`` to the length of ``text``; a longer keyword is kept whole."""
    if len(keyword) >= len(text):
        return keyword
    if not keyword:
        raise ValueError("vigenere needs a non-empty keyword")
    repeats = -(-len(text) // len(keyword))
    return (keyword * repeats)[: len(text)]


def encrypt(text: str, key: str) -> str:
    """Encrypt letters, advancing the key on every character, symbols included."""
    full_key = extend_key(text, key)
    return "".join(
        _shift_letter(ch, _key_shift(k)) for ch, k in zip(text, full_key)
    )


def decrypt(text: str, key: str) -> str:
    """Undo :func:`encrypt` with the same key."""
    full_key = extend_key(text, key)
    return "".join(
        _shift_letter(ch, -_key_shift(k)) for ch, k in zip(text, full_key)
    )