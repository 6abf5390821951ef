"""Running-key cipher: a key text at least as long as the message."""


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


def _check_key(text: str, key: str) -> None:
    if len(key) < len(text):
        raise ValueError(
            f"running key is {len(key)} characters, text needs {len(text)}"
        )


def encrypt(text: str, key: str) -> str:
    """Shift each letter by the key character at the same position."""
    _check_key(text, key)
    return "".join(_shift_letter(ch, _key_shift(k)) for ch, k in zip(text, key))


def decrypt(text: str, key: str) -> str:
    """Undo :func:`encrypt` with the same running key."""
    _check_key(text, key)
    return "".join(_shift_letter(ch, -_key_shift(k)) for ch, k in zip(text, key))