"""August cipher: a fixed shift of one letter forward."""


def _shift_letter(ch: str, shift: int) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr((ord(ch) - base + shift) % 26 + base)


def encrypt(text: str) -> str:
    """Replace each letter with the next one, z wrapping to a."""
    return "".join(_shift_letter(ch, 1) for ch in text)


def decrypt(text: str) -> str:
    """Replace each letter with the previous one, a wrapping to z."""
    return "".join(_shift_letter(ch, -1) for ch in text)