"""Caesar shift cipher over the ASCII Latin alphabet."""


def _shift_letter(ch: str, shift: int) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr((ord(ch) - base + shift) % 26 + base)


def encrypt(text: str, shift: int) -> str:
    """Shift every letter forward by ``shift`` places, keeping its case."""
    return "".join(_shift_letter(ch, shift) for ch in text)


def decrypt(text: str, shift: int) -> str:
    """Undo :func:`encrypt` with the same shift."""
    return "".join(_shift_letter(ch, -shift) for ch in text)