"""Rail fence transposition cipher."""


def _zigzag(length: int, rails: int) -> list[int]:
    if rails < 1:
        raise ValueError(f"number of rails must be positive: {rails}")
    if rails == 1:
        return [0] * length
    cycle = 2 * (rails - 1)
    return [min(i % cycle, cycle - i % cycle) for i in range(length)]


def _reading_order(length: int, rails: int) -> list[int]:
    rows = _zigzag(length, rails)
    return sorted(range(length), key=rows.__getitem__)


def encrypt(text: str, rails: int) -> str:
    """Write the text in a zigzag over ``rails`` rows and read the rows in turn."""
    return "".join(text[i] for i in _reading_order(len(text), rails))


def decrypt(cipher: str, rails: int) -> str:
    """Undo :func:`encrypt` with the same number of rails."""
    result = [""] * len(cipher)
    for ch, index in zip(cipher, _reading_order(len(cipher), rails)):
        result[index] = ch
    return "".join(result)