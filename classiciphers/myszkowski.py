"""Columnar transposition ordered by the alphabetical rank of key letters."""

import string

PAD = "X"


def preprocess(text: str) -> str:
    """Drop everything but ASCII letters and upper-case the rest."""
    return "".join(ch.upper() for ch in text if ch in string.ascii_letters)


def key_order(key: str) -> list[int]:
    """Return each key letter's alphabet index (A=0 ... Z=25), case-insensitive."""
    order = []
    for ch in key:
        if ch not in string.ascii_letters:
            raise ValueError(f"key must contain letters only: {key!r}")
        order.append(ord(ch.upper()) - ord("A"))
    return order


def _column_sequence(key: str) -> list[int]:
    if not key:
        raise ValueError("myszkowski needs a non-empty key")
    order = key_order(key)
    # Stable sort: columns with equal letters keep their left-to-right order.
    return sorted(range(len(key)), key=order.__getitem__)


def encrypt(plaintext: str, key: str) -> str:
    """Write the text in rows under the key, padded with 'X', and read columns in key order."""
    sequence = _column_sequence(key)
    width = len(key)
    rows = -(-len(plaintext) // width)
    padded = plaintext.ljust(rows * width, PAD)
    return "".join(padded[col::width] for col in sequence)


def decrypt(ciphertext: str, key: str) -> str:
    """Refill the columns in key order and read the rows back."""
    sequence = _column_sequence(key)
    width = len(key)
    rows = -(-len(ciphertext) // width)
    columns = [PAD * rows] * width
    pos = 0
    for col in sequence:
        chunk = ciphertext[pos : pos + rows]
        pos += len(chunk)
        columns[col] = chunk.ljust(rows, PAD)
    text = "".join("".join(column[r] for column in columns) for r in range(rows))
    return text[: len(ciphertext)]