"""Hill cipher with a 2x2 key matrix over the alphabet A-Z."""

import math
import string

Matrix = list[list[int]]


def _check_shape(key) -> None:
    if len(key) != 2 or any(len(row) != 2 for row in key):
        raise ValueError("hill key must be a 2x2 matrix")


def determinant(key) -> int:
    """Return the key's determinant reduced modulo 26."""
    _check_shape(key)
    return (key[0][0] * key[1][1] - key[0][1] * key[1][0]) % 26


def mod_inverse(a: int, m: int) -> int:
    """Return x in 1..m-1 with a*x = 1 (mod m); raises ValueError if none exists."""
    a %= m
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    raise ValueError(f"no modular inverse of {a} modulo {m}")


def is_valid_key(key) -> bool:
    """True when all entries lie in 0..25 and the determinant is coprime with 26."""
    _check_shape(key)
    if any(not 0 <= value < 26 for row in key for value in row):
        return False
    return math.gcd(determinant(key), 26) == 1


def adjugate(key) -> Matrix:
    """Return the adjugate of the key, with entries reduced modulo 26."""
    _check_shape(key)
    return [
        [key[1][1], -key[0][1] % 26],
        [-key[1][0] % 26, key[0][0]],
    ]


def encrypt(text: str, key) -> str:
    """Keep letters only, upper-case them, pad to even length with 'X' and encrypt pairs."""
    _check_shape(key)
    cleaned = "".join(ch.upper() for ch in text if ch in string.ascii_letters)
    if len(cleaned) % 2:
        cleaned += "X"
    out = []
    for first, second in zip(cleaned[0::2], cleaned[1::2]):
        p1 = ord(first) - ord("A")
        p2 = ord(second) - ord("A")
        out.append(chr((key[0][0] * p1 + key[0][1] * p2) % 26 + ord("A")))
        out.append(chr((key[1][0] * p1 + key[1][1] * p2) % 26 + ord("A")))
    return "".join(out)


def decrypt(text: str, key) -> str:
    """Encrypt with the inverse key; raises ValueError if the key is not invertible."""
    try:
        det_inv = mod_inverse(determinant(key), 26)
    except ValueError:
        raise ValueError(
            "invalid key matrix: no modular multiplicative inverse exists"
        ) from None
    inverse = [[value * det_inv % 26 for value in row] for row in adjugate(key)]
    return encrypt(text, inverse)