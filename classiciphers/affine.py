"""Affine cipher: each letter x becomes (a*x + b) mod 26."""


def mod_inverse(a: int, m: int) -> int:
    """Return the smallest positive i with a*i = 1 (mod m).

    Raises ValueError when no such inverse exists.
    """
    for i in range(1, m):
        if (a * i) % m == 1:
            return i
    raise ValueError(f"no modular inverse of {a} modulo {m}")


def _map_letters(text: str, func) -> str:
    out = []
    for ch in text:
        if "a" <= ch <= "z":
            base = ord("a")
        elif "A" <= ch <= "Z":
            base = ord("A")
        else:
            out.append(ch)
            continue
        out.append(chr(func(ord(ch) - base) % 26 + base))
    return "".join(out)


def encrypt(text: str, a: int, b: int) -> str:
    """Encrypt letters with the affine map x -> a*x + b, keeping case."""
    return _map_letters(text, lambda x: a * x + b)


def decrypt(text: str, a: int, b: int) -> str:
    """Invert :func:`encrypt`; raises ValueError if ``a`` has no inverse mod 26."""
    a_inv = mod_inverse(a, 26)
    return _map_letters(text, lambda x: a_inv * (x - b))