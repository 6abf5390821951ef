"""Atbash cipher: the alphabet is mirrored."""


def _mirror(ch: str) -> str:
    if "a" <= ch <= "z":
        return chr(ord("z") - (ord(ch) - ord("a")))
    if "A" <= ch <= "Z":
        return chr(ord("Z") - (ord(ch) - ord("A")))
    return ch


def atbash(text: str) -> str:
    """Map a<->z, b<->y, ... keeping case; applying it twice restores the text."""
    return "".join(_mirror(ch) for ch in text)