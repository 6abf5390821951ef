"""Classical substitution and transposition ciphers, one module per cipher."""

__version__ = "0.1.0"

__all__ = [
    "affine",
    "atbash",
    "august",
    "autokey",
    "beaufort",
    "caesar",
    "gronsfeld",
    "hill",
    "myszkowski",
    "railfence",
    "route",
    "runningkey",
    "vigenere",
]