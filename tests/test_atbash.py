import string

from classiciphers.atbash import atbash


def test_known_value():
    assert atbash("abc XYZ") == "zyx CBA"


def test_whole_alphabet_reversed():
    assert atbash(string.ascii_lowercase) == string.ascii_lowercase[::-1]
    assert atbash(string.ascii_uppercase) == string.ascii_uppercase[::-1]


def test_is_involution():
    text = "Hello, World! 2024"
    assert atbash(atbash(text)) == text


def test_non_letters_untouched():
    assert atbash("123 !?\n") == "123 !?\n"


def test_empty():
    assert atbash("") == ""