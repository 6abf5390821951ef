import pytest

from classiciphers import affine, caesar

VALID_A = [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]


def test_known_example():
    assert affine.encrypt("AFFINE CIPHER", 5, 8) == "IHHWVC SWFRCP"


def test_known_example_decrypts():
    assert affine.decrypt("IHHWVC SWFRCP", 5, 8) == "AFFINE CIPHER"


@pytest.mark.parametrize("a", VALID_A)
def test_mod_inverse_is_inverse(a):
    inv = affine.mod_inverse(a, 26)
    assert (a * inv) % 26 == 1
    assert 1 <= inv < 26


@pytest.mark.parametrize("a", [0, 2, 13, 26])
def test_mod_inverse_missing_raises(a):
    with pytest.raises(ValueError):
        affine.mod_inverse(a, 26)


@pytest.mark.parametrize("a", VALID_A)
@pytest.mark.parametrize("b", [0, 3, 25])
def test_round_trip(a, b):
    text = "Hello, World! xyz"
    assert affine.decrypt(affine.encrypt(text, a, b), a, b) == text


def test_decrypt_without_inverse_raises():
    with pytest.raises(ValueError):
        affine.decrypt("HELLO", 13, 4)


def test_a_one_matches_caesar():
    text = "Mixed Case Text."
    assert affine.encrypt(text, 1, 7) == caesar.encrypt(text, 7)


def test_non_letters_untouched():
    assert affine.encrypt("123 ,.!", 5, 8) == "123 ,.!"