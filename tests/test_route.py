import pytest

from classiciphers.route import decrypt, encrypt


def test_encrypt_small_grid():
    assert encrypt("ABCDEF", 2, 3) == "ADEFCB"


def test_decrypt_small_grid():
    assert decrypt("ADEFCB", 2, 3) == "ABCDEF"


@pytest.mark.parametrize(
    "rows,cols", [(1, 1), (1, 5), (5, 1), (2, 2), (3, 4), (4, 3), (5, 5), (6, 2)]
)
def test_round_trip_and_permutation(rows, cols):
    text = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"[: rows * cols]
    cipher = encrypt(text, rows, cols)
    assert sorted(cipher) == sorted(text)
    assert decrypt(cipher, rows, cols) == text


def test_first_column_read_first():
    text = "ABCDEFGHIJKL"
    assert encrypt(text, 3, 4)[:3] == text[0::4]


def test_single_row_and_column_are_identity():
    assert encrypt("ABCD", 1, 4) == "ABCD"
    assert encrypt("ABCD", 4, 1) == "ABCD"


def test_extra_text_is_ignored():
    assert encrypt("ABCDEFGH", 2, 3) == encrypt("ABCDEF", 2, 3)


def test_short_text_rejected():
    with pytest.raises(ValueError):
        encrypt("ABC", 2, 3)
    with pytest.raises(ValueError):
        decrypt("ABC", 2, 3)


def test_bad_dimensions_rejected():
    with pytest.raises(ValueError):
        encrypt("ABCD", 0, 4)
    with pytest.raises(ValueError):
        decrypt("ABCD", 2, -1)