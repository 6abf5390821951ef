import pytest

from classiciphers import autokey


def test_known_example():
    assert autokey.encrypt("ATTACKATDAWN", "QUEENLY") == "QNXEPVYTWTWP"


def test_known_example_decrypts():
    assert autokey.decrypt("QNXEPVYTWTWP", "QUEENLY") == "ATTACKATDAWN"


@pytest.mark.parametrize(
    "text,key",
    [
        ("HELLOWORLD", "KEY"),
        ("hello world", "key"),
        ("Mixed Case, With Punctuation!", "Secret"),
        ("SHORT", "AVERYLONGKEYINDEED"),
    ],
)
def test_round_trip(text, key):
    assert autokey.decrypt(autokey.encrypt(text, key), key) == text


def test_length_preserved():
    text = "ABCDEFGHIJ"
    assert len(autokey.encrypt(text, "XY")) == len(text)


def test_key_a_leaves_first_letter():
    result = autokey.encrypt("HELLO", "A")
    assert result[0] == "H"


def test_empty_key_raises():
    with pytest.raises(ValueError):
        autokey.encrypt("HELLO", "")
    with pytest.raises(ValueError):
        autokey.decrypt("HELLO", "")


def test_empty_text():
    assert autokey.encrypt("", "KEY") == ""