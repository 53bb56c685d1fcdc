import pytest

from simplecipher.alphabet import ALPHABET, char_to_index, index_to_char, validate
from simplecipher.errors import InvalidCharacter, InvalidKey

def test_char_to_index():
    assert char_to_index('a') == 0
    assert char_to_index('b') == 1
    assert char_to_index('z') == 25

def test_char_to_index_rejects():
    for bad in ['A', ' ', '1', '!', '', 'ab', 'é']:
        with pytest.raises(InvalidCharacter):
            char_to_index(bad)

def test_index_to_char_wraps():
    assert index_to_char(0) == 'a'
    assert index_to_char(25) == 'z'
    assert index_to_char(26) == 'a'
    assert index_to_char(40) == 'o'
    assert index_to_char(-1) == 'z'
    assert index_to_char(-26) == 'a'
    assert index_to_char(-27) == 'z'

def test_index_roundtrip():
    for i, c in enumerate(ALPHABET):
        assert index_to_char(char_to_index(c)) == c
        assert char_to_index(index_to_char(i)) == i

def test_validate():
    validate("")
    validate(ALPHABET)

    with pytest.raises(InvalidCharacter) as e:
        validate("iam a panda")
    assert e.value.char == ' '
    assert e.value.position == 3

    with pytest.raises(InvalidKey):
        validate("abC", error=InvalidKey)
