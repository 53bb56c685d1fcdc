from typing import Type
import string

from simplecipher.errors import CipherError, InvalidCharacter

ALPHABET = string.ascii_lowercase

_INDEX = {c: i for i, c in enumerate(ALPHABET)}

def char_to_index(char:str) -> int:
    '''
    Position of a single letter in the alphabet: a -> 0, b -> 1, ..., z -> 25
    '''
    idx = _INDEX.get(char)
    if idx is None:
        raise InvalidCharacter(char)
    return idx

def index_to_char(index:int) -> str:
    '''
    Letter at the given position, wrapping around the alphabet in both directions
    e.g. 26 -> a, 40 -> o, -1 -> z
    '''
    return ALPHABET[index % len(ALPHABET)]

def validate(text:str, error:Type[CipherError]=InvalidCharacter):
    for i, c in enumerate(text):
        if c not in _INDEX:
            if error is InvalidCharacter:
                raise InvalidCharacter(c, i)
            raise error(f"{c!r} at position {i} is not a lowercase letter")
