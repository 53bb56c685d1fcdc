from typing import Optional
import random

from simplecipher.alphabet import ALPHABET, char_to_index, index_to_char, validate
from simplecipher.errors import InvalidKey

KEY_LENGTH = 100

# os.urandom backed, safe to share between threads
_rng = random.SystemRandom()

def generate_key(length:int=KEY_LENGTH) -> str:
    if length < 1:
        raise ValueError("key length must be at least 1")
    return "".join(_rng.choice(ALPHABET) for _ in range(length))

def stretch_key(key:str, length:int) -> str:
    '''
    Repeat the key cyclically until it is exactly `length` letters long.
    Keys longer than `length` are truncated.

    e.g. stretch_key("ab", 5) == "ababa"
    '''
    return "".join(key[i % len(key)] for i in range(length))

class Cipher:
    '''
    Vigenère style substitution cipher over the lowercase alphabet.

    :param key: lowercase letters only. A random key of KEY_LENGTH letters is generated when omitted.
    '''
    def __init__(self, key:Optional[str]=None):
        if key is None:
            key = generate_key()
        elif not isinstance(key, str) or len(key) == 0:
            raise InvalidKey("key must be a non-empty string of lowercase letters")
        else:
            validate(key, error=InvalidKey)

        self._key = key.lower()

    @property
    def key(self) -> str:
        return self._key

    def encode(self, ptxt:str) -> str:
        return self._transform(ptxt, 1)

    def decode(self, ctxt:str) -> str:
        return self._transform(ctxt, -1)

    def _transform(self, text:str, direction:int) -> str:
        # Checked up front so a bad character never leaves half a result behind
        validate(text)

        key = stretch_key(self._key, len(text))
        out = list()
        for t, k in zip(text, key):
            out.append(index_to_char(char_to_index(t) + direction*char_to_index(k)))

        return "".join(out)

    def __repr__(self):
        return f"<Cipher key_len: {len(self._key)}>"

def encrypt(ptxt:str, key:str) -> str:
    return Cipher(key).encode(ptxt)

def decrypt(ctxt:str, key:str) -> str:
    return Cipher(key).decode(ctxt)
