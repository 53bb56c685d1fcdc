class CipherError(ValueError):
    pass

class InvalidKey(CipherError):
    pass

class InvalidCharacter(CipherError):
    '''
    A character of the text (or key) could not be mapped onto the alphabet

    :param char: the offending character
    :param position: index of the character in the text, None for a lone lookup
    '''
    def __init__(self, char:str, position:int=None):
        self.char = char
        self.position = position

        if position is None:
            msg = f"{char!r} is not in the alphabet"
        else:
            msg = f"{char!r} at position {position} is not in the alphabet"
        super().__init__(msg)
