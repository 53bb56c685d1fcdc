import numpy as np

from simplecipher.alphabet import ALPHABET, char_to_index, validate

def frequency_table(text:str) -> np.ndarray:
    '''
    Count of each letter of the alphabet in the text, indexed a=0 ... z=25
    '''
    validate(text)
    ordinals = np.fromiter((char_to_index(c) for c in text), dtype=np.int64, count=len(text))
    return np.bincount(ordinals, minlength=len(ALPHABET))

def letter_distribution(text:str) -> np.ndarray:
    counts = frequency_table(text)
    if len(text) == 0:
        return counts.astype(np.float64)
    return counts / len(text)

# http://practicalcryptography.com/cryptanalysis/text-characterisation/index-coincidence/
def index_of_coincidence(text:str) -> float:
    '''
    measure of how similar a frequency distribution is to the uniform distribution
    English sits around 0.066, uniformly random letters around 0.038
    '''
    if len(text) < 2:
        return 0.0

    counts = frequency_table(text)
    numerator = int(np.sum(counts * (counts - 1)))
    denominator = len(text) * (len(text) - 1)

    return numerator / denominator
