"""
Conversion between scrambled ids, word triples and address strings.

A scrambled id is written in base N (the dictionary size) with exactly three
digits, most significant first: id = i1 * N**2 + i2 * N + i3.
"""
from typing import Tuple

from map3terms.config import ADDRESS_DELIMITER
from map3terms.dictionary import Dictionary
from map3terms.errors import DigitOutOfRangeError, MalformedAddressError, PackOutOfRangeError

WordTriple = Tuple[int, int, int]


class WordPacker:
    """Writes scrambled ids as three dictionary words and reads them back."""

    def __init__(self, dictionary: Dictionary, delimiter: str = ADDRESS_DELIMITER):
        self.dictionary = dictionary
        self.delimiter = delimiter
        self.radix = len(dictionary)

    def pack(self, scrambled_id: int) -> WordTriple:
        """
        Split an id into three dictionary indices.

        Raises:
            PackOutOfRangeError: If the id needs more than three digits
        """
        n = self.radix
        if not 0 <= scrambled_id < n ** 3:
            raise PackOutOfRangeError(
                f"Id {scrambled_id} not representable with three words of radix {n}"
            )
        return scrambled_id // (n * n), (scrambled_id // n) % n, scrambled_id % n

    def unpack(self, i1: int, i2: int, i3: int) -> int:
        """
        Combine three dictionary indices into an id.

        Raises:
            DigitOutOfRangeError: If any index is outside [0, N)
        """
        n = self.radix
        for digit in (i1, i2, i3):
            if not 0 <= digit < n:
                raise DigitOutOfRangeError(f"Word index {digit} out of range for radix {n}")
        return (i1 * n + i2) * n + i3

    def to_words(self, triple: WordTriple) -> str:
        return self.delimiter.join(self.dictionary.word_at(i) for i in triple)

    def from_words(self, text: str) -> WordTriple:
        """
        Parse "w1.w2.w3" into dictionary indices.

        Raises:
            MalformedAddressError: Unless the text holds exactly three
                non-empty words
            UnknownWordError: If a word is not in the dictionary
        """
        tokens = [token.strip() for token in text.strip().split(self.delimiter)]
        if len(tokens) != 3 or not all(tokens):
            raise MalformedAddressError(f"Expected three words, got: {text!r}")

        i1, i2, i3 = (self.dictionary.index_of(token) for token in tokens)
        return i1, i2, i3
