"""
Word dictionary for encoding/decoding addresses.

A dictionary of N words is the radix of the three-word address space: it can
label N ** 3 cells. Lookups in both directions are O(1) and the dictionary is
never modified after loading, so one instance can be shared by any number of
callers.
"""
import logging
from itertools import islice, product
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from map3terms.config import ADDRESS_DELIMITER
from map3terms.errors import (
    DictionaryTooSmallError,
    DuplicateWordError,
    EmptyDictionaryError,
    IndexOutOfRangeError,
    InvalidWordError,
    UnknownWordError,
)

logger = logging.getLogger(__name__)

CONSONANTS = 'bdfghjklmnprstvz'
VOWELS = 'aeiou'


def normalize_word(word: str) -> str:
    """Trim and lower-case a word before lookup."""
    return word.strip().lower()


class Dictionary:
    """Ordered, immutable vocabulary with word <-> index lookup."""

    __slots__ = ('_words', '_indices')

    def __init__(self, words: Iterable[str]):
        ordered = []
        indices: Dict[str, int] = {}
        for raw in words:
            word = normalize_word(raw)
            if not word or ADDRESS_DELIMITER in word or any(c.isspace() for c in word):
                raise InvalidWordError(raw)
            if word in indices:
                raise DuplicateWordError(word)
            indices[word] = len(ordered)
            ordered.append(word)

        if not ordered:
            raise EmptyDictionaryError("Dictionary must contain at least one word")

        self._words: Tuple[str, ...] = tuple(ordered)
        self._indices = indices

    @classmethod
    def load(cls, source: Iterable[str], total_cells: Optional[int] = None) -> 'Dictionary':
        """
        Build a dictionary from a list of words.

        Args:
            source: Words in address order
            total_cells: Optional number of grid cells the dictionary must cover

        Returns:
            Loaded dictionary

        Raises:
            DuplicateWordError: If a word appears twice
            EmptyDictionaryError: If the list is empty
            DictionaryTooSmallError: If size ** 3 < total_cells
        """
        dictionary = cls(source)
        if total_cells is not None:
            dictionary.require_capacity(total_cells)
        logger.info(f"Loaded dictionary with {len(dictionary)} words")
        return dictionary

    def require_capacity(self, total_cells: int) -> None:
        if self.capacity < total_cells:
            raise DictionaryTooSmallError(len(self._words), total_cells)

    @property
    def capacity(self) -> int:
        """Number of distinct three-word addresses."""
        return len(self._words) ** 3

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def index_of(self, word: str) -> int:
        try:
            return self._indices[normalize_word(word)]
        except KeyError:
            raise UnknownWordError(word) from None

    def word_at(self, index: int) -> str:
        if not 0 <= index < len(self._words):
            raise IndexOutOfRangeError(index, len(self._words))
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._indices

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary(size={len(self._words)})"


def parse_word_list(text: str) -> list[str]:
    """
    Parse a word list file: one word per line.

    Blank lines and lines starting with '#' are ignored.
    """
    words = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith('#'):
            words.append(line)
    return words


def load_words_from_file(path: Union[str, Path]) -> list[str]:
    """Read a UTF-8 word list from disk."""
    return parse_word_list(Path(path).read_text(encoding='utf-8'))


def generate_vocabulary(size: int) -> list[str]:
    """
    Generate a deterministic vocabulary of three-syllable pseudo-words.

    Syllables are a consonant followed by a vowel, which gives
    (16 * 5) ** 3 = 512000 distinct words.

    Args:
        size: Number of words to generate

    Returns:
        List of `size` distinct words, always in the same order
    """
    syllables = [c + v for c, v in product(CONSONANTS, VOWELS)]
    limit = len(syllables) ** 3
    if not 0 < size <= limit:
        raise ValueError(f"Vocabulary size must be in 1..{limit}, got {size}")

    return [''.join(parts) for parts in islice(product(syllables, repeat=3), size)]
