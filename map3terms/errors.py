"""
Exceptions raised by the address codec.

Every error derives from ``ValueError`` so callers can treat a bad coordinate
or a bad address like any other invalid input.
"""


class AddressError(ValueError):
    """Base class for all codec errors."""


# Dictionary

class DictionaryError(AddressError):
    """Problem with the word list or a word lookup."""


class EmptyDictionaryError(DictionaryError):
    pass


class DuplicateWordError(DictionaryError):
    def __init__(self, word: str):
        super().__init__(f"Duplicate word in dictionary: {word}")
        self.word = word


class InvalidWordError(DictionaryError):
    def __init__(self, word: str):
        super().__init__(f"Invalid dictionary word: {word!r}")
        self.word = word


class DictionaryTooSmallError(DictionaryError):
    def __init__(self, size: int, total_cells: int):
        super().__init__(
            f"Dictionary of {size} words addresses {size ** 3} cells, "
            f"grid needs {total_cells}"
        )
        self.size = size
        self.total_cells = total_cells


class UnknownWordError(DictionaryError):
    def __init__(self, word: str):
        super().__init__(f"Unknown word: {word}")
        self.word = word


class IndexOutOfRangeError(DictionaryError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Word index {index} out of range for {size} words")
        self.index = index
        self.size = size


# Grid

class GridError(AddressError):
    """Problem mapping between coordinates and cells."""


class GridOutOfRangeError(GridError):
    pass


# Word packing

class PackError(AddressError):
    """Problem converting between ids, word triples and address strings."""


class PackOutOfRangeError(PackError):
    pass


class DigitOutOfRangeError(PackError):
    pass


class MalformedAddressError(PackError):
    pass
