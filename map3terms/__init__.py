"""
Three-word addresses for every ~3 m cell on Earth.
"""
from map3terms.codec import ThreeWordCodec
from map3terms.config import FORMAT_VERSION, GridConfig, ScrambleConfig
from map3terms.dictionary import Dictionary, generate_vocabulary
from map3terms.errors import (
    AddressError,
    DictionaryError,
    GridError,
    GridOutOfRangeError,
    MalformedAddressError,
    PackError,
    UnknownWordError,
)
from map3terms.grid import Bounds, Coordinate, GridIndexer
from map3terms.packer import WordPacker
from map3terms.scrambler import Scrambler

__all__ = [
    'AddressError',
    'Bounds',
    'Coordinate',
    'Dictionary',
    'DictionaryError',
    'FORMAT_VERSION',
    'GridConfig',
    'GridError',
    'GridIndexer',
    'GridOutOfRangeError',
    'MalformedAddressError',
    'PackError',
    'ScrambleConfig',
    'Scrambler',
    'ThreeWordCodec',
    'UnknownWordError',
    'WordPacker',
    'generate_vocabulary',
]
