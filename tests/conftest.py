import os

import pytest

from map3terms.codec import ThreeWordCodec
from map3terms.config import GridConfig
from map3terms.dictionary import Dictionary, generate_vocabulary
from map3terms.grid import GridIndexer
from map3terms.scrambler import Scrambler

os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')

TOY_WORDS = ["ant", "bee", "cat", "dog", "elk", "fox", "gnu", "hen"]
FRUIT_WORDS = ["apple", "banana", "cherry", "date", "elder", "fig", "grape", "honeydew"]

# 16 rows x 32 columns = 512 cells = 8 ** 3
TOY_GRID = GridConfig(lat_step=11.25, lon_ratio=1.0)


@pytest.fixture
def toy_dictionary():
    return Dictionary.load(TOY_WORDS)


@pytest.fixture
def toy_grid():
    return GridIndexer(TOY_GRID)


@pytest.fixture
def toy_scrambler(toy_grid):
    return Scrambler(toy_grid.total_cells)


@pytest.fixture
def toy_codec():
    return ThreeWordCodec.from_words(TOY_WORDS, TOY_GRID)


@pytest.fixture
def fruit_codec():
    return ThreeWordCodec.from_words(FRUIT_WORDS, TOY_GRID)


@pytest.fixture(scope='session')
def default_codec():
    return ThreeWordCodec.from_words(generate_vocabulary(40000))
