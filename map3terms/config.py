"""
Address format constants.

The dictionary, the grid resolution and the scramble constants together make
up an address format. Changing any of them changes the address of every cell,
so the defaults below are fixed for FORMAT_VERSION.
"""
from dataclasses import dataclass
from typing import Tuple

FORMAT_VERSION = 'v1'

ADDRESS_DELIMITER = '.'

# Size of the generated vocabulary used when no word list is configured.
# 40000 ** 3 = 6.4e13 >= 3.6e13 cells of the default grid.
DEFAULT_DICTIONARY_SIZE = 40000


@dataclass(frozen=True)
class GridConfig:
    """
    Equirectangular grid resolution.

    Attributes:
        lat_step: Cell height in degrees of latitude
        lon_ratio: Cell width as a multiple of lat_step
    """
    lat_step: float = 3e-5  # ~3.3 m
    lon_ratio: float = 2.0  # square cells at 60 degrees latitude

    def __post_init__(self):
        if not 0 < self.lat_step <= 180:
            raise ValueError(f"lat_step must be in (0, 180], got {self.lat_step}")
        if not 0 < self.lat_step * self.lon_ratio <= 360:
            raise ValueError(f"lon_ratio gives an invalid longitude step: {self.lon_ratio}")

    @property
    def lon_step(self) -> float:
        return self.lat_step * self.lon_ratio


@dataclass(frozen=True)
class ScrambleConfig:
    """
    Feistel network constants for the cell id permutation.

    Attributes:
        round_keys: One key per round, xored into the round input
        multipliers: Two odd multipliers used by the round function
    """
    round_keys: Tuple[int, ...] = (
        0xA511E9B3,
        0x63D83595,
        0x9E3779B9,
        0x2545F491,
        0xD6E8FEB8,
        0x4F1BBCDC,
    )
    multipliers: Tuple[int, int] = (0x045D9F3B, 0x119DE1F3)

    def __post_init__(self):
        if len(self.round_keys) < 3:
            raise ValueError("At least 3 Feistel rounds are required")
        if len(self.multipliers) != 2 or any(m % 2 == 0 for m in self.multipliers):
            raise ValueError("Exactly two odd multipliers are required")


DEFAULT_GRID = GridConfig()
DEFAULT_SCRAMBLE = ScrambleConfig()
