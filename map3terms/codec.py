"""
Three-word address codec.

encode: coordinate -> cell id -> scrambled id -> word triple -> "w1.w2.w3"
decode: the same pipeline in reverse, returning the centre of the cell.
"""
from typing import Iterable, Optional

from map3terms.config import DEFAULT_GRID, DEFAULT_SCRAMBLE, GridConfig, ScrambleConfig
from map3terms.dictionary import Dictionary
from map3terms.grid import Bounds, Coordinate, GridIndexer
from map3terms.packer import WordPacker
from map3terms.scrambler import Scrambler


class ThreeWordCodec:
    """
    Converts between coordinates and three-word addresses.

    All parts are immutable once built, so a single codec may be shared
    between threads.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        grid: Optional[GridIndexer] = None,
        scrambler: Optional[Scrambler] = None,
    ):
        self.grid = grid or GridIndexer()
        self.scrambler = scrambler or Scrambler(self.grid.total_cells)
        if self.scrambler.total_cells != self.grid.total_cells:
            raise ValueError(
                f"Scrambler covers {self.scrambler.total_cells} ids, "
                f"grid has {self.grid.total_cells} cells"
            )

        dictionary.require_capacity(self.grid.total_cells)
        self.dictionary = dictionary
        self.packer = WordPacker(dictionary)

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        grid_config: GridConfig = DEFAULT_GRID,
        scramble_config: ScrambleConfig = DEFAULT_SCRAMBLE,
    ) -> 'ThreeWordCodec':
        grid = GridIndexer(grid_config)
        dictionary = Dictionary.load(words, total_cells=grid.total_cells)
        return cls(dictionary, grid, Scrambler(grid.total_cells, scramble_config))

    def encode(self, lat: float, lon: float) -> str:
        """
        Get the address of the cell containing a coordinate.

        Args:
            lat: Latitude in [-90, 90]
            lon: Longitude in [-180, 180]

        Returns:
            Address in "w1.w2.w3" form
        """
        cell_id = self.grid.cell_of(lat, lon)
        return self.address_of_cell(cell_id)

    def decode(self, address: str) -> Coordinate:
        """
        Get the centre of the cell an address names.

        Args:
            address: Address in "w1.w2.w3" form; words are trimmed and
                compared case-insensitively

        Returns:
            Centre coordinate of the cell
        """
        return self.grid.center_of(self.cell_of_address(address))

    def address_of_cell(self, cell_id: int) -> str:
        scrambled = self.scrambler.scramble(cell_id)
        return self.packer.to_words(self.packer.pack(scrambled))

    def cell_of_address(self, address: str) -> int:
        scrambled = self.packer.unpack(*self.packer.from_words(address))
        return self.scrambler.unscramble(scrambled)

    def bounds_of_address(self, address: str) -> Bounds:
        return self.grid.bounds_of(self.cell_of_address(address))
