"""
Fixed permutation of cell ids.

Neighbouring cells have neighbouring ids. Scrambling the id before packing it
into words stops a neighbour's address from being guessed from a known one.

The permutation is a balanced Feistel network over 2h bits, where h is the
smallest half-width for which 2 ** (2h) >= total_cells. Values that land
outside [0, total_cells) are fed through the network again (cycle walking)
until they land inside it, which keeps the result a bijection on the grid.
Since 2 ** (2h) < 4 * total_cells, a walk takes fewer than four passes on
average.
"""
from map3terms.config import DEFAULT_SCRAMBLE, ScrambleConfig
from map3terms.errors import GridOutOfRangeError


class Scrambler:
    """Deterministic bijection on [0, total_cells)."""

    def __init__(self, total_cells: int, config: ScrambleConfig = DEFAULT_SCRAMBLE):
        if total_cells < 1:
            raise ValueError(f"total_cells must be positive, got {total_cells}")

        self.total_cells = total_cells
        self.config = config
        self.half_bits = max(1, ((total_cells - 1).bit_length() + 1) // 2)
        self._mask = (1 << self.half_bits) - 1
        self._shift = (self.half_bits + 1) // 2
        self._keys = tuple(key & self._mask for key in config.round_keys)
        self._mul1, self._mul2 = (m & self._mask for m in config.multipliers)

    def scramble(self, cell_id: int) -> int:
        """
        Map a cell id to its scrambled id.

        Raises:
            GridOutOfRangeError: If cell_id is outside [0, total_cells)
        """
        self._check(cell_id)
        value = self._encrypt(cell_id)
        while value >= self.total_cells:
            value = self._encrypt(value)
        return value

    def unscramble(self, scrambled_id: int) -> int:
        """
        Map a scrambled id back to its cell id.

        Raises:
            GridOutOfRangeError: If scrambled_id is outside [0, total_cells)
        """
        self._check(scrambled_id)
        value = self._decrypt(scrambled_id)
        while value >= self.total_cells:
            value = self._decrypt(value)
        return value

    def _round(self, half: int, key: int) -> int:
        # multiply/xorshift mixer restricted to h bits
        x = (half ^ key) & self._mask
        x = (x * self._mul1) & self._mask
        x ^= x >> self._shift
        x = (x * self._mul2) & self._mask
        x ^= x >> self._shift
        return x

    def _encrypt(self, value: int) -> int:
        left, right = value >> self.half_bits, value & self._mask
        for key in self._keys:
            left, right = right, left ^ self._round(right, key)
        return (left << self.half_bits) | right

    def _decrypt(self, value: int) -> int:
        left, right = value >> self.half_bits, value & self._mask
        for key in reversed(self._keys):
            left, right = right ^ self._round(left, key), left
        return (left << self.half_bits) | right

    def _check(self, value: int) -> None:
        if not 0 <= value < self.total_cells:
            raise GridOutOfRangeError(
                f"Id {value} outside scramble domain of {self.total_cells} cells"
            )
