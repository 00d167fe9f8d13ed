"""
Equirectangular grid over the whole Earth.

Rows run south to north and columns west to east. A cell id is the row-major
index row * col_count + col, so ids grow monotonically along both axes.
"""
import math
from typing import NamedTuple, Tuple

from map3terms.config import DEFAULT_GRID, GridConfig
from map3terms.errors import GridOutOfRangeError


class Coordinate(NamedTuple):
    lat: float
    lon: float


class Bounds(NamedTuple):
    south: float
    west: float
    north: float
    east: float


def _span_count(span: float, step: float) -> int:
    """Number of steps needed to cover span, tolerant of float noise."""
    count = span / step
    nearest = round(count)
    if abs(count - nearest) < 1e-6:
        return int(nearest)
    return math.ceil(count)


def _clamp(value: int, upper: int) -> int:
    return min(max(value, 0), upper - 1)


class GridIndexer:
    """Maps coordinates to cell ids and cell ids to cell centres."""

    def __init__(self, config: GridConfig = DEFAULT_GRID):
        self.config = config
        self.lat_step = config.lat_step
        self.lon_step = config.lon_step
        self.row_count = _span_count(180.0, self.lat_step)
        self.col_count = _span_count(360.0, self.lon_step)
        self.total_cells = self.row_count * self.col_count

    def cell_of(self, lat: float, lon: float) -> int:
        """
        Get the id of the cell containing a coordinate.

        Points on the north pole or the antimeridian (lat=90, lon=180) belong
        to the last row/column.

        Raises:
            GridOutOfRangeError: If the coordinate is not finite or outside
                [-90, 90] x [-180, 180]
        """
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise GridOutOfRangeError(f"Coordinate must be finite: ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise GridOutOfRangeError(f"Latitude out of range: {lat}")
        if not -180.0 <= lon <= 180.0:
            raise GridOutOfRangeError(f"Longitude out of range: {lon}")

        row = _clamp(math.floor((lat + 90.0) / self.lat_step), self.row_count)
        col = _clamp(math.floor((lon + 180.0) / self.lon_step), self.col_count)
        return row * self.col_count + col

    def cell_at(self, row: int, col: int) -> int:
        if not (0 <= row < self.row_count and 0 <= col < self.col_count):
            raise GridOutOfRangeError(f"Cell ({row}, {col}) outside grid")
        return row * self.col_count + col

    def row_col_of(self, cell_id: int) -> Tuple[int, int]:
        self._check_cell(cell_id)
        return divmod(cell_id, self.col_count)

    def center_of(self, cell_id: int) -> Coordinate:
        """
        Get the centre of a cell.

        The centre is clamped into the legal domain, which only matters when
        the last row or column is narrower than a full step.
        """
        row, col = self.row_col_of(cell_id)
        lat = min(-90.0 + (row + 0.5) * self.lat_step, 90.0)
        lon = min(-180.0 + (col + 0.5) * self.lon_step, 180.0)
        return Coordinate(lat, lon)

    def bounds_of(self, cell_id: int) -> Bounds:
        row, col = self.row_col_of(cell_id)
        return Bounds(
            south=-90.0 + row * self.lat_step,
            west=-180.0 + col * self.lon_step,
            north=min(-90.0 + (row + 1) * self.lat_step, 90.0),
            east=min(-180.0 + (col + 1) * self.lon_step, 180.0),
        )

    def _check_cell(self, cell_id: int) -> None:
        if not 0 <= cell_id < self.total_cells:
            raise GridOutOfRangeError(
                f"Cell id {cell_id} outside grid of {self.total_cells} cells"
            )

    def __repr__(self) -> str:
        return f"GridIndexer(rows={self.row_count}, cols={self.col_count})"
